"""Database Metadata — declarative Base shared by ORM models and Alembic.

Invariants:
    - Engines and sessions live in infrastructure/database.py, not here
"""
