"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - JSON responses everywhere except the landing page and 404 user lookups
"""
