"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Identifiers serialize under the `_id` key (existing client contract)
    - Dates serialize as calendar strings, never ISO timestamps

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Request payloads are checked by core/validation.py, not by schemas,
      so JSON and form bodies share one validation path
"""
