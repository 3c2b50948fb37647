"""Infrastructure Layer — store access and cross-cutting concerns.

Invariants:
    - Implements core/ protocols; core never imports from here
    - All store failures mapped to core/errors.py types
"""
