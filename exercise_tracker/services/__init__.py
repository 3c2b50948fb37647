"""Services Layer — request handlers between the routes and the repositories.

Invariants:
    - Handlers split by resource (users, exercises)
    - Handlers never touch HTTP objects or ORM sessions directly
"""
