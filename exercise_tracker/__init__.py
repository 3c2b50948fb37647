"""Exercise Tracker — HTTP API for users and their exercise logs.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
