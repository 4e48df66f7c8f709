"""Users API Package — welcome, health and user listing over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
