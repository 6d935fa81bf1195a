"""Congregation — users and church members over an async data-access layer.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
