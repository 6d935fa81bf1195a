"""Pydantic Schemas — request/response shapes for the HTTP boundary.

Invariants:
    - Schemas check shape and strip whitespace only; content rules live in core/enforce_rules.py
"""
