"""Core — pure domain logic: entities, rules, errors, and persistence contracts.

Invariants:
    - Nothing in core/ performs IO or imports from infrastructure/, repositories/ or api/
    - Rules are plain functions, testable without a database
"""
