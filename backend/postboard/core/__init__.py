"""Core: pure domain types, validation rules and the error hierarchy.

Invariants:
    - Nothing in core/ performs IO or imports from infrastructure/
"""
