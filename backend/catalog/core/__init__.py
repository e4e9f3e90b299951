"""Core Layer: domain types, errors, state, and formatting. No IO.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
"""
