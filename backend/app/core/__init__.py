"""Core Layer: errors, domain types, protocols and pure functions. No IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
"""
