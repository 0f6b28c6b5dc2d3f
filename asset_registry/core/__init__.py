"""Core Layer — pure registry rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (replay produces identical state)

Design Decisions:
    - Functional core separated from imperative shell: the shell reads state,
      asks core what to do, then commits the result in one transaction
"""
