"""Infrastructure Layer — database, logging, and the deterministic collaborators.

Invariants:
    - Implements the Protocols declared in core/repository_protocols.py
    - No registry rules live here; rules belong to core/

Design Decisions:
    - Time and randomness derive from block position, never from the OS,
      so a replayed operation sequence reproduces identical state
"""
