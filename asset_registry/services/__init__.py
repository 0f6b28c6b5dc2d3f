"""Services Layer — imperative shell around the pure registry core.

Invariants:
    - Services read state, delegate every rule to core/, then commit once
    - Only RegistryService mutates the registry stores

Design Decisions:
    - Store implementation lives beside the service that drives it
"""
