"""Services Layer — startup workflows that span repositories and settings.

Invariants:
    - Services depend on core/ protocols, not on concrete repositories
"""
