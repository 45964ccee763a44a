"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Role requirements are declared per route (or per router) via require_roles

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
