"""Repositories — the only place that talks to the ORM session.

Invariants:
    - Read-many methods return Owned rows (entity + nested owner User),
      newest first
    - Joins are explicit select(...).outerjoin(...); no lazy loading
    - Each mutating method commits its own unit of work

Design Decisions:
    - Classes over module functions: one AsyncSession injected per request,
      matching the Protocol contracts in core/repository_protocols.py
"""
