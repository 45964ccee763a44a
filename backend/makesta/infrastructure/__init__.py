"""Infrastructure Layer — database engine, password hashing, file storage, logging.

Invariants:
    - Infrastructure never imports from api/
    - Configuration (paths, limits, URLs) arrives through constructors or settings
"""
