"""Infrastructure Layer — database access, repositories and logging setup.

Invariants:
    - Repositories return core domain types, never ORM rows
    - All SQLAlchemy errors mapped to DatabaseError before leaving this layer
"""
