"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services await repositories, core decides
    - Repositories arrive by constructor injection (no module-level stores)
"""
