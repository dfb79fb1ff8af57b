"""Fund Catalog Application Package: REST backend over a flat-file fund collection.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
