"""Infrastructure Layer — store client, repository and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - All store failures mapped to StoreError before leaving this layer
"""
