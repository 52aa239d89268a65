"""Infrastructure Layer: query executor and logging setup.

Invariants:
    - Infrastructure never imports from api/ or services/
"""
