"""Restaurantes API Package: CRUD and reporting endpoints over the restaurant schema.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
