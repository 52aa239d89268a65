"""Services Layer: SQL templates for entity CRUD and reports.

Invariants:
    - Services build SQL strings only; execution stays in infrastructure/database.py
"""
