"""Pydantic Schemas: request body and response shapes for API endpoints.

Invariants:
    - Body models declare the mutable columns of each table, in SQL parameter order
    - Body fields are optional and untyped: absent fields become None, values
      reach the store unchanged
"""
