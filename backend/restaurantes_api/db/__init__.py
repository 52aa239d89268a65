"""Database Infrastructure: SQLAlchemy Base shared by the schema models.

Invariants:
    - Metadata here describes the store schema; handlers never query through the ORM
"""
