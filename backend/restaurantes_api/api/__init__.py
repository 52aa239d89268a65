"""API Layer: FastAPI routes, request body parsing and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON
"""
