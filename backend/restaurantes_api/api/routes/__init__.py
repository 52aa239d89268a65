"""Route Modules: one file per resource, plus reports and health.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Each handler issues at most one statement through the QueryExecutor
"""
