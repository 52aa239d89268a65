"""Schema Models: SQLAlchemy declarative models for the five store tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Used by Alembic and the test suite to build the schema; never by handlers

Design Decisions:
    - One file per table
    - All models imported here so Base.metadata is complete after one import
"""

from restaurantes_api.models.restaurante import Restaurante  # noqa: F401
from restaurantes_api.models.producto import Producto  # noqa: F401
from restaurantes_api.models.empleado import Empleado  # noqa: F401
from restaurantes_api.models.pedido import Pedido  # noqa: F401
from restaurantes_api.models.detalle_pedido import DetallePedido  # noqa: F401
