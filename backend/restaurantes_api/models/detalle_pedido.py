"""DetallePedido ORM: link rows joining an order to a product with a quantity.

Invariants:
    - Both FKs are enforced by the store; nothing in the API writes this table
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from restaurantes_api.db.base import Base


class DetallePedido(Base):
    __tablename__ = "detallepedido"

    id_detalle: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    id_pedido: Mapped[int] = mapped_column(
        Integer, ForeignKey("pedido.id_pedido"), nullable=False,
    )
    id_prod: Mapped[int] = mapped_column(
        Integer, ForeignKey("producto.id_prod"), nullable=False,
    )
    cantidad: Mapped[int] = mapped_column(Integer, nullable=False)
    subtotal: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
