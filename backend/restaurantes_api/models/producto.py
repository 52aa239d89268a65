"""Producto ORM: menu products referenced by order line items."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from restaurantes_api.db.base import Base


class Producto(Base):
    __tablename__ = "producto"

    id_prod: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    nombre: Mapped[str | None] = mapped_column(String(100), nullable=True)
    precio: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
