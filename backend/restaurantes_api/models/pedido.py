"""Pedido ORM: orders placed at one restaurant on one date."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from restaurantes_api.db.base import Base


class Pedido(Base):
    __tablename__ = "pedido"

    id_pedido: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    fecha: Mapped[date | None] = mapped_column(Date, nullable=True)
    id_rest: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("restaurante.id_rest"), nullable=True,
    )
    total: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
