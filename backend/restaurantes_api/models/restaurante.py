"""Restaurante ORM: restaurants referenced by employees and orders.

Invariants:
    - id_rest is a store-generated integer primary key
    - No ORM relationships: handlers issue SQL directly, the store enforces FKs
"""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from restaurantes_api.db.base import Base


class Restaurante(Base):
    __tablename__ = "restaurante"

    id_rest: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    nombre: Mapped[str | None] = mapped_column(String(100), nullable=True)
    ciudad: Mapped[str | None] = mapped_column(String(100), nullable=True)
    direccion: Mapped[str | None] = mapped_column(String(200), nullable=True)
    fecha_apertura: Mapped[date | None] = mapped_column(Date, nullable=True)
