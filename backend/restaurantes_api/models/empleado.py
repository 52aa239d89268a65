"""Empleado ORM: staff members, each owned by one restaurant."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from restaurantes_api.db.base import Base


class Empleado(Base):
    __tablename__ = "empleado"

    id_empleado: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    nombre: Mapped[str | None] = mapped_column(String(100), nullable=True)
    rol: Mapped[str | None] = mapped_column(String(50), nullable=True)
    id_rest: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("restaurante.id_rest"), nullable=True,
    )
