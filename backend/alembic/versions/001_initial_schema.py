"""Initial schema: restaurante, producto, empleado, pedido, detallepedido.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "restaurante",
        sa.Column("id_rest", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("nombre", sa.String(100), nullable=True),
        sa.Column("ciudad", sa.String(100), nullable=True),
        sa.Column("direccion", sa.String(200), nullable=True),
        sa.Column("fecha_apertura", sa.Date, nullable=True),
    )

    op.create_table(
        "producto",
        sa.Column("id_prod", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("nombre", sa.String(100), nullable=True),
        sa.Column("precio", sa.Numeric(10, 2), nullable=True),
    )

    op.create_table(
        "empleado",
        sa.Column("id_empleado", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("nombre", sa.String(100), nullable=True),
        sa.Column("rol", sa.String(50), nullable=True),
        sa.Column("id_rest", sa.Integer, sa.ForeignKey("restaurante.id_rest"), nullable=True),
    )

    op.create_table(
        "pedido",
        sa.Column("id_pedido", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("fecha", sa.Date, nullable=True),
        sa.Column("id_rest", sa.Integer, sa.ForeignKey("restaurante.id_rest"), nullable=True),
        sa.Column("total", sa.Numeric(10, 2), nullable=True),
    )

    op.create_table(
        "detallepedido",
        sa.Column("id_detalle", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("id_pedido", sa.Integer, sa.ForeignKey("pedido.id_pedido"), nullable=False),
        sa.Column("id_prod", sa.Integer, sa.ForeignKey("producto.id_prod"), nullable=False),
        sa.Column("cantidad", sa.Integer, nullable=False),
        sa.Column("subtotal", sa.Numeric(10, 2), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("detallepedido")
    op.drop_table("pedido")
    op.drop_table("empleado")
    op.drop_table("producto")
    op.drop_table("restaurante")
