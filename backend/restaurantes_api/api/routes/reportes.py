"""Reportes: aggregate and multi-table read endpoints.

Invariants:
    - Path values are forwarded as strings; the store casts or rejects them
    - No match is [] with 200, never 404
"""

from fastapi import APIRouter, Depends

from restaurantes_api.infrastructure.database import QueryExecutor, get_executor
from restaurantes_api.services.report_sql import (
    BEST_SELLERS, ORDER_PRODUCTS, SALES_BY_RESTAURANT,
)

router = APIRouter(prefix="/api", tags=["reportes"])


@router.get("/restaurante/{id_rest}/pedido/{id_pedido}/productos")
async def list_productos_de_pedido(
    id_rest: str, id_pedido: str, db: QueryExecutor = Depends(get_executor),
):
    """Line items of one order, with product name and price."""
    return await db.execute(ORDER_PRODUCTS, [id_rest, id_pedido])


@router.get("/restaurante/{id_rest}/productos-mas-vendidos/{cantidad}")
async def list_productos_mas_vendidos(
    id_rest: str, cantidad: str, db: QueryExecutor = Depends(get_executor),
):
    """Products whose total quantity sold at the restaurant exceeds `cantidad`."""
    return await db.execute(BEST_SELLERS, [id_rest, cantidad])


@router.get("/restaurantes/ventas")
async def list_ventas_por_restaurante(
    db: QueryExecutor = Depends(get_executor),
):
    """Sum of order totals per restaurant, all time."""
    return await db.execute(SALES_BY_RESTAURANT)
