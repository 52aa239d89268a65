"""Pedidos: CRUD over the pedido table plus the by-date filter."""

from fastapi import APIRouter, Depends, status

from restaurantes_api.api.request_body import body_of
from restaurantes_api.infrastructure.database import QueryExecutor, get_executor
from restaurantes_api.schemas.entities import MessageResponse, PedidoBody
from restaurantes_api.services.entity_sql import PEDIDO
from restaurantes_api.services.report_sql import ORDERS_BY_DATE

router = APIRouter(prefix="/api", tags=["pedidos"])


@router.get("/pedido")
async def list_pedidos(db: QueryExecutor = Depends(get_executor)):
    return await db.execute(PEDIDO.select_all())


@router.get("/restaurante/{id_rest}/pedidos/{fecha}")
async def list_pedidos_by_fecha(
    id_rest: str, fecha: str, db: QueryExecutor = Depends(get_executor),
):
    """Orders of one restaurant on one date (YYYY-MM-DD). Empty list if none."""
    return await db.execute(ORDERS_BY_DATE, [id_rest, fecha])


@router.post("/pedido", status_code=status.HTTP_201_CREATED)
async def create_pedido(
    body: PedidoBody = Depends(body_of(PedidoBody)),
    db: QueryExecutor = Depends(get_executor),
):
    rows = await db.execute(PEDIDO.insert(), body.column_values())
    return rows[0] if rows else None


@router.put("/pedido/{id}")
async def update_pedido(
    id: str,
    body: PedidoBody = Depends(body_of(PedidoBody)),
    db: QueryExecutor = Depends(get_executor),
):
    rows = await db.execute(PEDIDO.update(), [*body.column_values(), id])
    return rows[0] if rows else None


@router.delete("/pedido/{id}", response_model=MessageResponse)
async def delete_pedido(id: str, db: QueryExecutor = Depends(get_executor)):
    await db.execute(PEDIDO.delete(), [id])
    return MessageResponse(message=PEDIDO.deleted_message())
