"""Productos: CRUD over the producto table."""

from fastapi import APIRouter, Depends, status

from restaurantes_api.api.request_body import body_of
from restaurantes_api.infrastructure.database import QueryExecutor, get_executor
from restaurantes_api.schemas.entities import MessageResponse, ProductoBody
from restaurantes_api.services.entity_sql import PRODUCTO

router = APIRouter(prefix="/api", tags=["productos"])


@router.post("/producto", status_code=status.HTTP_201_CREATED)
async def create_producto(
    body: ProductoBody = Depends(body_of(ProductoBody)),
    db: QueryExecutor = Depends(get_executor),
):
    rows = await db.execute(PRODUCTO.insert(), body.column_values())
    return rows[0] if rows else None


@router.get("/productos")
async def list_productos(db: QueryExecutor = Depends(get_executor)):
    return await db.execute(PRODUCTO.select_all())


@router.put("/producto/{id}")
async def update_producto(
    id: str,
    body: ProductoBody = Depends(body_of(ProductoBody)),
    db: QueryExecutor = Depends(get_executor),
):
    rows = await db.execute(PRODUCTO.update(), [*body.column_values(), id])
    return rows[0] if rows else None


@router.delete("/producto/{id}", response_model=MessageResponse)
async def delete_producto(id: str, db: QueryExecutor = Depends(get_executor)):
    await db.execute(PRODUCTO.delete(), [id])
    return MessageResponse(message=PRODUCTO.deleted_message())
