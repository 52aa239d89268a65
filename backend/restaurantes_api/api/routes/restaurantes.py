"""Restaurantes: CRUD over the restaurante table.

Invariants:
    - PUT replaces every mutable column; unmatched id -> 200 with null body
    - DELETE answers the same message whether or not the row existed
"""

from fastapi import APIRouter, Depends, status

from restaurantes_api.api.request_body import body_of
from restaurantes_api.infrastructure.database import QueryExecutor, get_executor
from restaurantes_api.schemas.entities import MessageResponse, RestauranteBody
from restaurantes_api.services.entity_sql import RESTAURANTE

router = APIRouter(prefix="/api", tags=["restaurantes"])


@router.post("/restaurante", status_code=status.HTTP_201_CREATED)
async def create_restaurante(
    body: RestauranteBody = Depends(body_of(RestauranteBody)),
    db: QueryExecutor = Depends(get_executor),
):
    rows = await db.execute(RESTAURANTE.insert(), body.column_values())
    return rows[0] if rows else None


@router.get("/restaurantes")
async def list_restaurantes(db: QueryExecutor = Depends(get_executor)):
    return await db.execute(RESTAURANTE.select_all())


@router.put("/restaurante/{id}")
async def update_restaurante(
    id: str,
    body: RestauranteBody = Depends(body_of(RestauranteBody)),
    db: QueryExecutor = Depends(get_executor),
):
    rows = await db.execute(RESTAURANTE.update(), [*body.column_values(), id])
    return rows[0] if rows else None


@router.delete("/restaurante/{id}", response_model=MessageResponse)
async def delete_restaurante(
    id: str, db: QueryExecutor = Depends(get_executor),
):
    await db.execute(RESTAURANTE.delete(), [id])
    return MessageResponse(message=RESTAURANTE.deleted_message())
