"""Empleados: CRUD over the empleado table plus the by-role filter.

Invariants:
    - id_rest is forwarded as sent; a dangling restaurant id fails in the store
    - The role filter returns [] (200) when nothing matches
"""

from fastapi import APIRouter, Depends, status

from restaurantes_api.api.request_body import body_of
from restaurantes_api.infrastructure.database import QueryExecutor, get_executor
from restaurantes_api.schemas.entities import EmpleadoBody, MessageResponse
from restaurantes_api.services.entity_sql import EMPLEADO
from restaurantes_api.services.report_sql import EMPLOYEES_BY_ROLE

router = APIRouter(prefix="/api", tags=["empleados"])


@router.get("/empleado")
async def list_empleados(db: QueryExecutor = Depends(get_executor)):
    return await db.execute(EMPLEADO.select_all())


@router.get("/restaurante/{id_rest}/empleados/{rol}")
async def list_empleados_by_rol(
    id_rest: str, rol: str, db: QueryExecutor = Depends(get_executor),
):
    """Employees of one restaurant holding a given role."""
    return await db.execute(EMPLOYEES_BY_ROLE, [id_rest, rol])


@router.post("/empleado", status_code=status.HTTP_201_CREATED)
async def create_empleado(
    body: EmpleadoBody = Depends(body_of(EmpleadoBody)),
    db: QueryExecutor = Depends(get_executor),
):
    rows = await db.execute(EMPLEADO.insert(), body.column_values())
    return rows[0] if rows else None


@router.put("/empleado/{id}")
async def update_empleado(
    id: str,
    body: EmpleadoBody = Depends(body_of(EmpleadoBody)),
    db: QueryExecutor = Depends(get_executor),
):
    rows = await db.execute(EMPLEADO.update(), [*body.column_values(), id])
    return rows[0] if rows else None


@router.delete("/empleado/{id}", response_model=MessageResponse)
async def delete_empleado(id: str, db: QueryExecutor = Depends(get_executor)):
    await db.execute(EMPLEADO.delete(), [id])
    return MessageResponse(message=EMPLEADO.deleted_message())
