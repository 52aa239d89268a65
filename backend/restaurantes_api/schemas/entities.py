"""Entity Schemas: request bodies for the four writable tables.

Invariants:
    - Field declaration order == column order in INSERT/UPDATE templates
    - Unknown fields are dropped; missing fields default to None
    - No type validation: the store accepts or rejects values

Design Decisions:
    - Any-typed fields keep form-encoded strings and JSON numbers as sent
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class EntityBody(BaseModel):
    """Base body: ignores extra keys, every field optional."""
    model_config = ConfigDict(extra="ignore")

    @classmethod
    def column_names(cls) -> tuple[str, ...]:
        return tuple(cls.model_fields)

    def column_values(self) -> list[Any]:
        return [getattr(self, name) for name in self.column_names()]


class RestauranteBody(EntityBody):
    nombre: Any = None
    ciudad: Any = None
    direccion: Any = None
    fecha_apertura: Any = None


class ProductoBody(EntityBody):
    nombre: Any = None
    precio: Any = None


class EmpleadoBody(EntityBody):
    nombre: Any = None
    rol: Any = None
    id_rest: Any = None


class PedidoBody(EntityBody):
    fecha: Any = None
    id_rest: Any = None
    total: Any = None


class MessageResponse(BaseModel):
    """Confirmation body returned by delete endpoints."""
    message: str
