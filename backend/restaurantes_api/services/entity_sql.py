"""Entity SQL: renders the four CRUD statement shapes for one table.

Invariants:
    - Placeholders are positional ($1..$n) in column order; the primary key
      placeholder always comes last in UPDATE and is $1 in DELETE
    - INSERT and UPDATE return the full row (RETURNING *)
    - DELETE returns nothing; callers report success whether or not a row existed
"""

from dataclasses import dataclass

from restaurantes_api.schemas.entities import (
    EmpleadoBody, EntityBody, PedidoBody, ProductoBody, RestauranteBody,
)


@dataclass(frozen=True)
class EntityTable:
    """One writable table: name, primary key, mutable columns and display label."""
    table: str
    pk: str
    body: type[EntityBody]
    label: str

    @property
    def columns(self) -> tuple[str, ...]:
        return self.body.column_names()

    def select_all(self) -> str:
        return f"SELECT * FROM {self.table}"

    def insert(self) -> str:
        cols = ", ".join(self.columns)
        placeholders = ", ".join(f"${i}" for i in range(1, len(self.columns) + 1))
        return (
            f"INSERT INTO {self.table} ({cols}) "
            f"VALUES ({placeholders}) RETURNING *"
        )

    def update(self) -> str:
        assignments = ", ".join(
            f"{col} = ${i}" for i, col in enumerate(self.columns, start=1)
        )
        pk_placeholder = f"${len(self.columns) + 1}"
        return (
            f"UPDATE {self.table} SET {assignments} "
            f"WHERE {self.pk} = {pk_placeholder} RETURNING *"
        )

    def delete(self) -> str:
        return f"DELETE FROM {self.table} WHERE {self.pk} = $1"

    def deleted_message(self) -> str:
        return f"{self.label} eliminado"


RESTAURANTE = EntityTable("restaurante", "id_rest", RestauranteBody, "Restaurante")
PRODUCTO = EntityTable("producto", "id_prod", ProductoBody, "Producto")
EMPLEADO = EntityTable("empleado", "id_empleado", EmpleadoBody, "Empleado")
PEDIDO = EntityTable("pedido", "id_pedido", PedidoBody, "Pedido")
