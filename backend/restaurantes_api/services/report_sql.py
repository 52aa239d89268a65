"""Report SQL: fixed multi-table and filtered queries.

Invariants:
    - Every join is performed by the store; no application-level joins
    - Best-sellers threshold is exclusive (HAVING SUM(...) > threshold)
    - Sales totals cover all time, one row per restaurant with orders
"""

ORDER_PRODUCTS = """
SELECT p.id_prod, p.nombre, p.precio, dp.cantidad, dp.subtotal
FROM detallepedido dp
JOIN producto p ON dp.id_prod = p.id_prod
JOIN pedido pe ON dp.id_pedido = pe.id_pedido
WHERE pe.id_rest = $1 AND pe.id_pedido = $2
ORDER BY p.id_prod
"""

# CAST keeps the comparison numeric when the threshold arrives as a path string.
BEST_SELLERS = """
SELECT p.id_prod, p.nombre, SUM(dp.cantidad) AS total_vendido
FROM detallepedido dp
JOIN producto p ON dp.id_prod = p.id_prod
JOIN pedido pe ON dp.id_pedido = pe.id_pedido
WHERE pe.id_rest = $1
GROUP BY p.id_prod, p.nombre
HAVING SUM(dp.cantidad) > CAST($2 AS INTEGER)
ORDER BY total_vendido DESC
"""

SALES_BY_RESTAURANT = """
SELECT r.id_rest, r.nombre, SUM(pe.total) AS total_ventas
FROM pedido pe
JOIN restaurante r ON pe.id_rest = r.id_rest
GROUP BY r.id_rest, r.nombre
ORDER BY r.id_rest
"""

ORDERS_BY_DATE = "SELECT * FROM pedido WHERE id_rest = $1 AND fecha = $2"

EMPLOYEES_BY_ROLE = "SELECT * FROM empleado WHERE id_rest = $1 AND rol = $2"
