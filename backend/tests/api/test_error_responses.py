"""Error mapping: store rejections, undecodable bodies and health probes.

Invariants:
    - Any StoreError -> 500 {"error": <driver message>, "code": "STORE_ERROR"}
    - A non-numeric identifier is forwarded to the store unchanged (500, not 400)
    - Malformed JSON -> 400 INVALID_BODY, nothing sent to the store
"""

import pytest


async def test_non_numeric_id_is_forwarded_and_store_rejection_is_500(
    failing_client, failing_executor,
):
    res = await failing_client.delete("/api/restaurante/abc")
    assert res.status_code == 500
    assert res.json() == {
        "error": 'invalid input syntax for type integer: "abc"',
        "code": "STORE_ERROR",
    }
    sql, params = failing_executor.calls[0]
    assert params == ["abc"]


@pytest.mark.parametrize("method,path", [
    ("GET", "/api/restaurantes"),
    ("GET", "/api/productos"),
    ("GET", "/api/empleado"),
    ("GET", "/api/pedido"),
    ("GET", "/api/restaurantes/ventas"),
    ("GET", "/api/restaurante/x/pedidos/2024-01-01"),
    ("GET", "/api/restaurante/x/empleados/cocinero"),
    ("GET", "/api/restaurante/x/pedido/y/productos"),
    ("GET", "/api/restaurante/x/productos-mas-vendidos/diez"),
    ("POST", "/api/producto"),
    ("PUT", "/api/empleado/x"),
    ("DELETE", "/api/pedido/x"),
])
async def test_every_route_maps_store_errors_to_500(failing_client, method, path):
    res = await failing_client.request(method, path, json={})
    assert res.status_code == 500
    assert res.json()["code"] == "STORE_ERROR"


async def test_malformed_json_returns_400(failing_client, failing_executor):
    res = await failing_client.post(
        "/api/restaurante",
        content=b'{"nombre": ',
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_BODY"
    assert failing_executor.calls == []


async def test_json_array_body_returns_400(client):
    res = await client.post("/api/producto", json=[{"nombre": "x"}])
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_BODY"


async def test_liveness_probe(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_probe_with_reachable_store(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_probe_with_unreachable_store(failing_client):
    res = await failing_client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
