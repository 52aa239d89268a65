"""Pedido CRUD and the per-restaurant date filter."""

import pytest


@pytest.fixture
async def restaurante(client):
    res = await client.post("/api/restaurante", json={"nombre": "Central"})
    return res.json()


async def test_create_pedido_returns_submitted_fields(client, restaurante):
    payload = {"fecha": "2024-05-01", "id_rest": restaurante["id_rest"], "total": 120}
    res = await client.post("/api/pedido", json=payload)
    assert res.status_code == 201
    row = res.json()
    assert {k: row[k] for k in payload} == payload
    assert row in (await client.get("/api/pedido")).json()


async def test_filter_by_date_returns_orders_of_that_day(client, restaurante):
    rid = restaurante["id_rest"]
    for fecha in ("2024-05-01", "2024-05-01", "2024-05-02"):
        await client.post(
            "/api/pedido", json={"fecha": fecha, "id_rest": rid, "total": 50},
        )

    res = await client.get(f"/api/restaurante/{rid}/pedidos/2024-05-01")
    assert res.status_code == 200
    assert len(res.json()) == 2
    assert {p["fecha"] for p in res.json()} == {"2024-05-01"}


async def test_filter_by_date_without_orders_returns_empty_array(client, restaurante):
    res = await client.get(
        f"/api/restaurante/{restaurante['id_rest']}/pedidos/1999-01-01",
    )
    assert res.status_code == 200
    assert res.json() == []


async def test_update_pedido_total(client, restaurante):
    created = (await client.post(
        "/api/pedido",
        json={"fecha": "2024-05-01", "id_rest": restaurante["id_rest"], "total": 50},
    )).json()

    res = await client.put(
        f"/api/pedido/{created['id_pedido']}",
        json={"fecha": "2024-05-01", "id_rest": restaurante["id_rest"], "total": 75},
    )
    assert res.status_code == 200
    assert res.json()["total"] == 75


async def test_delete_unknown_pedido_still_returns_message(client):
    res = await client.delete("/api/pedido/12345")
    assert res.status_code == 200
    assert res.json() == {"message": "Pedido eliminado"}
