"""Error Responses — routing fallbacks, malformed bodies, catch-all, health probe."""

from unittest.mock import patch

from app.api.routes import dishes


async def test_unknown_path_is_404(client):
    res = await client.get("/menus")
    assert res.status_code == 404
    assert res.json() == {"error": "Path not found: /menus"}


async def test_unsupported_method_is_405(client):
    res = await client.patch("/orders")
    assert res.status_code == 405
    assert res.json() == {"error": "PATCH not allowed for /orders"}


async def test_malformed_json_is_400(client):
    res = await client.post(
        "/dishes", content=b"{not json", headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Request body must be a JSON object"}


async def test_non_object_body_is_400(client):
    res = await client.post("/orders", json=["data"])
    assert res.status_code == 400
    assert res.json() == {"error": "Request body must be a JSON object"}


async def test_non_object_data_reports_first_field(client):
    res = await client.post("/orders", json={"data": "nope"})
    assert res.status_code == 400
    assert res.json() == {"error": "Order must include a deliverTo"}


async def test_handler_fault_is_500_without_details(raising_client):
    with patch.object(dishes.handlers, "list", side_effect=RuntimeError("boom")):
        res = await raising_client.get("/dishes")
    assert res.status_code == 500
    assert res.json() == {"error": "Something went wrong!"}


async def test_health_reports_record_counts(client, stored_order):
    stored_order()
    res = await client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["records"] == {"dishes": 0, "orders": 1}
