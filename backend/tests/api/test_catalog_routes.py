"""Catalog Routes: HTTP binding of the Display Surface contract.

Invariants:
    - GET /state returns the controller snapshot
    - POST /filter and /sort answer 202 while the delay is still running
    - Malformed intent bodies answer 400 with field-level details
    - Display errors surface only the generic message
"""

from catalog.core.errors import LoadError, describe_cause

from tests.fakes import SAMPLE_PRODUCT


async def test_health(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_ready_reflects_load(client, controller):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503

    await controller.initialize()

    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200


async def test_ready_after_empty_load(client, controller, source):
    source.rows = []
    await controller.initialize()

    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert (await client.get("/api/v1/catalog/state")).json()["rows"] == []


async def test_not_ready_after_failed_load(client, controller, source):
    source.error = LoadError("Invalid data format received")
    await controller.initialize()

    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["phase"] == "errored"


async def test_state_after_load(client, controller):
    await controller.initialize()

    res = await client.get("/api/v1/catalog/state")

    body = res.json()
    assert res.status_code == 200
    assert body["rows"] == [SAMPLE_PRODUCT]
    assert body["loading"] is False
    assert body["error"] is None
    assert body["phase"] == "ready"


async def test_state_after_failed_load(client, controller, source):
    source.error = LoadError("Invalid data format received")
    await controller.initialize()

    body = (await client.get("/api/v1/catalog/state")).json()

    assert body["phase"] == "errored"
    assert body["error"] == "Failed to load products"
    assert body["rows"] == []


async def test_filter_accepted_while_delay_runs(client, controller, clock):
    await controller.initialize()

    res = await client.post("/api/v1/catalog/filter", json={
        "items": [{"field": "categories", "operator": "contains", "value": "Category 4"}],
    })

    assert res.status_code == 202
    assert res.json()["loading"] is True
    assert res.json()["active_filter_value"] == "Category 4"

    await clock.wait_for_calls(1)
    clock.release()
    await controller.drain()

    body = (await client.get("/api/v1/catalog/state")).json()
    assert body["loading"] is False
    assert body["phase"] == "ready"
    assert body["active_filter_value"] == "Category 4"


async def test_empty_filter_is_noop(client, controller, clock):
    await controller.initialize()

    res = await client.post("/api/v1/catalog/filter", json={"items": []})

    assert res.status_code == 202
    assert res.json()["loading"] is False
    assert clock.calls == []


async def test_sort_accepted(client, controller, clock):
    await controller.initialize()

    res = await client.post("/api/v1/catalog/sort", json={
        "items": [{"field": "price", "sort": "desc"}],
    })

    assert res.status_code == 202
    assert res.json()["loading"] is True
    assert res.json()["active_sort"] == [{"field": "price", "sort": "desc"}]

    await clock.wait_for_calls(1)
    clock.release()
    await controller.drain()


async def test_sort_validation_error(client):
    res = await client.post("/api/v1/catalog/sort", json={
        "items": [{"field": "price", "sort": "sideways"}],
    })

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"]


async def test_display_error_reports_generic_message(client, controller, events):
    await controller.initialize()

    res = await client.post("/api/v1/catalog/display-error", json={
        "name": "TypeError", "message": "Cannot read properties of undefined",
    })

    body = res.json()
    assert res.status_code == 200
    assert body["error"] == "An error occurred while displaying products"
    assert "undefined" not in body["error"]
    assert events.messages("ERROR") == ["DataGrid error occurred"]


async def test_columns(client):
    res = await client.get("/api/v1/catalog/columns")
    fields = [c["field"] for c in res.json()["columns"]]
    assert fields == ["id", "categories", "name", "inStock", "price"]


async def test_rows_are_display_formatted(client, controller, source, events):
    source.rows.append(dict(SAMPLE_PRODUCT, id=1101, price=None))
    await controller.initialize()

    rows = (await client.get("/api/v1/catalog/rows")).json()["rows"]

    assert rows[0]["price"] == "HK$381.00"
    assert rows[0]["categories"] == "Category 1, Category 2"
    assert rows[1]["price"] == "N/A"
    assert events.messages("ERROR") == ["Failed to format price"]


async def test_display_error_forwards_grid_stack(client, controller, events):
    await controller.initialize()

    await client.post("/api/v1/catalog/display-error", json={
        "name": "TypeError",
        "message": "x is undefined",
        "stack": "TypeError: x is undefined\n    at renderCell (grid.js:42)",
    })

    logged = describe_cause(events.causes()[0])
    assert logged["name"] == "TypeError"
    assert logged["message"] == "x is undefined"
    assert "grid.js:42" in logged["stack"]
