from __future__ import annotations

import httpx
import pytest

from powerplant.battery.api.api_v1.deps import get_battery_repository, get_battery_service
from powerplant.battery.services.battery_service import BatteryService
from powerplant.crud.battery_repository import IBatteryRepository

PERTH = [
    {"name": "Cannington", "postcode": "6107", "capacity": 13500},
    {"name": "Midland", "postcode": "6057", "capacity": 50500},
    {"name": "Koolan Island", "postcode": "6733", "capacity": 10000},
]


@pytest.mark.asyncio
async def test_create_battery(client: httpx.AsyncClient) -> None:
    resp = await client.post("/battery/create", json=PERTH[0])

    assert resp.status_code == 200
    body = resp.json()
    assert isinstance(body["id"], int)
    assert {k: body[k] for k in ("name", "postcode", "capacity")} == PERTH[0]


@pytest.mark.asyncio
async def test_create_battery_capacity_defaults_to_zero(client: httpx.AsyncClient) -> None:
    resp = await client.post("/battery/create", json={"name": "Bentley", "postcode": "6102"})

    assert resp.status_code == 200
    assert resp.json()["capacity"] == 0


@pytest.mark.asyncio
async def test_create_battery_with_used_postcode(client: httpx.AsyncClient) -> None:
    await client.post("/battery/create", json=PERTH[0])

    resp = await client.post("/battery/create", json={"name": "Other", "postcode": "6107", "capacity": 1})

    assert resp.status_code == 400
    assert resp.json() == {
        "message": "Battery already exists with battery post code: 6107",
        "success": False,
    }
    listed = (await client.get("/battery/batteries")).json()
    assert [b["name"] for b in listed] == ["Cannington"]


@pytest.mark.asyncio
async def test_create_battery_without_name(client: httpx.AsyncClient) -> None:
    resp = await client.post("/battery/create", json={"postcode": "6107", "capacity": 13500})

    assert resp.status_code == 400
    assert resp.json() == {"name": "Name is mandatory"}


@pytest.mark.asyncio
async def test_create_battery_blank_fields(client: httpx.AsyncClient) -> None:
    resp = await client.post("/battery/create", json={"name": "  ", "postcode": "", "capacity": 1})

    assert resp.status_code == 400
    assert resp.json() == {"name": "Name is mandatory", "postcode": "Post code is mandatory"}


@pytest.mark.asyncio
async def test_create_battery_null_postcode(client: httpx.AsyncClient) -> None:
    resp = await client.post("/battery/create", json={"name": "Midland", "postcode": None})

    assert resp.status_code == 400
    assert resp.json() == {"postcode": "Post code is mandatory"}


@pytest.mark.asyncio
async def test_create_battery_bad_capacity(client: httpx.AsyncClient) -> None:
    resp = await client.post("/battery/create", json={"name": "Midland", "postcode": "6057", "capacity": "lots"})

    assert resp.status_code == 400
    assert list(resp.json()) == ["capacity"]


@pytest.mark.asyncio
async def test_create_and_list_batteries(client: httpx.AsyncClient) -> None:
    resp = await client.post("/battery/batteries", json=PERTH)

    assert resp.status_code == 200
    created = resp.json()
    assert [b["name"] for b in created] == ["Cannington", "Midland", "Koolan Island"]
    assert len({b["id"] for b in created}) == 3

    listed = await client.get("/battery/batteries")
    assert listed.status_code == 200
    assert listed.json() == created


@pytest.mark.asyncio
async def test_list_batteries_empty(client: httpx.AsyncClient) -> None:
    resp = await client.get("/battery/batteries")

    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_bulk_create_allows_repeated_postcodes(client: httpx.AsyncClient) -> None:
    await client.post("/battery/create", json=PERTH[0])

    resp = await client.post("/battery/batteries", json=[PERTH[0], PERTH[0]])

    assert resp.status_code == 200
    assert len((await client.get("/battery/batteries")).json()) == 3


@pytest.mark.asyncio
async def test_bulk_create_enforced_uniqueness(app, client: httpx.AsyncClient) -> None:
    def _strict_service() -> BatteryService:
        repo: IBatteryRepository = get_battery_repository()
        return BatteryService(repo=repo, enforce_bulk_uniqueness=True)

    app.dependency_overrides[get_battery_service] = _strict_service

    resp = await client.post("/battery/batteries", json=[PERTH[0], PERTH[0]])

    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert (await client.get("/battery/batteries")).json() == []


@pytest.mark.asyncio
async def test_bulk_create_validates_every_item(client: httpx.AsyncClient) -> None:
    resp = await client.post("/battery/batteries", json=[PERTH[0], {"name": "", "postcode": "6057"}])

    assert resp.status_code == 400
    assert resp.json() == {"1.name": "Name is mandatory"}
    assert (await client.get("/battery/batteries")).json() == []


@pytest.mark.asyncio
async def test_range(client: httpx.AsyncClient) -> None:
    await client.post("/battery/batteries", json=PERTH)

    resp = await client.post("/battery/range", json={"startPostcode": "6050", "endPostcode": "6200"})

    assert resp.status_code == 200
    body = resp.json()
    assert [(b["name"], b["postcode"], b["capacity"]) for b in body["batteriesInRange"]] == [
        ("Cannington", "6107", 13500),
        ("Midland", "6057", 50500),
    ]
    assert body["totalWattCapacity"] == 64000
    assert body["averageWattCapacity"] == 32000.0


@pytest.mark.asyncio
async def test_range_without_batteries(client: httpx.AsyncClient) -> None:
    resp = await client.post("/battery/range", json={"startPostcode": "6050", "endPostcode": "6200"})

    assert resp.status_code == 200
    assert resp.json() == {"batteriesInRange": [], "totalWattCapacity": 0, "averageWattCapacity": 0.0}


@pytest.mark.asyncio
async def test_range_start_after_end(client: httpx.AsyncClient) -> None:
    await client.post("/battery/batteries", json=PERTH)

    resp = await client.post("/battery/range", json={"startPostcode": "9999", "endPostcode": "0000"})

    assert resp.status_code == 200
    assert resp.json()["batteriesInRange"] == []


@pytest.mark.asyncio
async def test_range_missing_fields(client: httpx.AsyncClient) -> None:
    resp = await client.post("/battery/range", json={"startPostcode": " "})

    assert resp.status_code == 400
    assert resp.json() == {
        "startPostcode": "Start post code is mandatory",
        "endPostcode": "End post code is mandatory",
    }


@pytest.mark.asyncio
async def test_get_battery(client: httpx.AsyncClient) -> None:
    created = (await client.post("/battery/create", json=PERTH[1])).json()

    resp = await client.get(f"/battery/{created['id']}")

    assert resp.status_code == 200
    assert resp.json() == created


@pytest.mark.asyncio
async def test_get_missing_battery(client: httpx.AsyncClient) -> None:
    resp = await client.get("/battery/999")

    assert resp.status_code == 404
    assert resp.json() == {"message": "Battery not found with batteryId: 999", "success": False}


@pytest.mark.asyncio
async def test_update_battery(client: httpx.AsyncClient) -> None:
    created = (await client.post("/battery/create", json=PERTH[1])).json()

    resp = await client.put(
        f"/battery/{created['id']}", json={"name": "Midland East", "postcode": "6056", "capacity": 51000}
    )

    assert resp.status_code == 200
    assert resp.json() == {"id": created["id"], "name": "Midland East", "postcode": "6056", "capacity": 51000}
    assert (await client.get(f"/battery/{created['id']}")).json()["postcode"] == "6056"


@pytest.mark.asyncio
async def test_update_battery_conflict(client: httpx.AsyncClient) -> None:
    await client.post("/battery/create", json=PERTH[0])
    midland = (await client.post("/battery/create", json=PERTH[1])).json()

    resp = await client.put(f"/battery/{midland['id']}", json={**PERTH[1], "postcode": "6107"})

    assert resp.status_code == 400
    assert resp.json()["message"] == "Battery already exists with battery post code: 6107"


@pytest.mark.asyncio
async def test_update_missing_battery(client: httpx.AsyncClient) -> None:
    resp = await client.put("/battery/5", json=PERTH[0])

    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_unhandled_error_is_500(app) -> None:
    class BrokenRepository:
        async def list_all(self, session):
            raise RuntimeError("store unavailable")

    app.dependency_overrides[get_battery_repository] = BrokenRepository

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        resp = await c.get("/battery/batteries")

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error", "success": False}


@pytest.mark.asyncio
async def test_health(client: httpx.AsyncClient) -> None:
    resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
@pytest.mark.parametrize("capacity", [2**31, -(2**31) - 1, 2**64])
async def test_create_battery_capacity_out_of_int_range(client: httpx.AsyncClient, capacity: int) -> None:
    resp = await client.post("/battery/create", json={"name": "Big", "postcode": "6000", "capacity": capacity})

    assert resp.status_code == 400
    assert list(resp.json()) == ["capacity"]
    assert (await client.get("/battery/batteries")).json() == []


@pytest.mark.asyncio
async def test_create_battery_capacity_at_int_limits(client: httpx.AsyncClient) -> None:
    resp = await client.post(
        "/battery/batteries",
        json=[
            {"name": "Max", "postcode": "6000", "capacity": 2**31 - 1},
            {"name": "Min", "postcode": "6001", "capacity": -(2**31)},
        ],
    )

    assert resp.status_code == 200
    assert [b["capacity"] for b in resp.json()] == [2**31 - 1, -(2**31)]


@pytest.mark.asyncio
async def test_bulk_create_capacity_out_of_int_range(client: httpx.AsyncClient) -> None:
    resp = await client.post("/battery/batteries", json=[PERTH[0], {**PERTH[1], "capacity": 2**31}])

    assert resp.status_code == 400
    assert list(resp.json()) == ["1.capacity"]


@pytest.mark.asyncio
@pytest.mark.parametrize("battery_id", [2**31, 2**64, 0, -1])
async def test_get_battery_id_outside_column_range(client: httpx.AsyncClient, battery_id: int) -> None:
    resp = await client.get(f"/battery/{battery_id}")

    assert resp.status_code == 404
    assert resp.json() == {"message": f"Battery not found with batteryId: {battery_id}", "success": False}


@pytest.mark.asyncio
async def test_update_battery_id_outside_column_range(client: httpx.AsyncClient) -> None:
    resp = await client.put(f"/battery/{2**64}", json=PERTH[0])

    assert resp.status_code == 404
    assert resp.json()["message"] == f"Battery not found with batteryId: {2**64}"


@pytest.mark.asyncio
async def test_path_validation_error_key(client: httpx.AsyncClient) -> None:
    resp = await client.get("/battery/not-a-number")

    assert resp.status_code == 400
    assert list(resp.json()) == ["battery_id"]
