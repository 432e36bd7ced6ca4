from __future__ import annotations


async def _create_pen(client, name: str, **extra) -> dict:
    resp = await client.post("/api/v1/pens/", json={"name": name, **extra})
    assert resp.status_code == 201, resp.text
    return resp.json()


def _cow_payload(pen_id: str | None = None, tag: str = "COW-101") -> dict:
    return {
        "category": "Mega Stock",
        "tag": tag,
        "breed": "Jersey",
        "birth_date": "2022-04-12",
        "gender": "Female",
        "pen_id": pen_id,
    }


async def test_create_individual_and_restrict_pen(client):
    pen = await _create_pen(client, "North Paddock")
    assert pen["allowed_category"] is None

    resp = await client.post("/api/v1/livestock/", json=_cow_payload(pen["id"]))
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["kind"] == "individual"
    assert body["display_name"] == "Jersey COW-101"
    assert body["quantity"] is None
    assert body["activity_logs"] == [] and body["important_dates"] == []

    pen_resp = await client.get(f"/api/v1/pens/{pen['id']}")
    assert pen_resp.status_code == 200
    detail = pen_resp.json()
    assert detail["allowed_category"] == "Mega Stock"
    assert detail["livestock_count"] == 1
    assert [x["id"] for x in detail["livestock"]] == [body["id"]]

    eligible = await client.get("/api/v1/pens/eligible", params={"category": "Mini Stock"})
    assert eligible.status_code == 200
    assert pen["id"] not in [x["id"] for x in eligible.json()]


async def test_create_batch(client):
    payload = {
        "category": "Micro Stock",
        "tag": "HIVE-07",
        "breed": "Italian bees",
        "quantity": 1,
    }
    resp = await client.post("/api/v1/livestock/", json=payload)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["kind"] == "batch"
    assert body["quantity"] == 1
    assert body["gender"] is None
    assert body["birth_date"] is None


async def test_variant_fields_are_checked(client):
    # batch without quantity
    resp = await client.post(
        "/api/v1/livestock/",
        json={"category": "Mini Stock", "tag": "B-1", "breed": "Broiler"},
    )
    assert resp.status_code == 422
    # individual carrying a quantity
    resp = await client.post("/api/v1/livestock/", json={**_cow_payload(), "quantity": 3})
    assert resp.status_code == 422
    resp = await client.post("/api/v1/livestock/", json={**_cow_payload(), "category": "Huge"})
    assert resp.status_code == 422


async def test_incompatible_pen_is_conflict(client):
    pen = await _create_pen(client, "Coop", allowed_category="Mini Stock")
    resp = await client.post("/api/v1/livestock/", json=_cow_payload(pen["id"]))
    assert resp.status_code == 409
    body = resp.json()
    assert body["code"] == "conflict"
    assert body["details"]["pen_id"] == pen["id"]

    listing = await client.get("/api/v1/livestock/")
    assert listing.json() == []


async def test_unknown_ids_return_not_found(client):
    resp = await client.get("/api/v1/livestock/missing")
    assert resp.status_code == 404
    assert resp.json()["code"] == "not_found"

    resp = await client.post("/api/v1/livestock/", json=_cow_payload("no-such-pen"))
    assert resp.status_code == 404

    resp = await client.post(
        "/api/v1/livestock/missing/activity-logs",
        json={"date": "2025-01-01T08:00:00Z", "type": "Feeding", "description": "Hay"},
    )
    assert resp.status_code == 404


async def test_activity_logs_and_dates_are_ordered(client):
    created = (await client.post("/api/v1/livestock/", json=_cow_payload())).json()
    base = f"/api/v1/livestock/{created['id']}"

    for day in ("2025-02-01", "2025-03-01", "2025-01-01"):
        resp = await client.post(
            f"{base}/activity-logs",
            json={"date": f"{day}T09:00:00Z", "type": "Observation", "description": day},
        )
        assert resp.status_code == 201, resp.text
    for day in ("2025-06-01", "2025-04-01"):
        resp = await client.post(
            f"{base}/important-dates", json={"date": f"{day}T00:00:00Z", "event_name": day}
        )
        assert resp.status_code == 201, resp.text

    body = (await client.get(base)).json()
    assert [x["description"] for x in body["activity_logs"]] == [
        "2025-03-01",
        "2025-02-01",
        "2025-01-01",
    ]
    assert [x["event_name"] for x in body["important_dates"]] == ["2025-04-01", "2025-06-01"]


async def test_update_keeps_history(client):
    created = (await client.post("/api/v1/livestock/", json=_cow_payload())).json()
    base = f"/api/v1/livestock/{created['id']}"
    await client.post(
        f"{base}/activity-logs",
        json={"date": "2025-01-05T10:00:00Z", "type": "Vaccination", "description": "Rabies"},
    )

    resp = await client.put(base, json={**_cow_payload(tag="COW-102"), "health_records": "OK"})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["tag"] == "COW-102"
    assert body["health_records"] == "OK"
    assert len(body["activity_logs"]) == 1

    resp = await client.put("/api/v1/livestock/missing", json=_cow_payload())
    assert resp.status_code == 404


async def test_list_filters(client):
    pen = await _create_pen(client, "Barn")
    await client.post("/api/v1/livestock/", json=_cow_payload(pen["id"], tag="COW-1"))
    await client.post("/api/v1/livestock/", json=_cow_payload(tag="COW-2"))
    await client.post(
        "/api/v1/livestock/",
        json={"category": "Mini Stock", "tag": "HEN-1", "breed": "Leghorn", "quantity": 12},
    )

    by_pen = await client.get("/api/v1/livestock/", params={"pen_id": pen["id"]})
    assert [x["tag"] for x in by_pen.json()] == ["COW-1"]
    by_category = await client.get("/api/v1/livestock/", params={"category": "Mini Stock"})
    assert [x["tag"] for x in by_category.json()] == ["HEN-1"]
    by_text = await client.get("/api/v1/livestock/", params={"q": "leg"})
    assert [x["tag"] for x in by_text.json()] == ["HEN-1"]
