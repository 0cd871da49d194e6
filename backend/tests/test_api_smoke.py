def test_root_ok(client):
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert "message" in data


def test_create_and_list_hike(client, ridge_trail):
    cr = client.post("/hikes/", json=ridge_trail)
    assert cr.status_code == 200, cr.text
    hike = cr.json()
    assert hike["id"]
    assert hike["created_at"]
    assert hike["photos"] == []
    assert hike["locationCoords"] is None

    lr = client.get("/hikes/")
    assert lr.status_code == 200
    arr = lr.json()
    assert len(arr) == 1
    assert arr[0]["name"] == "Ridge Trail"
    assert arr[0]["length"] == 5.2


def test_create_rejects_bad_length(client, ridge_trail):
    r = client.post("/hikes/", json={**ridge_trail, "length": 0})
    assert r.status_code == 422


def test_get_update_delete_round(client, ridge_trail):
    payload = {
        **ridge_trail,
        "photos": ["file:///1.jpg", "file:///2.jpg"],
        "locationCoords": {"latitude": -33.7125, "longitude": 150.3119},
    }
    hike_id = client.post("/hikes/", json=payload).json()["id"]

    r = client.get(f"/hikes/{hike_id}")
    assert r.status_code == 200
    assert r.json()["locationCoords"] == {"latitude": -33.7125, "longitude": 150.3119}

    ur = client.put(
        f"/hikes/{hike_id}",
        json={"id": 999, "is_completed": True, "completed_date": "2024-06-05"},
    )
    assert ur.status_code == 200, ur.text
    updated = ur.json()
    assert updated["id"] == hike_id
    assert updated["is_completed"] is True
    assert updated["completed_date"] == "2024-06-05"
    assert updated["photos"] == ["file:///1.jpg", "file:///2.jpg"]

    dr = client.delete(f"/hikes/{hike_id}")
    assert dr.status_code == 200
    assert client.get(f"/hikes/{hike_id}").status_code == 404
    assert client.delete(f"/hikes/{hike_id}").status_code == 404


def test_update_errors(client, ridge_trail):
    assert client.put("/hikes/12345", json={"name": "Ghost"}).status_code == 404

    hike_id = client.post("/hikes/", json=ridge_trail).json()["id"]
    r = client.put(f"/hikes/{hike_id}", json={"is_completed": True})
    assert r.status_code == 400
    assert "completed_date" in r.json()["detail"]


def test_search_map_stats_and_clear(client, ridge_trail):
    client.post("/hikes/", json=ridge_trail)
    client.post(
        "/hikes/",
        json={
            **ridge_trail,
            "name": "Coastal Walk",
            "location": "Sydney",
            "date": "2024-06-01",
            "difficulty": "Easy",
            "locationCoords": {"latitude": -33.89, "longitude": 151.27},
        },
    )

    names = [h["name"] for h in client.get("/hikes/", params={"q": "coastal"}).json()]
    assert names == ["Coastal Walk"]

    ordered = [h["name"] for h in client.get("/hikes/").json()]
    assert ordered == ["Coastal Walk", "Ridge Trail"]

    mapped = client.get("/hikes/map").json()
    assert [h["name"] for h in mapped] == ["Coastal Walk"]

    stats = client.get("/hikes/stats").json()
    assert stats["total_hikes"] == 2
    assert stats["by_difficulty"]["Easy"] == 1

    assert client.delete("/hikes/").status_code == 200
    assert client.get("/hikes/").json() == []
