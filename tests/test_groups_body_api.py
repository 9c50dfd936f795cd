"""API tests: coach groups and body measurements."""

from conftest import signup

API = "/api/v1"


async def test_group_visibility(client, alice, bob):
    carol = await signup(client, "carol@example.com", "carol")
    r = await client.post(f"{API}/groups", json={"name": "Morning Crew"}, auth=alice["auth"])
    assert r.status_code == 201
    group_id = r.json()["id"]

    # Not yet a member: the group does not exist for bob
    assert (await client.get(f"{API}/groups/{group_id}", auth=bob["auth"])).status_code == 404

    r = await client.post(f"{API}/groups/{group_id}/members", json={"user_id": bob["id"]}, auth=alice["auth"])
    assert r.status_code == 201
    r = await client.post(f"{API}/groups/{group_id}/members", json={"user_id": carol["id"]}, auth=alice["auth"])
    assert r.status_code == 201

    assert (await client.get(f"{API}/groups/{group_id}", auth=bob["auth"])).status_code == 200
    assert [g["name"] for g in (await client.get(f"{API}/groups", auth=bob["auth"])).json()] == ["Morning Crew"]

    coach_view = (await client.get(f"{API}/groups/{group_id}/members", auth=alice["auth"])).json()
    assert {m["user_id"] for m in coach_view} == {bob["id"], carol["id"]}
    member_view = (await client.get(f"{API}/groups/{group_id}/members", auth=bob["auth"])).json()
    assert [m["user_id"] for m in member_view] == [bob["id"]]


async def test_only_coach_manages_group(client, alice, bob):
    group_id = (await client.post(f"{API}/groups", json={"name": "Crew"}, auth=alice["auth"])).json()["id"]
    await client.post(f"{API}/groups/{group_id}/members", json={"user_id": bob["id"]}, auth=alice["auth"])

    assert (await client.patch(f"{API}/groups/{group_id}", json={"name": "Bob's"}, auth=bob["auth"])).status_code == 404
    r = await client.post(f"{API}/groups/{group_id}/members", json={"user_id": alice["id"]}, auth=bob["auth"])
    assert r.status_code == 404

    r = await client.patch(f"{API}/groups/{group_id}", json={"is_active": False}, auth=alice["auth"])
    assert r.json()["is_active"] is False

    for payload in ({"name": None}, {"is_active": None}):
        r = await client.patch(f"{API}/groups/{group_id}", json=payload, auth=alice["auth"])
        assert r.status_code == 422, payload


async def test_member_added_twice_is_a_conflict(client, alice, bob):
    group_id = (await client.post(f"{API}/groups", json={"name": "Crew"}, auth=alice["auth"])).json()["id"]
    url = f"{API}/groups/{group_id}/members"
    assert (await client.post(url, json={"user_id": bob["id"]}, auth=alice["auth"])).status_code == 201
    assert (await client.post(url, json={"user_id": bob["id"]}, auth=alice["auth"])).status_code == 409


async def test_remove_member_and_delete_group(client, alice, bob):
    group_id = (await client.post(f"{API}/groups", json={"name": "Crew"}, auth=alice["auth"])).json()["id"]
    await client.post(f"{API}/groups/{group_id}/members", json={"user_id": bob["id"]}, auth=alice["auth"])

    r = await client.delete(f"{API}/groups/{group_id}/members/{bob['id']}", auth=alice["auth"])
    assert r.status_code == 204
    assert (await client.get(f"{API}/groups/{group_id}", auth=bob["auth"])).status_code == 404

    assert (await client.delete(f"{API}/groups/{group_id}", auth=alice["auth"])).status_code == 204
    assert (await client.get(f"{API}/groups", auth=alice["auth"])).json() == []


async def test_body_measurements(client, alice, bob):
    r = await client.post(
        f"{API}/body",
        json={"weight": 70.5, "body_fat_percentage": 18, "measured_at": "2024-01-01T08:00:00Z"},
        auth=alice["auth"],
    )
    assert r.status_code == 201
    first = r.json()
    r = await client.post(f"{API}/body", json={"weight": 69.8, "waist": 80}, auth=alice["auth"])
    assert r.status_code == 201
    latest = r.json()

    series = (await client.get(f"{API}/body", auth=alice["auth"])).json()
    assert [m["id"] for m in series] == [first["id"], latest["id"]]
    assert (await client.get(f"{API}/body/latest", auth=alice["auth"])).json()["id"] == latest["id"]

    r = await client.patch(f"{API}/body/{first['id']}", json={"notes": "fasted"}, auth=alice["auth"])
    assert r.json()["notes"] == "fasted"

    # Another user's measurement does not exist for bob
    assert (await client.get(f"{API}/body/{first['id']}", auth=bob["auth"])).status_code == 404
    assert (await client.get(f"{API}/body", auth=bob["auth"])).json() == []
    assert (await client.get(f"{API}/body/latest", auth=bob["auth"])).json() is None

    assert (await client.delete(f"{API}/body/{first['id']}", auth=alice["auth"])).status_code == 204


async def test_body_measurement_bounds(client, alice):
    r = await client.post(f"{API}/body", json={"body_fat_percentage": 120}, auth=alice["auth"])
    assert r.status_code == 422
