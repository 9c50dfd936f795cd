"""API tests: workout templates."""

API = "/api/v1"


async def _template(client, owner, exercise_ids, name="Full Body", is_public=False):
    payload = {
        "name": name,
        "difficulty_level": "beginner",
        "is_public": is_public,
        "exercises": [
            {"exercise_id": exercise_ids["Squat"], "sets": 3, "reps": [5, 5, 5], "weight": [60, 60, 60]},
            {"exercise_id": exercise_ids["Pull-up"], "sets": 2, "reps": [8, 8]},
        ],
    }
    r = await client.post(f"{API}/templates", json=payload, auth=owner["auth"])
    assert r.status_code == 201, r.text
    return r.json()


async def test_create_template_keeps_order(client, alice, exercise_ids):
    t = await _template(client, alice, exercise_ids)
    assert [step["order_index"] for step in t["exercises"]] == [0, 1]
    assert [step["exercise"]["name"] for step in t["exercises"]] == ["Squat", "Pull-up"]
    assert t["times_used"] == 0


async def test_invalid_difficulty_is_rejected(client, alice):
    r = await client.post(f"{API}/templates", json={"name": "Hard", "difficulty_level": "insane"}, auth=alice["auth"])
    assert r.status_code == 422


async def test_private_templates_are_hidden(client, alice, bob, exercise_ids):
    private = await _template(client, alice, exercise_ids, name="Mine")
    public = await _template(client, alice, exercise_ids, name="Shared", is_public=True)

    assert (await client.get(f"{API}/templates/{private['id']}", auth=bob["auth"])).status_code == 404
    assert (await client.get(f"{API}/templates/{public['id']}", auth=bob["auth"])).status_code == 200

    listed = (await client.get(f"{API}/templates", auth=bob["auth"])).json()
    assert [t["name"] for t in listed] == ["Shared"]
    mine = (await client.get(f"{API}/templates", params={"visibility": "mine"}, auth=alice["auth"])).json()
    assert {t["name"] for t in mine} == {"Mine", "Shared"}


async def test_only_creator_edits_public_template(client, alice, bob, exercise_ids):
    t = await _template(client, alice, exercise_ids, is_public=True)
    r = await client.patch(f"{API}/templates/{t['id']}", json={"name": "Hijacked"}, auth=bob["auth"])
    assert r.status_code == 404
    assert (await client.delete(f"{API}/templates/{t['id']}", auth=bob["auth"])).status_code == 404


async def test_update_replaces_steps(client, alice, exercise_ids):
    t = await _template(client, alice, exercise_ids)
    r = await client.patch(
        f"{API}/templates/{t['id']}",
        json={"difficulty_level": "advanced", "exercises": [{"exercise_id": exercise_ids["Deadlift"], "sets": 1, "reps": [3]}]},
        auth=alice["auth"],
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["difficulty_level"] == "advanced"
    assert [step["exercise"]["name"] for step in body["exercises"]] == ["Deadlift"]


async def test_instantiate_logs_a_workout(client, alice, bob, exercise_ids):
    t = await _template(client, alice, exercise_ids, is_public=True)
    r = await client.post(f"{API}/templates/{t['id']}/instantiate", auth=bob["auth"])
    assert r.status_code == 201, r.text
    workout = r.json()
    assert workout["user_id"] == bob["id"]
    assert workout["name"] == "Full Body"
    assert [e["reps"] for e in workout["exercises"]] == [[5, 5, 5], [8, 8]]

    again = (await client.get(f"{API}/templates/{t['id']}", auth=bob["auth"])).json()
    assert again["times_used"] == 1


async def test_template_from_workout(client, alice, exercise_ids):
    r = await client.post(
        f"{API}/workouts",
        json={"name": "Tuesday", "exercises": [{"exercise_id": exercise_ids["Rowing"], "duration_seconds": 600}]},
        auth=alice["auth"],
    )
    r = await client.post(
        f"{API}/templates/from-workout",
        json={"name": "Row Plan", "workout_id": r.json()["id"]},
        auth=alice["auth"],
    )
    assert r.status_code == 201
    assert r.json()["exercises"][0]["exercise"]["name"] == "Rowing"


async def test_required_fields_cannot_be_cleared(client, alice, exercise_ids):
    t = await _template(client, alice, exercise_ids)
    for payload in ({"name": None}, {"is_public": None}):
        r = await client.patch(f"{API}/templates/{t['id']}", json=payload, auth=alice["auth"])
        assert r.status_code == 422, payload
    r = await client.patch(f"{API}/templates/{t['id']}", json={"difficulty_level": None}, auth=alice["auth"])
    assert r.status_code == 200
    assert r.json()["name"] == "Full Body"
    assert r.json()["is_public"] is False
