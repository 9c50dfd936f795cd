"""API tests: follows, shares, likes and the feed."""

from conftest import signup

API = "/api/v1"


async def _share(client, owner, caption="Done!"):
    r = await client.post(f"{API}/workouts", json={"name": "Shared session"}, auth=owner["auth"])
    r = await client.post(
        f"{API}/social/shares", json={"workout_id": r.json()["id"], "caption": caption}, auth=owner["auth"]
    )
    assert r.status_code == 201, r.text
    return r.json()


async def test_like_unlike_round_trip(client, alice, bob):
    carol = await signup(client, "carol@example.com", "carol")
    share = await _share(client, alice)
    url = f"{API}/social/shares/{share['id']}/like"

    for _ in range(3):
        r = await client.post(url, auth=bob["auth"])
        assert r.status_code == 201
        assert r.json() == {"share_id": share["id"], "liked": True, "likes_count": 1}
        r = await client.post(url, auth=carol["auth"])
        assert r.json()["likes_count"] == 2

        r = await client.delete(url, auth=bob["auth"])
        assert r.status_code == 200
        assert r.json()["likes_count"] == 1
        assert r.json()["liked"] is False
        r = await client.delete(url, auth=carol["auth"])
        assert r.json()["likes_count"] == 0

    feed = (await client.get(f"{API}/social/feed", auth=bob["auth"])).json()
    assert feed[0]["likes_count"] == 0
    assert feed[0]["liked_by_me"] is False


async def test_double_like_is_a_conflict_and_count_stays(client, alice, bob):
    share = await _share(client, alice)
    url = f"{API}/social/shares/{share['id']}/like"
    assert (await client.post(url, auth=bob["auth"])).status_code == 201

    r = await client.post(url, auth=bob["auth"])
    assert r.status_code == 409
    assert r.json()["detail"].startswith("Operation failed:")

    feed = (await client.get(f"{API}/social/feed", auth=bob["auth"])).json()
    assert feed[0]["likes_count"] == 1
    assert feed[0]["liked_by_me"] is True


async def test_unlike_without_like(client, alice, bob):
    share = await _share(client, alice)
    r = await client.delete(f"{API}/social/shares/{share['id']}/like", auth=bob["auth"])
    assert r.status_code == 404


async def test_likes_from_two_users(client, alice, bob):
    share = await _share(client, alice)
    url = f"{API}/social/shares/{share['id']}/like"
    await client.post(url, auth=bob["auth"])
    r = await client.post(url, auth=alice["auth"])
    assert r.json()["likes_count"] == 2
    mine = await client.get(f"{API}/social/likes/mine", auth=alice["auth"])
    assert mine.json() == [share["id"]]


async def test_cannot_share_someone_elses_workout(client, alice, bob):
    r = await client.post(f"{API}/workouts", json={"name": "Private"}, auth=alice["auth"])
    r = await client.post(f"{API}/social/shares", json={"workout_id": r.json()["id"]}, auth=bob["auth"])
    assert r.status_code == 404


async def test_only_owner_deletes_share(client, alice, bob):
    share = await _share(client, alice)
    assert (await client.delete(f"{API}/social/shares/{share['id']}", auth=bob["auth"])).status_code == 404
    assert (await client.delete(f"{API}/social/shares/{share['id']}", auth=alice["auth"])).status_code == 204


async def test_follow_and_following_feed(client, alice, bob):
    await _share(client, alice, caption="from alice")
    await _share(client, bob, caption="from bob")

    r = await client.post(f"{API}/social/follows/{alice['id']}", auth=bob["auth"])
    assert r.status_code == 201
    assert (await client.post(f"{API}/social/follows/{alice['id']}", auth=bob["auth"])).status_code == 409

    feed = (await client.get(f"{API}/social/feed", params={"following_only": True}, auth=bob["auth"])).json()
    assert [item["caption"] for item in feed] == ["from alice"]
    assert feed[0]["username"] == "alice"

    followers = (await client.get(f"{API}/social/followers", auth=alice["auth"])).json()
    assert [f["follower_id"] for f in followers] == [bob["id"]]

    assert (await client.delete(f"{API}/social/follows/{alice['id']}", auth=bob["auth"])).status_code == 204
    assert (await client.delete(f"{API}/social/follows/{alice['id']}", auth=bob["auth"])).status_code == 404


async def test_cannot_follow_self(client, alice):
    r = await client.post(f"{API}/social/follows/{alice['id']}", auth=alice["auth"])
    assert r.status_code == 400
