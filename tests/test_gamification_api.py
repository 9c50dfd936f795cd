"""API tests: achievements, points, leaderboard and dashboard analytics."""

import uuid
from datetime import datetime, timedelta, timezone

from conftest import signup

from fitquest.models import Workout

API = "/api/v1"


async def test_achievement_granted_once(client, alice):
    r = await client.post(f"{API}/workouts", json={"name": "First"}, auth=alice["auth"])
    assert [a["name"] for a in r.json()["new_achievements"]] == ["First Workout"]

    for _ in range(2):
        r = await client.post(f"{API}/achievements/evaluate", auth=alice["auth"])
        assert r.status_code == 200
        assert r.json() == {"granted": [], "points_awarded": 0, "total_points": 100}

    mine = (await client.get(f"{API}/achievements/mine", auth=alice["auth"])).json()
    assert [m["achievement"]["name"] for m in mine] == ["First Workout"]

    profile = (await client.get(f"{API}/profiles/me", auth=alice["auth"])).json()
    assert profile["total_points"] == 100
    assert profile["fitness_level"] == 1


async def test_evaluate_with_nothing_reached(client, alice):
    r = await client.post(f"{API}/achievements/evaluate", auth=alice["auth"])
    assert r.json()["granted"] == []
    assert r.json()["total_points"] == 0


async def test_achievement_catalogue(client, alice):
    r = await client.get(f"{API}/achievements", auth=alice["auth"])
    assert r.status_code == 200
    assert len(r.json()) == 6


async def test_level_progress(client, alice):
    r = await client.get(f"{API}/profiles/me/progress", auth=alice["auth"])
    assert r.json()["points_to_next_level"] == 1000
    await client.post(f"{API}/workouts", json={"name": "First"}, auth=alice["auth"])
    r = await client.get(f"{API}/profiles/me/progress", auth=alice["auth"])
    assert r.json()["points_in_level"] == 100
    assert r.json()["points_to_next_level"] == 900


async def test_leaderboard_ranks(client, alice, bob):
    carol = await signup(client, "carol@example.com", "carol")
    await client.post(f"{API}/workouts", json={"name": "Points"}, auth=bob["auth"])

    board = (await client.get(f"{API}/leaderboard", auth=alice["auth"])).json()
    assert [(e["rank"], e["username"]) for e in board] == [(1, "bob"), (2, "alice"), (3, "carol")]
    assert board[0]["total_workouts"] == 1
    assert board[0]["total_points"] == 100

    top = (await client.get(f"{API}/leaderboard/me", auth=bob["auth"])).json()
    assert top == {"rank": 1, "total_profiles": 3, "total_points": 100}
    last = (await client.get(f"{API}/leaderboard/me", auth=carol["auth"])).json()
    assert last["rank"] == 3


async def test_leaderboard_limit(client, alice, bob):
    r = await client.get(f"{API}/leaderboard", params={"limit": 1}, auth=alice["auth"])
    assert len(r.json()) == 1
    r = await client.get(f"{API}/leaderboard", params={"limit": 101}, auth=alice["auth"])
    assert r.status_code == 422


async def test_analytics_summary(client, alice, exercise_ids):
    await client.post(
        f"{API}/workouts",
        json={
            "name": "A",
            "duration_minutes": 30,
            "exercises": [{"exercise_id": exercise_ids["Bench Press"], "sets": 1, "reps": [10], "weight": [50]}],
        },
        auth=alice["auth"],
    )
    await client.post(f"{API}/workouts", json={"name": "B", "duration_minutes": 60}, auth=alice["auth"])
    await client.post(f"{API}/workouts", json={"name": "C"}, auth=alice["auth"])

    summary = (await client.get(f"{API}/analytics/summary", auth=alice["auth"])).json()
    assert summary["total_workouts"] == 3
    assert summary["workouts_this_week"] == 3
    assert summary["total_exercises"] == 1
    assert summary["average_workout_minutes"] == 45.0
    assert summary["personal_bests"] == 1
    assert summary["current_streak"] == 1
    assert summary["longest_streak"] == 1
    assert summary["level"]["total_points"] == 100


async def test_streak_endpoint(client, alice):
    r = await client.get(f"{API}/analytics/streak", auth=alice["auth"])
    assert r.json() == {"current_streak": 0, "longest_streak": 0, "last_workout_date": None}
    await client.post(f"{API}/workouts", json={"name": "Today"}, auth=alice["auth"])
    r = await client.get(f"{API}/analytics/streak", auth=alice["auth"])
    assert r.json()["current_streak"] == 1


async def test_old_streak_still_earns_achievement(client, session_maker, alice):
    start = datetime.now(timezone.utc) - timedelta(days=500)
    async with session_maker() as session:
        session.add_all(
            [
                Workout(user_id=uuid.UUID(alice["id"]), name=f"Day {i}", created_at=start - timedelta(days=i))
                for i in range(7)
            ]
        )
        await session.commit()

    r = await client.post(f"{API}/achievements/evaluate", auth=alice["auth"])
    assert {a["name"] for a in r.json()["granted"]} == {"First Workout", "Week Warrior"}
    assert r.json()["total_points"] == 400

    # The dashboard streak only looks back about fourteen months
    r = await client.get(f"{API}/analytics/streak", auth=alice["auth"])
    assert r.json()["longest_streak"] == 0
