import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from scoring.settings import stableford_settings


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c
    stableford_settings.reset_to_defaults()


def _create_course(client) -> str:
    holes = [{"number": i, "par": 4, "handicap": i, "tee_yardages": {"White": 380}} for i in range(1, 19)]
    resp = client.post("/api/courses", json={"name": "Demo Course", "location": "Napa, CA", "holes": holes})
    assert resp.status_code == 201
    return resp.json()["id"]


def _create_players(client, *names) -> list:
    ids = []
    for name in names:
        resp = client.post("/api/players", json={"name": name})
        assert resp.status_code == 201
        ids.append(resp.json()["id"])
    return ids


def _create_round(client, course_id, player_ids, fmt=None) -> str:
    body = {"course_id": course_id, "player_ids": player_ids}
    if fmt is not None:
        body["format"] = fmt
    resp = client.post("/api/rounds", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


def _scores(entries):
    return {"scores": [{"hole_number": h, "player_id": p, "strokes": s} for h, p, s in entries]}


# ================================================================
# Health / setup
# ================================================================

def test_health_reports_counts(client):
    _create_players(client, "Ann")
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "players": 1, "courses": 0, "rounds": 0}


def test_duplicate_course_conflicts(client):
    _create_course(client)
    resp = client.post("/api/courses", json={"name": "Demo Course", "location": "Napa, CA"})
    assert resp.status_code == 409


def test_invalid_player_rejected(client):
    resp = client.post("/api/players", json={"name": "Ann", "handicap": 99})
    assert resp.status_code == 422


def test_round_with_unknown_player_rejected(client):
    course_id = _create_course(client)
    resp = client.post("/api/rounds", json={"course_id": course_id, "player_ids": ["nobody"]})
    assert resp.status_code == 422


def test_unknown_round_is_404(client):
    assert client.get("/api/rounds/missing").status_code == 404
    assert client.get("/api/rounds/missing/scorecard").status_code == 404


# ================================================================
# Score entry
# ================================================================

def test_score_entry_and_scorecard(client):
    course_id = _create_course(client)
    ann, bob = _create_players(client, "Ann", "Bob")
    round_id = _create_round(client, course_id, [ann, bob])

    resp = client.put(f"/api/rounds/{round_id}/scores", json=_scores([(1, ann, 4), (1, bob, 5), (10, ann, 3)]))
    assert resp.status_code == 200

    card = client.get(f"/api/rounds/{round_id}/scorecard").json()
    totals = {row["player_id"]: row for row in card["total"]}
    assert totals[ann]["gross"] == 7
    assert totals[ann]["holes_played"] == 2
    assert card["back_nine"][0]["gross"] == 3


def test_bad_batch_is_rejected_whole(client):
    course_id = _create_course(client)
    ann, bob, cat = _create_players(client, "Ann", "Bob", "Cat")
    round_id = _create_round(client, course_id, [ann, bob])

    resp = client.put(f"/api/rounds/{round_id}/scores", json=_scores([(1, ann, 4), (1, cat, 4)]))
    assert resp.status_code == 422
    assert client.get(f"/api/rounds/{round_id}").json()["hole_scores"] == []


def test_clear_score_and_complete(client):
    course_id = _create_course(client)
    (ann,) = _create_players(client, "Ann")
    round_id = _create_round(client, course_id, [ann])

    client.put(f"/api/rounds/{round_id}/scores", json=_scores([(n, ann, 4) for n in range(1, 19)]))
    assert client.delete(f"/api/rounds/{round_id}/scores/18/{ann}").status_code == 204
    assert client.post(f"/api/rounds/{round_id}/complete").status_code == 409

    client.put(f"/api/rounds/{round_id}/scores", json=_scores([(18, ann, 5)]))
    resp = client.post(f"/api/rounds/{round_id}/complete")
    assert resp.status_code == 200
    assert resp.json()["is_completed"] is True

    listed = client.get("/api/rounds", params={"completed": True}).json()
    assert [r["id"] for r in listed] == [round_id]
    assert listed[0]["course_name"] == "Demo Course"


# ================================================================
# Formats
# ================================================================

def test_stableford_uses_configured_points(client):
    course_id = _create_course(client)
    (ann,) = _create_players(client, "Ann")
    round_id = _create_round(client, course_id, [ann], {"kind": "stableford"})
    client.put(f"/api/rounds/{round_id}/scores", json=_scores([(1, ann, 3)]))

    assert client.get(f"/api/rounds/{round_id}/stableford").json()["standings"][0]["points"] == 3

    resp = client.put("/api/settings/stableford", json={"birdie": 6})
    assert resp.json()["birdie"] == 6
    assert client.get(f"/api/rounds/{round_id}/stableford").json()["standings"][0]["points"] == 6

    assert client.post("/api/settings/stableford/reset").json()["birdie"] == 3


def test_nassau_and_presses(client):
    course_id = _create_course(client)
    ann, bob, cat, dan = _create_players(client, "Ann", "Bob", "Cat", "Dan")
    fmt = {"kind": "nassau", "teams": {"Team 1": [ann, bob], "Team 2": [cat, dan]}}
    round_id = _create_round(client, course_id, [ann, bob, cat, dan], fmt)
    client.put(f"/api/rounds/{round_id}/scores", json=_scores([(1, ann, 3), (1, cat, 4), (2, ann, 3), (2, cat, 4)]))

    result = client.get(f"/api/rounds/{round_id}/nassau").json()
    assert result["matches"][0]["status"]["status"] == "Team 1 2 up with 7 to play"
    assert result["available_presses"][0]["losing_team"] == "Team 2"

    resp = client.post(f"/api/rounds/{round_id}/presses", json={"match_type": "front9"})
    assert resp.status_code == 201
    assert resp.json() == {"match_type": "front9", "starting_hole": 3, "initiating_team": "Team 2"}

    assert client.post(f"/api/rounds/{round_id}/presses", json={"match_type": "back9"}).status_code == 409
    assert len(client.get(f"/api/rounds/{round_id}/nassau").json()["matches"]) == 4


def test_skins_payouts(client):
    course_id = _create_course(client)
    ann, bob = _create_players(client, "Ann", "Bob")
    fmt = {"kind": "skins", "pot_per_player": 10}
    round_id = _create_round(client, course_id, [ann, bob], fmt)
    client.put(f"/api/rounds/{round_id}/scores", json=_scores([(1, ann, 4), (1, bob, 4), (2, ann, 3), (2, bob, 4)]))

    result = client.get(f"/api/rounds/{round_id}/skins").json()
    assert result["skins"] == {ann: 2, bob: 0}
    assert result["payouts"] == {ann: 10.0, bob: -10.0}
    assert result["total_pot"] == 20.0


def test_match_sentinel_for_stroke_round(client):
    course_id = _create_course(client)
    (ann,) = _create_players(client, "Ann")
    round_id = _create_round(client, course_id, [ann])

    result = client.get(f"/api/rounds/{round_id}/match").json()
    assert result["status"]["status"] == "Not a match play game"


def test_press_with_hole_out_of_range_rejected(client):
    course_id = _create_course(client)
    ann, bob, cat, dan = _create_players(client, "Ann", "Bob", "Cat", "Dan")
    fmt = {"kind": "nassau", "teams": {"Team 1": [ann, bob], "Team 2": [cat, dan]}}
    round_id = _create_round(client, course_id, [ann, bob, cat, dan], fmt)
    client.put(f"/api/rounds/{round_id}/scores", json=_scores([(1, ann, 3), (1, cat, 4)]))

    resp = client.post(f"/api/rounds/{round_id}/presses", json={"match_type": "front9", "starting_hole": 25})
    assert resp.status_code == 422

    resp = client.post(f"/api/rounds/{round_id}/presses", json={"match_type": "front9", "starting_hole": 15})
    assert resp.status_code == 409


def test_player_in_a_round_cannot_be_deleted(client):
    course_id = _create_course(client)
    ann, bob = _create_players(client, "Ann", "Bob")
    round_id = _create_round(client, course_id, [ann])

    assert client.delete(f"/api/players/{ann}").status_code == 409
    assert client.delete(f"/api/players/{bob}").status_code == 204

    client.delete(f"/api/rounds/{round_id}")
    assert client.delete(f"/api/players/{ann}").status_code == 204
