import uuid
from datetime import datetime, timezone
from sqlalchemy.exc import OperationalError
from skillmatch.models import Match, Profile
from conftest import AUTH_HEADERS, make_result

U = "aaaaaaaa-0000-0000-0000-000000000001"
V = "bbbbbbbb-0000-0000-0000-000000000002"
W = "cccccccc-0000-0000-0000-000000000003"
A, B = U, V


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_get_match_requires_user_id(client, mock_session):
    response = client.get("/match")

    assert response.status_code == 400
    assert response.json() == {"error": "user_id required"}
    mock_session.execute.assert_not_awaited()


def test_get_match_returns_ranked_candidates(client, mock_session):
    mock_session.execute.side_effect = [
        make_result(scalars=[1, 2]),
        make_result(rows=[(V, 1), (W, 1), (W, 2)]),
        make_result(scalars=[Profile(user_id=V, full_name="Vera"), Profile(user_id=W, full_name="Walt")]),
        make_result(rows=[(1, "Python"), (2, "Guitar")]),
    ]

    response = client.get("/match", params={"user_id": U})

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert [m["user_id"] for m in body["matches"]] == [W, V]
    assert body["matches"][0]["match_count"] == 2
    assert sorted(body["matches"][0]["matched_skills"]) == ["Guitar", "Python"]


def test_get_match_without_wants(client):
    response = client.get("/match", params={"user_id": U})

    assert response.status_code == 200
    assert response.json() == {"matches": [], "count": 0}


def test_get_match_store_error_is_500(client, mock_session):
    mock_session.execute.side_effect = OperationalError("SELECT", {}, Exception("db down"))

    response = client.get("/match", params={"user_id": U})

    assert response.status_code == 500
    assert "db down" in response.json()["error"]


def test_create_match_requires_token(client, mock_session):
    response = client.post("/matches", json={"user_a": A, "user_b": B})

    assert response.status_code == 401
    assert response.json() == {"error": "Authorization header missing or malformed"}
    mock_session.add.assert_not_called()


def test_create_match_rejected_token(client, mock_auth_client):
    mock_auth_client.get_user.return_value = None

    response = client.post("/matches", json={"user_a": A, "user_b": B},
                           headers={"Authorization": "Bearer expired"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid or expired token"}
    mock_auth_client.get_user.assert_awaited_once_with("expired")


def test_create_match_with_only_user_a(client):
    response = client.post("/matches", json={"user_a": A}, headers=AUTH_HEADERS)

    assert response.status_code == 400
    assert response.json() == {"error": "user_a & user_b required"}


def test_create_match_without_body(client):
    response = client.post("/matches", headers=AUTH_HEADERS)

    assert response.status_code == 400
    assert "error" in response.json()


def test_create_match_canonical_order(client, mock_session):
    response = client.post("/matches", json={"user_a": B, "user_b": A, "matched_skills": ["Python"]},
                           headers=AUTH_HEADERS)

    assert response.status_code == 200
    match = response.json()["match"]
    assert (match["user_a"], match["user_b"]) == (A, B)
    assert match["status"] == "proposed"
    assert match["matched_skills"] == ["Python"]
    stored = mock_session.add.call_args[0][0]
    assert (stored.user_a, stored.user_b) == (A, B)


def test_list_matches_requires_user_id(client):
    response = client.get("/matches", headers=AUTH_HEADERS)

    assert response.status_code == 400
    assert response.json() == {"error": "user_id required"}


def test_accept_then_list_shows_accepted(client, mock_session):
    match_id = uuid.uuid4()
    accepted = Match(
        id=match_id, user_a=A, user_b=B, matched_skills=["Python"], status="accepted",
        created_at=datetime(2026, 3, 1, tzinfo=timezone.utc),
        accepted_at=datetime(2026, 3, 2, tzinfo=timezone.utc),
    )
    mock_session.execute.return_value = make_result(one=accepted)

    response = client.patch(f"/matches/{match_id}/accept", headers=AUTH_HEADERS)

    assert response.status_code == 200
    assert response.json()["match"]["status"] == "accepted"

    mock_session.execute.return_value = make_result(scalars=[accepted])
    response = client.get("/matches", params={"user_id": A}, headers=AUTH_HEADERS)

    assert response.status_code == 200
    listed = response.json()["matches"]
    assert listed[0]["id"] == str(match_id)
    assert listed[0]["status"] == "accepted"
    assert listed[0]["accepted_at"] is not None


def test_accept_unknown_match_is_404(client, mock_session):
    mock_session.execute.return_value = make_result(one=None)

    response = client.patch(f"/matches/{uuid.uuid4()}/accept", headers=AUTH_HEADERS)

    assert response.status_code == 404
    assert response.json() == {"error": "match not found"}


def test_reject_with_and_without_body(client, mock_session):
    match_id = uuid.uuid4()
    mock_session.execute.return_value = make_result(
        one=Match(id=match_id, user_a=A, user_b=B, status="rejected", reason="busy")
    )

    response = client.patch(f"/matches/{match_id}/reject", json={"reason": "busy"}, headers=AUTH_HEADERS)
    assert response.status_code == 200
    assert response.json()["match"]["reason"] == "busy"

    response = client.patch(f"/matches/{match_id}/reject", headers=AUTH_HEADERS)
    assert response.status_code == 200


def test_reject_malformed_id_is_400(client):
    response = client.patch("/matches/123/reject", headers=AUTH_HEADERS)

    assert response.status_code == 400
    assert response.json() == {"error": "invalid match id"}


def test_get_match_malformed_user_id_is_400(client, mock_session):
    response = client.get("/match", params={"user_id": "not-a-uuid"})

    assert response.status_code == 400
    assert response.json() == {"error": "invalid user id"}
    mock_session.execute.assert_not_awaited()
