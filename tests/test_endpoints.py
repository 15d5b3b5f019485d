"""
HTTP tests for the DietLog API.

Most tests run against the real routers and an in-memory database; a few
monkeypatch the services (as the route-mapping tests do) to check the
transport layer in isolation.
"""

import uuid

from test_fixtures import make_user, meal_payload, unique_email
from domain.schemas.meal_schemas import AdherenceMetrics
from services import MealService, SessionService


def register(client, email=None, name="Sarah Martinez"):
    r = client.post("/users", json={"name": name, "email": email or unique_email()})
    assert r.status_code == 201, r.text
    return r


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


# =============================================================================
# HEALTH
# =============================================================================


def test_health_check(client):
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "DietLog"}
    assert "X-Request-ID" in r.headers


# =============================================================================
# USERS & SESSIONS
# =============================================================================


def test_register_sets_session_cookie(client):
    email = unique_email("john.doe")
    r = register(client, email=email, name="John Doe")

    body = r.json()
    assert body["email"] == email
    assert body["name"] == "John Doe"
    assert uuid.UUID(body["id"])
    assert "session_token" not in body
    assert "sessionId" in r.cookies

    me = client.get("/users/me")
    assert me.status_code == 200
    assert me.json()["id"] == body["id"]


def test_register_duplicate_email(client):
    email = unique_email("john.doe")
    register(client, email=email)

    r = client.post("/users", json={"name": "John Doe", "email": email})

    assert r.status_code == 409
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "ALREADY_EXISTS"
    assert body["error"]["message"] == "User already exists"


def test_register_email_is_case_insensitive(client):
    register(client, email="Mixed.Case@Example.com")

    r = client.post("/users", json={"name": "Again", "email": "mixed.case@example.com"})

    assert r.status_code == 409


def test_register_invalid_payload(client):
    r = client.post("/users", json={"name": "John Doe", "email": "not-an-email"})

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_create_session_rotates_cookie(client_factory):
    client = client_factory()
    email = unique_email("session")
    first = register(client, email=email).cookies["sessionId"]

    r = client.post("/users/session", json={"email": email})

    assert r.status_code == 200
    new_token = r.json()["session_token"]
    assert r.cookies["sessionId"] == new_token
    assert new_token != first

    other = client_factory()
    assert other.get("/meals", headers=bearer(new_token)).status_code == 200
    stale = other.get("/meals", headers=bearer(first))
    assert stale.status_code == 401
    assert stale.json()["error"]["code"] == "UNAUTHENTICATED"


def test_create_session_unknown_email(client):
    r = client.post("/users/session", json={"email": unique_email("ghost")})

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


# =============================================================================
# AUTHENTICATION GATE
# =============================================================================


def test_meal_routes_require_session(client):
    some_id = uuid.uuid4()
    calls = [
        client.get("/meals"),
        client.post("/meals", json=meal_payload()),
        client.get("/meals/metrics"),
        client.get(f"/meals/{some_id}"),
        client.put(f"/meals/{some_id}", json=meal_payload()),
        client.delete(f"/meals/{some_id}"),
        client.get("/users/me"),
    ]

    for r in calls:
        assert r.status_code == 401
        assert r.json()["error"]["code"] == "UNAUTHENTICATED"


def test_bearer_header_is_accepted(client_factory):
    owner = client_factory()
    register(owner)
    token = owner.cookies["sessionId"]

    anonymous = client_factory()
    r = anonymous.post("/meals", json=meal_payload(), headers=bearer(token))

    assert r.status_code == 201
    assert len(owner.get("/meals").json()["meals"]) == 1


# =============================================================================
# MEALS
# =============================================================================


def test_create_meal(client):
    register(client)

    r = client.post("/meals", json=meal_payload(is_on_diet=True))

    assert r.status_code == 201
    body = r.json()
    assert body["name"] == "Grilled chicken salad"
    assert body["is_on_diet"] is True
    assert body["occurred_at"] == "2024-01-01T08:00:00"
    assert uuid.UUID(body["id"])


def test_create_meal_accepts_snake_case(client):
    register(client)
    payload = {
        "name": "Tofu stir fry",
        "description": "Tofu, broccoli, soy sauce",
        "occurred_at": "2024-01-02T19:30:00+02:00",
        "is_on_diet": True,
    }

    r = client.post("/meals", json=payload)

    assert r.status_code == 201
    # Stored as UTC
    assert r.json()["occurred_at"] == "2024-01-02T17:30:00"


def test_create_meal_invalid_payload(client):
    register(client)

    r = client.post("/meals", json={"name": "No date", "description": "x", "isOnDiet": True})

    assert r.status_code == 422


def test_get_update_delete_meal(client):
    register(client)
    meal_id = client.post("/meals", json=meal_payload()).json()["id"]

    r = client.get(f"/meals/{meal_id}")
    assert r.status_code == 200
    assert r.json()["id"] == meal_id

    r = client.put(
        f"/meals/{meal_id}",
        json=meal_payload(is_on_diet=False, hours=5, name="Double cheeseburger"),
    )
    assert r.status_code == 200
    assert r.json()["name"] == "Double cheeseburger"
    assert r.json()["is_on_diet"] is False

    r = client.delete(f"/meals/{meal_id}")
    assert r.status_code == 200
    assert r.json()["message"] == "Meal deleted"

    assert client.get(f"/meals/{meal_id}").status_code == 404


def test_cross_user_access_is_rejected(client_factory):
    alice = client_factory()
    bob = client_factory()
    register(alice, name="Alice")
    register(bob, name="Bob")
    meal_id = alice.post("/meals", json=meal_payload(name="Alice's salad")).json()["id"]

    r = bob.get(f"/meals/{meal_id}")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"

    r = bob.put(f"/meals/{meal_id}", json=meal_payload(name="Bob was here"))
    assert r.status_code == 403
    assert r.json()["error"]["code"] == "UNAUTHORIZED"

    r = bob.delete(f"/meals/{meal_id}")
    assert r.status_code == 403

    assert bob.get("/meals").json() == {"meals": []}
    assert alice.get(f"/meals/{meal_id}").json()["name"] == "Alice's salad"


def test_mutating_unknown_meal_is_unauthorized(client):
    register(client)
    missing = uuid.uuid4()

    assert client.put(f"/meals/{missing}", json=meal_payload()).status_code == 403
    assert client.delete(f"/meals/{missing}").status_code == 403
    assert client.get(f"/meals/{missing}").status_code == 404


def test_invalid_meal_id(client):
    register(client)

    assert client.get("/meals/not-a-uuid").status_code == 422


def test_list_meals_newest_first(client):
    register(client)
    for hours, name in [(2, "Lunch"), (0, "Breakfast"), (10, "Dinner")]:
        client.post("/meals", json=meal_payload(hours=hours, name=name))

    meals = client.get("/meals").json()["meals"]

    assert [m["name"] for m in meals] == ["Dinner", "Lunch", "Breakfast"]


# =============================================================================
# METRICS
# =============================================================================


def test_metrics_ten_on_diet_meals(client):
    register(client)
    for i in range(10):
        r = client.post("/meals", json=meal_payload(is_on_diet=True, name=f"Meal {i + 1}"))
        assert r.status_code == 201

    r = client.get("/meals/metrics")

    assert r.status_code == 200
    assert r.json() == {
        "total_meals": 10,
        "on_diet_count": 10,
        "off_diet_count": 0,
        "best_streak": 10,
        "current_streak": 10,
        "adherence_percentage": "100.00%",
    }


def test_metrics_without_meals(client):
    register(client)

    body = client.get("/meals/metrics").json()

    assert body["total_meals"] == 0
    assert body["adherence_percentage"] == "0.00%"


def test_metrics_route_maps_service_result(client, monkeypatch):
    user = make_user()
    snapshot = AdherenceMetrics(
        total_meals=7,
        on_diet_count=3,
        off_diet_count=4,
        best_streak=2,
        current_streak=0,
        adherence_percentage="42.86%",
    )
    monkeypatch.setattr(SessionService, "resolve", lambda db, token: user)
    monkeypatch.setattr(MealService, "metrics", lambda db, owner: snapshot)

    r = client.get("/meals/metrics", headers=bearer(user.session_token))

    assert r.status_code == 200
    assert r.json()["adherence_percentage"] == "42.86%"
    assert r.json()["best_streak"] == 2


# =============================================================================
# END-TO-END
# =============================================================================


def test_end_to_end_meal_log(client):
    register(client, email="e@example.com", name="E")

    first = client.post("/meals", json=meal_payload(is_on_diet=True, hours=1, name="Porridge"))
    second = client.post("/meals", json=meal_payload(is_on_diet=False, hours=6, name="Donut"))
    assert first.status_code == 201
    assert second.status_code == 201

    meals = client.get("/meals").json()["meals"]
    assert [m["name"] for m in meals] == ["Donut", "Porridge"]

    r = client.delete(f"/meals/{meals[0]['id']}")
    assert r.status_code == 200

    remaining = client.get("/meals").json()["meals"]
    assert [m["name"] for m in remaining] == ["Porridge"]

    metrics = client.get("/meals/metrics").json()
    assert metrics["total_meals"] == 1
    assert metrics["on_diet_count"] == 1
    assert metrics["adherence_percentage"] == "100.00%"
