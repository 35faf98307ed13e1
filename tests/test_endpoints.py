"""
Endpoint tests for the PlatePilot API.

Requests go through the shared TestClient against the in-memory collection
store; TheMealDB is replaced by an httpx.MockTransport per test.
"""

import uuid

import pytest

from test_fixtures import (
    client,
    install_mealdb,
    make_carbonara,
    make_meal,
    make_mealdb_record,
    meal_payload,
    random_meal_cycle,
    respond_with,
)


def test_health_check():
    r = client.get("/health-check")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == "PlatePilot"
    assert body["version"] == "1.0.0"


# =============================================================================
# MEALS
# =============================================================================


def test_random_meals_with_count():
    seen = install_mealdb(random_meal_cycle([make_mealdb_record(meal_id="1"), make_mealdb_record(meal_id="2")]))

    r = client.get("/meals/random", params={"count": 3})

    assert r.status_code == 200
    assert [m["id"] for m in r.json()] == ["1", "2", "1"]
    assert all(req.url.path.endswith("/random.php") for req in seen)


def test_random_meals_include_labels():
    install_mealdb(random_meal_cycle([make_mealdb_record()]))

    meal = client.get("/meals/random", params={"count": 1}).json()[0]

    assert meal["calories_label"] == f"{meal['calories']} cal"
    assert meal["cost_label"].startswith("$")
    assert meal["cook_time_label"].endswith(" min")
    assert meal["is_favorite"] is False


@pytest.mark.parametrize("count", [0, 51])
def test_random_meals_count_out_of_range(count):
    r = client.get("/meals/random", params={"count": count})
    assert r.status_code == 422


def test_search_meals():
    seen = install_mealdb(respond_with({"meals": [make_mealdb_record()]}))

    r = client.get("/meals/search", params={"q": "teriyaki"})

    assert r.status_code == 200
    assert r.json()[0]["name"] == "Teriyaki Chicken Casserole"
    assert seen[0].url.params["s"] == "teriyaki"


def test_search_meals_no_results():
    install_mealdb(respond_with({"meals": None}))

    r = client.get("/meals/search", params={"q": "zzzz"})

    assert r.status_code == 200
    assert r.json() == []


def test_search_marks_favorites():
    client.post("/favorites", json=meal_payload(make_meal()))
    install_mealdb(respond_with({"meals": [make_mealdb_record()]}))

    r = client.get("/meals/search", params={"q": "teriyaki"})

    assert r.json()[0]["is_favorite"] is True


def test_search_requires_query():
    r = client.get("/meals/search")
    assert r.status_code == 422


# =============================================================================
# FAVORITES
# =============================================================================


def test_favorites_add_list_and_remove():
    r = client.post("/favorites", json=meal_payload(make_meal()))
    assert r.status_code == 201
    assert r.json()["is_favorite"] is True

    r = client.get("/favorites")
    assert [m["id"] for m in r.json()] == ["52772"]
    assert r.json()[0]["ingredients"][0]["name"] == "soy sauce"

    r = client.get("/favorites/52772")
    assert r.json() == {"meal_id": "52772", "is_favorite": True}

    r = client.delete("/favorites/52772")
    assert r.status_code == 200
    assert r.json()["deleted"] == "52772"
    assert client.get("/favorites").json() == []


def test_add_favorite_twice_keeps_one():
    client.post("/favorites", json=meal_payload(make_meal()))
    client.post("/favorites", json=meal_payload(make_meal()))

    assert len(client.get("/favorites").json()) == 1


def test_toggle_favorite():
    payload = meal_payload(make_carbonara())

    r = client.post("/favorites/toggle", json=payload)
    assert r.json() == {"meal_id": "52982", "is_favorite": True}

    r = client.post("/favorites/toggle", json=payload)
    assert r.json() == {"meal_id": "52982", "is_favorite": False}
    assert client.get("/favorites/52982").json()["is_favorite"] is False


def test_remove_unknown_favorite_returns_404():
    r = client.delete("/favorites/12345")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


# =============================================================================
# PLANNER
# =============================================================================


def test_add_meals_to_planner_returns_sorted_days():
    r = client.post("/planner/sunday/meals", json=meal_payload(make_carbonara()))
    assert r.status_code == 201

    r = client.post("/planner/Monday/meals", json=meal_payload(make_meal()))
    days = r.json()

    assert [d["day_of_week"] for d in days] == ["Monday", "Sunday"]
    assert days[0]["header"] == "Monday • 650 cal • $18.50"
    assert days[1]["total_calories"] == 820


def test_add_meal_to_today():
    r = client.post("/planner/today/meals", json=meal_payload(make_meal()))

    assert r.status_code == 201
    assert len(r.json()) == 1
    assert len(r.json()[0]["meals"]) == 1


def test_remove_meal_from_planner():
    client.post("/planner/tuesday/meals", json=meal_payload(make_meal()))
    client.post("/planner/tuesday/meals", json=meal_payload(make_carbonara()))

    r = client.delete("/planner/tuesday/meals/0")
    assert r.status_code == 200
    assert [m["id"] for m in r.json()[0]["meals"]] == ["52982"]

    r = client.delete("/planner/tuesday/meals/0")
    assert r.json() == []


def test_remove_meal_bad_index_returns_404():
    client.post("/planner/tuesday/meals", json=meal_payload(make_meal()))

    r = client.delete("/planner/tuesday/meals/5")

    assert r.status_code == 404
    assert r.json()["error"]["details"] == {"meals": 1}


def test_planner_summary_and_clear():
    client.put("/settings", json={"weekly_budget": 20})
    client.post("/planner/monday/meals", json=meal_payload(make_meal()))
    client.post("/planner/friday/meals", json=meal_payload(make_carbonara()))

    summary = client.get("/planner/summary").json()
    assert summary["planned_days"] == 2
    assert summary["planned_meals"] == 2
    assert summary["total_calories"] == 1470
    assert summary["total_cost"] == pytest.approx(29.75)
    assert summary["remaining_budget"] == pytest.approx(-9.75)
    assert summary["over_budget"] is True

    r = client.delete("/planner")
    assert r.json()["deleted"] == "planner"
    assert client.get("/planner").json() == []


# =============================================================================
# GROCERY LIST
# =============================================================================


def test_add_grocery_item_manually():
    r = client.post("/grocery", json={"name": "  Olive oil ", "quantity": "1 bottle"})

    assert r.status_code == 201
    item = r.json()
    assert item["name"] == "Olive oil"
    assert item["category"] == "Other"
    assert item["is_purchased"] is False
    uuid.UUID(item["id"])


def test_grocery_from_meal_skips_existing_names():
    client.post("/grocery", json={"name": "PARMESAN"})

    r = client.post("/grocery/from-meal", json=meal_payload(make_carbonara()))

    assert r.status_code == 200
    body = r.json()
    assert [i["name"] for i in body["added"]] == ["Spaghetti", "Egg Yolks", "Bacon", "Black Pepper"]
    assert len(body["items"]) == 5


def test_grocery_from_planner():
    client.post("/planner/monday/meals", json=meal_payload(make_meal(ingredients=[("Rice", "1 cup")])))
    client.post("/planner/friday/meals", json=meal_payload(make_meal(ingredients=[("rice", "2 cups"), ("Tofu", "1 block")])))

    body = client.post("/grocery/from-planner").json()

    assert [(i["name"], i["quantity"]) for i in body["added"]] == [("Rice", "1 cup"), ("Tofu", "1 block")]


def test_grocery_purchase_flow():
    milk = client.post("/grocery", json={"name": "Milk"}).json()
    bread = client.post("/grocery", json={"name": "Bread"}).json()

    r = client.post(f"/grocery/{milk['id']}/toggle")
    assert r.json()["is_purchased"] is True

    r = client.patch(f"/grocery/{bread['id']}", json={"is_purchased": True})
    assert r.json()["is_purchased"] is True

    r = client.delete("/grocery/completed")
    assert r.json() == {"deleted": "completed", "count": 2}
    assert client.get("/grocery").json() == []


def test_delete_grocery_item_and_clear():
    milk = client.post("/grocery", json={"name": "Milk"}).json()
    client.post("/grocery", json={"name": "Eggs"})

    r = client.delete(f"/grocery/{milk['id']}")
    assert r.json()["deleted"] == milk["id"]
    assert [i["name"] for i in client.get("/grocery").json()] == ["Eggs"]

    client.delete("/grocery")
    assert client.get("/grocery").json() == []


def test_unknown_grocery_item_returns_404():
    r = client.post(f"/grocery/{uuid.uuid4()}/toggle")
    assert r.status_code == 404


# =============================================================================
# SETTINGS
# =============================================================================


def test_settings_defaults():
    r = client.get("/settings")

    assert r.status_code == 200
    assert r.json() == {
        "weekly_budget": 50.0,
        "calorie_goal": 2000,
        "notifications_enabled": False,
        "weekly_budget_text": "$50.00",
        "calorie_goal_text": "2000 cal/day",
    }


def test_update_and_reset_settings():
    r = client.put("/settings", json={"calorie_goal": 1800})
    assert r.json()["calorie_goal"] == 1800
    assert r.json()["weekly_budget"] == 50.0

    r = client.put("/settings", json={"notifications_enabled": True})
    assert r.json()["calorie_goal"] == 1800
    assert r.json()["notifications_enabled"] is True

    r = client.delete("/settings")
    assert r.json()["calorie_goal"] == 2000
    assert client.get("/settings").json()["notifications_enabled"] is False


def test_negative_budget_rejected():
    r = client.put("/settings", json={"weekly_budget": -1})
    assert r.status_code == 422


def test_clear_all_data():
    client.post("/favorites", json=meal_payload(make_meal()))
    client.post("/planner/monday/meals", json=meal_payload(make_meal()))
    client.post("/grocery", json={"name": "Milk"})

    r = client.delete("/data")

    assert r.json() == {"deleted": "all", "count": 3}
    assert client.get("/favorites").json() == []
    assert client.get("/planner").json() == []
    assert client.get("/grocery").json() == []


def test_get_db_yields_a_session_and_closes_it():
    from sqlalchemy.orm import Session

    from api.dependencies import get_db

    dependency = get_db()
    db = next(dependency)
    assert isinstance(db, Session)

    with pytest.raises(StopIteration):
        next(dependency)
