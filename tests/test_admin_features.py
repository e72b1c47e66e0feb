from datetime import datetime, timedelta

import pytest

import config
from app import create_app
from app.extensions import db
from app.models.attendance import Attendance
from app.models.ingredient_requirement import IngredientRequirement
from app.models.meal import Meal
from app.utils.enums import MealType
from tests.conftest import add_meal


def test_create_meal(client, app, admin_headers):
    tomorrow = (datetime.utcnow() + timedelta(days=1)).date().isoformat()
    r = client.post("/api/admin/meals", headers=admin_headers, json={
        "title": "Rice & Dal",
        "type": "LUNCH",
        "date": tomorrow,
        "ingredients": [
            {"itemName": "rice", "gramsPerPax": 150},
            {"itemName": "dal", "gramsPerPax": 80},
        ],
    })
    assert r.status_code == 201, r.data
    meal = r.get_json()["meal"]
    assert meal["type"] == "LUNCH"
    assert meal["imgURL"] == app.config["DEFAULT_MEAL_IMAGE"]
    assert [i["itemName"] for i in meal["ingredients"]] == ["rice", "dal"]

    with app.app_context():
        assert IngredientRequirement.query.filter_by(meal_id=meal["id"]).count() == 2


def test_create_meal_validation(client, admin_headers):
    r = client.post("/api/admin/meals", headers=admin_headers, json={
        "title": "No Ingredients", "type": "LUNCH", "date": "2030-01-01", "ingredients": [],
    })
    assert r.status_code == 400
    assert "ingredients" in r.get_json()["error"]["details"]

    r2 = client.post("/api/admin/meals", headers=admin_headers, json={
        "title": "Bad Type", "type": "BRUNCH", "date": "2030-01-01",
        "ingredients": [{"itemName": "egg", "gramsPerPax": 50}],
    })
    assert r2.status_code == 400
    assert "type" in r2.get_json()["error"]["details"]

    r3 = client.post("/api/admin/meals", headers=admin_headers, json={
        "title": "Zero Rate", "date": "2030-01-01",
        "ingredients": [{"itemName": "egg", "gramsPerPax": 0}],
    })
    assert r3.status_code == 400

    r4 = client.post("/api/admin/meals", headers=admin_headers, json={"type": "LUNCH"})
    assert r4.status_code == 400
    assert {"title", "date"} <= set(r4.get_json()["error"]["details"])


def test_admin_endpoints_reject_students(app, client, user_headers):
    for path in ["/api/admin/dashboard-stats", "/api/admin/upcoming-meals", "/api/admin/users"]:
        r = client.get(path, headers=user_headers)
        assert r.status_code == 403, path
        assert r.get_json()["error"]["code"] == "FORBIDDEN"

    # logging in set a session cookie on `client`
    r = app.test_client().get("/api/admin/dashboard-stats")
    assert r.status_code == 401


def test_upcoming_meals_projected_demand(client, app, admin_headers):
    with app.app_context():
        lunch = add_meal("Rice & Dal", MealType.LUNCH, days_from_now=1,
                         ingredients=[("rice", 150), ("dal", 80)], bookings=3)
        add_meal("Poha", MealType.BREAKFAST, days_from_now=2, ingredients=[("poha", 70)], bookings=1)
        add_meal("Past", MealType.DINNER, days_from_now=-5, ingredients=[("roti", 100)], bookings=4)

    r = client.get("/api/admin/upcoming-meals", headers=admin_headers)

    assert r.status_code == 200
    data = r.get_json()
    first = data["meals"][0]
    assert first["id"] == lunch
    assert [(i["itemName"], i["totalGrams"]) for i in first["ingredients"]] == [("rice", 450), ("dal", 240)]
    assert first["ingredientCount"] == 2
    assert first["totalIngredients"] == 690
    assert data["stats"] == {"totalUpcomingMeals": 2, "totalBookings": 4, "avgIngredients": 380.0}

    r2 = client.get("/api/admin/upcoming-meals?all=true", headers=admin_headers)
    assert r2.get_json()["stats"]["totalUpcomingMeals"] == 3
    assert r2.get_json()["meals"][0]["title"] == "Past"


def test_dashboard_stats_endpoint(client, app, admin_headers):
    with app.app_context():
        add_meal("A Remarkably Long Festival Thali", MealType.DINNER, ingredients=[("rice", 100)], bookings=2)

    r = client.get("/api/admin/dashboard-stats", headers=admin_headers)

    assert r.status_code == 200
    data = r.get_json()
    assert data["totalMeals"] == 1
    assert data["totalAttendance"] == 2
    assert data["avgRating"] == 0
    assert data["topMeals"] == [{"name": "A Remarkably Long Fe", "bookings": 2, "type": "DINNER"}]
    assert data["mealDistribution"] == [{"name": "DINNER", "value": 1}]
    assert len(data["attendanceTrends"]) == 7


def test_dashboard_stats_estimate_mode(client, app, admin_headers):
    app.config["ATTENDANCE_TRENDS_MODE"] = "estimate"

    r = client.get("/api/admin/dashboard-stats", headers=admin_headers)

    assert r.status_code == 200
    assert [p["count"] for p in r.get_json()["attendanceTrends"]] == [0] * 7


def test_delete_meal_cascades(client, app, admin_headers):
    with app.app_context():
        meal = add_meal("To Remove", ingredients=[("rice", 100)], bookings=2)

    r = client.delete(f"/api/admin/meals/{meal}", headers=admin_headers)
    assert r.status_code == 200

    with app.app_context():
        assert db.session.get(Meal, meal) is None
        assert Attendance.query.filter_by(meal_id=meal).count() == 0
        assert IngredientRequirement.query.filter_by(meal_id=meal).count() == 0

    r2 = client.delete(f"/api/admin/meals/{meal}", headers=admin_headers)
    assert r2.status_code == 404


def test_list_users(client, admin_headers):
    r = client.get("/api/admin/users?role=admin", headers=admin_headers)
    assert r.status_code == 200
    data = r.get_json()
    assert data["total"] == 1
    assert data["items"][0]["email"] == "admin@example.com"

    r2 = client.get("/api/admin/users?search=student", headers=admin_headers)
    assert [u["email"] for u in r2.get_json()["items"]] == ["user@example.com"]

    r3 = client.get("/api/admin/users?role=CHEF", headers=admin_headers)
    assert r3.status_code == 400


def test_unknown_trends_mode_fails_at_startup():
    class GuessingConfig(config.TestConfig):
        ATTENDANCE_TRENDS_MODE = "guess"

    with pytest.raises(ValueError):
        create_app(GuessingConfig)
