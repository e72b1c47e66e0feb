import random
from datetime import date, datetime, timedelta

from app.extensions import db
from app.models.attendance import Attendance
from app.models.feedback import Feedback
from app.services import dashboard_service
from app.utils.enums import MealType, TrendsMode
from tests.conftest import add_meal, user_id


def _totals(users=0, meals=0, bookings=0, feedback=0):
    return {"users": users, "meals": meals, "bookings": bookings, "feedback": feedback}


def test_ratios_with_example_counts():
    assert dashboard_service.meals_per_user(10, 4) == 2.5
    assert dashboard_service.booking_rate(25, 10) == 250.0


def test_ratios_are_zero_without_denominator():
    assert dashboard_service.booking_rate(25, 0) == 0
    assert dashboard_service.meals_per_user(10, 0) == 0

    payload = dashboard_service.compose_dashboard(_totals(), 0, [], [], [])

    assert payload["bookingRate"] == 0
    assert payload["mealsPerUser"] == 0
    assert payload["avgRating"] == 0.0


def test_compose_dashboard_shape_and_inputs_untouched():
    meals = [
        {"id": 1, "title": "Rice & Dal", "type": "LUNCH", "bookings": 3},
        {"id": 2, "title": "Poha", "type": "BREAKFAST", "bookings": 5},
    ]
    requirements = [{"itemName": "rice", "gramsPerPax": 150}]
    trends = [{"date": "Oct 19", "count": 1}]
    snapshot = ([dict(m) for m in meals], list(requirements), list(trends))

    payload = dashboard_service.compose_dashboard(
        _totals(users=4, meals=2, bookings=8, feedback=1), 4.5, meals, requirements, trends
    )

    assert set(payload) == {
        "totalUsers", "totalMeals", "totalAttendance", "totalFeedback", "avgRating",
        "bookingRate", "mealsPerUser", "mealDistribution", "ingredientConsumption",
        "attendanceTrends", "topMeals",
    }
    assert payload["bookingRate"] == 400.0
    assert payload["topMeals"][0]["name"] == "Poha"
    assert payload["mealDistribution"] == [
        {"name": "BREAKFAST", "value": 1},
        {"name": "LUNCH", "value": 1},
    ]
    assert (meals, requirements, trends) == snapshot


def test_actual_trends_cover_trailing_week_including_today():
    today = date(2026, 10, 19)
    counts = {"2026-10-19": 4, "2026-10-14": 2}

    series = dashboard_service.actual_trends(today, counts)

    assert [p["date"] for p in series] == [
        "Oct 13", "Oct 14", "Oct 15", "Oct 16", "Oct 17", "Oct 18", "Oct 19",
    ]
    assert [p["count"] for p in series] == [0, 2, 0, 0, 0, 0, 4]


def test_estimated_trends_stay_within_jitter_bounds():
    series = dashboard_service.estimated_trends(date(2026, 10, 19), 70, random.Random(7))

    assert len(series) == 7
    for point in series:
        assert 8 <= point["count"] <= 12


def test_estimated_trends_never_negative():
    series = dashboard_service.estimated_trends(date(2026, 10, 19), 3, random.Random(1))

    assert all(point["count"] == 0 for point in series)


def test_get_dashboard_stats_reads_store(app):
    with app.app_context():
        lunch = add_meal("Rice, Dal and a Very Long Side", MealType.LUNCH,
                         ingredients=[("rice", 150), ("dal", 80)], bookings=3)
        add_meal("Poha", MealType.BREAKFAST, ingredients=[("rice", 60)], bookings=1)
        student = user_id("user@example.com")
        db.session.add(Feedback(meal_id=lunch, user_id=student, rating=4))
        db.session.add(Feedback(meal_id=lunch, user_id=student, rating=5))
        db.session.commit()

        stats = dashboard_service.get_dashboard_stats(mode=TrendsMode.ACTUAL)

    # one seeded student plus four bookers
    assert stats["totalUsers"] == 5
    assert stats["totalMeals"] == 2
    assert stats["totalAttendance"] == 4
    assert stats["totalFeedback"] == 2
    assert stats["avgRating"] == 4.5
    assert stats["bookingRate"] == 200.0
    assert stats["ingredientConsumption"] == [
        {"name": "rice", "value": 210},
        {"name": "dal", "value": 80},
    ]
    assert stats["topMeals"][0] == {"name": "Rice, Dal and a Very", "bookings": 3, "type": "LUNCH"}
    assert stats["attendanceTrends"][-1]["count"] == 4
    assert sum(p["count"] for p in stats["attendanceTrends"]) == 4


def test_actual_trends_bucket_by_booking_day(app):
    now = datetime.utcnow()
    with app.app_context():
        meal = add_meal("Khichdi", bookings=2)
        old = Attendance.query.filter_by(meal_id=meal).first()
        old.created_at = now - timedelta(days=3)
        db.session.commit()

        stats = dashboard_service.get_dashboard_stats(mode=TrendsMode.ACTUAL, now=now)

    counts = [p["count"] for p in stats["attendanceTrends"]]
    assert counts[-1] == 1
    assert counts[-4] == 1
