"""
Dashboard Service

Composes the admin dashboard payload from store counts and the demand
aggregator's leaderboards.
"""

import math
import random
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import func

from app.extensions import db
from app.models.attendance import Attendance
from app.models.feedback import Feedback
from app.models.ingredient_requirement import IngredientRequirement
from app.models.meal import Meal
from app.models.user import User
from app.services import demand_service
from app.services.meal_service import meals_with_booking_counts
from app.utils.enums import TrendsMode, UserRole

TREND_DAYS = 7
TREND_JITTER = 0.2


def _ratio(numerator: float, denominator: float, scale: float = 1.0) -> float:
    if not denominator:
        return 0
    return round(numerator / denominator * scale, 1)


def booking_rate(total_bookings: int, total_meals: int) -> float:
    """Bookings per meal as a percentage, 0 when there are no meals."""
    return _ratio(total_bookings, total_meals, 100)


def meals_per_user(total_meals: int, total_users: int) -> float:
    return _ratio(total_meals, total_users)


def trend_label(day: date) -> str:
    return f"{day.strftime('%b')} {day.day}"


def trend_days(today: date) -> List[date]:
    """The trailing week including ``today``, oldest first."""
    return [today - timedelta(days=offset) for offset in range(TREND_DAYS - 1, -1, -1)]


def actual_trends(today: date, counts_by_day: Dict[str, int]) -> List[Dict[str, Any]]:
    """Label each trailing day with its booking count; missing days are 0."""
    return [
        {"date": trend_label(day), "count": counts_by_day.get(day.isoformat(), 0)}
        for day in trend_days(today)
    ]


def estimated_trends(today: date, total_bookings: int, rng: Optional[random.Random] = None) -> List[Dict[str, Any]]:
    """
    Spread the overall booking total evenly over the week with bounded jitter.

    This is an estimate for display only; it does not read booking dates.
    """
    rng = rng or random.Random()
    avg_per_day = total_bookings // TREND_DAYS
    series = []
    for day in trend_days(today):
        jitter = math.floor(rng.random() * (avg_per_day * TREND_JITTER * 2)) - avg_per_day * TREND_JITTER
        series.append({"date": trend_label(day), "count": max(0, int(avg_per_day + jitter))})
    return series


def compose_dashboard(
    totals: Dict[str, int],
    avg_rating: float,
    meals: List[Dict[str, Any]],
    requirements: List[Dict[str, Any]],
    attendance_trends: List[Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Assemble the dashboard summary payload.

    Args:
        totals: ``users``, ``meals``, ``bookings`` and ``feedback`` counts
        avg_rating: Mean feedback rating, 0 when there is no feedback
        meals: Every meal with ``title``, ``type`` and ``bookings``
        requirements: Every ingredient requirement row
        attendance_trends: Day-labelled booking series

    Returns:
        The summary dictionary; inputs are left untouched
    """
    return {
        "totalUsers": totals["users"],
        "totalMeals": totals["meals"],
        "totalAttendance": totals["bookings"],
        "totalFeedback": totals["feedback"],
        "avgRating": float(avg_rating or 0),
        "bookingRate": booking_rate(totals["bookings"], totals["meals"]),
        "mealsPerUser": meals_per_user(totals["meals"], totals["users"]),
        "mealDistribution": demand_service.meal_type_distribution(meals),
        "ingredientConsumption": demand_service.top_ingredients(requirements),
        "attendanceTrends": list(attendance_trends),
        "topMeals": demand_service.top_meals(meals),
    }


def _booking_counts_by_day(start: datetime) -> Dict[str, int]:
    results = (
        db.session.query(
            func.date(Attendance.created_at).label("day"),
            func.count(Attendance.id).label("count"),
        )
        .filter(Attendance.created_at >= start)
        .group_by(func.date(Attendance.created_at))
        .all()
    )
    return {str(r.day): r.count for r in results}


def _requirement_rows() -> List[Dict[str, Any]]:
    rows = (
        db.session.query(IngredientRequirement.item_name, IngredientRequirement.grams_per_pax)
        .order_by(IngredientRequirement.id)
        .all()
    )
    return [{"itemName": name, "gramsPerPax": grams} for name, grams in rows]


def get_dashboard_stats(
    mode: TrendsMode = TrendsMode.ACTUAL,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    """
    Read counts and rows from the store and compose the dashboard payload.

    Each count is an independent read; the result is not a consistent
    snapshot across queries.
    """
    now = now or datetime.utcnow()
    today = now.date()

    totals = {
        "users": User.query.filter_by(role=UserRole.USER).count(),
        "meals": Meal.query.count(),
        "bookings": Attendance.query.count(),
        "feedback": Feedback.query.count(),
    }
    avg_rating = db.session.query(func.avg(Feedback.rating)).scalar() or 0

    if TrendsMode(mode) is TrendsMode.ESTIMATE:
        trends = estimated_trends(today, totals["bookings"], rng)
    else:
        start = datetime.combine(trend_days(today)[0], datetime.min.time())
        trends = actual_trends(today, _booking_counts_by_day(start))

    return compose_dashboard(
        totals,
        avg_rating,
        meals_with_booking_counts(),
        _requirement_rows(),
        trends,
    )
