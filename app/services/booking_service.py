"""
Booking Service

Admits users to meals and reports their attendance history.
"""

import logging
import math
from datetime import datetime
from typing import Dict, Any, List, Optional

from sqlalchemy.exc import IntegrityError

from app.extensions import db
from app.models.attendance import Attendance
from app.models.meal import Meal
from app.services.meal_service import get_meal, serialize_meal
from app.utils.enums import MealType
from app.utils.errors import ConflictError, InvalidRequestError

logger = logging.getLogger(__name__)

ALREADY_BOOKED = "You have already booked this meal"


def _find_booking(user_id: int, meal_id: int) -> Optional[Attendance]:
    return Attendance.query.filter_by(user_id=user_id, meal_id=meal_id).first()


def book_meal(user_id: int, meal_id: int, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Book a meal for a user.

    Args:
        user_id: Booking user
        meal_id: Meal to book
        now: Reference time, defaults to the current UTC time

    Returns:
        The created booking with its meal

    Raises:
        NotFoundError: If the meal does not exist
        InvalidRequestError: If the meal is already in the past
        ConflictError: If the user already holds a booking for the meal
    """
    now = now or datetime.utcnow()
    meal = get_meal(meal_id)

    if meal.date < now:
        raise InvalidRequestError("Cannot book past meals", code="PAST_MEAL")

    if _find_booking(user_id, meal_id):
        raise ConflictError(ALREADY_BOOKED, code="ALREADY_BOOKED")

    attendance = Attendance(user_id=user_id, meal_id=meal_id, has_eaten=False)
    db.session.add(attendance)
    try:
        db.session.commit()
    except IntegrityError:
        # A concurrent request inserted the same (user, meal) pair first
        db.session.rollback()
        logger.info("Duplicate booking rejected by store: user=%s meal=%s", user_id, meal_id)
        raise ConflictError(ALREADY_BOOKED, code="ALREADY_BOOKED")

    logger.info("User %s booked meal %s", user_id, meal_id)
    return {
        "id": attendance.id,
        "userId": attendance.user_id,
        "mealId": attendance.meal_id,
        "hasEaten": attendance.has_eaten,
        "createdAt": attendance.created_at.isoformat(),
        "meal": serialize_meal(meal),
    }


def booked_meal_ids(user_id: int) -> List[int]:
    rows = db.session.query(Attendance.meal_id).filter_by(user_id=user_id).order_by(Attendance.id).all()
    return [meal_id for (meal_id,) in rows]


def attendance_rate(attended: int, booked: int) -> int:
    """Share of bookings that were attended, as a whole percentage."""
    if not booked:
        return 0
    return math.floor(attended / booked * 100 + 0.5)


def get_user_attendance(user_id: int) -> Dict[str, Any]:
    records = (
        db.session.query(Attendance, Meal)
        .join(Meal, Attendance.meal_id == Meal.id)
        .filter(Attendance.user_id == user_id)
        .order_by(Attendance.created_at.desc(), Attendance.id.desc())
        .all()
    )

    attendance = [
        {
            "id": record.id,
            "mealTitle": meal.title,
            "mealType": MealType(meal.type).value,
            "mealDate": meal.date.isoformat(),
            "attended": record.has_eaten,
            "bookedAt": record.created_at.isoformat(),
        }
        for record, meal in records
    ]

    total_booked = len(attendance)
    attended_count = sum(1 for item in attendance if item["attended"])
    return {
        "attendance": attendance,
        "stats": {
            "totalBooked": total_booked,
            "attendedCount": attended_count,
            "bookingRate": attendance_rate(attended_count, total_booked),
            "totalMeals": Meal.query.count(),
        },
    }
