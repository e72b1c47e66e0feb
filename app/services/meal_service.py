"""
Meal Service

Handles meal creation, deletion and the meal listings.
"""

import logging
from datetime import datetime
from typing import Dict, Any, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import selectinload

from app.extensions import db
from app.models.attendance import Attendance
from app.models.feedback import Feedback
from app.models.ingredient_requirement import IngredientRequirement
from app.models.meal import Meal
from app.services import demand_service
from app.utils.enums import MealType
from app.utils.errors import NotFoundError

logger = logging.getLogger(__name__)


def start_of_day(now: Optional[datetime] = None) -> datetime:
    now = now or datetime.utcnow()
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def serialize_meal(meal: Meal) -> Dict[str, Any]:
    return {
        "id": meal.id,
        "title": meal.title,
        "type": MealType(meal.type).value,
        "date": _isoformat(meal.date),
        "imgURL": meal.img_url,
    }


def serialize_ingredient(requirement: IngredientRequirement) -> Dict[str, Any]:
    return {
        "id": requirement.id,
        "itemName": requirement.item_name,
        "gramsPerPax": requirement.grams_per_pax,
    }


def _count_by_meal(column, meal_ids: List[int]) -> Dict[int, int]:
    if not meal_ids:
        return {}
    rows = (
        db.session.query(column, func.count())
        .filter(column.in_(meal_ids))
        .group_by(column)
        .all()
    )
    return {meal_id: count for meal_id, count in rows}


def _meals_from(query, since: Optional[datetime]) -> List[Meal]:
    if since is not None:
        query = query.filter(Meal.date >= since)
    return query.order_by(Meal.date.asc(), Meal.id.asc()).all()


def list_upcoming_meals(now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """
    List meals dated today or later for booking.

    Each meal carries its ingredients and a ``_count`` of bookings and
    feedback entries.
    """
    meals = _meals_from(Meal.query.options(selectinload(Meal.ingredients)), start_of_day(now))
    meal_ids = [meal.id for meal in meals]
    bookings = _count_by_meal(Attendance.meal_id, meal_ids)
    feedback = _count_by_meal(Feedback.meal_id, meal_ids)

    result = []
    for meal in meals:
        payload = serialize_meal(meal)
        payload["ingredients"] = [serialize_ingredient(ing) for ing in meal.ingredients]
        payload["_count"] = {
            "attendance": bookings.get(meal.id, 0),
            "feedback": feedback.get(meal.id, 0),
        }
        result.append(payload)
    return result


def get_meal_demand_listing(include_past: bool = False, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Build the admin listing of meals with projected ingredient demand.

    Args:
        include_past: Include meals dated before today
        now: Reference time, defaults to the current UTC time

    Returns:
        ``{"meals": [...], "stats": {...}}``
    """
    since = None if include_past else start_of_day(now)
    meals = _meals_from(Meal.query.options(selectinload(Meal.ingredients)), since)
    bookings = _count_by_meal(Attendance.meal_id, [meal.id for meal in meals])

    summaries = []
    for meal in meals:
        payload = serialize_meal(meal)
        payload["bookings"] = bookings.get(meal.id, 0)
        payload["ingredients"] = [serialize_ingredient(ing) for ing in meal.ingredients]
        summaries.append(demand_service.summarize_meal(payload))

    return {"meals": summaries, "stats": demand_service.upcoming_meal_stats(summaries)}


def meals_with_booking_counts() -> List[Dict[str, Any]]:
    """Every meal with its booking count, in id order."""
    rows = (
        db.session.query(Meal, func.count(Attendance.id))
        .outerjoin(Attendance, Attendance.meal_id == Meal.id)
        .group_by(Meal.id)
        .order_by(Meal.id)
        .all()
    )
    result = []
    for meal, count in rows:
        payload = serialize_meal(meal)
        payload["bookings"] = count
        result.append(payload)
    return result


def get_meal(meal_id: int) -> Meal:
    meal = db.session.get(Meal, meal_id)
    if not meal:
        raise NotFoundError("Meal not found", code="MEAL_NOT_FOUND")
    return meal


def create_meal(
    title: str,
    meal_type: str,
    date: datetime,
    ingredients: List[Dict[str, Any]],
    img_url: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a meal together with its ingredient requirements.

    Args:
        title: Meal title
        meal_type: BREAKFAST/LUNCH/DINNER
        date: When the meal is served
        ingredients: List of {itemName, gramsPerPax}
        img_url: Image reference

    Returns:
        The created meal with its ingredients
    """
    meal = Meal(title=title, type=MealType(meal_type), date=date, img_url=img_url)
    for item in ingredients:
        meal.ingredients.append(IngredientRequirement(
            item_name=item["itemName"].strip(),
            grams_per_pax=float(item["gramsPerPax"]),
        ))

    db.session.add(meal)
    db.session.commit()
    logger.info("Created meal %s (%s) with %d ingredients", meal.id, meal.title, len(meal.ingredients))

    payload = serialize_meal(meal)
    payload["ingredients"] = [serialize_ingredient(ing) for ing in meal.ingredients]
    return payload


def delete_meal(meal_id: int) -> None:
    """Delete a meal along with its bookings, requirements and feedback."""
    meal = get_meal(meal_id)
    db.session.delete(meal)
    db.session.commit()
    logger.info("Deleted meal %s", meal_id)
