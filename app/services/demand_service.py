"""
Demand Aggregation

Pure functions that turn meals, their ingredient requirements and booking
counts into demand figures and leaderboards. Nothing here touches the
database; callers pass plain dictionaries shaped like the API payloads:

    meal = {
        "id": 1, "title": "Rice & Dal", "type": "LUNCH", "date": ...,
        "imgURL": ..., "bookings": 3,
        "ingredients": [{"itemName": "rice", "gramsPerPax": 150}, ...],
    }
"""

from typing import Any, Dict, Iterable, List, Optional

from app.utils.enums import MealType

LEADERBOARD_SIZE = 10
TITLE_DISPLAY_LENGTH = 20


def _grams(value: Optional[float]) -> float:
    # A missing rate contributes nothing; negative rates are passed through.
    return float(value) if value is not None else 0.0


def ingredient_demand(ingredients: Iterable[Dict[str, Any]], bookings: int) -> List[Dict[str, Any]]:
    """
    Compute total demand for each ingredient of a single meal.

    Args:
        ingredients: Rows with ``itemName`` and ``gramsPerPax``
        bookings: Number of bookings for the meal, attended or not

    Returns:
        One ``{itemName, gramsPerPax, totalGrams}`` entry per ingredient,
        in input order
    """
    return [
        {
            "itemName": ing.get("itemName"),
            "gramsPerPax": ing.get("gramsPerPax"),
            "totalGrams": _grams(ing.get("gramsPerPax")) * bookings,
        }
        for ing in ingredients
    ]


def summarize_meal(meal: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build the demand summary for one meal.

    Returns a new dictionary with the meal's identifying fields plus
    ``bookings``, ``ingredientCount``, ``totalIngredients`` (grams across all
    ingredients) and the per-ingredient ``ingredients`` breakdown.
    """
    bookings = int(meal.get("bookings") or 0)
    ingredients = ingredient_demand(meal.get("ingredients") or [], bookings)
    return {
        "id": meal.get("id"),
        "title": meal.get("title"),
        "type": meal.get("type"),
        "date": meal.get("date"),
        "imgURL": meal.get("imgURL"),
        "bookings": bookings,
        "ingredientCount": len(ingredients),
        "totalIngredients": sum(ing["totalGrams"] for ing in ingredients),
        "ingredients": ingredients,
    }


def upcoming_meal_stats(summaries: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Roll meal summaries up into the listing header stats."""
    total_meals = len(summaries)
    total_bookings = sum(s["bookings"] for s in summaries)
    total_grams = sum(s["totalIngredients"] for s in summaries)
    return {
        "totalUpcomingMeals": total_meals,
        "totalBookings": total_bookings,
        "avgIngredients": round(total_grams / total_meals, 1) if total_meals else 0,
    }


def top_ingredients(requirements: Iterable[Dict[str, Any]], limit: int = LEADERBOARD_SIZE) -> List[Dict[str, Any]]:
    """
    Rank ingredients by their per-serving rate summed across the menu.

    This sums ``gramsPerPax`` over every requirement row sharing an
    ``itemName``; it does not weight by bookings. Ties keep the order in
    which names were first seen.
    """
    totals: Dict[str, float] = {}
    for row in requirements:
        name = row.get("itemName")
        totals[name] = totals.get(name, 0.0) + _grams(row.get("gramsPerPax"))

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [{"name": name, "value": value} for name, value in ranked[:limit]]


def meal_type_distribution(meals: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    counts: Dict[str, int] = {}
    for meal in meals:
        meal_type = MealType(meal.get("type")).value
        counts[meal_type] = counts.get(meal_type, 0) + 1
    return [
        {"name": meal_type.value, "value": counts[meal_type.value]}
        for meal_type in MealType
        if meal_type.value in counts
    ]


def top_meals(meals: Iterable[Dict[str, Any]], limit: int = LEADERBOARD_SIZE) -> List[Dict[str, Any]]:
    """Meals ranked by booking count, titles cut to display length."""
    ranked = sorted(meals, key=lambda meal: int(meal.get("bookings") or 0), reverse=True)
    return [
        {
            "name": (meal.get("title") or "")[:TITLE_DISPLAY_LENGTH],
            "bookings": int(meal.get("bookings") or 0),
            "type": meal.get("type"),
        }
        for meal in ranked[:limit]
    ]
