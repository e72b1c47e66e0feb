"""
Meal Controller Module

Handles meal endpoints:
- Upcoming meals and the current user's bookings
- Booking a meal
- Meal feedback
- Admin meal creation, deletion and demand listing
"""

from flask import request, current_app

from app.schemas.feedback_schema import FeedbackSchema
from app.schemas.meal_schema import BookMealSchema, CreateMealSchema
from app.services import booking_service, feedback_service, meal_service
from app.utils.http import ok, error, json_body, validate_schema, arg_bool


def list_meals_handler():
    return ok({"meals": meal_service.list_upcoming_meals()})


def booked_meals_handler():
    return ok({"bookedMealIds": booking_service.booked_meal_ids(request.user_id)})


def book_meal_handler():
    """
    Book a meal for the current user.

    Body Parameters:
        - mealId (required): ID of the meal to book
    """
    data, errors = validate_schema(BookMealSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "mealId is required", 400, details=errors)

    attendance = booking_service.book_meal(request.user_id, data["mealId"])
    return ok({"message": "Meal booked successfully", "attendance": attendance}, 201)


def create_feedback_handler(meal_id: int):
    data, errors = validate_schema(FeedbackSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid feedback data", 400, details=errors)

    feedback = feedback_service.create_feedback(request.user_id, meal_id, data["rating"], data.get("comment"))
    return ok({
        "id": feedback.id,
        "mealId": feedback.meal_id,
        "rating": feedback.rating,
        "comment": feedback.comment,
        "createdAt": feedback.created_at.isoformat(),
    }, 201)


def user_attendance_handler():
    return ok(booking_service.get_user_attendance(request.user_id))


def upcoming_meals_handler():
    return ok(meal_service.get_meal_demand_listing(include_past=arg_bool("all")))


def create_meal_handler():
    """
    Create a meal with its ingredient requirements.

    Body Parameters:
        - title (required): Meal title
        - type (optional): BREAKFAST/LUNCH/DINNER (default: BREAKFAST)
        - date (required): Serving date or datetime (ISO format)
        - imgURL (optional): Image reference
        - ingredients (required): List of {itemName, gramsPerPax}
    """
    data, errors = validate_schema(CreateMealSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid meal data", 400, details=errors)

    title = data["title"].strip()
    if not title:
        return error("VALIDATION_ERROR", "Title and Date are required", 400)

    meal = meal_service.create_meal(
        title=title,
        meal_type=data["type"],
        date=data["date"],
        ingredients=data["ingredients"],
        img_url=data.get("imgURL") or current_app.config["DEFAULT_MEAL_IMAGE"],
    )
    return ok({"message": "Meal created successfully", "meal": meal}, 201)


def delete_meal_handler(meal_id: int):
    meal_service.delete_meal(meal_id)
    return ok({"message": "Meal deleted successfully"})
