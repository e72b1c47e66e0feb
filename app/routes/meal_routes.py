from flask import Blueprint
from app.utils.auth import require_auth
from app.controllers.meal_controller import (
    list_meals_handler,
    booked_meals_handler,
    book_meal_handler,
    create_feedback_handler,
)

meal_bp = Blueprint("meals", __name__, url_prefix="/api/meals")

@meal_bp.get("")
@require_auth
def list_meals():
    return list_meals_handler()


@meal_bp.get("/booked")
@require_auth
def booked_meals():
    return booked_meals_handler()


@meal_bp.post("/book")
@require_auth
def book_meal():
    return book_meal_handler()


@meal_bp.post("/<int:id>/feedback")
@require_auth
def create_feedback(id):
    return create_feedback_handler(id)
