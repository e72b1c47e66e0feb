from flask import Blueprint
from app.utils.auth import require_admin
from app.controllers.admin_user_controller import list_users_handler
from app.controllers.dashboard_controller import get_stats_handler
from app.controllers.meal_controller import (
    upcoming_meals_handler,
    create_meal_handler,
    delete_meal_handler,
)

admin_bp = Blueprint("admin", __name__, url_prefix="/api/admin")

@admin_bp.route("/users", methods=["GET"])
@require_admin
def list_users():
    return list_users_handler()

@admin_bp.route("/dashboard-stats", methods=["GET"])
@require_admin
def dashboard_stats():
    return get_stats_handler()

@admin_bp.route("/upcoming-meals", methods=["GET"])
@require_admin
def upcoming_meals():
    return upcoming_meals_handler()

@admin_bp.route("/meals", methods=["POST"])
@require_admin
def create_meal():
    return create_meal_handler()

@admin_bp.route("/meals/<int:id>", methods=["DELETE"])
@require_admin
def delete_meal(id):
    return delete_meal_handler(id)
