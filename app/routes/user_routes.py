from flask import Blueprint
from app.utils.auth import require_user
from app.controllers.meal_controller import user_attendance_handler

user_bp = Blueprint("user", __name__, url_prefix="/api/user")

@user_bp.get("/attendance")
@require_user
def attendance():
    return user_attendance_handler()
