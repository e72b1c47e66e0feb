from flask import request
from app.services.user_service import list_users
from app.utils.enums import UserRole
from app.utils.http import ok, error, arg_int

def list_users_handler():
    page = arg_int("page", 1, min_value=1)
    limit = arg_int("limit", 10, min_value=1, max_value=100)
    search = (request.args.get("search") or "").strip()
    role_filter = (request.args.get("role") or "").strip().upper()

    role = None
    if role_filter:
        try:
            role = UserRole(role_filter)
        except ValueError:
            return error("VALIDATION_ERROR", f"Unknown role '{role_filter}'", 400)

    return ok(list_users(page=page, limit=limit, search=search, role=role))
