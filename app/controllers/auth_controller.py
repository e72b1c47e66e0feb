from flask import current_app
from app.services.user_service import authenticate, register_user, serialize_user
from app.schemas.user_schema import LoginSchema, RegisterSchema
from app.utils.auth import SESSION_COOKIE, create_token
from app.utils.http import ok, error, json_body, validate_schema

def _session_response(user, status=200):
    token = create_token(user.id, user.role)
    response, status = ok({"token": token, "user": serialize_user(user)}, status)
    response.set_cookie(
        SESSION_COOKIE,
        token,
        max_age=current_app.config["TOKEN_TTL_HOURS"] * 3600,
        httponly=True,
        samesite="Lax",
    )
    return response, status

def login_handler():
    data, errors = validate_schema(LoginSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "email and password required", 400, details=errors)

    user = authenticate(data["email"], data["password"])
    if not user:
        return error("INVALID_CREDENTIALS", "Email or password incorrect", 401)
    return _session_response(user)

def register_handler():
    data, errors = validate_schema(RegisterSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid registration data", 400, details=errors)

    user = register_user(data["email"], data["password"], name=data.get("name"))
    return _session_response(user, 201)

def logout_handler():
    """
    Since sessions are JWTs the server keeps no state; logging out only
    clears the session cookie. Clients holding a bearer token drop it themselves.
    """
    response, status = ok({"message": "Logged out successfully"})
    response.delete_cookie(SESSION_COOKIE)
    return response, status
