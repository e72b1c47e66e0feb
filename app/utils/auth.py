import datetime as dt
from functools import wraps
from typing import Optional, Tuple
from flask import request, current_app
import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from app.utils.enums import UserRole
from app.utils.http import error

SESSION_COOKIE = "session_token"
LOGIN_PATH = "/login"
USER_HOME_PATH = "/dashboard"


def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


def create_token(user_id: int, role: UserRole) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": str(user_id),
        "role": UserRole(role).value,
        "iat": int(now.timestamp()),
        "exp": int((now + dt.timedelta(hours=current_app.config["TOKEN_TTL_HOURS"])).timestamp()),
    }
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")


def decode_token(token: str):
    return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])


def _request_token() -> Optional[str]:
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header.split(" ", 1)[1]
    return request.cookies.get(SESSION_COOKIE)


def current_session() -> Optional[Tuple[int, UserRole]]:
    """Return ``(user_id, role)`` for the request, or None without a valid session."""
    token = _request_token()
    if not token:
        return None
    try:
        payload = decode_token(token)
        return int(payload["sub"]), UserRole(payload.get("role"))
    except (jwt.PyJWTError, KeyError, TypeError, ValueError):
        return None


def role_allows(role: UserRole, required: UserRole) -> bool:
    if required is UserRole.ADMIN:
        return role is UserRole.ADMIN
    if required is UserRole.USER:
        return role is UserRole.USER
    raise ValueError(f"Unhandled role: {required!r}")


def admin_page_redirect(session: Optional[Tuple[int, UserRole]]) -> Optional[str]:
    """Where to send a request for an admin page, or None to let it through."""
    if session is None:
        return LOGIN_PATH
    _, role = session
    if role is UserRole.ADMIN:
        return None
    if role is UserRole.USER:
        return USER_HOME_PATH
    raise ValueError(f"Unhandled role: {role!r}")


def _authenticate():
    session = current_session()
    if session is None:
        if _request_token():
            return error("UNAUTHORIZED", "Invalid token", 401)
        return error("UNAUTHORIZED", "Not authenticated", 401)
    request.user_id, request.user_role = session  # type: ignore
    return None


def require_auth(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        failure = _authenticate()
        if failure:
            return failure
        return f(*args, **kwargs)
    return wrapper


def require_role(required: UserRole):
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            failure = _authenticate()
            if failure:
                return failure
            if not role_allows(request.user_role, required):  # type: ignore
                return error("FORBIDDEN", f"{required.value} role required", 403)
            return f(*args, **kwargs)
        return wrapper
    return decorator


require_admin = require_role(UserRole.ADMIN)
require_user = require_role(UserRole.USER)

__all__ = [
    "hash_password",
    "create_token",
    "current_session",
    "admin_page_redirect",
    "require_auth",
    "require_admin",
    "require_user",
    "check_password_hash",
]
