"""
User Service

Registration, credential checks and the admin user listing.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from app.extensions import db
from app.models.user import User
from app.utils.auth import check_password_hash, hash_password
from app.utils.enums import UserRole
from app.utils.errors import ConflictError

logger = logging.getLogger(__name__)


def serialize_user(user: User) -> Dict[str, Any]:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": UserRole(user.role).value,
        "created_at": user.created_at.isoformat() if user.created_at else None,
    }


def register_user(email: str, password: str, name: Optional[str] = None, role: UserRole = UserRole.USER) -> User:
    """
    Create a user with a hashed password.

    Raises:
        ConflictError: If the email is already registered
    """
    email = email.strip().lower()
    if User.query.filter_by(email=email).first():
        raise ConflictError("User already exists", code="EMAIL_IN_USE")

    user = User(name=name, email=email, password=hash_password(password), role=role)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError("User already exists", code="EMAIL_IN_USE")
    logger.info("Registered user %s with role %s", user.id, user.role.value)
    return user


def authenticate(email: str, password: str) -> Optional[User]:
    """Return the user when the credentials match, otherwise None."""
    user = User.query.filter_by(email=(email or "").strip().lower()).first()
    if not user or not check_password_hash(user.password, password):
        return None
    return user


def list_users(page: int = 1, limit: int = 10, search: str = "", role: Optional[UserRole] = None) -> Dict[str, Any]:
    query = User.query

    if search:
        term = f"%{search}%"
        query = query.filter(or_(User.name.ilike(term), User.email.ilike(term)))

    if role is not None:
        query = query.filter(User.role == role)

    pagination = query.order_by(User.id).paginate(page=page, per_page=limit, error_out=False)
    return {
        "items": [serialize_user(u) for u in pagination.items],
        "total": pagination.total,
        "page": page,
        "limit": limit,
        "pages": pagination.pages,
    }
