from datetime import datetime, timedelta

import pytest
from werkzeug.security import generate_password_hash

from app import create_app
from app.extensions import db
from app.models.attendance import Attendance
from app.models.ingredient_requirement import IngredientRequirement
from app.models.meal import Meal
from app.models.user import User
from app.utils.enums import MealType, UserRole


@pytest.fixture()
def app():
    app = create_app("config.TestConfig")
    with app.app_context():
        db.create_all()
        db.session.add(User(name="Admin", email="admin@example.com",
                            password=generate_password_hash("secret"), role=UserRole.ADMIN))
        db.session.add(User(name="Student", email="user@example.com",
                            password=generate_password_hash("secret"), role=UserRole.USER))
        db.session.commit()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def login(client, email):
    r = client.post("/api/auth/login", json={"email": email, "password": "secret"})
    assert r.status_code == 200, r.data
    return r.get_json()["token"]


@pytest.fixture()
def admin_headers(client):
    return {"Authorization": f"Bearer {login(client, 'admin@example.com')}"}


@pytest.fixture()
def user_headers(client):
    return {"Authorization": f"Bearer {login(client, 'user@example.com')}"}


def user_id(email):
    return User.query.filter_by(email=email).first().id


def add_meal(title, meal_type=MealType.LUNCH, days_from_now=1, ingredients=(), bookings=0):
    """Insert a meal with ingredients and ``bookings`` booking rows from fresh users.

    Must be called inside an app context. Returns the meal id.
    """
    meal = Meal(title=title, type=meal_type, date=datetime.utcnow() + timedelta(days=days_from_now))
    for item_name, grams in ingredients:
        meal.ingredients.append(IngredientRequirement(item_name=item_name, grams_per_pax=grams))
    db.session.add(meal)
    db.session.flush()

    for i in range(bookings):
        booker = User(name=f"Booker {meal.id}-{i}", email=f"booker{meal.id}-{i}@example.com",
                      password="x", role=UserRole.USER)
        db.session.add(booker)
        db.session.flush()
        db.session.add(Attendance(user_id=booker.id, meal_id=meal.id))

    db.session.commit()
    return meal.id
