from datetime import datetime, timedelta
from app import create_app
from app.extensions import db
from app.models.user import User
from app.models.meal import Meal
from app.models.ingredient_requirement import IngredientRequirement
from app.utils.enums import MealType, UserRole
from werkzeug.security import generate_password_hash

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    if not User.query.filter_by(email="student@example.com").first():
        db.session.add(User(name="Student Demo", email="student@example.com",
                            password=generate_password_hash("secret"), role=UserRole.USER))

    tomorrow = (datetime.utcnow() + timedelta(days=1)).replace(hour=0, minute=0, second=0, microsecond=0)

    def ensure_meal(title, meal_type, served_at, items):
        if Meal.query.filter_by(title=title, date=served_at).first():
            return
        meal = Meal(title=title, type=meal_type, date=served_at)
        for item_name, grams in items:
            meal.ingredients.append(IngredientRequirement(item_name=item_name, grams_per_pax=grams))
        db.session.add(meal)

    ensure_meal("Poha with Peanuts", MealType.BREAKFAST, tomorrow + timedelta(hours=8),
                [("flattened rice", 80), ("peanuts", 15), ("onion", 20)])
    ensure_meal("Rice, Dal & Mixed Veg", MealType.LUNCH, tomorrow + timedelta(hours=13),
                [("rice", 150), ("dal", 80), ("mixed vegetables", 100)])
    ensure_meal("Chapati & Paneer Curry", MealType.DINNER, tomorrow + timedelta(hours=20),
                [("wheat flour", 90), ("paneer", 70), ("tomato", 40)])

    db.session.commit()
    print("Seed complete")
