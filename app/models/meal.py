from datetime import datetime
from app.extensions import db
from app.utils.enums import MealType

class Meal(db.Model):
    __tablename__ = "meals"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(150), nullable=False)
    type = db.Column(db.Enum(MealType, native_enum=False, length=20), nullable=False)
    date = db.Column(db.DateTime, nullable=False, index=True)
    img_url = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    ingredients = db.relationship(
        "IngredientRequirement",
        backref="meal",
        cascade="all, delete-orphan",
        order_by="IngredientRequirement.id",
    )
    attendance = db.relationship("Attendance", backref="meal", cascade="all, delete-orphan")
    feedback = db.relationship("Feedback", backref="meal", cascade="all, delete-orphan")
