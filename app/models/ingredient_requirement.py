from app.extensions import db

class IngredientRequirement(db.Model):
    __tablename__ = "ingredient_requirements"

    id = db.Column(db.Integer, primary_key=True)
    meal_id = db.Column(db.Integer, db.ForeignKey("meals.id", ondelete="CASCADE"), nullable=False, index=True)
    item_name = db.Column(db.String(150), nullable=False)
    grams_per_pax = db.Column(db.Float, nullable=False)
