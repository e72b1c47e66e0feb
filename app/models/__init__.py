from app.models.user import User
from app.models.meal import Meal
from app.models.ingredient_requirement import IngredientRequirement
from app.models.attendance import Attendance
from app.models.feedback import Feedback

__all__ = ["User", "Meal", "IngredientRequirement", "Attendance", "Feedback"]
