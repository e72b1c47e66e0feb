from app.extensions import db
from app.models.feedback import Feedback
from app.services.meal_service import get_meal

def create_feedback(user_id, meal_id, rating, comment=None):
    """
    Records a user's rating of a meal.
    Raises NotFoundError when the meal does not exist.
    """
    get_meal(meal_id)
    feedback = Feedback(
        user_id=user_id,
        meal_id=meal_id,
        rating=rating,
        comment=comment,
    )
    db.session.add(feedback)
    db.session.commit()
    return feedback
