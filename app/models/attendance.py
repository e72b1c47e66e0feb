from datetime import datetime
from app.extensions import db

class Attendance(db.Model):
    """A user's booking of a meal. ``has_eaten`` is flipped by check-in."""
    __tablename__ = "attendance"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    meal_id = db.Column(db.Integer, db.ForeignKey("meals.id", ondelete="CASCADE"), nullable=False, index=True)
    has_eaten = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    user = db.relationship("User", backref="attendance")

    __table_args__ = (
        db.UniqueConstraint('user_id', 'meal_id', name='uq_attendance_user_meal'),
    )
