from datetime import datetime
from cybele.extensions import db
from sqlalchemy.orm import relationship

WORKOUT_CATEGORIES = (
    "Running",
    "Swimming",
    "Cycling",
    "Boxing",
    "Weightlifting",
    "Yoga",
    "Pilates",
    "HIIT",
    "CrossFit",
    "Walking",
    "Rowing",
    "Hiking",
)

class Workout(db.Model):
    __tablename__ = "workouts"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    name = db.Column(db.String(50), nullable=False)  # one of WORKOUT_CATEGORIES
    date = db.Column(db.DateTime, nullable=False, index=True)
    duration = db.Column(db.Integer, nullable=True)  # minutes

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    exercises = relationship(
        "Exercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="Exercise.id",
    )

    __table_args__ = (
        db.Index("idx_workouts_user_date", "user_id", "date"),
        db.CheckConstraint("duration IS NULL OR duration > 0", name="ck_workouts_duration_positive"),
    )

    def __repr__(self):
        return f"<Workout {self.id} {self.name}>"
