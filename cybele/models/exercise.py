from cybele.extensions import db

class Exercise(db.Model):
    __tablename__ = "exercises"

    id = db.Column(db.Integer, primary_key=True)
    workout_id = db.Column(db.Integer, db.ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False)
    name = db.Column(db.String(100), nullable=False)

    # Performance details
    sets = db.Column(db.Integer, nullable=False)
    reps = db.Column(db.Integer, nullable=False)
    weight = db.Column(db.Integer, nullable=False, default=0)  # kg

    workout = db.relationship("Workout", back_populates="exercises")

    __table_args__ = (
        db.Index("idx_exercises_workout_id", "workout_id"),
    )

    def __repr__(self):
        return f"<Exercise {self.workout_id}-{self.name}>"
