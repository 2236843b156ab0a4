from datetime import datetime
from cybele.extensions import db

class Run(db.Model):
    __tablename__ = "runs"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    distance = db.Column(db.Integer, nullable=False)  # km
    date = db.Column(db.DateTime, nullable=False, index=True)
    duration = db.Column(db.Integer, nullable=True)  # minutes

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.Index("idx_runs_user_date", "user_id", "date"),
        db.CheckConstraint("distance > 0", name="ck_runs_distance_positive"),
    )

    def __repr__(self):
        return f"<Run {self.id} {self.distance}km>"
