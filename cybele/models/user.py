from datetime import datetime
from cybele.extensions import db

class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)

    # Profile
    full_name = db.Column(db.String(150), nullable=False)
    date_of_birth = db.Column(db.Date, nullable=False)
    target_distance = db.Column(db.Integer, nullable=False)  # km per week

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint("target_distance > 0", name="ck_users_target_distance_positive"),
    )

    def __repr__(self):
        return f"<User {self.username}>"
