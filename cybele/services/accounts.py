from werkzeug.security import check_password_hash, generate_password_hash

from cybele.errors import ValidationError


def register_user(storage, data):
    """Create a user from validated registration data (plain ``password`` included)."""
    if storage.get_user_by_username(data["username"]):
        raise ValidationError({"username": ["Username already exists."]})

    record = dict(data)
    record["password_hash"] = generate_password_hash(record.pop("password"))
    return storage.create_user(record)


def authenticate(storage, username, password):
    """Return the user when the credentials match, else None."""
    user = storage.get_user_by_username(username)
    if user is None or not check_password_hash(user.password_hash, password):
        return None
    return user
