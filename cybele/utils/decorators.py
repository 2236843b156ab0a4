# cybele/utils/decorators.py
from functools import wraps
from flask_jwt_extended import get_current_user, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from cybele.errors import Unauthorized


def login_required(view_func):
    """
    Require a valid session cookie and pass the logged-in user to the view
    as ``current_user``.

    A missing, expired or tampered token, or one whose user no longer exists,
    raises Unauthorized before the view runs.
    """
    @wraps(view_func)
    def wrapper(*args, **kwargs):
        try:
            verify_jwt_in_request()
        except (JWTExtendedException, PyJWTError) as e:
            raise Unauthorized() from e
        kwargs['current_user'] = get_current_user()
        return view_func(*args, **kwargs)
    return wrapper
