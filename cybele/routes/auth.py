import logging

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import create_access_token, set_access_cookies, unset_jwt_cookies

from cybele.extensions import limiter
from cybele.schemas import login_schema, user_schema, validate_payload
from cybele.services.accounts import authenticate, register_user
from cybele.storage import get_storage
from cybele.utils.decorators import login_required

auth_bp = Blueprint("auth", __name__)
logger = logging.getLogger(__name__)


def _login_response(user, status):
    access_token = create_access_token(identity=str(user.id))
    response = jsonify(user_schema.dump(user))
    set_access_cookies(response, access_token)
    return response, status


@auth_bp.route("/register", methods=["POST"])
@limiter.limit(lambda: current_app.config["REGISTER_RATE_LIMIT"])
def register():
    data = validate_payload(user_schema, request.get_json(silent=True))
    user = register_user(get_storage(), data)
    logger.info(f"Registered user {user.username} (id={user.id})")
    return _login_response(user, 201)


@auth_bp.route("/login", methods=["POST"])
@limiter.limit(lambda: current_app.config["LOGIN_RATE_LIMIT"])
def login():
    data = validate_payload(login_schema, request.get_json(silent=True))
    user = authenticate(get_storage(), data["username"], data["password"])

    if user is None:
        logger.info(f"Login failed for username {data['username']!r}")
        return jsonify({"message": "Invalid username or password"}), 401

    logger.info(f"Login successful for user {user.username}")
    return _login_response(user, 200)


@auth_bp.route("/logout", methods=["POST"])
def logout():
    logger.info("Logout requested")
    response = jsonify({"message": "Logout successful"})
    unset_jwt_cookies(response)
    return response, 200


@auth_bp.route("/user", methods=["GET"])
@login_required
def get_current_user_profile(current_user):
    return jsonify(user_schema.dump(current_user)), 200
