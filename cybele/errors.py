"""Error taxonomy shared by the storage, auth and route layers.

Each error knows its HTTP status; ``register_error_handlers`` turns them into
JSON responses so views can simply raise.
"""
import logging

from flask import jsonify
from marshmallow import ValidationError as SchemaValidationError
from werkzeug.exceptions import BadRequest, HTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {"message": self.message}


class ValidationError(AppError):
    """Malformed or out-of-range input; ``messages`` maps field -> errors."""

    status_code = 400
    message = "Validation failed"

    def __init__(self, messages, message=None):
        super().__init__(message)
        self.messages = messages

    @property
    def fields(self):
        return sorted(self.messages) if isinstance(self.messages, dict) else []

    def to_dict(self):
        return {"message": self.message, "errors": self.messages}


class Unauthorized(AppError):
    status_code = 401
    message = "Unauthorized"


class NotFound(AppError):
    status_code = 404
    message = "Not found"


class StorageError(AppError):
    status_code = 500
    message = "Internal server error"


def register_error_handlers(app):
    @app.errorhandler(Unauthorized)
    def handle_unauthorized(error):
        return "", 401

    @app.errorhandler(StorageError)
    def handle_storage_error(error):
        # Details were logged where the backend failed; keep the response opaque.
        return jsonify({"message": StorageError.message}), 500

    @app.errorhandler(AppError)
    def handle_app_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(SchemaValidationError)
    def handle_schema_error(error):
        return handle_app_error(ValidationError(error.messages))

    @app.errorhandler(BadRequest)
    def handle_bad_request(error):
        return jsonify({"message": "Malformed request body"}), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        logger.exception("Unhandled error: %s", error)
        return jsonify({"message": "Internal server error"}), 500
