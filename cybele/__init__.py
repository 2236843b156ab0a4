import logging
import os

from flask import Flask

from cybele.config import config
from cybele.errors import register_error_handlers
from cybele.extensions import db, ma, jwt, migrate, limiter, cors
from cybele.storage import build_storage, get_storage


def configure_logging(app):
    """Apply LOG_LEVEL/LOG_FORMAT to the root logger and the app logger."""
    level = getattr(logging, str(app.config['LOG_LEVEL']).upper(), logging.INFO)
    logging.basicConfig(level=level, format=app.config['LOG_FORMAT'])
    logging.getLogger().setLevel(level)
    app.logger.setLevel(level)


def create_app(config_name=None, storage=None, **overrides):
    """Build the application.

    ``config_name`` picks a class from ``cybele.config.config`` (falls back to
    FLASK_CONFIG, then "default"). ``storage`` injects a ready storage handle;
    otherwise one is built from STORAGE_BACKEND.
    """
    app = Flask(__name__)

    # Settings
    config_name = config_name or os.getenv('FLASK_CONFIG', 'default')
    app.config.from_object(config[config_name])
    app.config.update(overrides)

    if config_name == 'production':
        missing = [key for key in ('SECRET_KEY', 'JWT_SECRET_KEY', 'SQLALCHEMY_DATABASE_URI')
                   if not app.config.get(key)]
        if missing:
            raise RuntimeError(f"Missing required settings for production: {', '.join(missing)}")

    configure_logging(app)

    # Extensions
    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    cors.init_app(app, resources={r"/api/*": {
        "origins": app.config['CORS_ORIGINS'],
        "allow_headers": ["Content-Type", "X-CSRF-TOKEN"],
        "methods": ["GET", "POST", "DELETE", "OPTIONS"],
        "supports_credentials": True,
    }})

    # Storage handle shared by every request
    app.extensions['storage'] = storage if storage is not None else build_storage(app)

    register_error_handlers(app)

    # Blueprints
    from cybele.routes.auth import auth_bp
    from cybele.routes.api import api_bp

    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(api_bp, url_prefix="/api")

    from cybele.commands import register_commands
    register_commands(app)

    app.logger.info(
        f"Cybele started (config={config_name}, storage={type(app.extensions['storage']).__name__})"
    )
    return app


# JWT callback
@jwt.user_lookup_loader
def user_lookup_callback(_jwt_header, jwt_data):
    identity = jwt_data["sub"]
    try:
        user_id = int(identity)
    except (TypeError, ValueError):
        return None
    return get_storage().get_user_by_id(user_id)
