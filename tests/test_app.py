import pytest
from sqlalchemy import inspect

from cybele import create_app
from cybele.extensions import db
from cybele.services.accounts import authenticate
from cybele.storage import MemoryStorage


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_unknown_route_is_json_404(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert "message" in response.get_json()


@pytest.mark.parametrize("missing", ["SECRET_KEY", "JWT_SECRET_KEY", "SQLALCHEMY_DATABASE_URI"])
def test_production_refuses_to_start_without_secrets(missing):
    settings = {
        "SECRET_KEY": "s3cret",
        "JWT_SECRET_KEY": "jwt-s3cret",
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        missing: None,
    }
    with pytest.raises(RuntimeError, match=missing):
        create_app("production", storage=MemoryStorage(), **settings)


def test_overrides_win_over_config_class():
    app = create_app("testing", LOGIN_RATE_LIMIT="1 per day")
    assert app.config["LOGIN_RATE_LIMIT"] == "1 per day"
    assert app.config["TESTING"] is True


class TestCommands:
    ARGS = [
        "create-user", "sam",
        "--password", "pw",
        "--full-name", "Sam Okafor",
        "--date-of-birth", "1992-03-14",
        "--target-distance", "15",
    ]

    def test_create_user(self, app):
        result = app.test_cli_runner().invoke(args=self.ARGS)
        assert result.exit_code == 0, result.output
        assert "Created user 'sam'" in result.output

        user = app.extensions["storage"].get_user_by_username("sam")
        assert user.full_name == "Sam Okafor"
        assert user.target_distance == 15
        assert authenticate(app.extensions["storage"], "sam", "pw") is not None

    def test_created_user_can_log_in(self, app):
        app.test_cli_runner().invoke(args=self.ARGS)
        response = app.test_client().post("/api/login", json={"username": "sam", "password": "pw"})
        assert response.status_code == 200

    def test_duplicate_username_exits_non_zero(self, app):
        runner = app.test_cli_runner()
        runner.invoke(args=self.ARGS)
        result = runner.invoke(args=self.ARGS)
        assert result.exit_code == 1
        assert "username" in result.output

    def test_invalid_input_exits_non_zero(self, app):
        args = list(self.ARGS)
        args[args.index("1992-03-14")] = "2999-01-01"
        result = app.test_cli_runner().invoke(args=args)
        assert result.exit_code == 1
        assert "dateOfBirth" in result.output
        assert app.extensions["storage"].get_user_by_username("sam") is None

    def test_init_db(self):
        app = create_app("testing", STORAGE_BACKEND="database")
        result = app.test_cli_runner().invoke(args=["init-db"])
        assert result.exit_code == 0, result.output

        with app.app_context():
            tables = set(inspect(db.engine).get_table_names())
            assert {"users", "workouts", "exercises", "runs"} <= tables
            db.drop_all()
