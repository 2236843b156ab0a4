import click
from flask import current_app
from flask.cli import with_appcontext

from cybele.errors import ValidationError
from cybele.extensions import db
from cybele.schemas import user_schema, validate_payload
from cybele.services.accounts import register_user
from cybele.storage import get_storage


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create the database tables."""
    db.create_all()
    click.echo("Database tables created.")


@click.command("create-user")
@click.argument("username")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--full-name", required=True)
@click.option("--date-of-birth", required=True, help="YYYY-MM-DD")
@click.option("--target-distance", required=True, type=int, help="Weekly target in km")
@with_appcontext
def create_user_command(username, password, full_name, date_of_birth, target_distance):
    """Create a user through the configured storage backend."""
    try:
        data = validate_payload(user_schema, {
            "username": username,
            "password": password,
            "fullName": full_name,
            "dateOfBirth": date_of_birth,
            "targetDistance": target_distance,
        })
        user = register_user(get_storage(), data)
    except ValidationError as e:
        for field, messages in e.messages.items():
            click.echo(f"{field}: {' '.join(messages)}", err=True)
        raise click.exceptions.Exit(1)

    current_app.logger.info(f"Created user {user.username} from the command line")
    click.echo(f"Created user '{user.username}' (id={user.id}).")


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_user_command)
