import click
from flask.cli import with_appcontext
from clinic.extensions import db
from clinic.models import UserPreferences


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create all tables and the default dashboard preferences."""
    db.create_all()

    UserPreferences.get_or_create()
    db.session.commit()

    click.echo("Database initialized successfully!")


def register_commands(app):
    app.cli.add_command(init_db_command)
