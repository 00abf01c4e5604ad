import click
from flask import current_app
from flask.cli import with_appcontext

from .seeds import StoreUnavailable, create_schema, seed


def abort(step: str, exc: StoreUnavailable):
    current_app.logger.error("%s failed: %s", step, exc)
    return click.ClickException(f"Database unavailable: {exc}")


def run_seed() -> None:
    try:
        admin = seed()
    except StoreUnavailable as exc:
        raise abort("Seeding", exc) from exc
    if admin is None:
        click.echo("Super admin already present")
    else:
        click.echo(f"Created super admin {admin.email}")


@click.command('seed')
@with_appcontext
def seed_command():
    """Create the default super admin if none exists."""
    run_seed()


@click.command('setup')
@with_appcontext
def setup_command():
    """Create the database tables, then seed them."""
    try:
        create_schema()
    except StoreUnavailable as exc:
        raise abort("Schema creation", exc) from exc
    run_seed()


def init_app(app):
    app.cli.add_command(seed_command)
    app.cli.add_command(setup_command)
