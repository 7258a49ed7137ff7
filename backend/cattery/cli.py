import click
from flask.cli import AppGroup

from cattery.application.settings import initialize_default_settings

settings_cli = AppGroup("settings", help="Manage site settings.")


@settings_cli.command("init")
def init_settings():
    """Insert default site settings that are missing."""
    inserted = initialize_default_settings()

    if not inserted:
        click.echo("All default settings already present.")
        return

    for setting in inserted:
        click.echo(f"Added {setting.key}")
