import click
import sys

from ec2_lifecycle.config_manager import ConfigManager
from ec2_lifecycle.exceptions import ConfigError
from ec2_lifecycle.params import DEFAULT_SETTINGS


@click.group(name="config")
def config():
    """Settings used to build the EC2 client"""
    pass


@config.command(name="show")
def show_config():
    """Print the effective settings"""
    try:
        manager = ConfigManager()
    except ConfigError as e:
        click.echo(f"❗ {e}")
        sys.exit(1)

    click.echo(f"📁 {manager.config_path}")
    for key, value in manager.settings.items():
        click.echo(f"  {key}: {'' if value is None else value}")


@config.command(name="set")
@click.argument("key", type=click.Choice(list(DEFAULT_SETTINGS)))
@click.argument("value")
def set_config(key, value):
    """Store a setting"""
    try:
        manager = ConfigManager()
        manager.set(key, value)
    except ConfigError as e:
        click.echo(f"❌ {e}")
        sys.exit(1)

    click.echo(f"✅ {key} set to: '{manager.get(key)}'")


@config.command(name="unset")
@click.argument("key", type=click.Choice(list(DEFAULT_SETTINGS)))
def unset_config(key):
    """Remove a setting, falling back to the default"""
    try:
        manager = ConfigManager()
    except ConfigError as e:
        click.echo(f"❌ {e}")
        sys.exit(1)

    if manager.unset(key):
        click.echo(f"🗑️ {key} removed.")
    else:
        click.echo(f"❗ {key} was not set.")
