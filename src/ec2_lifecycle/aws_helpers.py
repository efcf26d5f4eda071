import click
from botocore.exceptions import BotoCoreError

from ec2_lifecycle.compute_manager import EC2ComputeManager
from ec2_lifecycle.config_manager import ConfigManager
from ec2_lifecycle.exceptions import ConfigError
from ec2_lifecycle.lifecycle import run_action
from ec2_lifecycle.models import Action
from ec2_lifecycle.utils import Spinner, configure_logging


######## AWS init context
def init_aws_context():
    try:
        config_manager = ConfigManager()
    except ConfigError as e:
        click.echo(f"❗ {e}")
        return None, None

    settings = config_manager.settings
    configure_logging(settings["log_level"])

    try:
        compute_manager = EC2ComputeManager(
            region=settings["region"], aws_profile=settings["aws_profile"]
        )
    except BotoCoreError as e:
        click.echo(f"Error requesting action: {e}")
        return None, None

    return config_manager, compute_manager


def echo_lines(lines):
    for line in lines:
        click.echo(line)


def run_lifecycle_command(action: Action, instance_id: str, dry_run: bool = False):
    _, compute_manager = init_aws_context()
    if not compute_manager:
        return None

    result = run_action(
        compute_manager,
        instance_id,
        action,
        dry_run=dry_run,
        progress=Spinner,
        announce=click.echo,
    )
    click.echo(result.message)
    return result
