import click

from ec2_lifecycle.aws_helpers import run_lifecycle_command
from ec2_lifecycle.models import Action


@click.command(name="stop")
@click.argument("instance_id")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Check permissions to perform this operation without actually making the request.",
)
def stop_ec2_instance(instance_id, dry_run):
    """Stop a running EC2 instance and wait until it is stopped"""
    run_lifecycle_command(Action.STOP, instance_id, dry_run=dry_run)
