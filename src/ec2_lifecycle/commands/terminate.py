import click

from ec2_lifecycle.aws_helpers import run_lifecycle_command
from ec2_lifecycle.models import Action


@click.command(name="terminate")
@click.argument("instance_id")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Check permissions to perform this operation without actually making the request.",
)
def terminate_ec2_instance(instance_id, dry_run):
    """Terminate an EC2 instance and wait until it is terminated"""
    run_lifecycle_command(Action.TERMINATE, instance_id, dry_run=dry_run)
