import click

from ec2_lifecycle.aws_helpers import run_lifecycle_command
from ec2_lifecycle.models import Action


@click.command(name="reboot")
@click.argument("instance_id")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Check permissions to perform this operation without actually making the request.",
)
def reboot_ec2_instance(instance_id, dry_run):
    """Request a reboot of an EC2 instance"""
    run_lifecycle_command(Action.REBOOT, instance_id, dry_run=dry_run)
