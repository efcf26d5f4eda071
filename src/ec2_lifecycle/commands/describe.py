import click

from ec2_lifecycle.aws_helpers import echo_lines, init_aws_context
from ec2_lifecycle.lifecycle import locate_instance
from ec2_lifecycle.presenter import format_instances


@click.command(name="describe")
@click.argument("instance_id")
def describe_ec2_instance(instance_id):
    """Show every detail of one EC2 instance"""
    _, compute_manager = init_aws_context()
    if not compute_manager:
        return

    instance, error = locate_instance(compute_manager, instance_id)
    if error is not None:
        click.echo(error.message)
        return

    echo_lines(format_instances([instance], verbose=True))
