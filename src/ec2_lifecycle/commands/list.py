import click

from ec2_lifecycle.aws_helpers import echo_lines, init_aws_context
from ec2_lifecycle.lifecycle import fetch_instances
from ec2_lifecycle.models import InstanceState
from ec2_lifecycle.presenter import format_instances


@click.command(name="list")
@click.option("--verbose", is_flag=True, help="Verbose output")
@click.option("-r", "--running", is_flag=True, help="Show only running instances.")
@click.option("-s", "--stopped", is_flag=True, help="Show only stopped instances.")
def list_ec2_instances(verbose, running, stopped):
    """List EC2 instances"""
    if running and stopped:
        raise click.UsageError("'--running' and '--stopped' are mutually exclusive.")

    _, compute_manager = init_aws_context()
    if not compute_manager:
        return

    instances, error = fetch_instances(compute_manager)
    if error is not None:
        click.echo(error.message)
        return

    if running or stopped:
        state = InstanceState.RUNNING if running else InstanceState.STOPPED
        instances = [i for i in instances if i.state == state.value]

    echo_lines(format_instances(instances, verbose=verbose))
