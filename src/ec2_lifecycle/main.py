import click

from ec2_lifecycle.commands.config import config
from ec2_lifecycle.commands.describe import describe_ec2_instance
from ec2_lifecycle.commands.list import list_ec2_instances
from ec2_lifecycle.commands.reboot import reboot_ec2_instance
from ec2_lifecycle.commands.start import start_ec2_instance
from ec2_lifecycle.commands.stop import stop_ec2_instance
from ec2_lifecycle.commands.terminate import terminate_ec2_instance
from ec2_lifecycle.params import VERSION


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(VERSION, "-v", "--version", prog_name="ec2")
def cli():
    """Simple EC2 Management."""
    pass


cli.add_command(list_ec2_instances)
cli.add_command(describe_ec2_instance)
cli.add_command(start_ec2_instance)
cli.add_command(stop_ec2_instance)
cli.add_command(reboot_ec2_instance)
cli.add_command(terminate_ec2_instance)
cli.add_command(config)


if __name__ == "__main__":
    cli()
