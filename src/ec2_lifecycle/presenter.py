from typing import List

from ec2_lifecycle.models import Instance
from ec2_lifecycle.params import LABEL_WIDTH, SEPARATOR


def _line(label: str, value) -> str:
    return f"{(label + ':').ljust(LABEL_WIDTH)}{'' if value is None else value}"


def _continuation(text: str) -> str:
    return " " * LABEL_WIDTH + text


def format_instance(instance: Instance, verbose: bool = False) -> List[str]:
    lines = [
        _line("Instance ID", instance.instance_id),
        _line("Name", instance.name),
    ]

    state = instance.state.upper()
    if not instance.is_running:
        state = f"{state} - Reason: {instance.state_reason or ''}"
    lines.append(_line("State", state))
    lines.append(_line("Private IP address", instance.private_ip_address))

    if not verbose:
        return lines

    lines.append(_line("Instance type", instance.instance_type))
    lines.append(_line("Location", instance.availability_zone))
    if instance.iam_instance_profile_arn:
        lines.append(_line("IAM instance profile ARN", instance.iam_instance_profile_arn))
    lines.append(_line("Key name", instance.key_name))
    lines.append(_line("Launch time", instance.launch_time))
    lines.append(_line("Monitoring", instance.monitoring))
    if instance.public_ip_address:
        lines.append(_line("Public IP address", instance.public_ip_address))
    if instance.public_dns_name:
        lines.append(_line("Public DNS name", instance.public_dns_name))
    lines.append(_line("VPC ID", instance.vpc_id))
    lines.append(_line("Subnet ID", instance.subnet_id))

    if instance.tags:
        lines.append("Tags:")
        for key, value in instance.tags:
            lines.append(_continuation(f"{key} = {value}"))

    lines.append("Security groups:")
    for group_name, group_id in instance.security_groups:
        lines.append(_continuation(f"GroupName = {group_name}, GroupID = {group_id}"))

    return lines


def format_instances(instances: List[Instance], verbose: bool = False) -> List[str]:
    """Render instances as numbered text blocks, headed by a count line."""
    lines = [f"Instances: {len(instances)}"]
    for i, instance in enumerate(instances, 1):
        lines.append(SEPARATOR)
        lines.append(f"#{i}")
        lines.extend(format_instance(instance, verbose=verbose))
    return lines
