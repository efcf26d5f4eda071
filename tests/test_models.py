from datetime import datetime, timezone

from ec2_lifecycle.models import Action, ActionResult, Instance, InstanceState, Outcome


def test_instance_from_api_full_record():
    """A describe_instances record maps onto every Instance field."""
    launched = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    record = {
        "InstanceId": "i-0abc",
        "State": {"Code": 80, "Name": "stopped"},
        "StateReason": {"Code": "Client.UserInitiatedShutdown", "Message": "..."},
        "InstanceType": "t3.small",
        "Placement": {"AvailabilityZone": "eu-west-1b"},
        "PrivateIpAddress": "10.1.2.3",
        "PublicIpAddress": "52.0.0.1",
        "PublicDnsName": "ec2-52-0-0-1.compute.amazonaws.com",
        "VpcId": "vpc-9",
        "SubnetId": "subnet-9",
        "KeyName": "ops",
        "LaunchTime": launched,
        "Monitoring": {"State": "enabled"},
        "IamInstanceProfile": {"Arn": "arn:aws:iam::123:instance-profile/web"},
        "Tags": [{"Key": "env", "Value": "prod"}, {"Key": "Name", "Value": "api"}],
        "SecurityGroups": [{"GroupName": "web", "GroupId": "sg-1"}],
    }

    instance = Instance.from_api(record)

    assert instance.instance_id == "i-0abc"
    assert instance.state == "stopped"
    assert instance.state_reason == "Client.UserInitiatedShutdown"
    assert instance.name == "api"
    assert instance.availability_zone == "eu-west-1b"
    assert instance.monitoring == "enabled"
    assert instance.iam_instance_profile_arn == "arn:aws:iam::123:instance-profile/web"
    assert instance.launch_time == launched
    assert instance.tags == [("env", "prod"), ("Name", "api")]
    assert instance.security_groups == [("web", "sg-1")]
    assert instance.is_running is False


def test_instance_from_api_minimal_record():
    instance = Instance.from_api(
        {"InstanceId": "i-1", "State": {"Code": 16, "Name": "running"}}
    )

    assert instance.is_running is True
    assert instance.name is None
    assert instance.state_reason is None
    assert instance.public_dns_name == ""
    assert instance.iam_instance_profile_arn is None
    assert instance.tags == []
    assert instance.security_groups == []


def test_action_targets():
    assert Action.START.target_state is InstanceState.RUNNING
    assert Action.STOP.target_state is InstanceState.STOPPED
    assert Action.TERMINATE.target_state is InstanceState.TERMINATED
    assert Action.REBOOT.target_state is None

    assert Action.START.waiter_name == "instance_running"
    assert Action.STOP.waiter_name == "instance_stopped"
    assert Action.TERMINATE.waiter_name == "instance_terminated"
    assert Action.REBOOT.waiter_name is None


def test_action_result_ok():
    assert ActionResult(Outcome.COMPLETED, "").ok
    assert ActionResult(Outcome.UNCHANGED, "").ok
    assert ActionResult(Outcome.REQUEST_SENT, "").ok
    assert not ActionResult(Outcome.NOT_FOUND, "").ok
    assert not ActionResult(Outcome.DRY_RUN, "").ok
    assert not ActionResult(Outcome.API_ERROR, "").ok
