from datetime import datetime, timezone

import pytest

from ec2_lifecycle.models import Instance


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the settings file at a temporary location for every test."""
    config_path = tmp_path / "config.yaml"
    monkeypatch.setenv("EC2_CONFIG", str(config_path))
    return config_path


@pytest.fixture
def make_instance():
    def _make(instance_id="i-123", state="running", **kwargs):
        defaults = {
            "state_reason": None
            if state == "running"
            else "Client.UserInitiatedShutdown",
            "name": "web",
            "instance_type": "t3.micro",
            "availability_zone": "us-east-1a",
            "private_ip_address": "10.0.0.12",
            "vpc_id": "vpc-1",
            "subnet_id": "subnet-1",
            "key_name": "ops",
            "launch_time": datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
            "monitoring": "disabled",
            "tags": [("Name", "web")],
            "security_groups": [("default", "sg-1")],
        }
        defaults.update(kwargs)
        return Instance(instance_id=instance_id, state=state, **defaults)

    return _make


@pytest.fixture
def compute_mock(mocker):
    return mocker.Mock()
