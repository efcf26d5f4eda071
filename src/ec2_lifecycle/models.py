from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple


class InstanceState(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"
    SHUTTING_DOWN = "shutting-down"
    TERMINATED = "terminated"


class Action(str, Enum):
    START = "start"
    STOP = "stop"
    REBOOT = "reboot"
    TERMINATE = "terminate"

    @property
    def target_state(self) -> Optional[InstanceState]:
        """State the action waits for. Reboot has none."""
        if self is Action.START:
            return InstanceState.RUNNING
        if self is Action.STOP:
            return InstanceState.STOPPED
        if self is Action.TERMINATE:
            return InstanceState.TERMINATED
        return None

    @property
    def waiter_name(self) -> Optional[str]:
        if self.target_state is None:
            return None
        return f"instance_{self.target_state.value}"


class Outcome(str, Enum):
    COMPLETED = "completed"
    UNCHANGED = "unchanged"
    REQUEST_SENT = "request_sent"
    NOT_FOUND = "not_found"
    INVALID_STATE = "invalid_state"
    UNAUTHORIZED = "unauthorized"
    DRY_RUN = "dry_run"
    API_ERROR = "api_error"


SUCCESS_OUTCOMES = frozenset(
    [Outcome.COMPLETED, Outcome.UNCHANGED, Outcome.REQUEST_SENT]
)


@dataclass(frozen=True)
class ActionResult:
    outcome: Outcome
    message: str

    @property
    def ok(self) -> bool:
        return self.outcome in SUCCESS_OUTCOMES


@dataclass
class Instance:
    """A single EC2 instance as reported by ``describe_instances``."""

    instance_id: str
    state: str
    state_reason: Optional[str] = None
    name: Optional[str] = None
    instance_type: Optional[str] = None
    availability_zone: Optional[str] = None
    private_ip_address: Optional[str] = None
    public_ip_address: Optional[str] = None
    public_dns_name: str = ""
    vpc_id: Optional[str] = None
    subnet_id: Optional[str] = None
    key_name: Optional[str] = None
    launch_time: Optional[datetime] = None
    monitoring: Optional[str] = None
    iam_instance_profile_arn: Optional[str] = None
    tags: List[Tuple[str, str]] = field(default_factory=list)
    security_groups: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def is_running(self) -> bool:
        return self.state == InstanceState.RUNNING.value

    @classmethod
    def from_api(cls, record: dict) -> "Instance":
        tags = [(t["Key"], t["Value"]) for t in record.get("Tags", [])]
        name = next((value for key, value in tags if key == "Name"), None)

        return cls(
            instance_id=record["InstanceId"],
            state=record["State"]["Name"],
            state_reason=(record.get("StateReason") or {}).get("Code"),
            name=name,
            instance_type=record.get("InstanceType"),
            availability_zone=(record.get("Placement") or {}).get("AvailabilityZone"),
            private_ip_address=record.get("PrivateIpAddress"),
            public_ip_address=record.get("PublicIpAddress"),
            public_dns_name=record.get("PublicDnsName") or "",
            vpc_id=record.get("VpcId"),
            subnet_id=record.get("SubnetId"),
            key_name=record.get("KeyName"),
            launch_time=record.get("LaunchTime"),
            monitoring=(record.get("Monitoring") or {}).get("State"),
            iam_instance_profile_arn=(record.get("IamInstanceProfile") or {}).get(
                "Arn"
            ),
            tags=tags,
            security_groups=[
                (g["GroupName"], g["GroupId"]) for g in record.get("SecurityGroups", [])
            ],
        )
