import logging
from contextlib import contextmanager
from typing import Callable, List, Optional, Tuple

from botocore.exceptions import BotoCoreError, ClientError

from ec2_lifecycle.compute_manager import EC2ComputeManager
from ec2_lifecycle.models import (
    Action,
    ActionResult,
    Instance,
    InstanceState,
    Outcome,
)

logger = logging.getLogger(__name__)

######## Guard table
# (action, state) -> (outcome, message). Pairs not listed go to the API.
TRANSITION_GUARDS = {
    (Action.START, InstanceState.PENDING): (
        Outcome.INVALID_STATE,
        "Error starting instance: the instance is pending. Try again later.",
    ),
    (Action.START, InstanceState.RUNNING): (
        Outcome.UNCHANGED,
        "The instance is already running.",
    ),
    (Action.START, InstanceState.TERMINATED): (
        Outcome.INVALID_STATE,
        "Error starting instance: the instance is terminated, so you cannot start it.",
    ),
    (Action.STOP, InstanceState.STOPPING): (
        Outcome.UNCHANGED,
        "The instance is already stopping.",
    ),
    (Action.STOP, InstanceState.STOPPED): (
        Outcome.UNCHANGED,
        "The instance is already stopped.",
    ),
    (Action.STOP, InstanceState.TERMINATED): (
        Outcome.INVALID_STATE,
        "Error stopping instance: the instance is terminated, so you cannot stop it.",
    ),
    (Action.REBOOT, InstanceState.TERMINATED): (
        Outcome.INVALID_STATE,
        "Error requesting reboot: the instance is already terminated.",
    ),
    (Action.TERMINATE, InstanceState.TERMINATED): (
        Outcome.UNCHANGED,
        "The instance is already terminated.",
    ),
}

SUCCESS_MESSAGES = {
    Action.START: "Instance started successfully.",
    Action.STOP: "Instance stopped successfully.",
    Action.REBOOT: "Reboot request sent.",
    Action.TERMINATE: "Instance terminated successfully.",
}


######## Locator
def find_instance(instances: List[Instance], instance_id: str) -> Optional[Instance]:
    for instance in instances:
        if instance.instance_id == instance_id:
            return instance
    return None


def not_found(instance_id: str) -> ActionResult:
    return ActionResult(Outcome.NOT_FOUND, f"No instance found with id: {instance_id}")


def fetch_instances(
    compute_manager: EC2ComputeManager,
) -> Tuple[Optional[List[Instance]], Optional[ActionResult]]:
    try:
        return compute_manager.list_instances(), None
    except (ClientError, BotoCoreError) as e:
        logger.info("Listing instances failed: %s", e)
        return None, classify_error(e)


def locate_instance(
    compute_manager: EC2ComputeManager, instance_id: str
) -> Tuple[Optional[Instance], Optional[ActionResult]]:
    """Fetch the collection and pick the instance with exactly ``instance_id``."""
    instances, error = fetch_instances(compute_manager)
    if error is not None:
        return None, error

    instance = find_instance(instances, instance_id)
    if instance is None:
        return None, not_found(instance_id)
    return instance, None


######## Guard
def check_transition(action: Action, state: str) -> Optional[ActionResult]:
    """
    Returns the short-circuit result for ``action`` on an instance in
    ``state``, or None when the request should be sent to AWS.
    """
    try:
        known_state = InstanceState(state)
    except ValueError:
        return None

    guard = TRANSITION_GUARDS.get((action, known_state))
    if guard is None:
        return None
    outcome, message = guard
    return ActionResult(outcome, message)


######## Error classification
def classify_error(error: Exception) -> ActionResult:
    if isinstance(error, ClientError):
        code = error.response.get("Error", {}).get("Code", "")
        message = error.response.get("Error", {}).get("Message") or str(error)
        if code == "DryRunOperation":
            return ActionResult(
                Outcome.DRY_RUN,
                f"Checking permissions to perform this operation: {message}",
            )
        if code == "UnauthorizedOperation":
            return ActionResult(
                Outcome.UNAUTHORIZED, f"Error executing action: {message}"
            )
        return ActionResult(Outcome.API_ERROR, f"Error requesting action: {message}")
    return ActionResult(Outcome.API_ERROR, f"Error requesting action: {error}")


######## Executor
@contextmanager
def _silent(**_kwargs):
    yield


def _send_request(
    compute_manager: EC2ComputeManager, action: Action, instance_id: str, dry_run: bool
):
    instance_ids = [instance_id]
    if action is Action.START:
        return compute_manager.start_instances(instance_ids, dry_run=dry_run)
    elif action is Action.STOP:
        return compute_manager.stop_instances(instance_ids, dry_run=dry_run)
    elif action is Action.REBOOT:
        return compute_manager.reboot_instances(instance_ids, dry_run=dry_run)
    elif action is Action.TERMINATE:
        return compute_manager.terminate_instances(instance_ids, dry_run=dry_run)
    raise ValueError(f"Unsupported action: {action}")


def execute_action(
    compute_manager: EC2ComputeManager,
    instance: Instance,
    action: Action,
    dry_run: bool = False,
    progress: Optional[Callable] = None,
) -> ActionResult:
    """
    Applies ``action`` to ``instance`` and reports what happened.

    Outside dry-run the current state is checked first and the request is
    skipped when the transition is pointless or impossible. start, stop and
    terminate then block until AWS reports the target state; reboot returns
    as soon as the request is accepted.

    Args:
        compute_manager (EC2ComputeManager): Client used for every API call.
        instance (Instance): Freshly fetched instance record.
        action (Action): Requested transition.
        dry_run (bool): Ask AWS to validate permissions only.
        progress (callable): Context manager factory taking ``text``,
            ``done_text`` and ``fail_text``; wraps the blocking wait.

    Returns:
        ActionResult
    """
    if not dry_run:
        guarded = check_transition(action, instance.state)
        if guarded is not None:
            logger.info(
                "%s skipped for %s in state %s",
                action.value,
                instance.instance_id,
                instance.state,
            )
            return guarded

    progress = progress or _silent

    try:
        _send_request(compute_manager, action, instance.instance_id, dry_run)

        if dry_run:
            # A permitted dry-run normally raises DryRunOperation
            return ActionResult(
                Outcome.DRY_RUN,
                "Checking permissions to perform this operation: "
                "Request would have succeeded, but DryRun flag is set.",
            )

        if action.waiter_name is not None:
            with progress(
                text=f"Waiting for instance {instance.instance_id} to be {action.target_state.value}",
                done_text=f"✅ Instance {instance.instance_id} is {action.target_state.value}",
                fail_text=f"❗ Instance {instance.instance_id} did not reach {action.target_state.value}",
            ):
                compute_manager.wait_until(action.waiter_name, [instance.instance_id])
            return ActionResult(Outcome.COMPLETED, SUCCESS_MESSAGES[action])

        return ActionResult(Outcome.REQUEST_SENT, SUCCESS_MESSAGES[action])
    except (ClientError, BotoCoreError) as e:
        logger.info("%s failed for %s: %s", action.value, instance.instance_id, e)
        return classify_error(e)


def run_action(
    compute_manager: EC2ComputeManager,
    instance_id: str,
    action: Action,
    dry_run: bool = False,
    progress: Optional[Callable] = None,
    announce: Optional[Callable[[str], None]] = None,
) -> ActionResult:
    instance, error = locate_instance(compute_manager, instance_id)
    if error is not None:
        return error

    if announce is not None:
        announce(
            f"Attempting to {action.value} instance {instance.instance_id}, "
            "this might take a few minutes..."
        )
    return execute_action(
        compute_manager, instance, action, dry_run=dry_run, progress=progress
    )


if __name__ == "__main__":
    pass
