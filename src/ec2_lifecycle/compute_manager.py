import logging
from typing import List, Optional

import boto3

from ec2_lifecycle.models import Instance

logger = logging.getLogger(__name__)


class EC2ComputeManager:
    def __init__(
        self,
        region: str = None,
        aws_profile: str = None,
        session: Optional[boto3.session.Session] = None,
    ):
        self.session = session or boto3.session.Session(
            profile_name=aws_profile, region_name=region
        )
        self.region = self.session.region_name
        self.client = self.session.client("ec2")

    def list_instances(self) -> List[Instance]:
        logger.debug("Describing instances in region %s", self.region)
        paginator = self.client.get_paginator("describe_instances")

        instances = []
        for page in paginator.paginate():
            for reservation in page.get("Reservations", []):
                for record in reservation.get("Instances", []):
                    instances.append(Instance.from_api(record))
        return instances

    def start_instances(self, instance_ids: List[str], dry_run: bool = False):
        logger.debug("start_instances %s dry_run=%s", instance_ids, dry_run)
        return self.client.start_instances(InstanceIds=instance_ids, DryRun=dry_run)

    def stop_instances(self, instance_ids: List[str], dry_run: bool = False):
        logger.debug("stop_instances %s dry_run=%s", instance_ids, dry_run)
        return self.client.stop_instances(InstanceIds=instance_ids, DryRun=dry_run)

    def reboot_instances(self, instance_ids: List[str], dry_run: bool = False):
        logger.debug("reboot_instances %s dry_run=%s", instance_ids, dry_run)
        return self.client.reboot_instances(InstanceIds=instance_ids, DryRun=dry_run)

    def terminate_instances(self, instance_ids: List[str], dry_run: bool = False):
        logger.debug("terminate_instances %s dry_run=%s", instance_ids, dry_run)
        return self.client.terminate_instances(
            InstanceIds=instance_ids, DryRun=dry_run
        )

    def wait_until(self, waiter_name: str, instance_ids: List[str]):
        """
        Blocks until every instance in ``instance_ids`` reaches the state named
        by ``waiter_name`` (e.g. 'instance_running').

        Polling interval and attempt limit are the boto3 waiter defaults.
        Raises botocore.exceptions.WaiterError when the waiter gives up.
        """
        logger.debug("Waiting for %s on %s", waiter_name, instance_ids)
        waiter = self.client.get_waiter(waiter_name)
        waiter.wait(InstanceIds=instance_ids)
        logger.info("%s reached for %s", waiter_name, instance_ids)


if __name__ == "__main__":
    pass
