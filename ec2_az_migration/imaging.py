"""
AMI creation from the stopped source instance.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from ec2_az_migration.common.waiter_utils import wait_ami_available
from ec2_az_migration.config import (
    AMI_DESCRIPTION_TEMPLATE,
    AMI_NAME_TEMPLATE,
    AMI_TIMESTAMP_FORMAT,
    IMAGE_WAIT,
    WaitPolicy,
)


def build_ami_name(instance_id: str, now: Optional[datetime] = None) -> str:
    """Return a unique AMI name embedding the instance id and a UTC timestamp."""
    moment = now or datetime.now(timezone.utc)
    return AMI_NAME_TEMPLATE.format(
        instance_id=instance_id,
        timestamp=moment.strftime(AMI_TIMESTAMP_FORMAT),
    )


def build_ami_description(instance_id: str, source_zone: str, destination_zone: str) -> str:
    return AMI_DESCRIPTION_TEMPLATE.format(
        instance_id=instance_id,
        source_zone=source_zone,
        destination_zone=destination_zone,
    )


def request_migration_ami(
    ec2_client,
    instance_id: str,
    ami_name: str,
    description: Optional[str] = None,
) -> str:
    """
    Request an AMI of the instance without rebooting it.

    Args:
        ec2_client: Boto3 EC2 client
        instance_id: Source instance ID (already stopped)
        ami_name: Name for the new AMI
        description: Optional AMI description

    Returns:
        str: The new AMI ID, still pending
    """
    params = {"InstanceId": instance_id, "Name": ami_name, "NoReboot": True}
    if description:
        params["Description"] = description

    print(f"Creating AMI {ami_name} ...")
    ami_id = ec2_client.create_image(**params)["ImageId"]
    print(f"AMI request submitted (ID: {ami_id}). Waiting for the AMI to become available...")
    return ami_id


def wait_for_migration_ami(ec2_client, ami_id: str, policy: WaitPolicy = IMAGE_WAIT) -> None:
    """Block until the AMI is available or the policy runs out."""
    wait_ami_available(ec2_client, ami_id, policy)
    print(f"AMI {ami_id} is now available.")
