"""
Stop the source instance and capture what the replacement needs.
"""

from __future__ import annotations

from ec2_az_migration.common.waiter_utils import wait_instance_stopped
from ec2_az_migration.config import STOP_WAIT, WaitPolicy
from ec2_az_migration.context import InstanceAttributes
from ec2_az_migration.discovery import describe_instance_raw


def stop_source_instance(ec2_client, instance_id: str, policy: WaitPolicy = STOP_WAIT) -> None:
    """Stop the instance and block until EC2 reports it stopped."""
    print(f"Stopping source instance {instance_id} ...")
    ec2_client.stop_instances(InstanceIds=[instance_id])
    print("Waiting for the instance to enter the stopped state (this may take a few minutes)...")
    wait_instance_stopped(ec2_client, instance_id, policy)
    print("Source instance is stopped. Gathering attributes...")


def capture_instance_attributes(ec2_client, instance_id: str) -> InstanceAttributes:
    """
    Read the launch attributes of the stopped instance.

    A missing key pair or instance profile is recorded as None.
    """
    instance = describe_instance_raw(ec2_client, instance_id)
    profile = instance.get("IamInstanceProfile") or {}
    return InstanceAttributes(
        instance_type=instance["InstanceType"],
        security_group_ids=[group["GroupId"] for group in instance.get("SecurityGroups", [])],
        key_name=instance.get("KeyName") or None,
        iam_instance_profile_arn=profile.get("Arn") or None,
    )


def read_instance_tags(ec2_client, instance_id: str) -> list[dict]:
    """Return every tag on the instance as Key/Value dicts."""
    paginator = ec2_client.get_paginator("describe_tags")
    tags = []
    for page in paginator.paginate(Filters=[{"Name": "resource-id", "Values": [instance_id]}]):
        for tag in page.get("Tags", []):
            tags.append({"Key": tag["Key"], "Value": tag.get("Value", "")})
    return tags
