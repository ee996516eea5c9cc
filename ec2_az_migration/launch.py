"""
Launch the replacement instance from the migration AMI.
"""

from __future__ import annotations

from ec2_az_migration.common.waiter_utils import wait_instance_running
from ec2_az_migration.config import RUN_WAIT, WaitPolicy
from ec2_az_migration.context import InstanceAttributes, SubnetChoice


def build_run_instances_params(ami_id: str, attributes: InstanceAttributes, subnet: SubnetChoice) -> dict:
    """
    Build run_instances arguments for exactly one replacement instance.

    KeyName and IamInstanceProfile are only present when the source had them.
    """
    params = {
        "ImageId": ami_id,
        "InstanceType": attributes.instance_type,
        "MinCount": 1,
        "MaxCount": 1,
        "SubnetId": subnet.subnet_id,
        "Placement": {"AvailabilityZone": subnet.availability_zone},
    }
    if attributes.security_group_ids:
        params["SecurityGroupIds"] = list(attributes.security_group_ids)
    if attributes.key_name:
        params["KeyName"] = attributes.key_name
    if attributes.iam_instance_profile_arn:
        params["IamInstanceProfile"] = {"Arn": attributes.iam_instance_profile_arn}
    return params


def request_replacement_instance(ec2_client, params: dict) -> str:
    """Call run_instances and return the new instance ID."""
    zone = params["Placement"]["AvailabilityZone"]
    print(f"Launching new instance in {zone} (subnet {params['SubnetId']}) ...")
    response = ec2_client.run_instances(**params)
    new_instance_id = response["Instances"][0]["InstanceId"]
    print(f"New instance launched: {new_instance_id}")
    return new_instance_id


def wait_for_replacement_running(ec2_client, instance_id: str, policy: WaitPolicy = RUN_WAIT) -> None:
    print("Waiting for the new instance to enter the running state...")
    wait_instance_running(ec2_client, instance_id, policy)
    print("New instance is running.")
