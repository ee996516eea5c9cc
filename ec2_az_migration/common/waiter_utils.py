"""
Bounded AWS waiter utilities.

Each function wraps a botocore waiter with an explicit poll delay and attempt
limit taken from a WaitPolicy, so no wait in the migration is unbounded.
"""

from ec2_az_migration.config import WaitPolicy


def _waiter_config(policy: WaitPolicy) -> dict:
    return {"Delay": policy.delay, "MaxAttempts": policy.max_attempts}


def wait_for_instance_state(ec2_client, instance_id: str, waiter_name: str, policy: WaitPolicy):
    """
    Wait for an EC2 instance waiter state with the given policy.

    Args:
        ec2_client: Boto3 EC2 client
        instance_id: EC2 instance ID
        waiter_name: Waiter name, e.g., "instance_stopped" or "instance_running"
        policy: Poll delay and attempt limit

    Raises:
        botocore.exceptions.WaiterError: If the waiter times out or errors
    """
    waiter = ec2_client.get_waiter(waiter_name)
    waiter.wait(InstanceIds=[instance_id], WaiterConfig=_waiter_config(policy))


def wait_instance_stopped(ec2_client, instance_id: str, policy: WaitPolicy):
    """Wait for an instance to reach the stopped state."""
    wait_for_instance_state(ec2_client, instance_id, "instance_stopped", policy)


def wait_instance_running(ec2_client, instance_id: str, policy: WaitPolicy):
    """Wait for an instance to reach the running state."""
    wait_for_instance_state(ec2_client, instance_id, "instance_running", policy)


def wait_ami_available(ec2_client, ami_id: str, policy: WaitPolicy):
    """
    Wait for an AMI to reach available state.

    Args:
        ec2_client: Boto3 EC2 client
        ami_id: AMI ID to wait for
        policy: Poll delay and attempt limit

    Raises:
        WaiterError: If waiter times out or encounters an error
    """
    waiter = ec2_client.get_waiter("image_available")
    waiter.wait(ImageIds=[ami_id], WaiterConfig=_waiter_config(policy))
