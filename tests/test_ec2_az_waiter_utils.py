"""Tests for the bounded waiter wrappers."""

from __future__ import annotations

from unittest.mock import MagicMock

from ec2_az_migration.common import waiter_utils
from ec2_az_migration.config import DEFAULT_WAIT_POLICIES, WaitPolicy
from tests.assertions import assert_equal


def _client_with_waiter():
    client = MagicMock()
    waiter = MagicMock()
    client.get_waiter.return_value = waiter
    return client, waiter


def test_wait_ami_available_uses_policy():
    """wait_ami_available requests the image waiter with the policy's delay and attempts."""
    client, waiter = _client_with_waiter()

    waiter_utils.wait_ami_available(client, "ami-123", WaitPolicy(delay=5, max_attempts=3))

    client.get_waiter.assert_called_once_with("image_available")
    waiter.wait.assert_called_once_with(ImageIds=["ami-123"], WaiterConfig={"Delay": 5, "MaxAttempts": 3})


def test_wait_instance_stopped():
    """wait_instance_stopped requests the instance_stopped waiter."""
    client, waiter = _client_with_waiter()

    waiter_utils.wait_instance_stopped(client, "i-1", WaitPolicy(delay=15, max_attempts=40))

    client.get_waiter.assert_called_once_with("instance_stopped")
    waiter.wait.assert_called_once_with(InstanceIds=["i-1"], WaiterConfig={"Delay": 15, "MaxAttempts": 40})


def test_wait_instance_running():
    """wait_instance_running requests the instance_running waiter."""
    client, waiter = _client_with_waiter()

    waiter_utils.wait_instance_running(client, "i-2", WaitPolicy(delay=1, max_attempts=2))

    client.get_waiter.assert_called_once_with("instance_running")
    waiter.wait.assert_called_once_with(InstanceIds=["i-2"], WaiterConfig={"Delay": 1, "MaxAttempts": 2})


def test_default_policies_are_bounded():
    """Every default wait has a finite timeout."""
    assert_equal(DEFAULT_WAIT_POLICIES.stop.timeout_seconds, 600)
    assert_equal(DEFAULT_WAIT_POLICIES.image.timeout_seconds, 1800)
    assert_equal(DEFAULT_WAIT_POLICIES.run.timeout_seconds, 600)
