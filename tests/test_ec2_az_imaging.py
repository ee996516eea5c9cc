"""Tests for ec2_az_migration/imaging.py"""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import MagicMock

from ec2_az_migration.config import WaitPolicy
from ec2_az_migration.imaging import (
    build_ami_description,
    build_ami_name,
    request_migration_ami,
    wait_for_migration_ami,
)
from tests.assertions import assert_equal
from tests.ec2_az_test_utils import AMI_ID, SOURCE_INSTANCE_ID, build_ec2_client


def test_build_ami_name_embeds_instance_and_timestamp():
    """AMI names carry the instance id and a UTC timestamp."""
    moment = datetime(2024, 3, 5, 7, 8, 9, tzinfo=timezone.utc)

    assert_equal(build_ami_name("i-abc", now=moment), "i-abc-migration-20240305070809")


def test_build_ami_name_defaults_to_now():
    """Without an explicit time, the current UTC time is used."""
    name = build_ami_name("i-abc")

    assert name.startswith("i-abc-migration-")
    assert_equal(len(name.rsplit("-", 1)[1]), 14)


def test_build_ami_description():
    """The description names the source and both zones."""
    description = build_ami_description("i-abc", "us-east-1a", "us-east-1d")

    assert_equal(description, "AZ migration of i-abc from us-east-1a to us-east-1d")


def test_request_migration_ami_without_reboot():
    """create_image is called with NoReboot and the generated name."""
    client = build_ec2_client()

    ami_id = request_migration_ami(client, SOURCE_INSTANCE_ID, "i-0source-migration-1", "desc")

    assert_equal(ami_id, AMI_ID)
    client.create_image.assert_called_once_with(
        InstanceId=SOURCE_INSTANCE_ID,
        Name="i-0source-migration-1",
        NoReboot=True,
        Description="desc",
    )


def test_request_migration_ami_omits_empty_description():
    """No Description parameter is sent when none is given."""
    client = build_ec2_client()

    request_migration_ami(client, SOURCE_INSTANCE_ID, "name")

    assert "Description" not in client.create_image.call_args.kwargs


def test_wait_for_migration_ami(capsys):
    """The image_available waiter runs with the given policy."""
    client = MagicMock()
    waiter = MagicMock()
    client.get_waiter.return_value = waiter

    wait_for_migration_ami(client, AMI_ID, WaitPolicy(delay=30, max_attempts=10))

    client.get_waiter.assert_called_once_with("image_available")
    waiter.wait.assert_called_once_with(ImageIds=[AMI_ID], WaiterConfig={"Delay": 30, "MaxAttempts": 10})
    assert f"AMI {AMI_ID} is now available." in capsys.readouterr().out
