"""
Source instance discovery.

Resolves where the source instance lives and which other Availability Zones
of its VPC could receive it.
"""

from __future__ import annotations

from botocore.exceptions import ClientError

from ec2_az_migration.common.aws_common import extract_tag_value, get_error_code
from ec2_az_migration.config import INSTANCE_NOT_FOUND_CODES, NAME_TAG_KEY
from ec2_az_migration.context import SourceInstance, SubnetChoice
from ec2_az_migration.errors import (
    InstanceNotFoundError,
    NoAlternativeZoneError,
    NoSubnetsError,
    NoVpcError,
)


def describe_instance_raw(ec2_client, instance_id: str) -> dict:
    """
    Return the raw describe_instances entry for one instance.

    Raises:
        InstanceNotFoundError: If the instance does not exist or is not visible
        ClientError: For any other AWS failure
    """
    if not instance_id:
        raise InstanceNotFoundError(instance_id)
    try:
        response = ec2_client.describe_instances(InstanceIds=[instance_id])
    except ClientError as e:
        if get_error_code(e) in INSTANCE_NOT_FOUND_CODES:
            raise InstanceNotFoundError(instance_id) from e
        raise

    for reservation in response.get("Reservations", []):
        for instance in reservation.get("Instances", []):
            return instance
    raise InstanceNotFoundError(instance_id)


def describe_source_instance(ec2_client, instance_id: str) -> SourceInstance:
    """Look up the zone and VPC of the instance to migrate."""
    instance = describe_instance_raw(ec2_client, instance_id)
    vpc_id = instance.get("VpcId")
    if not vpc_id:
        raise NoVpcError(instance_id)
    return SourceInstance(
        instance_id=instance_id,
        availability_zone=instance["Placement"]["AvailabilityZone"],
        vpc_id=vpc_id,
        subnet_id=instance.get("SubnetId"),
        state=instance.get("State", {}).get("Name"),
    )


def _iter_subnets(ec2_client, filters: list[dict]):
    paginator = ec2_client.get_paginator("describe_subnets")
    for page in paginator.paginate(Filters=filters):
        yield from page.get("Subnets", [])


def list_candidate_zones(ec2_client, vpc_id: str, current_zone: str) -> list[str]:
    """
    List the zones holding at least one subnet of the VPC, minus the current zone.

    Returns:
        Zone names in lexical order

    Raises:
        NoAlternativeZoneError: If the VPC only has subnets in the current zone
    """
    zones = {
        subnet["AvailabilityZone"]
        for subnet in _iter_subnets(ec2_client, [{"Name": "vpc-id", "Values": [vpc_id]}])
    }
    zones.discard(current_zone)
    if not zones:
        raise NoAlternativeZoneError(vpc_id, current_zone)
    return sorted(zones)


def list_zone_subnets(ec2_client, vpc_id: str, zone: str) -> list[SubnetChoice]:
    """
    List the subnets of the VPC in the given zone with their Name tags.

    Raises:
        NoSubnetsError: If the zone has no subnet in the VPC
    """
    filters = [
        {"Name": "vpc-id", "Values": [vpc_id]},
        {"Name": "availability-zone", "Values": [zone]},
    ]
    subnets = [
        SubnetChoice(
            subnet_id=subnet["SubnetId"],
            availability_zone=subnet.get("AvailabilityZone", zone),
            name=extract_tag_value(subnet, NAME_TAG_KEY),
        )
        for subnet in _iter_subnets(ec2_client, filters)
    ]
    if not subnets:
        raise NoSubnetsError(zone, vpc_id)
    return subnets
