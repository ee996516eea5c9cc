"""
Tag replication onto the replacement instance and its volumes.
"""

from __future__ import annotations

import logging

from ec2_az_migration.config import NAME_TAG_KEY, RESERVED_TAG_PREFIX


def build_tag_set(source_tags: list[dict], new_name: str) -> list[dict]:
    """
    Build the tags to write on the new instance.

    Tags are keyed by Key with the last value winning. Values are copied
    verbatim. A Name tag set to new_name is added only when the source had
    none. Keys with the reserved aws: prefix are dropped.

    Args:
        source_tags: Key/Value dicts read from the source instance
        new_name: Operator-supplied name for the new instance

    Returns:
        list: Key/Value dicts ready for create_tags
    """
    tags_by_key: dict[str, str] = {}
    for tag in source_tags:
        key = tag["Key"]
        if key.startswith(RESERVED_TAG_PREFIX):
            logging.warning("Skipping reserved tag %s; it cannot be copied", key)
            continue
        tags_by_key[key] = tag.get("Value", "")

    if NAME_TAG_KEY not in tags_by_key:
        tags_by_key[NAME_TAG_KEY] = new_name

    return [{"Key": key, "Value": value} for key, value in tags_by_key.items()]


def list_attached_volume_ids(ec2_client, instance_id: str) -> list[str]:
    """Return the IDs of all EBS volumes attached to the instance."""
    paginator = ec2_client.get_paginator("describe_volumes")
    volume_ids = []
    for page in paginator.paginate(Filters=[{"Name": "attachment.instance-id", "Values": [instance_id]}]):
        volume_ids.extend(volume["VolumeId"] for volume in page.get("Volumes", []))
    return volume_ids


def apply_tags(ec2_client, instance_id: str, volume_ids: list[str], tags: list[dict]) -> list[str]:
    """
    Write tags on the instance and all of its volumes in one create_tags call.

    Returns:
        list: Every resource ID that was tagged
    """
    resources = [instance_id, *volume_ids]
    if volume_ids:
        print("Applying tags to new instance and its volumes...")
    else:
        print("Applying tags to new instance...")
    ec2_client.create_tags(Resources=resources, Tags=tags)
    return resources
