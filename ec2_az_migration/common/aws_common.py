"""
Shared EC2 response helpers.

Small accessors for tags, error codes and zone names used across the
migration steps.
"""

from typing import Optional

from botocore.exceptions import ClientError


def get_error_code(error: ClientError) -> Optional[str]:
    """Return the AWS error code carried by a ClientError, if any."""
    return error.response.get("Error", {}).get("Code")


def extract_tag_value(resource, key, default=None):
    """
    Extract a specific tag value from an AWS resource.

    Args:
        resource: AWS resource dict containing 'Tags' key
        key: Tag key to search for
        default: Default value if tag not found

    Returns:
        str: Tag value if found, otherwise default value
    """
    for tag in resource.get("Tags", []):
        if tag["Key"] == key:
            return tag["Value"]
    return default


def region_from_zone(availability_zone: str) -> str:
    """Derive the region name from an Availability Zone name (us-east-1a -> us-east-1)."""
    return availability_zone[:-1]
