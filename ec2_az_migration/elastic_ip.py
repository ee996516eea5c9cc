"""
Move an Elastic IP from the source instance to its replacement.
"""

from __future__ import annotations

from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from ec2_az_migration.context import ElasticIpBinding
from ec2_az_migration.errors import ElasticIpReassignmentError


def find_elastic_ip(ec2_client, instance_id: str) -> Optional[ElasticIpBinding]:
    """Return the VPC Elastic IP associated with the instance, or None."""
    response = ec2_client.describe_addresses(Filters=[{"Name": "instance-id", "Values": [instance_id]}])
    for address in response.get("Addresses", []):
        if address.get("AllocationId") and address.get("AssociationId"):
            return ElasticIpBinding(
                allocation_id=address["AllocationId"],
                association_id=address["AssociationId"],
                public_ip=address.get("PublicIp"),
            )
    return None


def reassign_elastic_ip(ec2_client, binding: ElasticIpBinding, new_instance_id: str) -> None:
    """
    Disassociate the address from the source and associate it with the new instance.

    Raises:
        ElasticIpReassignmentError: If association fails after the disassociation
            succeeded; the address is left unassociated
    """
    print(f"Reassigning Elastic IP allocation {binding.allocation_id} ...")
    ec2_client.disassociate_address(AssociationId=binding.association_id)
    try:
        ec2_client.associate_address(AllocationId=binding.allocation_id, InstanceId=new_instance_id)
    except (ClientError, BotoCoreError) as e:
        raise ElasticIpReassignmentError(binding.allocation_id, new_instance_id, e) from e
    print(f"Elastic IP reassigned to {new_instance_id}")
