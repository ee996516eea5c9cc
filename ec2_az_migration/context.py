"""
Request-scoped state for one migration run.

A single MigrationContext is created per run and passed explicitly through
every step; nothing is kept at module level.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SourceInstance:
    """Placement of the instance being migrated."""

    instance_id: str
    availability_zone: str
    vpc_id: str
    subnet_id: str | None = None
    state: str | None = None


@dataclass
class InstanceAttributes:
    """Launch attributes copied from the stopped source instance."""

    instance_type: str
    security_group_ids: list[str]
    key_name: str | None = None
    iam_instance_profile_arn: str | None = None


@dataclass
class SubnetChoice:
    """A destination subnet offered to the operator."""

    subnet_id: str
    availability_zone: str
    name: str | None = None

    @property
    def label(self) -> str:
        return f"{self.subnet_id} ({self.name or 'no Name tag'})"


@dataclass
class ElasticIpBinding:
    """An Elastic IP currently associated with the source instance."""

    allocation_id: str
    association_id: str
    public_ip: str | None = None


@dataclass
class MigrationContext:  # pylint: disable=too-many-instance-attributes
    """Everything one migration run has chosen, created and completed so far."""

    source: SourceInstance
    destination_zone: str | None = None
    destination_subnet: SubnetChoice | None = None
    new_instance_name: str | None = None
    attributes: InstanceAttributes | None = None
    source_tags: list[dict] = field(default_factory=list)
    ami_name: str | None = None
    ami_id: str | None = None
    new_instance_id: str | None = None
    applied_tags: list[dict] = field(default_factory=list)
    tagged_volume_ids: list[str] = field(default_factory=list)
    elastic_ip: ElasticIpBinding | None = None
    completed_steps: list[str] = field(default_factory=list)

    @property
    def source_instance_id(self) -> str:
        return self.source.instance_id

    def mark_completed(self, step: str) -> None:
        self.completed_steps.append(step)
