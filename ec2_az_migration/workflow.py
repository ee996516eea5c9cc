"""
EC2 Availability Zone migration workflow.

Runs the steps of one migration strictly in order:

    discover -> select-zone -> select-subnet -> name
      -> stop -> capture -> image -> launch -> tag -> reassign-ip

Any failure aborts the run. Completed steps are not rolled back; the
context records them so the operator can clean up by hand. Re-running after
a failure creates another AMI and another instance.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from ec2_az_migration.common.aws_common import region_from_zone
from ec2_az_migration.common.cli_utils import InputFunc, prompt_text
from ec2_az_migration.config import DEFAULT_WAIT_POLICIES, WaitPolicies
from ec2_az_migration.context import MigrationContext
from ec2_az_migration.discovery import describe_source_instance, list_candidate_zones, list_zone_subnets
from ec2_az_migration.elastic_ip import find_elastic_ip, reassign_elastic_ip
from ec2_az_migration.errors import ProviderError
from ec2_az_migration.imaging import (
    build_ami_description,
    build_ami_name,
    request_migration_ami,
    wait_for_migration_ami,
)
from ec2_az_migration.launch import (
    build_run_instances_params,
    request_replacement_instance,
    wait_for_replacement_running,
)
from ec2_az_migration.selection import prompt_for_selection
from ec2_az_migration.snapshot import capture_instance_attributes, read_instance_tags, stop_source_instance
from ec2_az_migration.tagging import apply_tags, build_tag_set, list_attached_volume_ids

STEP_DISCOVER = "discover"
STEP_SELECT_ZONE = "select-zone"
STEP_SELECT_SUBNET = "select-subnet"
STEP_NAME = "name"
STEP_STOP = "stop"
STEP_CAPTURE = "capture"
STEP_IMAGE = "image"
STEP_LAUNCH = "launch"
STEP_TAG = "tag"
STEP_REASSIGN_IP = "reassign-ip"


@contextmanager
def _provider_step(step: str, context: Optional[MigrationContext] = None):
    """Wrap botocore failures in ProviderError and record the step when it finishes."""
    try:
        yield
    except (ClientError, BotoCoreError) as e:
        raise ProviderError(step, e) from e
    if context is not None:
        context.mark_completed(step)


def plan_migration(ec2_client, instance_id: Optional[str] = None, input_func: InputFunc = input) -> MigrationContext:
    """
    Resolve the source instance and let the operator pick the destination.

    Args:
        ec2_client: Boto3 EC2 client
        instance_id: Source instance ID; prompted for when None
        input_func: Callable used for every prompt

    Returns:
        MigrationContext: Context with source, destination and new name filled in
    """
    if not instance_id:
        instance_id = prompt_text("Enter the source EC2 instance ID to migrate: ", input_func)

    with _provider_step(STEP_DISCOVER):
        source = describe_source_instance(ec2_client, instance_id)
    context = MigrationContext(source=source)
    context.mark_completed(STEP_DISCOVER)
    print(
        f"Source instance is in Availability Zone: {source.availability_zone} "
        f"(Region: {region_from_zone(source.availability_zone)})"
    )

    with _provider_step(STEP_SELECT_ZONE, context):
        zones = list_candidate_zones(ec2_client, source.vpc_id, source.availability_zone)
        index = prompt_for_selection(
            "Available destination Availability Zones in the same VPC:",
            zones,
            prompt="Choose the number of the destination Availability Zone: ",
            input_func=input_func,
        )
        context.destination_zone = zones[index]
        print(f"Selected Availability Zone: {context.destination_zone}")

    with _provider_step(STEP_SELECT_SUBNET, context):
        subnets = list_zone_subnets(ec2_client, source.vpc_id, context.destination_zone)
        index = prompt_for_selection(
            f"Available subnets in {context.destination_zone}:",
            [subnet.label for subnet in subnets],
            prompt="Choose the number of the destination subnet: ",
            input_func=input_func,
        )
        context.destination_subnet = subnets[index]
        print(
            f"Destination subnet chosen: {context.destination_subnet.subnet_id} "
            f"in {context.destination_zone}"
        )

    context.new_instance_name = prompt_text("Enter a name for the new instance: ", input_func)
    context.mark_completed(STEP_NAME)
    return context


def describe_plan(context: MigrationContext) -> list[str]:
    """Summarize what execute_migration is about to do."""
    return [
        f"Source instance:     {context.source_instance_id} ({context.source.availability_zone})",
        f"Destination zone:    {context.destination_zone}",
        f"Destination subnet:  {context.destination_subnet.label}",
        f"New instance name:   {context.new_instance_name}",
        "The source instance will be stopped and imaged; it is not terminated.",
    ]


def execute_migration(
    ec2_client,
    context: MigrationContext,
    wait_policies: WaitPolicies = DEFAULT_WAIT_POLICIES,
) -> MigrationContext:
    """
    Stop, image, relaunch, retag and move the Elastic IP.

    Args:
        ec2_client: Boto3 EC2 client
        context: Context returned by plan_migration
        wait_policies: Poll delay and attempt limits for the stop, image and run waits

    Returns:
        MigrationContext: The same context with created resource IDs filled in

    Raises:
        MigrationError: On the first failing step; earlier steps stay completed
    """
    instance_id = context.source_instance_id

    with _provider_step(STEP_STOP, context):
        stop_source_instance(ec2_client, instance_id, wait_policies.stop)

    with _provider_step(STEP_CAPTURE, context):
        context.attributes = capture_instance_attributes(ec2_client, instance_id)
        context.source_tags = read_instance_tags(ec2_client, instance_id)

    with _provider_step(STEP_IMAGE, context):
        context.ami_name = build_ami_name(instance_id)
        description = build_ami_description(
            instance_id, context.source.availability_zone, context.destination_zone
        )
        context.ami_id = request_migration_ami(ec2_client, instance_id, context.ami_name, description)
        wait_for_migration_ami(ec2_client, context.ami_id, wait_policies.image)

    with _provider_step(STEP_LAUNCH, context):
        params = build_run_instances_params(context.ami_id, context.attributes, context.destination_subnet)
        context.new_instance_id = request_replacement_instance(ec2_client, params)
        wait_for_replacement_running(ec2_client, context.new_instance_id, wait_policies.run)

    with _provider_step(STEP_TAG, context):
        context.applied_tags = build_tag_set(context.source_tags, context.new_instance_name)
        volume_ids = list_attached_volume_ids(ec2_client, context.new_instance_id)
        apply_tags(ec2_client, context.new_instance_id, volume_ids, context.applied_tags)
        context.tagged_volume_ids = volume_ids

    with _provider_step(STEP_REASSIGN_IP, context):
        binding = find_elastic_ip(ec2_client, instance_id)
        if binding is not None:
            context.elastic_ip = binding
            reassign_elastic_ip(ec2_client, binding, context.new_instance_id)

    return context


def describe_completed_steps(context: MigrationContext) -> list[str]:
    """
    List the resources a run has already changed or created.

    Pending AMIs and instances are included even when their wait did not finish.
    """
    done = set(context.completed_steps)
    lines = []
    if STEP_STOP in done:
        lines.append(f"Source instance {context.source_instance_id} was stopped (it is not restarted).")
    if context.ami_id:
        state = "available" if STEP_IMAGE in done else "requested, possibly still pending"
        lines.append(f"AMI {context.ami_id} ({context.ami_name}) was created: {state}.")
    if context.new_instance_id:
        state = "running" if STEP_LAUNCH in done else "launched, possibly not yet running"
        lines.append(
            f"New instance {context.new_instance_id} in {context.destination_zone} was created: {state}."
        )
    if STEP_TAG in done:
        lines.append(
            f"Tags were applied to {context.new_instance_id} and "
            f"{len(context.tagged_volume_ids)} volume(s)."
        )
    if context.elastic_ip is not None:
        if STEP_REASSIGN_IP in done:
            lines.append(
                f"Elastic IP {context.elastic_ip.allocation_id} was moved to {context.new_instance_id}."
            )
        else:
            lines.append(
                f"Elastic IP {context.elastic_ip.allocation_id} was being moved; check its association."
            )
    return lines
