"""
Command-line interface for moving an EC2 instance to another Availability Zone.

Prompts for the source instance, destination zone, destination subnet and the
new instance name, then runs the migration. Exit status is 0 on success and
1 on any migration error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from botocore.exceptions import BotoCoreError

from ec2_az_migration.common.aws_client_factory import create_ec2_client
from ec2_az_migration.common.cli_utils import InputFunc, confirm_action
from ec2_az_migration.context import MigrationContext
from ec2_az_migration.errors import MigrationError
from ec2_az_migration.workflow import (
    describe_completed_steps,
    describe_plan,
    execute_migration,
    plan_migration,
)

EXIT_INTERRUPTED = 130


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description=(
            "Move an EC2 instance to another Availability Zone in the same VPC "
            "by imaging it and launching a replacement."
        )
    )
    parser.add_argument("--instance-id", help="Source instance ID (prompted for when omitted).")
    parser.add_argument("--region", help="AWS region (default: resolved by boto3).")
    parser.add_argument(
        "--env-file",
        help="Path to a .env file with AWS credentials (default: $AWS_ENV_FILE or ~/.env).",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Skip the confirmation before the source instance is stopped.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


def _print_completed_steps(context: Optional[MigrationContext]) -> None:
    if context is None:
        return
    lines = describe_completed_steps(context)
    if not lines:
        print("No AWS resources were changed.")
        return
    print("Steps completed before the failure (nothing was rolled back):")
    for line in lines:
        print(f"  - {line}")


def _print_success(context: MigrationContext) -> None:
    print()
    print(f"Migration complete. New instance ID: {context.new_instance_id}")
    print(
        f"Source instance {context.source_instance_id} is stopped and AMI {context.ami_id} "
        "is kept; neither is cleaned up automatically."
    )


def run_migration(ec2_client, args: argparse.Namespace, input_func: InputFunc = input) -> int:
    """Plan, confirm and execute one migration. Returns the exit code."""
    context = None
    try:
        context = plan_migration(ec2_client, args.instance_id, input_func=input_func)

        print()
        for line in describe_plan(context):
            print(line)
        if not confirm_action("Proceed? [y/N] ", skip_prompt=args.yes, input_func=input_func):
            print("Migration cancelled; no resources were changed.")
            return 0

        execute_migration(ec2_client, context)
    except MigrationError as e:
        logging.error("%s", e)
        _print_completed_steps(context)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        _print_completed_steps(context)
        return EXIT_INTERRUPTED

    _print_success(context)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the EC2 AZ migration CLI."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        ec2_client = create_ec2_client(args.region, args.env_file)
    except BotoCoreError as e:
        logging.error("Could not create EC2 client: %s", e)
        return 1
    return run_migration(ec2_client, args)


if __name__ == "__main__":  # pragma: no cover - script entry point
    raise SystemExit(main())
