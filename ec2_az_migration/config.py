"""
Configuration for the EC2 Availability Zone migration.

Wait policies bound every blocking wait: a botocore waiter polls every
``delay`` seconds and gives up after ``max_attempts`` polls.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WaitPolicy:
    """Poll interval and attempt limit for one kind of wait."""

    delay: int
    max_attempts: int

    @property
    def timeout_seconds(self) -> int:
        return self.delay * self.max_attempts


@dataclass(frozen=True)
class WaitPolicies:
    """Wait policies for each long-running step of the migration."""

    stop: WaitPolicy
    image: WaitPolicy
    run: WaitPolicy


# ~10 min to stop, ~30 min for the AMI, ~10 min to boot
STOP_WAIT = WaitPolicy(delay=15, max_attempts=40)
IMAGE_WAIT = WaitPolicy(delay=15, max_attempts=120)
RUN_WAIT = WaitPolicy(delay=15, max_attempts=40)

DEFAULT_WAIT_POLICIES = WaitPolicies(stop=STOP_WAIT, image=IMAGE_WAIT, run=RUN_WAIT)

NAME_TAG_KEY: str = "Name"

# create_tags rejects keys with this prefix
RESERVED_TAG_PREFIX: str = "aws:"

AMI_NAME_TEMPLATE: str = "{instance_id}-migration-{timestamp}"
AMI_TIMESTAMP_FORMAT: str = "%Y%m%d%H%M%S"
AMI_DESCRIPTION_TEMPLATE: str = "AZ migration of {instance_id} from {source_zone} to {destination_zone}"

# EC2 error codes that mean the caller cannot see the instance
INSTANCE_NOT_FOUND_CODES = frozenset(
    {
        "InvalidInstanceID.NotFound",
        "InvalidInstanceID.Malformed",
        "UnauthorizedOperation",
    }
)
