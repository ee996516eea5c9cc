"""
Exceptions for the EC2 AZ migration.

Every error is terminal: the CLI prints it and exits non-zero. Nothing that
already happened is rolled back.
"""


class MigrationError(Exception):
    """Base class for all migration failures."""


class InputError(MigrationError):
    """Raised for bad operator input."""


class ConstraintError(MigrationError):
    """Raised when the environment offers no valid destination."""


class InstanceNotFoundError(InputError):
    """Raised when an instance does not exist or cannot be described."""

    def __init__(self, instance_id):
        super().__init__(
            f"Instance {instance_id} not found or you do not have permission to describe it."
        )
        self.instance_id = instance_id


class InvalidSelectionError(InputError):
    """Raised when a menu answer does not name one of the listed choices."""

    def __init__(self, raw_value, choice_count):
        super().__init__(f"Invalid selection {raw_value!r}; choose a number from 1 to {choice_count}.")
        self.raw_value = raw_value
        self.choice_count = choice_count


class NoVpcError(ConstraintError):
    """Raised when the source instance is not in a VPC."""

    def __init__(self, instance_id):
        super().__init__(f"Instance {instance_id} is not in a VPC.")


class NoAlternativeZoneError(ConstraintError):
    """Raised when the VPC has subnets only in the current zone."""

    def __init__(self, vpc_id, current_zone):
        super().__init__(
            f"No alternative Availability Zones found in VPC {vpc_id} (current zone {current_zone})."
        )


class NoSubnetsError(ConstraintError):
    """Raised when the chosen zone has no subnets in the VPC."""

    def __init__(self, zone, vpc_id):
        super().__init__(f"No subnets found in {zone} for VPC {vpc_id}.")




class ProviderError(MigrationError):
    """Raised when an AWS API call or waiter fails during a step."""

    def __init__(self, step, original_error, message=None):
        super().__init__(message or f"AWS error during {step}: {original_error}")
        self.step = step
        self.original_error = original_error


class ElasticIpReassignmentError(ProviderError):
    """Raised when an Elastic IP was disassociated but could not be re-associated."""

    def __init__(self, allocation_id, new_instance_id, original_error):
        super().__init__(
            "Elastic IP association",
            original_error,
            message=(
                f"Elastic IP {allocation_id} was disassociated from the source instance but could "
                f"not be associated with {new_instance_id}; it is currently unassociated. "
                f"Original error: {original_error}"
            ),
        )
        self.allocation_id = allocation_id
        self.new_instance_id = new_instance_id
