"""
EC2 Availability Zone migration toolkit.

Moves an EC2 instance into another Availability Zone of the same VPC by
stopping it, imaging it, launching a replacement from the image and carrying
over tags and the Elastic IP.
"""

__all__ = ["cli", "common", "config", "errors", "workflow"]
