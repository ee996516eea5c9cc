#!/usr/bin/env python3
"""
EC2 Availability Zone Migration Script
Moves an EC2 instance into another Availability Zone of the same VPC.
"""

from ec2_az_migration.cli import main

if __name__ == "__main__":  # pragma: no cover - script entry point
    raise SystemExit(main())
