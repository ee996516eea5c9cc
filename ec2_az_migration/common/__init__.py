"""Shared AWS helpers for the EC2 AZ migration toolkit."""
