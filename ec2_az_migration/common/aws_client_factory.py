#!/usr/bin/env python3
"""
AWS Client Factory Module
Provides boto3 client creation with credentials from a .env file.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import boto3
from dotenv import load_dotenv


def _resolve_env_path(env_path: Optional[str] = None) -> str:
    """
    Determine which .env file should be used for AWS credentials.

    Priority order:
      1. Explicit parameter
      2. AWS_ENV_FILE environment variable
      3. ~/.env
    """
    if env_path:
        return env_path
    aws_env_file = os.environ.get("AWS_ENV_FILE")
    if aws_env_file:
        return aws_env_file
    return str(Path.home() / ".env")


def load_credentials_from_env(env_path: Optional[str] = None) -> tuple[str, str]:
    """
    Load AWS credentials from .env file and return them as a tuple.

    Args:
        env_path: Optional override path (defaults to ~/.env)

    Returns:
        tuple: (aws_access_key_id, aws_secret_access_key)

    Raises:
        ValueError: If credentials are not found in .env file
    """
    resolved_path = _resolve_env_path(env_path)
    load_dotenv(resolved_path)

    aws_access_key_id = os.getenv("AWS_ACCESS_KEY_ID")
    aws_secret_access_key = os.getenv("AWS_SECRET_ACCESS_KEY")
    if aws_access_key_id and aws_secret_access_key:
        logging.info("AWS credentials loaded from %s", resolved_path)
        if os.getenv("AWS_SESSION_TOKEN"):
            logging.info("AWS session token loaded from %s", resolved_path)
        return aws_access_key_id, aws_secret_access_key

    raise ValueError(f"AWS credentials not found in {resolved_path}")


def create_client(
    service_name: str,
    region: Optional[str] = None,
    env_path: Optional[str] = None,
):
    """
    Create a boto3 client, preferring credentials from the .env file.

    When the .env file does not provide credentials the client is built with
    boto3's default credential chain (shared config, instance profile, SSO).

    Args:
        service_name: AWS service name (e.g., 'ec2')
        region: AWS region name; None lets boto3 resolve the default region
        env_path: Optional override for the .env file location

    Returns:
        boto3.client: Configured AWS service client
    """
    client_kwargs = {}
    try:
        aws_access_key_id, aws_secret_access_key = load_credentials_from_env(env_path)
    except ValueError as exc:
        logging.debug("%s; using the default AWS credential chain", exc)
    else:
        client_kwargs["aws_access_key_id"] = aws_access_key_id
        client_kwargs["aws_secret_access_key"] = aws_secret_access_key
        aws_session_token = os.getenv("AWS_SESSION_TOKEN")
        if aws_session_token:
            client_kwargs["aws_session_token"] = aws_session_token

    if region is not None:
        client_kwargs["region_name"] = region

    return boto3.client(service_name, **client_kwargs)


def create_ec2_client(region: Optional[str] = None, env_path: Optional[str] = None):
    """Create an EC2 boto3 client."""
    return create_client("ec2", region, env_path)
