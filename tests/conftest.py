"""Shared pytest fixtures for test files."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tests.ec2_az_test_utils import ScriptedInput


@pytest.fixture(autouse=True)
def mock_aws_env_file(tmp_path, monkeypatch):
    """Provide a mock .env file and clear any AWS credentials leaked by earlier tests."""
    for name in ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_SESSION_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("AWS_ACCESS_KEY_ID=test_key\nAWS_SECRET_ACCESS_KEY=test_secret\n")
    monkeypatch.setenv("AWS_ENV_FILE", str(env_file))
    yield str(env_file)


@pytest.fixture(autouse=True)
def stub_boto3_client(monkeypatch):
    """Replace boto3.client with a MagicMock factory so tests don't call real AWS."""

    def fake_client(service_name, **kwargs):
        client = MagicMock(name=f"{service_name}-client")
        client.meta.region_name = kwargs.get("region_name")
        return client

    monkeypatch.setattr("boto3.client", fake_client)


@pytest.fixture(name="scripted_input")
def fixture_scripted_input():
    """Factory for input() replacements that replay fixed answers."""
    return ScriptedInput
