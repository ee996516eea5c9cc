"""Tests for ec2_az_migration/tagging.py"""

from __future__ import annotations

import logging

from ec2_az_migration.tagging import apply_tags, build_tag_set, list_attached_volume_ids
from tests.assertions import assert_equal
from tests.ec2_az_test_utils import NEW_INSTANCE_ID, build_ec2_client, build_volume


def _names(tags):
    return [tag for tag in tags if tag["Key"] == "Name"]


def test_build_tag_set_synthesizes_missing_name():
    """Exactly one Name tag with the operator's name is added when the source has none."""
    tags = build_tag_set([{"Key": "Env", "Value": "prod"}], "web-new")

    assert_equal(tags, [{"Key": "Env", "Value": "prod"}, {"Key": "Name", "Value": "web-new"}])
    assert_equal(len(_names(tags)), 1)


def test_build_tag_set_keeps_existing_name():
    """An existing Name tag is neither duplicated nor overwritten."""
    tags = build_tag_set([{"Key": "Name", "Value": "web-old"}, {"Key": "Env", "Value": "prod"}], "web-new")

    assert_equal(_names(tags), [{"Key": "Name", "Value": "web-old"}])
    assert_equal(len(tags), 2)


def test_build_tag_set_empty_source():
    """An untagged source still gets a Name tag."""
    assert_equal(build_tag_set([], "solo"), [{"Key": "Name", "Value": "solo"}])


def test_build_tag_set_preserves_whitespace():
    """Embedded, leading and trailing whitespace in values survives unchanged."""
    value = "  Team  A\tnight shift  "

    tags = build_tag_set([{"Key": "Owner", "Value": value}, {"Key": "Cost Center", "Value": "R&D 42"}], "x")

    assert_equal(tags[0], {"Key": "Owner", "Value": value})
    assert_equal(tags[1], {"Key": "Cost Center", "Value": "R&D 42"})


def test_build_tag_set_last_write_wins():
    """Duplicate keys collapse to the last value."""
    tags = build_tag_set([{"Key": "Env", "Value": "dev"}, {"Key": "Env", "Value": "prod"}], "x")

    assert_equal([tag for tag in tags if tag["Key"] == "Env"], [{"Key": "Env", "Value": "prod"}])


def test_build_tag_set_drops_reserved_keys(caplog):
    """aws: prefixed tags cannot be written and are skipped with a warning."""
    source = [
        {"Key": "aws:cloudformation:stack-name", "Value": "stack"},
        {"Key": "Name", "Value": "web"},
    ]

    with caplog.at_level(logging.WARNING):
        tags = build_tag_set(source, "x")

    assert_equal(tags, [{"Key": "Name", "Value": "web"}])
    assert "aws:cloudformation:stack-name" in caplog.text


def test_list_attached_volume_ids():
    """Only volumes attached to the instance are listed."""
    client = build_ec2_client(
        volumes=[build_volume("vol-1"), build_volume("vol-2"), build_volume("vol-9", instance_id="i-other")]
    )

    assert_equal(list_attached_volume_ids(client, NEW_INSTANCE_ID), ["vol-1", "vol-2"])
    assert_equal(
        client.paginators["describe_volumes"].calls,
        [[{"Name": "attachment.instance-id", "Values": [NEW_INSTANCE_ID]}]],
    )


def test_apply_tags_instance_and_volumes_in_one_call(capsys):
    """The instance and all volumes are tagged by a single create_tags call."""
    client = build_ec2_client()
    tags = [{"Key": "Name", "Value": "web"}]

    resources = apply_tags(client, NEW_INSTANCE_ID, ["vol-1", "vol-2"], tags)

    assert_equal(resources, [NEW_INSTANCE_ID, "vol-1", "vol-2"])
    client.create_tags.assert_called_once_with(Resources=[NEW_INSTANCE_ID, "vol-1", "vol-2"], Tags=tags)
    assert "new instance and its volumes" in capsys.readouterr().out


def test_apply_tags_without_volumes():
    """Zero volumes tags the instance alone."""
    client = build_ec2_client()
    tags = [{"Key": "Name", "Value": "web"}]

    apply_tags(client, NEW_INSTANCE_ID, [], tags)

    client.create_tags.assert_called_once_with(Resources=[NEW_INSTANCE_ID], Tags=tags)
