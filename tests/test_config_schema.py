"""Tests for partition configuration models."""

import pytest
from pydantic import ValidationError

from super_image.config.config_schema import BlockDevice, Group, Partition, PartitionConfig, SuperMeta


def test_group_defaults():
    """Test that maximum_size defaults to an empty string."""
    group = Group(name="main")
    assert group.maximum_size == ""


def test_partition_defaults():
    """Test that path and size default to empty strings."""
    partition = Partition(is_dynamic=False, name="boot", group_name="default")
    assert partition.path == ""
    assert partition.size == ""


def test_records_are_frozen():
    """Test that records can't be modified after construction."""
    meta = SuperMeta(path="super.img", size="100")

    with pytest.raises(ValidationError):
        meta.size = "200"


def test_records_compare_by_value():
    device = BlockDevice(block_size="4096", name="super", alignment="1", size="1000")
    same = BlockDevice(block_size="4096", name="super", alignment="1", size="1000")
    other = BlockDevice(block_size="512", name="super", alignment="1", size="1000")

    assert device == same
    assert device != other


def test_strict_types():
    """Test that scalar fields don't coerce between JSON types."""
    with pytest.raises(ValidationError):
        SuperMeta(path="super.img", size=100)

    with pytest.raises(ValidationError):
        Partition(is_dynamic=1, name="system", group_name="main")


def test_partition_config_from_models():
    """Test building a configuration from model instances."""
    config = PartitionConfig(
        super_meta=SuperMeta(path="super.img", size="100"),
        nv_text="",
        block_devices=[BlockDevice(block_size="4096", name="super", alignment="1", size="100")],
        groups=[Group(name="main")],
        nv_id="",
        partitions=[Partition(is_dynamic=True, name="system", group_name="main")],
    )

    assert isinstance(config.partitions, tuple)
    assert config.partitions[0].group_name == "main"
    assert config.model_dump()["groups"] == ({"name": "main", "maximum_size": ""},)
