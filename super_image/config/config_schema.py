"""Pydantic models for super-image partition layout configuration."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class _Record(BaseModel):
    """Immutable record populated straight from the JSON document."""

    model_config = ConfigDict(frozen=True)


class SuperMeta(_Record):
    """Super-image metadata."""

    path: StrictStr = Field(..., description="Output path of the super image")
    size: StrictStr = Field(..., description="Super image size, kept as raw text")


class BlockDevice(_Record):
    """Physical or virtual block device backing the super image."""

    block_size: StrictStr = Field(..., description="Logical block size")
    name: StrictStr = Field(..., description="Block device name")
    alignment: StrictStr = Field(..., description="Partition alignment")
    size: StrictStr = Field(..., description="Device size")


class Group(_Record):
    """Partition group sharing a size budget."""

    name: StrictStr = Field(..., description="Group name")
    maximum_size: StrictStr = Field(default="", description="Size ceiling (empty if unbounded)")


class Partition(_Record):
    """Logical partition assigned to a group."""

    is_dynamic: StrictBool = Field(..., description="Whether the partition is resizable within its group")
    name: StrictStr = Field(..., description="Partition name")
    group_name: StrictStr = Field(..., description="Name of the owning group")
    path: StrictStr = Field(default="", description="Source image file (empty if none)")
    size: StrictStr = Field(default="", description="Partition size (empty if derived from the image)")


class PartitionConfig(_Record):
    """Complete partition layout description."""

    super_meta: SuperMeta = Field(..., description="Super image metadata")
    nv_text: StrictStr = Field(..., description="NV text")
    block_devices: Tuple[BlockDevice, ...] = Field(..., description="Block devices, in declaration order")
    groups: Tuple[Group, ...] = Field(..., description="Partition groups, in declaration order")
    nv_id: StrictStr = Field(..., description="NV identifier")
    partitions: Tuple[Partition, ...] = Field(..., description="Partitions, in declaration order")
