"""Super-image partition layout configuration."""

from .config import (
    BlockDevice,
    ConfigLoadError,
    ConfigLoader,
    Group,
    LoadErrorKind,
    Partition,
    PartitionConfig,
    SuperMeta,
    load_config,
)

__all__ = [
    "BlockDevice",
    "ConfigLoadError",
    "ConfigLoader",
    "Group",
    "LoadErrorKind",
    "Partition",
    "PartitionConfig",
    "SuperMeta",
    "load_config",
]
