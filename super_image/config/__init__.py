"""Partition layout configuration module."""

from .config_loader import DEFAULT_CONFIG_PATH, ConfigLoader, load_config
from .config_schema import BlockDevice, Group, Partition, PartitionConfig, SuperMeta
from .errors import ConfigLoadError, DuplicateFieldError, LoadErrorKind

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigLoader",
    "load_config",
    "PartitionConfig",
    "SuperMeta",
    "BlockDevice",
    "Group",
    "Partition",
    "ConfigLoadError",
    "LoadErrorKind",
    "DuplicateFieldError",
]
