"""Configuration loader for partition layout JSON files."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from .config_schema import PartitionConfig
from .errors import ConfigLoadError, DuplicateFieldError, LoadErrorKind

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "partition_config.json"

PathLike = Union[str, os.PathLike]


def _reject_duplicate_keys(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    """Build a JSON object, refusing keys that appear more than once."""
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise DuplicateFieldError(key)
        obj[key] = value
    return obj


def _parse(data: Union[str, bytes], path: Optional[Path] = None) -> PartitionConfig:
    try:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        document = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except ValueError as e:
        # JSONDecodeError, UnicodeDecodeError and DuplicateFieldError
        raise ConfigLoadError(LoadErrorKind.PARSE, e, path=path) from e

    try:
        return PartitionConfig.model_validate(document)
    except ValidationError as e:
        raise ConfigLoadError(LoadErrorKind.PARSE, e, path=path) from e


class ConfigLoader:
    """Load and validate partition layout configuration."""

    @staticmethod
    def load_config(path: PathLike = DEFAULT_CONFIG_PATH) -> PartitionConfig:
        """
        Load configuration from a JSON file.

        Args:
            path: Path to configuration file

        Returns:
            Populated PartitionConfig instance

        Raises:
            ConfigLoadError: With kind IO if the file can't be opened or read,
                PARSE if its contents don't match the schema
        """
        config_path = Path(path)
        logger.debug(f"Reading partition config from {config_path}")

        try:
            with open(config_path, "rb") as f:
                raw = f.read()
        except (OSError, ValueError) as e:
            # ValueError: path the OS can't represent, e.g. an embedded NUL
            raise ConfigLoadError(LoadErrorKind.IO, e, path=config_path) from e

        config = _parse(raw, path=config_path)

        logger.info(
            f"Loaded partition config {config_path}: "
            f"{len(config.block_devices)} block devices, "
            f"{len(config.groups)} groups, {len(config.partitions)} partitions"
        )
        return config

    @staticmethod
    def parse_config(data: Union[str, bytes]) -> PartitionConfig:
        """
        Parse configuration from JSON text already in memory.

        Args:
            data: JSON document as text or UTF-8 bytes

        Returns:
            Populated PartitionConfig instance

        Raises:
            ConfigLoadError: With kind PARSE if the document is invalid
        """
        return _parse(data)

    @staticmethod
    def validate_config(config: dict) -> PartitionConfig:
        """
        Validate an already decoded configuration dictionary.

        Args:
            config: Configuration dictionary

        Returns:
            Populated PartitionConfig instance

        Raises:
            ConfigLoadError: With kind PARSE if the dictionary is invalid
        """
        try:
            return PartitionConfig.model_validate(config)
        except ValidationError as e:
            raise ConfigLoadError(LoadErrorKind.PARSE, e) from e


def load_config(path: PathLike = DEFAULT_CONFIG_PATH) -> PartitionConfig:
    """
    Convenience function to load configuration.

    Args:
        path: Path to configuration file

    Returns:
        Populated PartitionConfig instance
    """
    return ConfigLoader.load_config(path)
