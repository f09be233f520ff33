"""
Configuration loader — reads connector.yml into a ConnectorSpec.

Reads YAML, validates against the Pydantic schema, and returns the
typed connector definition the generators run on.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from lspgen.core.models.connector import ConnectorSpec

logger = logging.getLogger(__name__)

# Default config filename
CONNECTOR_CONFIG_FILE = "connector.yml"


class ConfigError(Exception):
    """Raised when connector configuration is invalid or missing."""


def find_connector_file(start_dir: Path | None = None) -> Path | None:
    """Search for connector.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to connector.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONNECTOR_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_connector(path: Path | None = None) -> ConnectorSpec:
    """Load and validate connector configuration.

    Args:
        path: Explicit path to connector.yml. If None, searches upward.

    Returns:
        Validated ConnectorSpec.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_connector_file()

    if path is None:
        raise ConfigError(f"No {CONNECTOR_CONFIG_FILE} found.")

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading connector config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "connector" key or be flat
    connector_data = data.get("connector", data)
    if not isinstance(connector_data, dict):
        raise ConfigError(f"Expected 'connector' to be a mapping in {path}")

    try:
        spec = ConnectorSpec.model_validate(connector_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid connector configuration: {e}") from e

    logger.info(
        "Loaded connector '%s' with %d file types", spec.server_id, len(spec.file_types)
    )
    return spec
