# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Defaults resource loading for integration-test module configuration."""

import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

# Fixed, well-known defaults resource shipped inside the package
DEFAULTS_FILE = "spring-boot-itest.yml"


class ConfigurationError(Exception):
    """Base class for configuration failures."""

    pass


class ConfigurationIncompleteError(ConfigurationError):
    """Raised when a mandatory field is missing at build time."""

    def __init__(self, message: str):
        super().__init__(f"Configuration is not complete: {message}")


class DefaultsLoadError(ConfigurationError):
    """Raised when the defaults resource cannot be opened or parsed."""

    pass


class DefaultsResource:
    """Read-only view over the defaults resource.

    The file is read on the first lookup and cached on this instance; it is
    never reloaded. Values are plain strings, as in a properties file.
    """

    def __init__(self, path: Optional[Path] = None):
        """Initialize the resource.

        Args:
            path: Defaults file to read. If None, uses the packaged
                spring-boot-itest.yml.
        """
        self.path = path
        self._properties: Optional[Dict[str, str]] = None

    @property
    def source(self) -> str:
        """Human-readable location of the defaults file."""
        if self.path is None:
            return f"{__package__}/{DEFAULTS_FILE}"
        return str(self.path)

    @property
    def loaded(self) -> bool:
        return self._properties is not None

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the property value for ``name``, or ``default`` if absent.

        Raises:
            DefaultsLoadError: If the defaults file cannot be loaded.
        """
        if self._properties is None:
            self._properties = self._load()
        return self._properties.get(name, default)

    def get_bool(self, name: str, default: Optional[bool] = None) -> Optional[bool]:
        """Return the property parsed as a boolean, or ``default`` if absent.

        Only "true" (any case) is True; every other present value is False.
        """
        value = self.get(name)
        if value is None:
            return default
        return value.lower() == "true"

    def _load(self) -> Dict[str, str]:
        try:
            if self.path is None:
                handle = resources.files(__package__).joinpath(DEFAULTS_FILE).open(
                    "r", encoding="utf-8"
                )
            else:
                handle = open(self.path, encoding="utf-8")
            with handle as f:
                # BaseLoader keeps every scalar as a string
                loaded = yaml.load(f, Loader=yaml.BaseLoader)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise DefaultsLoadError(f"Unable to load property file: {self.source}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise DefaultsLoadError(
                f"Unable to load property file: {self.source} "
                f"(expected a mapping, got {type(loaded).__name__})"
            )

        properties = _flatten_scalars(loaded)
        logger.info(f"Loaded {len(properties)} default(s) from {self.source}")
        return properties


def _flatten_scalars(loaded: Dict[Any, Any]) -> Dict[str, str]:
    """Keep string scalars only; nulls and nested values count as absent."""
    properties: Dict[str, str] = {}
    for key, value in loaded.items():
        if not isinstance(value, str):
            logger.warning(f"Ignoring non-scalar default for '{key}'")
            continue
        properties[str(key)] = value
    return properties
