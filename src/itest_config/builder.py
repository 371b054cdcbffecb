# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Fluent builder for ITestConfig that enforces default values.

Setters overwrite unconditionally, except resource() and dependency() which
accumulate. build() validates the module name, then fills every unset field
from the defaults resource or a literal fallback:

    config = ITestConfigBuilder().module("camel-ftp").resource("ftp.xml").build()

There is deliberately no unit_test_enabled() setter: that flag comes from the
defaults resource or from a pre-seeded ITestConfig.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from . import models
from .config import ConfigurationIncompleteError, DefaultsResource
from .models import ITestConfig

logger = logging.getLogger(__name__)

DEFAULT_MAVEN_GROUP = "org.apache.camel"
DEFAULT_MODULES_PATH = "../../components/"
DEFAULT_UNIT_TEST_BASE_PACKAGE = "org.apache.camel"
DEFAULT_UNIT_TEST_INCLUSION_PATTERN = r"^.*Test$"  # all tests
DEFAULT_UNIT_TEST_EXCLUSION_PATTERN = r".*(\.integration\..*|XXXTest$)"  # integration tests


class ITestConfigBuilder:
    """Builds an ITestConfig, applying defaults on build()."""

    def __init__(self, config: Optional[ITestConfig] = None, defaults_path: Optional[Path] = None):
        """Initialize the builder.

        Args:
            config: Pre-populated configuration to continue from. If None,
                starts from an empty one.
            defaults_path: Defaults file to use instead of the packaged one.
        """
        self.config = config if config is not None else ITestConfig()
        self.defaults = DefaultsResource(defaults_path)

    def module(self, module: str) -> "ITestConfigBuilder":
        self.config.module_name = module
        return self

    def maven_group(self, maven_group: str) -> "ITestConfigBuilder":
        self.config.maven_group = maven_group
        return self

    def maven_version(self, maven_version: str) -> "ITestConfigBuilder":
        self.config.maven_version = maven_version
        return self

    def modules_path(self, path: str) -> "ITestConfigBuilder":
        self.config.modules_path = path
        return self

    def unit_test_expected_number(self, number: int) -> "ITestConfigBuilder":
        self.config.unit_tests_expected_number = number
        return self

    def unit_test_base_package(self, package: str) -> "ITestConfigBuilder":
        self.config.unit_test_base_package = package
        return self

    def unit_test_inclusion_pattern(self, pattern: str) -> "ITestConfigBuilder":
        self.config.unit_test_inclusion_pattern = pattern
        return self

    def unit_test_exclusion_pattern(self, pattern: str) -> "ITestConfigBuilder":
        self.config.unit_test_exclusion_pattern = pattern
        return self

    def include_test_dependencies(self, include: bool) -> "ITestConfigBuilder":
        self.config.include_test_dependencies = include
        return self

    def include_provided_dependencies(self, include: bool) -> "ITestConfigBuilder":
        self.config.include_provided_dependencies = include
        return self

    def autostart(self, autostart: bool) -> "ITestConfigBuilder":
        self.config.auto_start_component = autostart
        return self

    def resource(self, file: str, dest: Optional[str] = None) -> "ITestConfigBuilder":
        """Register a resource file, copied to ``dest`` (defaults to ``file``)."""
        if dest is None:
            dest = file
        if self.config.resources is None or isinstance(self.config.resources, MappingProxyType):
            self.config.resources = dict(self.config.resources or {})
        self.config.resources[file] = dest  # type: ignore[index]
        return self

    def dependency(self, dependency_canonical_form: str) -> "ITestConfigBuilder":
        """Add a dependency in canonical form, e.g. ``group:artifact:version``."""
        if self.config.additional_dependencies is None or isinstance(
            self.config.additional_dependencies, frozenset
        ):
            self.config.additional_dependencies = set(self.config.additional_dependencies or ())
        self.config.additional_dependencies.add(dependency_canonical_form)
        return self

    def build(self) -> ITestConfig:
        """Validate the configuration and fill in defaults.

        Returns:
            The fully populated configuration.

        Raises:
            ConfigurationIncompleteError: If the module name is not set.
            DefaultsLoadError: If the defaults resource cannot be loaded.
        """
        config = self.config

        # Checking conditions
        if config.module_name is None:
            raise ConfigurationIncompleteError("ModuleName is required")

        # Set the defaults
        if config.unit_test_enabled is None:
            config.unit_test_enabled = self._bool_default(models.UNIT_TEST_ENABLED, False)

        if config.maven_group is None:
            config.maven_group = self._default(models.MAVEN_GROUP, DEFAULT_MAVEN_GROUP)

        if config.maven_version is None:
            config.maven_version = self._default(models.MAVEN_VERSION, None)

        if config.unit_test_inclusion_pattern is None:
            config.unit_test_inclusion_pattern = self._default(
                models.UNIT_TEST_INCLUSION_PATTERN, DEFAULT_UNIT_TEST_INCLUSION_PATTERN
            )

        if config.unit_test_exclusion_pattern is None:
            config.unit_test_exclusion_pattern = self._default(
                models.UNIT_TEST_EXCLUSION_PATTERN, DEFAULT_UNIT_TEST_EXCLUSION_PATTERN
            )

        # Must follow unit_test_enabled
        if config.include_test_dependencies is None:
            config.include_test_dependencies = self._bool_default(
                models.INCLUDE_TEST_DEPENDENCIES, config.unit_test_enabled
            )

        if config.include_provided_dependencies is None:
            config.include_provided_dependencies = self._bool_default(
                models.INCLUDE_PROVIDED_DEPENDENCIES, True
            )

        if config.modules_path is None:
            config.modules_path = self._default(models.MODULES_PATH, DEFAULT_MODULES_PATH)

        if config.unit_test_base_package is None:
            config.unit_test_base_package = self._default(
                models.UNIT_TEST_BASE_PACKAGE, DEFAULT_UNIT_TEST_BASE_PACKAGE
            )

        if config.auto_start_component is None:
            config.auto_start_component = self._bool_default(models.AUTOSTART_COMPONENT, True)

        if config.resources is None:
            config.resources = MappingProxyType({})

        if config.additional_dependencies is None:
            config.additional_dependencies = frozenset()

        logger.debug(f"Built configuration for module '{config.module_name}': {config.to_dict()}")
        return config

    def _default(self, name: str, fallback: Optional[str]) -> Optional[str]:
        value = self.defaults.get(name, fallback)
        logger.debug(f"Defaulting {name} to {value!r}")
        return value

    def _bool_default(self, name: str, fallback: Optional[bool]) -> Optional[bool]:
        value = self.defaults.get_bool(name, fallback)
        logger.debug(f"Defaulting {name} to {value!r}")
        return value
