# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Data model for integration-test module configuration.

ITestConfig describes how an integration-test module is discovered, built and
executed. Fields left as None are "unset" and get resolved by
ITestConfigBuilder.build().
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Set, Union

# Keys used by the defaults resource and by to_dict()
MODULE_NAME = "moduleName"
MAVEN_GROUP = "mavenGroup"
MAVEN_VERSION = "mavenVersion"
MODULES_PATH = "modulesPath"
UNIT_TEST_ENABLED = "unitTestEnabled"
UNIT_TEST_BASE_PACKAGE = "unitTestBasePackage"
UNIT_TEST_INCLUSION_PATTERN = "unitTestInclusionPattern"
UNIT_TEST_EXCLUSION_PATTERN = "unitTestExclusionPattern"
UNIT_TESTS_EXPECTED_NUMBER = "unitTestsExpectedNumber"
INCLUDE_TEST_DEPENDENCIES = "includeTestDependencies"
INCLUDE_PROVIDED_DEPENDENCIES = "includeProvidedDependencies"
AUTOSTART_COMPONENT = "autostartComponent"
RESOURCES = "resources"
ADDITIONAL_DEPENDENCIES = "additionalDependencies"


@dataclass
class ITestConfig:
    """Configuration of a single integration-test module.

    Mutable while owned by a builder; consumers treat a built instance as
    read-only.
    """

    module_name: Optional[str] = None
    maven_group: Optional[str] = None
    maven_version: Optional[str] = None
    modules_path: Optional[str] = None
    unit_test_enabled: Optional[bool] = None
    unit_test_base_package: Optional[str] = None
    unit_test_inclusion_pattern: Optional[str] = None  # regex over class names
    unit_test_exclusion_pattern: Optional[str] = None  # regex over class names
    unit_tests_expected_number: Optional[int] = None
    include_test_dependencies: Optional[bool] = None
    include_provided_dependencies: Optional[bool] = None
    auto_start_component: Optional[bool] = None
    resources: Optional[Mapping[str, str]] = None  # source file -> destination
    additional_dependencies: Optional[Union[Set[str], frozenset]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            MODULE_NAME: self.module_name,
            MAVEN_GROUP: self.maven_group,
            MAVEN_VERSION: self.maven_version,
            MODULES_PATH: self.modules_path,
            UNIT_TEST_ENABLED: self.unit_test_enabled,
            UNIT_TEST_BASE_PACKAGE: self.unit_test_base_package,
            UNIT_TEST_INCLUSION_PATTERN: self.unit_test_inclusion_pattern,
            UNIT_TEST_EXCLUSION_PATTERN: self.unit_test_exclusion_pattern,
            UNIT_TESTS_EXPECTED_NUMBER: self.unit_tests_expected_number,
            INCLUDE_TEST_DEPENDENCIES: self.include_test_dependencies,
            INCLUDE_PROVIDED_DEPENDENCIES: self.include_provided_dependencies,
            AUTOSTART_COMPONENT: self.auto_start_component,
            RESOURCES: dict(self.resources) if self.resources is not None else None,
            ADDITIONAL_DEPENDENCIES: (
                sorted(self.additional_dependencies)
                if self.additional_dependencies is not None
                else None
            ),
        }
