# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Configuration builder for integration-test modules."""

from .builder import ITestConfigBuilder
from .config import (
    ConfigurationError,
    ConfigurationIncompleteError,
    DefaultsLoadError,
    DefaultsResource,
)
from .models import ITestConfig

__version__ = "0.1.0"

__all__ = [
    "ITestConfig",
    "ITestConfigBuilder",
    "DefaultsResource",
    "ConfigurationError",
    "ConfigurationIncompleteError",
    "DefaultsLoadError",
]
