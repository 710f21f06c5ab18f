"""
Configuration module for the App Runner infrastructure.

Resolves settings from environment variables (optionally seeded from a
.env file) and turns them into a typed, validated configuration object.
"""

from apprunner_iac.configs.base import EnvironmentConfig
from apprunner_iac.configs.environment import get_config
from apprunner_iac.configs.errors import ConfigurationError
from apprunner_iac.configs.resolver import ConfigResolver, derive_env_key, get_resolver
from apprunner_iac.configs.constants import (
    PORTS,
    DEFAULT_TAGS,
    ECR_PULL_ACTIONS,
)

__all__ = [
    "EnvironmentConfig",
    "get_config",
    "ConfigurationError",
    "ConfigResolver",
    "derive_env_key",
    "get_resolver",
    "PORTS",
    "DEFAULT_TAGS",
    "ECR_PULL_ACTIONS",
]
