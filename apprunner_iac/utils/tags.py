"""
Tag factory for AWS resources.

Every resource carries the default tags, the project/environment tags of
the active configuration and its own Name.
"""

from apprunner_iac.configs.base import EnvironmentConfig
from apprunner_iac.configs.constants import DEFAULT_TAGS


def create_tags(
    config: EnvironmentConfig,
    resource_name: str,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Create a standard tag set for an AWS resource.

    Args:
        config: Active environment configuration
        resource_name: Name of the resource
        **extra_tags: Additional tags to include; they override the defaults

    Returns:
        Dictionary of tags
    """
    return {
        **DEFAULT_TAGS,
        **config.get_tags(),
        "Name": resource_name,
        **extra_tags,
    }
