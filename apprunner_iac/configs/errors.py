"""Errors raised while turning raw settings into typed configuration."""


class ConfigurationError(Exception):
    """
    A setting is missing or holds a value that cannot be used.

    Attributes:
        key: Environment-variable key of the offending setting
    """

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key
