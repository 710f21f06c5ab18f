"""
Environment-variable resolver for infrastructure settings.

Maps accessor names (``apprunnerServiceName``, ``rds_multi_az``) to
environment-variable keys (``APPRUNNER_SERVICE_NAME``, ``RDS_MULTI_AZ``) and
reads them from a snapshot taken once at construction.

Dependencies: python-dotenv
System role: Single source of raw string settings for the Pulumi program
"""

import logging
import os
import re
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from dotenv import dotenv_values, load_dotenv

logger = logging.getLogger(__name__)

# .env at the repository root, next to Pulumi.yaml
DEFAULT_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"

# Acronym | optionally-capitalised word with trailing digits | lone capital | digits
# ASCII word boundaries only
_SEGMENT_PATTERN = re.compile(
    r"[A-Z]{2,}(?=[A-Z][a-z]+[0-9]*|\b)|[A-Z]?[a-z]+[0-9]*|[A-Z]|[0-9]+",
    re.ASCII,
)


def derive_env_key(name: str) -> str:
    """
    Derive the environment-variable key for an accessor name.

    Args:
        name: Accessor name, e.g. ``vpcCIDRBlock`` or ``rds_multi_az``

    Returns:
        Upper-case, underscore-joined key (``VPC_CIDR_BLOCK``). Names with no
        matching segments yield an empty string.
    """
    return "_".join(_SEGMENT_PATTERN.findall(str(name))).upper()


class ConfigResolver:
    """
    Read-only view over the process environment plus an optional env file.

    Values already present in the environment win over values in the file.
    The snapshot is fixed at construction.

    Attributes:
        env_file: Path of the env file that was consulted
    """

    def __init__(
        self,
        env_file: str | os.PathLike | None = DEFAULT_ENV_FILE,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.env_file = Path(env_file) if env_file is not None else None

        if environ is None:
            # Populate the real process environment, like any dotenv consumer
            if self.env_file is not None:
                loaded = load_dotenv(self.env_file, override=False, interpolate=False)
                logger.debug("Env file %s loaded: %s", self.env_file, loaded)
            environ = os.environ
        elif self.env_file is not None:
            file_values = {
                key: value
                for key, value in dotenv_values(self.env_file, interpolate=False).items()
                if value is not None
            }
            environ = {**file_values, **environ}

        self._snapshot: Mapping[str, str] = MappingProxyType(dict(environ))

    def resolve(self, name: str) -> str | None:
        """
        Resolve an accessor name to its raw string value.

        Args:
            name: Accessor name

        Returns:
            The value, or None when the derived key is not set
        """
        return self._snapshot.get(derive_env_key(name))

    def __contains__(self, name: object) -> bool:
        return derive_env_key(str(name)) in self._snapshot


@lru_cache
def get_resolver() -> ConfigResolver:
    """
    Get the process-wide resolver.

    The env file is read on the first call only.

    Returns:
        ConfigResolver: Shared resolver instance
    """
    return ConfigResolver()
