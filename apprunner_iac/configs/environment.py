"""
Environment configuration loader.

Builds and validates EnvironmentConfig from the environment resolver.
Each dataclass field is resolved by name, defaulted when unset and coerced
to the field's type.
"""

import dataclasses
import logging

from pydantic import TypeAdapter, ValidationError

from apprunner_iac.configs.base import EnvironmentConfig
from apprunner_iac.configs.constants import HEALTH_CHECK_PROTOCOLS
from apprunner_iac.configs.errors import ConfigurationError
from apprunner_iac.configs.resolver import ConfigResolver, derive_env_key, get_resolver
from apprunner_iac.utils.cidr import plan_subnet_cidrs

logger = logging.getLogger(__name__)


def _coerce(name: str, raw: str, annotation: object) -> object:
    """Coerce a raw string to the annotated type with pydantic's lax rules."""
    try:
        return TypeAdapter(annotation).validate_python(raw)
    except ValidationError as exc:
        error = exc.errors()[0]
        raise ConfigurationError(
            derive_env_key(name),
            f"invalid value {raw!r} ({error['msg']})",
        ) from exc


def _validate(config: EnvironmentConfig) -> None:
    """Check cross-field constraints that types alone cannot express."""
    if config.apprunner_health_check_protocol not in HEALTH_CHECK_PROTOCOLS:
        raise ConfigurationError(
            derive_env_key("apprunner_health_check_protocol"),
            f"must be one of {', '.join(HEALTH_CHECK_PROTOCOLS)}",
        )

    try:
        plan_subnet_cidrs(
            config.vpc_cidr_block,
            config.vpc_subnet_cidr_mask,
            config.vpc_max_azs,
        )
    except ValueError as exc:
        raise ConfigurationError(derive_env_key("vpc_cidr_block"), str(exc)) from exc


def get_config(resolver: ConfigResolver | None = None) -> EnvironmentConfig:
    """
    Load environment configuration from resolved environment variables.

    Args:
        resolver: Resolver to read from; the process-wide one when omitted

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        ConfigurationError: If a value cannot be coerced or is out of range
    """
    resolver = resolver or get_resolver()
    values = {}

    for field in dataclasses.fields(EnvironmentConfig):
        raw = resolver.resolve(field.name)
        if raw is None or raw.strip() == "":
            continue
        values[field.name] = _coerce(field.name, raw.strip(), field.type)

    if "apprunner_health_check_protocol" in values:
        values["apprunner_health_check_protocol"] = (
            values["apprunner_health_check_protocol"].upper()
        )

    config = EnvironmentConfig(**values)
    _validate(config)

    logger.debug(
        "Loaded %s config for %s (%d settings overridden)",
        config.environment,
        config.project_name,
        len(values),
    )
    return config
