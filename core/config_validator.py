# core/config_validator.py

from typing import List
from core.config import settings
from core.logging_config import logger


def validate_required_config() -> List[str]:
    """
    Validate settings the service cannot run without.
    Returns list of problems.
    """
    problems = []

    if not settings.JWT_SECRET_KEY:
        problems.append("JWT_SECRET_KEY is empty")
    if not settings.LOGIN_PATH.startswith("/"):
        problems.append("LOGIN_PATH must be an absolute path")
    if not settings.API_PREFIX.startswith("/"):
        problems.append("API_PREFIX must be an absolute path")

    # Dev conveniences that hand out or forge sessions
    if not settings.is_development:
        if settings.uses_dev_secret:
            problems.append(f"JWT_SECRET_KEY is the development default in ENV={settings.ENV}")
        if settings.ENABLE_DEV_LOGIN:
            problems.append(f"ENABLE_DEV_LOGIN must be off in ENV={settings.ENV}")

    return problems


def validate_optional_config() -> List[str]:
    """
    Settings that are fine for local work but risky anywhere else.
    Returns list of warnings.
    """
    warnings = []

    if settings.is_development:
        return warnings

    if not settings.SESSION_COOKIE_SECURE:
        warnings.append("SESSION_COOKIE_SECURE is off")

    return warnings


def validate_config_on_startup():
    """
    Validate configuration on application startup.
    Raises RuntimeError if critical config is missing.
    Logs warnings for risky config.
    """
    problems = validate_required_config()
    warnings = validate_optional_config()

    if problems:
        error_msg = f"Invalid configuration: {'; '.join(problems)}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)

    for warning in warnings:
        logger.warning(f"Configuration warning: {warning}")

    logger.info("Configuration validation passed")
