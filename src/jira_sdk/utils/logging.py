"""Logging utilities for the Jira SDK.

The SDK logs through the standard library under the ``jira-sdk`` logger
tree. Applications that configure logging themselves can ignore
``setup_logging``; it exists for scripts and quick sessions.
"""

import logging

SDK_LOGGER = "jira-sdk"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Send SDK log records to stderr.

    Only the ``jira-sdk`` logger is touched, so handlers the application
    installed on the root logger stay in place. Calling it again replaces
    the handler instead of adding a second one.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The configured SDK logger
    """
    sdk_logger = logging.getLogger(SDK_LOGGER)
    sdk_logger.setLevel(level)

    for handler in sdk_logger.handlers[:]:
        sdk_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s - %(name)s - %(message)s"))
    sdk_logger.addHandler(handler)

    return sdk_logger


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks sensitive strings for logging.

    Args:
        value: The string to mask
        keep_chars: Number of characters to keep visible at start and end

    Returns:
        Masked string with most characters replaced by asterisks
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}{'*' * (len(value) - keep_chars * 2)}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Logs a configuration parameter, masking if sensitive.

    Args:
        logger: The logger to use
        param: The parameter name
        value: The parameter value
        sensitive: Whether the value should be masked
    """
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"Jira {param}: {display_value}")
