"""
Environment variable configuration loader for the BitMEX SDK.

This module builds transport configuration and credentials from environment
variables (optionally seeded from a ``.env`` file), so deployments can switch
between testnet and production without code changes. The transport itself
never reads the environment; callers opt in through these helpers.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from .models import Credential
from .models import HTTPConfig

logger = logging.getLogger(__name__)


def load_config_from_env(dotenv_path: Optional[str] = None, use_dotenv: bool = True) -> HTTPConfig:
    """
    Load transport configuration from environment variables.

    Environment variables:
        BITMEX_TESTNET: Use the testnet host (true/false)
        BITMEX_BASE_URL: Explicit API base URL, overrides BITMEX_TESTNET
        BITMEX_TIMEOUT: Request timeout in seconds (unset disables it)
        BITMEX_USER_AGENT: User agent string
        BITMEX_SIGN_WITH_REQUEST_VERB: Sign with the request's own verb (true/false)

    Args:
        dotenv_path: Path of a .env file, searched for when None
        use_dotenv: Whether to load a .env file first

    Returns:
        HTTPConfig: Configuration object loaded from environment
    """
    if use_dotenv:
        load_dotenv(dotenv_path)

    config = HTTPConfig()

    config.testnet = _parse_bool(os.getenv('BITMEX_TESTNET', 'false'))

    if base_url := os.getenv('BITMEX_BASE_URL'):
        config.base_url = base_url.rstrip('/')

    if timeout := os.getenv('BITMEX_TIMEOUT'):
        try:
            config.timeout = float(timeout)
        except ValueError:
            logger.warning(f"Invalid timeout value: {timeout}, leaving requests without timeout")

    if user_agent := os.getenv('BITMEX_USER_AGENT'):
        config.user_agent = user_agent

    config.sign_with_request_verb = _parse_bool(os.getenv('BITMEX_SIGN_WITH_REQUEST_VERB', 'false'))

    if log_level := os.getenv('BITMEX_LOG_LEVEL'):
        configure_logging(log_level)

    return config


def load_credential_from_env(dotenv_path: Optional[str] = None, use_dotenv: bool = True) -> Optional[Credential]:
    """
    Load the API credential from BITMEX_API_KEY and BITMEX_API_SECRET.

    Args:
        dotenv_path: Path of a .env file, searched for when None
        use_dotenv: Whether to load a .env file first

    Returns:
        Credential, or None when either variable is missing
    """
    if use_dotenv:
        load_dotenv(dotenv_path)

    api_key = os.getenv('BITMEX_API_KEY')
    api_secret = os.getenv('BITMEX_API_SECRET')
    if not api_key or not api_secret:
        if api_key or api_secret:
            logger.warning("Only one of BITMEX_API_KEY / BITMEX_API_SECRET is set, ignoring both")
        return None

    return Credential(key=api_key, secret=api_secret)


def configure_logging(level: str) -> None:
    """Set the log level of the ``bitmex`` logger hierarchy."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        logger.warning(f"Invalid log level: {level}")
        return
    logging.getLogger('bitmex').setLevel(numeric)


def _parse_bool(value: Optional[str]) -> bool:
    """Parse boolean from string."""
    if not value:
        return False
    return value.lower() in ('true', '1', 'yes', 'on')
