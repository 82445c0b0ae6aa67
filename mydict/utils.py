"""
Utility functions for loading the mydict configuration.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .config import (
    API_KEY_VAR, API_URL, API_URL_VAR, DEBUG_VAR, ENV_FILE, TIMEOUT_VAR
)


@dataclass(frozen=True)
class AppConfig:
    """Settings resolved once at startup and passed to the service and renderer."""
    api_key: str
    api_url: str = API_URL
    debug: bool = False
    color: Optional[bool] = None
    timeout: Optional[float] = None


def load_environment(env_file: str = ENV_FILE) -> None:
    """Load the per-user env file, then the working directory's .env.

    Variables already present in the process environment are never overridden.
    """
    if os.path.isfile(env_file):
        load_dotenv(env_file)
        logging.debug(f"Loaded environment from {env_file}")

    local_env = find_dotenv(usecwd=True)
    if local_env:
        load_dotenv(local_env)
        logging.debug(f"Loaded environment from {local_env}")


def mask_key(key: str) -> str:
    """Hide all but the last four characters of an API key."""
    if len(key) <= 4:
        return "*" * len(key)
    return "*" * (len(key) - 4) + key[-4:]


def get_api_key() -> str:
    """Get the dictionary API key from environment variables.

    Raises:
        ValueError: If the key is missing or blank
    """
    api_key = os.getenv(API_KEY_VAR, "").strip()
    if not api_key:
        raise ValueError(
            f"No API key found. Please set {API_KEY_VAR} in {ENV_FILE} "
            f"or in your environment."
        )
    return api_key


def parse_timeout(value: Optional[str]) -> Optional[float]:
    """Parse the optional request timeout in seconds."""
    if value is None or not value.strip():
        return None
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"{TIMEOUT_VAR} must be a number of seconds, got '{value}'")
    if timeout <= 0:
        raise ValueError(f"{TIMEOUT_VAR} must be greater than zero, got '{value}'")
    return timeout


def env_debug_enabled() -> bool:
    return os.getenv(DEBUG_VAR, "") == "1"


def load_config(debug: bool = False, color: Optional[bool] = None) -> AppConfig:
    """Build the application configuration from the environment.

    Args:
        debug: Debug flag from the command line (DEBUG=1 also enables it)
        color: Force colour on or off; None lets the renderer decide

    Returns:
        AppConfig for this run

    Raises:
        ValueError: If the API key is missing or a setting is invalid
    """
    return AppConfig(
        api_key=get_api_key(),
        api_url=os.getenv(API_URL_VAR) or API_URL,
        debug=debug or env_debug_enabled(),
        color=color,
        timeout=parse_timeout(os.getenv(TIMEOUT_VAR)),
    )


def show_config(env_file: str = ENV_FILE) -> None:
    """Display the configuration the client would use."""
    api_key = os.getenv(API_KEY_VAR, "").strip()

    print("📋 Current mydict Configuration:")
    print("=" * 50)
    env_status = "✅" if os.path.isfile(env_file) else "❌"
    print(f"   Env File: {env_file} {env_status}")
    if api_key:
        print(f"   API Key: {mask_key(api_key)} ✅")
    else:
        print("   API Key: not set ❌")
    print(f"   API URL: {os.getenv(API_URL_VAR) or API_URL}")
    print(f"   Debug: {'on' if env_debug_enabled() else 'off'}")
    print(f"   Timeout: {os.getenv(TIMEOUT_VAR) or 'none'}")
    print("=" * 50)

    if not api_key:
        print("💡 Add your key to the env file in the format:")
        print(f"   {API_KEY_VAR}=your_api_key")
