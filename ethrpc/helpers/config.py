"""Configuration management and environment variable utilities."""

import os

from dotenv import load_dotenv

from ethrpc.helpers.constants import DEFAULT_TIMEOUT


# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_required_env(key: str) -> str:
    """Get a required environment variable.

    Args:
        key: Environment variable name

    Returns:
        Environment variable value

    Raises:
        ValueError: If the environment variable is not set
    """
    value = os.getenv(key)
    if not value:
        msg = f"{key} environment variable is not set"
        raise ValueError(msg)
    return value


def get_optional_env(key: str, default: str | None = None) -> str | None:
    """Get an optional environment variable with a default value."""
    return os.getenv(key, default)


def get_required_url(
    key: str, url: str | None = None, description: str | None = None
) -> str:
    """Get a URL from a parameter, falling back to an environment variable.

    Args:
        key: Environment variable name to fall back to
        url: Optional URL to use directly
        description: Human readable name used in the error message

    Returns:
        The URL

    Raises:
        ValueError: If neither the parameter nor the environment variable is set

    Example:
        ```python
        from ethrpc.helpers.config import get_required_url

        url = get_required_url("ETH_RPC_URL", description="Ethereum RPC URL")
        ```
    """
    if url:
        return url

    env_url = os.getenv(key)
    if not env_url:
        msg = f"{description or key} must be provided or set in {key}"
        raise ValueError(msg)

    return env_url


def get_eth_rpc_url(rpc_url: str | None = None) -> str:
    """Get Ethereum RPC URL from parameter or the ETH_RPC_URL environment variable.

    Raises:
        ValueError: If RPC URL is not provided and ETH_RPC_URL env var is not set
    """
    return get_required_url("ETH_RPC_URL", url=rpc_url, description="Ethereum RPC URL")


def get_log_level(log_level: str | None = None) -> str:
    """Resolve the log level from a parameter, LOG_LEVEL, or INFO.

    Raises:
        ValueError: If the resolved level is not a known logging level
    """
    level = (log_level or get_optional_env("LOG_LEVEL") or "INFO").upper()
    if level not in LOG_LEVELS:
        msg = f"Invalid log level: {level}"
        raise ValueError(msg)
    return level


def get_rpc_timeout(timeout: float | None = None) -> float:
    """Resolve the request timeout from a parameter, ETH_RPC_TIMEOUT, or the default.

    Raises:
        ValueError: If the timeout is not a positive number
    """
    if timeout is None:
        raw = get_optional_env("ETH_RPC_TIMEOUT")
        if not raw:
            return DEFAULT_TIMEOUT
        try:
            timeout = float(raw)
        except ValueError:
            msg = f"ETH_RPC_TIMEOUT must be a number, got {raw!r}"
            raise ValueError(msg) from None

    if timeout <= 0:
        msg = f"Timeout must be positive, got {timeout}"
        raise ValueError(msg)
    return timeout


__all__ = [
    "get_eth_rpc_url",
    "get_log_level",
    "get_optional_env",
    "get_required_env",
    "get_required_url",
    "get_rpc_timeout",
]
