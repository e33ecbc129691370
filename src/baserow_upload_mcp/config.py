# Baserow Upload MCP Server
# File: config.py
# Version: v1

"""Configuration loading for the Baserow Upload MCP Server."""

from __future__ import annotations

from dataclasses import dataclass
import os

from .errors import ConfigurationError


def _parse_bool_env(name: str, default: bool = False) -> bool:
    """Parse a boolean-like environment variable.

    Accepts 1/0, true/false, yes/no, on/off (case-insensitive).
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def _parse_int_env(
    name: str,
    default: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """Parse an int environment variable with clamping and safe fallback."""
    raw = os.getenv(name)
    if raw is None or not str(raw).strip():
        value = int(default)
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            value = int(default)

    if min_value is not None and value < min_value:
        value = min_value
    if max_value is not None and value > max_value:
        value = max_value

    return value


def _parse_timeout_env(name: str) -> float | None:
    """Parse an optional positive timeout in seconds.

    Unset, empty, non-numeric or non-positive values mean "no timeout".
    """
    raw = os.getenv(name)
    if raw is None or not str(raw).strip():
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    return value if value > 0 else None


@dataclass(frozen=True)
class BaserowConfig:
    """Connection settings for a Baserow instance.

    ``api_url`` and ``api_token`` form the credential context. They are read
    once from the environment and never change for the lifetime of the
    process.
    """

    api_url: str | None
    api_token: str | None

    verify_tls: bool = True
    # None disables the httpx timeout entirely.
    timeout_seconds: float | None = None
    # Hard cap for the sample rows requested per table.
    max_sample_rows: int = 200
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "BaserowConfig":
        """Create configuration from environment variables."""
        api_url = os.getenv("BASEROW_API_URL") or None
        api_token = os.getenv("BASEROW_API_TOKEN") or None

        verify_tls = _parse_bool_env("BASEROW_VERIFY_TLS", default=True)
        timeout_seconds = _parse_timeout_env("BASEROW_TIMEOUT_SECONDS")
        max_sample_rows = _parse_int_env(
            "BASEROW_MAX_SAMPLE_ROWS", default=200, min_value=1, max_value=1000
        )
        log_level = (os.getenv("BASEROW_LOG_LEVEL") or "WARNING").strip().upper()

        return cls(
            api_url=api_url,
            api_token=api_token,
            verify_tls=verify_tls,
            timeout_seconds=timeout_seconds,
            max_sample_rows=max_sample_rows,
            log_level=log_level,
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_url) and bool(self.api_token)

    @property
    def base_url(self) -> str:
        """API base URL without a trailing slash."""
        return (self.api_url or "").rstrip("/")

    def require_credentials(self) -> None:
        """Raise ConfigurationError unless both URL and token are set."""
        if not self.has_credentials:
            raise ConfigurationError(
                "BASEROW_API_URL and BASEROW_API_TOKEN environment variables "
                "are required"
            )
