# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client configuration for the Lever API binding.

The configuration holds no credentials. The API key is supplied on every
call, so a single configuration can be shared by any number of callers.
"""

from dataclasses import dataclass
from urllib.parse import urlsplit

from .exceptions import ConfigurationError

LEVER_API_ROOT = "https://api.lever.co/v1"
"""Production API root."""

LEVER_SANDBOX_API_ROOT = "https://api.sandbox.lever.co/v1"
"""Sandbox API root."""


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration for endpoint execution.

    All fields have defaults matching the plain behavior of the executor:
    production root, no timeout, permissive path params, raw JSON results.
    """

    api_root: str = LEVER_API_ROOT
    """Base URL every endpoint path is appended to."""

    timeout: float | None = None
    """Default request timeout in seconds. None disables the timeout."""

    strict_params: bool = False
    """Fail before sending when path params and placeholders do not match."""

    validate_responses: bool = False
    """Validate decoded bodies against each endpoint's response type."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        parts = urlsplit(self.api_root)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(
                f"api_root must be an absolute http(s) URL: {self.api_root!r}"
            )
        if parts.query or parts.fragment:
            raise ConfigurationError("api_root must not carry a query or fragment")
        # Endpoint paths start with '/'
        object.__setattr__(self, "api_root", self.api_root.rstrip("/"))
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError("timeout must be positive or None")


DEFAULT_CONFIG = ClientConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "LEVER_API_ROOT",
    "LEVER_SANDBOX_API_ROOT",
    "ClientConfig",
]
