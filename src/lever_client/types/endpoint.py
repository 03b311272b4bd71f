# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Endpoint descriptor types.

An endpoint descriptor is the static description of one remote operation:
the HTTP method and a path template such as
``/opportunities/:opportunity/notes/:note``. Descriptors are created once at
import time and never mutated.
"""

import re
from dataclasses import dataclass, field
from enum import Enum

from ..exceptions import ConfigurationError

# A placeholder is ':' followed by an identifier, ending at '/' or end of path
PLACEHOLDER_PATTERN = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


class HttpMethod(str, Enum):
    """
    HTTP methods supported by the Lever API.

    GET requests never carry a body. Every other method is sent with
    ``Content-Type: application/json``.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def coerce(cls, value: "HttpMethod | str") -> "HttpMethod":
        """Return the member for ``value``, accepting any letter case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ConfigurationError(
                f"Unsupported HTTP method {value!r} (expected one of {allowed})"
            ) from None


@dataclass(frozen=True)
class EndpointDescriptor:
    """
    Immutable description of a single Lever API operation.

    Attributes:
        method: HTTP method (strings are coerced to HttpMethod)
        path: Path template relative to the API root, placeholders written
            as ``:<name>``
        placeholders: Placeholder names in template order (derived)
    """

    method: HttpMethod
    path: str
    placeholders: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Coerce the method and validate the path template."""
        object.__setattr__(self, "method", HttpMethod.coerce(self.method))
        if not isinstance(self.path, str) or not self.path.startswith("/"):
            raise ConfigurationError(
                f"Endpoint path must start with '/': {self.path!r}"
            )
        object.__setattr__(
            self, "placeholders", tuple(PLACEHOLDER_PATTERN.findall(self.path))
        )

    def __str__(self) -> str:
        return f"{self.method.value} {self.path}"


__all__ = [
    "PLACEHOLDER_PATTERN",
    "EndpointDescriptor",
    "HttpMethod",
]
