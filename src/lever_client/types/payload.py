# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Per-call payload types.

A CallPayload is created fresh for each invocation and discarded afterwards.
TransportOverrides lets the caller adjust the outgoing request; override
values are applied on top of the computed ones and win on collision.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx
from typing_extensions import TypedDict

# Primitive query values; None entries are dropped during serialization
QueryValue = str | int | float | bool | None


class TransportOverrides(TypedDict, total=False):
    """
    Caller-supplied request options merged over the computed defaults.

    Keys:
        headers: Extra headers. Replace computed headers (including
            Authorization and Content-Type) on name collision.
        timeout: httpx timeout for this call. No timeout is applied otherwise.
        extensions: httpx request extensions.
        method: Replaces the endpoint's HTTP method.
        content: Raw request body. Replaces the JSON-encoded body.
        client: An httpx.AsyncClient to send through. When omitted, a client
            is created for the call and closed afterwards.
    """

    headers: Mapping[str, str]
    timeout: float | httpx.Timeout | None
    extensions: dict[str, Any]
    method: str
    content: str | bytes
    client: httpx.AsyncClient


@dataclass
class CallPayload:
    """
    Values supplied for a single endpoint invocation.

    Attributes:
        params: Path parameter values keyed by placeholder name
        query: Query parameters; None values are omitted from the URL
        body: JSON body (mapping, list, or pydantic model); ignored for GET
    """

    params: Mapping[str, Any] = field(default_factory=dict)
    query: Mapping[str, QueryValue] | None = None
    body: Any = None


__all__ = [
    "CallPayload",
    "QueryValue",
    "TransportOverrides",
]
