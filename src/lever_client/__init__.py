# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Lever Client - Typed async bindings for the Lever recruiting API.

Every Lever operation is declared as an endpoint: an HTTP method plus a path
template. Calling an endpoint performs exactly one HTTP request and returns
the decoded JSON body.

Key Features:
    - One generic executor behind every endpoint
    - Basic auth with the API key supplied per call (no ambient credentials)
    - Typed payload shapes and pydantic resource models
    - Optional response validation
    - Transport overrides (headers, timeout, shared httpx client)

Quick Start:
    >>> from lever_client.endpoints import list_opportunities, add_opportunity_tags
    >>>
    >>> page = await list_opportunities(api_key, query={"limit": 50, "tag": "python"})
    >>> for opportunity in page["data"]:
    ...     await add_opportunity_tags(
    ...         api_key,
    ...         params={"opportunity": opportunity["id"]},
    ...         body={"tags": ["reviewed"]},
    ...     )

Pagination is manual: when ``hasNext`` is true, pass ``next`` as the
``offset`` query param of the following call.

Main Exports:
    - create_endpoint, Endpoint: Build callables for any Lever path
    - execute: The underlying request executor
    - ClientConfig: API root, timeout, strictness and validation options
    - RequestFailedError, MalformedResponseError: Call failures

Version: 1.0.0
"""

__version__ = "1.0.0"

from .config import (
    DEFAULT_CONFIG,
    LEVER_API_ROOT,
    LEVER_SANDBOX_API_ROOT,
    ClientConfig,
)
from .endpoint import Endpoint, create_endpoint
from .exceptions import (
    ConfigurationError,
    LeverClientError,
    MalformedResponseError,
    PathParameterError,
    RequestFailedError,
    ResponseValidationError,
    TransportError,
)
from .executor import execute
from .types import (
    CallPayload,
    DataResponse,
    EndpointDescriptor,
    HttpMethod,
    ListResponse,
    TransportOverrides,
)

__all__ = [
    "DEFAULT_CONFIG",
    "LEVER_API_ROOT",
    "LEVER_SANDBOX_API_ROOT",
    # Types
    "CallPayload",
    # Config
    "ClientConfig",
    "ConfigurationError",
    "DataResponse",
    # Endpoints
    "Endpoint",
    "EndpointDescriptor",
    "HttpMethod",
    # Exceptions
    "LeverClientError",
    "ListResponse",
    "MalformedResponseError",
    "PathParameterError",
    "RequestFailedError",
    "ResponseValidationError",
    "TransportError",
    "TransportOverrides",
    "create_endpoint",
    # Executor
    "execute",
]
