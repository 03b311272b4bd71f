# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Callable endpoint bindings.

create_endpoint() turns a method and path template into an Endpoint: an
async callable that takes an API key and the call's params, query and body,
and returns the decoded JSON response.

An Endpoint is generic over its path params, query, body and response types,
so a type checker can verify each call. Declare those types by annotating
the endpoint:

Example:
    >>> add_tags: Endpoint[OpportunityParams, PerformAsQuery, TagsBody, dict[str, Any]] = (
    ...     create_endpoint("POST", "/opportunities/:opportunity/addTags")
    ... )
    >>> await add_tags(
    ...     api_key,
    ...     params={"opportunity": "op1"},
    ...     body={"tags": ["a", "b"]},
    ... )
"""

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar, cast

from pydantic import TypeAdapter, ValidationError

from .config import DEFAULT_CONFIG, ClientConfig
from .exceptions import ResponseValidationError
from .executor import execute, request_url
from .types.endpoint import EndpointDescriptor, HttpMethod
from .types.payload import CallPayload, QueryValue, TransportOverrides

logger = logging.getLogger(__name__)

P = TypeVar("P")
Q = TypeVar("Q")
B = TypeVar("B")
R = TypeVar("R")


class Endpoint(Generic[P, Q, B, R]):
    """
    An endpoint descriptor bound to its payload and response types.

    The type parameters are the path params (P), query (Q), body (B) and
    response (R) shapes. The response type is informational unless
    validation is requested, in which case the decoded body is validated
    with a pydantic TypeAdapter and the validated value is returned instead
    of the raw JSON.

    Attributes:
        descriptor: Static method and path template
        response_type: Declared type of the response body
        name: Human-readable name used in logs and repr
    """

    def __init__(
        self,
        descriptor: EndpointDescriptor,
        response_type: Any = dict[str, Any],
        name: str | None = None,
    ):
        self.descriptor = descriptor
        self.response_type = response_type
        self.name = name or str(descriptor)
        self._adapter: TypeAdapter[R] | None = None

    @property
    def method(self) -> HttpMethod:
        return self.descriptor.method

    @property
    def path(self) -> str:
        return self.descriptor.path

    @property
    def adapter(self) -> TypeAdapter[R]:
        """TypeAdapter for the response type, built on first use."""
        if self._adapter is None:
            self._adapter = TypeAdapter(self.response_type)
        return self._adapter

    def validate(self, data: Any, url: str | None = None) -> R:
        """Validate decoded JSON against the response type."""
        try:
            return self.adapter.validate_python(data)
        except ValidationError as e:
            raise ResponseValidationError(
                e, self.response_type, method=self.method.value, url=url
            ) from e

    async def __call__(
        self,
        api_key: str,
        params: P | None = None,
        query: Q | None = None,
        body: B | None = None,
        *,
        overrides: TransportOverrides | None = None,
        config: ClientConfig | None = None,
        validate: bool | None = None,
    ) -> R:
        """
        Invoke the endpoint.

        Args:
            api_key: Lever API key (Basic auth username, empty password)
            params: Path parameters
            query: Optional query parameters
            body: Optional JSON body (ignored for GET)
            overrides: Optional transport overrides
            config: Client configuration (defaults to DEFAULT_CONFIG)
            validate: Validate the response against ``response_type``.
                None defers to ``config.validate_responses``.

        Returns:
            The decoded JSON body, or the validated response object when
            validation is enabled.
        """
        config = config or DEFAULT_CONFIG
        payload = CallPayload(
            params=cast("Mapping[str, Any]", params or {}),
            query=cast("Mapping[str, QueryValue] | None", query),
            body=body,
        )
        data = await execute(api_key, self.descriptor, payload, overrides, config=config)
        if validate is None:
            validate = config.validate_responses
        if validate:
            logger.debug(f"Validating {self.name} response")
            return self.validate(data, url=request_url(self.descriptor, payload, config))
        return cast(R, data)

    def __repr__(self) -> str:
        return f"Endpoint({self.name!r}, {self.descriptor})"


def create_endpoint(
    method: HttpMethod | str,
    path: str,
    response_type: Any = dict[str, Any],
    *,
    name: str | None = None,
) -> Endpoint[Any, Any, Any, Any]:
    """
    Create a callable endpoint from a method and a path template.

    The result is untyped until assigned to a variable annotated with its
    ``Endpoint[P, Q, B, R]`` type.

    Args:
        method: HTTP method (GET, POST, PUT or DELETE)
        path: Path template relative to the API root, e.g.
            ``/opportunities/:opportunity``
        response_type: Declared response type used for optional validation
        name: Optional name for logs

    Raises:
        ConfigurationError: If the method or path is invalid.
    """
    descriptor = EndpointDescriptor(method=method, path=path)  # type: ignore[arg-type]
    return Endpoint(descriptor, response_type, name=name)


__all__ = ["Endpoint", "create_endpoint"]
