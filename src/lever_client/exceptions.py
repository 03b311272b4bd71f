# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the Lever client library.

This module defines the exception hierarchy used throughout the library.
Errors raised by the client itself inherit from LeverClientError, making it
easy to catch every client-originated failure with a single except clause.

Transport-level failures (DNS, refused connections, timeouts) are NOT wrapped.
They propagate unchanged from httpx and are re-exported here as
TransportError for convenience.
"""

from collections.abc import Iterable

from httpx import TransportError


class LeverClientError(Exception):
    """Base exception for all Lever client errors.

    Example:
        try:
            await retrieve_opportunity(api_key, params={"opportunity": opp_id})
        except LeverClientError as e:
            logger.error(f"Lever call failed: {e}")
    """

    pass


class RequestFailedError(LeverClientError):
    """Raised when the Lever API responds with a non-2xx status.

    The response body is not inspected. The exception carries enough context
    to diagnose the failure without a network trace.

    Attributes:
        method: HTTP method of the failed request.
        url: Fully assembled request URL, including the query string.
        status: Numeric HTTP status code.
        status_text: Reason phrase reported by the server (may be empty).

    Example:
        try:
            await retrieve_note(api_key, params=params)
        except RequestFailedError as e:
            if e.status == 404:
                return None
            raise
    """

    def __init__(self, method: str, url: str, status: int, status_text: str = ""):
        message = f"{method} {url} failed: HTTP {status}"
        if status_text:
            message = f"{message} {status_text}"
        super().__init__(message)
        self.method = method
        self.url = url
        self.status = status
        self.status_text = status_text


class MalformedResponseError(LeverClientError):
    """Raised when a successful response body cannot be decoded as JSON.

    Attributes:
        cause: The underlying decoding (or validation) exception.
        method: HTTP method of the request, when known.
        url: Request URL, when known.
    """

    def __init__(
        self,
        cause: Exception,
        method: str | None = None,
        url: str | None = None,
        message: str | None = None,
    ):
        if message is None:
            message = f"Malformed response body: {cause}"
            if method and url:
                message = f"{method} {url} returned a malformed body: {cause}"
        super().__init__(message)
        self.cause = cause
        self.method = method
        self.url = url


class ResponseValidationError(MalformedResponseError):
    """Raised when a decoded body does not match the endpoint's response type.

    Only raised when response validation is requested, either per call or via
    ClientConfig.validate_responses. The pydantic ValidationError is available
    as ``cause``.
    """

    def __init__(
        self,
        cause: Exception,
        response_type: object,
        method: str | None = None,
        url: str | None = None,
    ):
        type_name = getattr(response_type, "__name__", repr(response_type))
        message = f"Response does not match {type_name}: {cause}"
        if method and url:
            message = f"{method} {url} response does not match {type_name}: {cause}"
        super().__init__(cause, method=method, url=url, message=message)
        self.response_type = response_type


class ConfigurationError(LeverClientError):
    """Raised when an endpoint descriptor or client configuration is invalid.

    Common causes include:
    - An HTTP method outside GET, POST, PUT and DELETE
    - A path template that does not start with '/'
    - An API root that is not an absolute http(s) URL
    - A non-positive timeout
    """

    pass


class PathParameterError(LeverClientError):
    """Raised in strict mode when path params do not match the template.

    Strict checking is opt-in (ClientConfig.strict_params). By default
    unmatched placeholders are left in the URL and extra params are ignored.

    Attributes:
        path: The path template being interpolated.
        missing: Placeholder names with no supplied value.
        unused: Supplied param names with no matching placeholder.
    """

    def __init__(
        self,
        path: str,
        missing: Iterable[str] = (),
        unused: Iterable[str] = (),
    ):
        self.path = path
        self.missing = tuple(missing)
        self.unused = tuple(unused)
        details = []
        if self.missing:
            details.append(f"missing {', '.join(self.missing)}")
        if self.unused:
            details.append(f"unused {', '.join(self.unused)}")
        super().__init__(f"Path params do not match {path}: {'; '.join(details)}")


__all__ = [
    "ConfigurationError",
    "LeverClientError",
    "MalformedResponseError",
    "PathParameterError",
    "RequestFailedError",
    "ResponseValidationError",
    "TransportError",
]
