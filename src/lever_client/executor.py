# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request executor for Lever API endpoints.

Every endpoint call goes through execute(), which performs exactly one HTTP
request:

1. Interpolate path params into the endpoint's path template
2. Serialize query params, dropping None values
3. Assemble the URL from the API root, path and query string
4. Build headers (Basic auth, JSON content type for non-GET, overrides last)
5. Encode the JSON body (never for GET)
6. Send the request through httpx
7. Raise on non-2xx status, otherwise decode and return the JSON body

Nothing is retried, cached or queued. Transport errors raised by httpx
propagate unchanged.
"""

import base64
import json
import logging
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

import httpx
from pydantic import BaseModel

from .config import DEFAULT_CONFIG, ClientConfig
from .exceptions import MalformedResponseError, PathParameterError, RequestFailedError
from .types.endpoint import EndpointDescriptor, HttpMethod
from .types.payload import CallPayload, QueryValue, TransportOverrides

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

# Characters left unescaped in path segments, matching encodeURIComponent
_PATH_SAFE = "!*'()"


def interpolate_path(template: str, params: Mapping[str, Any] | None) -> str:
    """
    Substitute path params into a path template.

    Each ``:<name>`` token is replaced (first occurrence only) by the
    percent-encoded string form of the matching value. Only whole
    placeholders match, so ``opp`` never rewrites ``:opportunity``.
    Placeholders without a value are left as-is and params without a
    placeholder are ignored.

    Args:
        template: Path template such as ``/opportunities/:opportunity``
        params: Placeholder values keyed by name

    Returns:
        The interpolated path.
    """
    path = template
    for name, value in (params or {}).items():
        # Percent-encoded values contain no backslashes, so they are safe as
        # a literal replacement
        encoded = quote(str(value), safe=_PATH_SAFE)
        path = re.sub(rf":{re.escape(name)}(?![A-Za-z0-9_])", encoded, path, count=1)
    return path


def check_path_params(
    descriptor: EndpointDescriptor, params: Mapping[str, Any] | None
) -> None:
    """Raise PathParameterError unless params match the placeholders exactly."""
    supplied = set(params or {})
    expected = set(descriptor.placeholders)
    missing = [name for name in descriptor.placeholders if name not in supplied]
    unused = sorted(supplied - expected)
    if missing or unused:
        raise PathParameterError(descriptor.path, missing=missing, unused=unused)


def _stringify(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def serialize_query(query: Mapping[str, QueryValue] | None) -> str:
    """
    Serialize query params into a form-encoded query string.

    None values are dropped. Booleans render as ``true``/``false``.

    Returns:
        The query string without a leading ``?`` (empty if nothing remains).
    """
    if not query:
        return ""
    pairs = [(key, _stringify(value)) for key, value in query.items() if value is not None]
    return urlencode(pairs)


def build_url(api_root: str, path: str, query_string: str = "") -> str:
    """Join the API root, an interpolated path and an optional query string."""
    url = f"{api_root}{path}"
    if query_string:
        url = f"{url}?{query_string}"
    return url


def basic_auth_header(credential: str) -> str:
    """Return the Basic auth header value for an API key with empty password."""
    token = base64.b64encode(f"{credential}:".encode()).decode("ascii")
    return f"Basic {token}"


def build_headers(
    credential: str,
    method: HttpMethod,
    override_headers: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """
    Build request headers.

    Authorization is always set. Content-Type is set for every method except
    GET. Override headers are applied last and replace computed headers with
    the same name (compared case-insensitively).
    """
    headers = {"Authorization": basic_auth_header(credential)}
    if method is not HttpMethod.GET:
        headers["Content-Type"] = JSON_CONTENT_TYPE
    for name, value in (override_headers or {}).items():
        for existing in [k for k in headers if k.lower() == name.lower()]:
            del headers[existing]
        headers[name] = value
    return headers


def encode_body(method: HttpMethod, body: Any) -> str | None:
    """
    JSON-encode a request body.

    Returns None for GET requests and when no body is given. Pydantic models
    are dumped by alias with None fields excluded. NaN and infinite floats
    are not valid JSON and raise ValueError before anything is sent.
    """
    if method is HttpMethod.GET or body is None:
        return None
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def decode_json(response: httpx.Response, method: str, url: str) -> Any:
    """Decode a response body, raising MalformedResponseError on failure."""
    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponseError(e, method=method, url=url) from e


def request_url(
    descriptor: EndpointDescriptor, payload: CallPayload, config: ClientConfig
) -> str:
    """Assemble the full request URL for one call to ``descriptor``."""
    path = interpolate_path(descriptor.path, payload.params)
    return build_url(config.api_root, path, serialize_query(payload.query))


async def execute(
    credential: str,
    descriptor: EndpointDescriptor,
    payload: CallPayload | None = None,
    overrides: TransportOverrides | None = None,
    *,
    config: ClientConfig | None = None,
) -> Any:
    """
    Perform one request against a Lever endpoint.

    Args:
        credential: Lever API key, sent as the Basic auth username
        descriptor: Endpoint to call
        payload: Path params, query params and body for this call
        overrides: Transport options applied over the computed request
        config: Client configuration (defaults to DEFAULT_CONFIG)

    Returns:
        The decoded JSON response body.

    Raises:
        PathParameterError: If strict_params is enabled and params do not
            match the path template.
        ValueError: If the body contains NaN or infinite floats.
        RequestFailedError: If the response status is not 2xx.
        MalformedResponseError: If the response body is not valid JSON.
        httpx.TransportError: On connection, DNS or timeout failures.
    """
    config = config or DEFAULT_CONFIG
    payload = payload or CallPayload()
    overrides = overrides or {}

    if config.strict_params:
        check_path_params(descriptor, payload.params)

    url = request_url(descriptor, payload, config)
    headers = build_headers(credential, descriptor.method, overrides.get("headers"))
    content: str | bytes | None = encode_body(descriptor.method, payload.body)

    # Caller overrides win over computed method and body
    method = overrides.get("method", descriptor.method.value).upper()
    content = overrides.get("content", content)

    # Without a timeout the client's own default applies
    options: dict[str, Any] = {
        "headers": headers,
        "content": content,
        "extensions": overrides.get("extensions"),
    }
    if "timeout" in overrides:
        options["timeout"] = overrides["timeout"]
    elif config.timeout is not None:
        options["timeout"] = config.timeout

    logger.debug(f"Sending {method} {url}")

    client = overrides.get("client")
    if client is not None:
        response = await client.request(method, url, **options)
    else:
        async with httpx.AsyncClient(timeout=None) as call_client:
            response = await call_client.request(method, url, **options)

    if not response.is_success:
        logger.debug(f"{method} {url} returned HTTP {response.status_code}")
        raise RequestFailedError(
            method, url, response.status_code, response.reason_phrase
        )

    logger.debug(f"{method} {url} completed with HTTP {response.status_code}")
    return decode_json(response, method, url)


__all__ = [
    "JSON_CONTENT_TYPE",
    "basic_auth_header",
    "build_headers",
    "build_url",
    "check_path_params",
    "decode_json",
    "encode_body",
    "execute",
    "interpolate_path",
    "request_url",
    "serialize_query",
]
