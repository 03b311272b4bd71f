"""
Unit tests for the request-building helpers of the executor.

These cover path interpolation, query serialization, URL assembly, header
construction and body encoding without sending any request.
"""

import base64
import json
import re

import pytest
from pydantic import BaseModel

from lever_client.exceptions import PathParameterError
from lever_client.executor import (
    basic_auth_header,
    build_headers,
    build_url,
    check_path_params,
    encode_body,
    interpolate_path,
    serialize_query,
)
from lever_client.types import EndpointDescriptor, HttpMethod
from lever_client.types.resources import Note


class TestInterpolatePath:
    """Tests for interpolate_path."""

    def test_single_placeholder(self):
        """A placeholder is replaced by its value."""
        assert interpolate_path("/opportunities/:opportunity", {"opportunity": "abc"}) == (
            "/opportunities/abc"
        )

    def test_value_is_percent_encoded(self):
        """Spaces and reserved characters are percent-encoded."""
        assert interpolate_path("/opportunities/:opportunity", {"opportunity": "abc 123"}) == (
            "/opportunities/abc%20123"
        )
        assert interpolate_path("/stages/:stage", {"stage": "a/b?c#d"}) == (
            "/stages/a%2Fb%3Fc%23d"
        )

    def test_encode_uri_component_safe_set(self):
        """Characters left alone by encodeURIComponent stay unescaped."""
        assert interpolate_path("/x/:id", {"id": "a-b_c.d!e~f*g'h(i)"}) == (
            "/x/a-b_c.d!e~f*g'h(i)"
        )

    def test_unicode_value(self):
        """Non-ASCII values are UTF-8 percent-encoded."""
        assert interpolate_path("/x/:id", {"id": "é"}) == "/x/%C3%A9"

    def test_multiple_placeholders(self):
        """Every supplied placeholder is replaced and none remain."""
        path = interpolate_path(
            "/opportunities/:opportunity/notes/:note",
            {"note": "n 1", "opportunity": "op1"},
        )
        assert path == "/opportunities/op1/notes/n%201"
        assert not re.search(r":[A-Za-z_]", path)

    def test_only_first_occurrence_replaced(self):
        """A repeated token is replaced once per param."""
        assert interpolate_path("/a/:id/b/:id", {"id": "1"}) == "/a/1/b/:id"

    def test_missing_param_left_literally(self):
        """Unmatched placeholders stay in the path."""
        assert interpolate_path("/opportunities/:opportunity", {}) == (
            "/opportunities/:opportunity"
        )

    def test_extra_params_ignored(self):
        """Params without a placeholder are ignored."""
        assert interpolate_path("/tags", {"unused": "x"}) == "/tags"

    def test_param_prefix_of_placeholder_ignored(self):
        """A param named after a placeholder prefix leaves it intact."""
        assert interpolate_path("/opportunities/:opportunity", {"opp": "x"}) == (
            "/opportunities/:opportunity"
        )

    def test_prefix_param_does_not_clobber_longer_placeholder(self):
        """Each param fills only the placeholder with its exact name."""
        path = interpolate_path(
            "/opportunities/:opportunityId/notes/:opportunity",
            {"opportunity": "o1", "opportunityId": "o2"},
        )
        assert path == "/opportunities/o2/notes/o1"

    def test_none_params(self):
        """None params leave the template untouched."""
        assert interpolate_path("/tags", None) == "/tags"

    def test_non_string_value_stringified(self):
        """Values are converted with str() before encoding."""
        assert interpolate_path("/x/:id", {"id": 42}) == "/x/42"


class TestCheckPathParams:
    """Tests for strict placeholder checking."""

    descriptor = EndpointDescriptor(
        method="GET", path="/opportunities/:opportunity/notes/:note"
    )

    def test_exact_match_passes(self):
        """Matching params raise nothing."""
        check_path_params(self.descriptor, {"opportunity": "o", "note": "n"})

    def test_missing_placeholder(self):
        """A missing param is reported."""
        with pytest.raises(PathParameterError) as exc_info:
            check_path_params(self.descriptor, {"opportunity": "o"})
        assert exc_info.value.missing == ("note",)
        assert exc_info.value.unused == ()

    def test_unused_param(self):
        """An extra param is reported."""
        with pytest.raises(PathParameterError) as exc_info:
            check_path_params(
                self.descriptor, {"opportunity": "o", "note": "n", "posting": "p"}
            )
        assert exc_info.value.unused == ("posting",)


class TestSerializeQuery:
    """Tests for serialize_query."""

    def test_none_and_empty(self):
        """No query yields an empty string."""
        assert serialize_query(None) == ""
        assert serialize_query({}) == ""

    def test_none_values_dropped(self):
        """Keys with None values are omitted."""
        assert serialize_query({"limit": 10, "tag": None}) == "limit=10"

    def test_all_none_is_empty(self):
        """A query of only None values yields an empty string."""
        assert serialize_query({"tag": None, "email": None}) == ""

    def test_booleans_lowercase(self):
        """Booleans render as true/false."""
        assert serialize_query({"archived": True, "snoozed": False}) == (
            "archived=true&snoozed=false"
        )

    def test_integral_float(self):
        """Integral floats render without a fractional part."""
        assert serialize_query({"created_at_start": 1700000000000.0}) == (
            "created_at_start=1700000000000"
        )
        assert serialize_query({"x": 1.5}) == "x=1.5"

    def test_values_encoded(self):
        """Keys and values are form-encoded."""
        assert serialize_query({"email": "a+b@example.com", "tag": "big data"}) == (
            "email=a%2Bb%40example.com&tag=big+data"
        )

    def test_each_key_once(self):
        """Every non-None key appears exactly once, in insertion order."""
        qs = serialize_query({"limit": 5, "offset": "abc", "expand": "owner"})
        assert qs.split("&") == ["limit=5", "offset=abc", "expand=owner"]


class TestBuildUrl:
    """Tests for build_url."""

    def test_without_query(self):
        """No '?' is appended for an empty query string."""
        assert build_url("https://api.lever.co/v1", "/tags") == (
            "https://api.lever.co/v1/tags"
        )

    def test_with_query(self):
        """The query string follows a '?'."""
        assert build_url("https://api.lever.co/v1", "/tags", "limit=1") == (
            "https://api.lever.co/v1/tags?limit=1"
        )


class TestBuildHeaders:
    """Tests for build_headers and basic_auth_header."""

    def test_basic_auth_has_empty_password(self):
        """Authorization decodes to '<credential>:'."""
        header = basic_auth_header("my-key")
        scheme, token = header.split(" ")
        assert scheme == "Basic"
        username, password = base64.b64decode(token).decode().split(":", 1)
        assert username == "my-key"
        assert password == ""

    def test_get_has_no_content_type(self):
        """GET requests carry only Authorization."""
        headers = build_headers("k", HttpMethod.GET)
        assert set(headers) == {"Authorization"}

    @pytest.mark.parametrize("method", [HttpMethod.POST, HttpMethod.PUT, HttpMethod.DELETE])
    def test_non_get_sets_json_content_type(self, method):
        """Non-GET requests declare a JSON body."""
        assert build_headers("k", method)["Content-Type"] == "application/json"

    def test_override_adds_header(self):
        """Override headers are added."""
        headers = build_headers("k", HttpMethod.GET, {"X-Trace": "1"})
        assert headers["X-Trace"] == "1"
        assert "Authorization" in headers

    def test_override_replaces_case_insensitively(self):
        """Overrides win over computed headers regardless of case."""
        headers = build_headers(
            "k",
            HttpMethod.POST,
            {"authorization": "Bearer other", "content-type": "text/plain"},
        )
        assert headers == {"authorization": "Bearer other", "content-type": "text/plain"}


class TestEncodeBody:
    """Tests for encode_body."""

    def test_get_never_has_body(self):
        """GET ignores any body."""
        assert encode_body(HttpMethod.GET, {"tags": ["a"]}) is None

    def test_absent_body(self):
        """No body yields no content."""
        assert encode_body(HttpMethod.POST, None) is None

    def test_compact_json(self):
        """Bodies are serialized as compact JSON."""
        assert encode_body(HttpMethod.POST, {"tags": ["a", "b"]}) == '{"tags":["a","b"]}'

    def test_empty_mapping_is_sent(self):
        """An empty body is still serialized."""
        assert encode_body(HttpMethod.PUT, {}) == "{}"

    def test_non_ascii_kept(self):
        """Non-ASCII text is not escaped."""
        assert encode_body(HttpMethod.POST, {"value": "café"}) == '{"value":"café"}'

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_floats_rejected(self, value):
        """NaN and infinities are not valid JSON and are refused."""
        with pytest.raises(ValueError):
            encode_body(HttpMethod.POST, {"score": value})

    def test_pydantic_model_dumped_by_alias(self):
        """Pydantic bodies use wire names and skip None fields."""
        encoded = encode_body(HttpMethod.POST, Note(id="n1", created_at=3))
        assert json.loads(encoded) == {"id": "n1", "createdAt": 3, "fields": []}

    def test_plain_model(self):
        """Any BaseModel is accepted."""

        class Body(BaseModel):
            stage: str

        assert encode_body(HttpMethod.PUT, Body(stage="s1")) == '{"stage":"s1"}'
