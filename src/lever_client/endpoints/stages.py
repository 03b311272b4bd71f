# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Pipeline stage and tag endpoints."""

from typing import Any

from typing_extensions import TypedDict

from ..endpoint import Endpoint, create_endpoint
from .common import Empty


class GetStageParams(TypedDict):
    stage: str


get_stage: Endpoint[
    GetStageParams, Empty, Empty, dict[str, Any]
] = create_endpoint("GET", "/stages/:stage", dict[str, Any], name="get_stage")

get_stages: Endpoint[
    Empty, Empty, Empty, dict[str, Any]
] = create_endpoint("GET", "/stages", dict[str, Any], name="get_stages")

get_tags: Endpoint[
    Empty, Empty, Empty, dict[str, Any]
] = create_endpoint("GET", "/tags", dict[str, Any], name="get_tags")


__all__ = ["GetStageParams", "get_stage", "get_stages", "get_tags"]
