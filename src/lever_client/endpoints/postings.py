# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Posting endpoints (read-only)."""

from typing import Literal

from typing_extensions import TypedDict

from ..endpoint import Endpoint, create_endpoint
from ..types.resources import DataResponse, ListResponse, Posting
from .common import Empty, ListQuery


class RetrievePostingParams(TypedDict):
    posting: str


class ListPostingsQuery(ListQuery, total=False):
    state: Literal["published", "internal", "closed", "draft", "pending", "rejected"]
    distribution: Literal["internal", "external"]
    team: str
    department: str
    location: str
    commitment: str
    level: str
    tag: str
    group: str
    confidentiality: str
    updated_at_start: int
    updated_at_end: int


retrieve_posting: Endpoint[
    RetrievePostingParams, Empty, Empty, DataResponse[Posting]
] = create_endpoint(
    "GET", "/postings/:posting", DataResponse[Posting], name="retrieve_posting"
)

list_postings: Endpoint[
    Empty, ListPostingsQuery, Empty, ListResponse[Posting]
] = create_endpoint(
    "GET", "/postings", ListResponse[Posting], name="list_postings"
)


__all__ = [
    "ListPostingsQuery",
    "RetrievePostingParams",
    "list_postings",
    "retrieve_posting",
]
