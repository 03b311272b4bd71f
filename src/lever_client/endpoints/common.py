# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Payload shapes shared by several endpoint families."""

from typing_extensions import TypedDict


class Empty(TypedDict):
    """Shape for an endpoint that takes no params, query or body of a kind."""


class ListQuery(TypedDict, total=False):
    """
    Pagination and expansion query params accepted by list endpoints.

    To fetch the next page, pass the previous response's ``next`` value as
    ``offset``.
    """

    limit: int
    offset: str
    expand: str


class OpportunityParams(TypedDict):
    opportunity: str


class PerformAsQuery(TypedDict, total=False):
    """Perform the write on behalf of a specified user."""

    perform_as: str


__all__ = ["Empty", "ListQuery", "OpportunityParams", "PerformAsQuery"]
