# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Feedback and feedback template endpoints (read-only)."""

from typing_extensions import TypedDict

from ..endpoint import Endpoint, create_endpoint
from ..types.resources import DataResponse, Feedback, FeedbackTemplate, ListResponse
from .common import Empty, ListQuery, OpportunityParams


class FeedbackParams(TypedDict):
    opportunity: str
    feedback: str


ListFeedbackParams = OpportunityParams
ListFeedbackQuery = ListQuery
ListFeedbackTemplatesQuery = ListQuery


list_feedback: Endpoint[
    ListFeedbackParams, ListFeedbackQuery, Empty, ListResponse[Feedback]
] = create_endpoint(
    "GET",
    "/opportunities/:opportunity/feedback",
    ListResponse[Feedback],
    name="list_feedback",
)

retrieve_feedback: Endpoint[
    FeedbackParams, Empty, Empty, DataResponse[Feedback]
] = create_endpoint(
    "GET",
    "/opportunities/:opportunity/feedback/:feedback",
    DataResponse[Feedback],
    name="retrieve_feedback",
)

list_feedback_templates: Endpoint[
    Empty, ListFeedbackTemplatesQuery, Empty, ListResponse[FeedbackTemplate]
] = create_endpoint(
    "GET",
    "/feedback_templates",
    ListResponse[FeedbackTemplate],
    name="list_feedback_templates",
)


__all__ = [
    "FeedbackParams",
    "ListFeedbackParams",
    "ListFeedbackQuery",
    "ListFeedbackTemplatesQuery",
    "list_feedback",
    "list_feedback_templates",
    "retrieve_feedback",
]
