# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Interview endpoints."""

from typing import Any

from typing_extensions import NotRequired, TypedDict

from ..endpoint import Endpoint, create_endpoint
from ..types.resources import DataResponse, Interview, ListResponse
from .common import Empty, ListQuery, OpportunityParams, PerformAsQuery


class InterviewParams(TypedDict):
    opportunity: str
    interview: str


RetrieveInterviewParams = InterviewParams
ListInterviewsParams = OpportunityParams
ListInterviewsQuery = ListQuery
CreateInterviewParams = OpportunityParams
CreateInterviewQuery = PerformAsQuery


class InterviewerAssignment(TypedDict):
    id: str
    feedbackTemplate: str


class CreateInterviewBody(TypedDict):
    panel: str
    subject: NotRequired[str]
    note: NotRequired[str]
    interviewers: list[InterviewerAssignment]
    date: int
    duration: int
    location: NotRequired[str]
    feedbackTemplate: NotRequired[str]
    feedbackReminder: NotRequired[str]


class UpdateInterviewBody(TypedDict, total=False):
    panel: str
    subject: str
    note: str
    interviewers: list[InterviewerAssignment]
    date: int
    duration: int
    location: str
    feedbackTemplate: str
    feedbackReminder: str


UpdateInterviewParams = InterviewParams
UpdateInterviewQuery = PerformAsQuery
DeleteInterviewParams = InterviewParams
DeleteInterviewQuery = PerformAsQuery


retrieve_interview: Endpoint[
    RetrieveInterviewParams, Empty, Empty, DataResponse[Interview]
] = create_endpoint(
    "GET",
    "/opportunities/:opportunity/interviews/:interview",
    DataResponse[Interview],
    name="retrieve_interview",
)

list_interviews: Endpoint[
    ListInterviewsParams, ListInterviewsQuery, Empty, ListResponse[Interview]
] = create_endpoint(
    "GET",
    "/opportunities/:opportunity/interviews",
    ListResponse[Interview],
    name="list_interviews",
)

create_interview: Endpoint[
    CreateInterviewParams,
    CreateInterviewQuery,
    CreateInterviewBody,
    DataResponse[Interview],
] = create_endpoint(
    "POST",
    "/opportunities/:opportunity/interviews",
    DataResponse[Interview],
    name="create_interview",
)

update_interview: Endpoint[
    UpdateInterviewParams,
    UpdateInterviewQuery,
    UpdateInterviewBody,
    DataResponse[Interview],
] = create_endpoint(
    "PUT",
    "/opportunities/:opportunity/interviews/:interview",
    DataResponse[Interview],
    name="update_interview",
)

delete_interview: Endpoint[
    DeleteInterviewParams, DeleteInterviewQuery, Empty, dict[str, Any]
] = create_endpoint(
    "DELETE",
    "/opportunities/:opportunity/interviews/:interview",
    dict[str, Any],
    name="delete_interview",
)


__all__ = [
    "CreateInterviewBody",
    "CreateInterviewParams",
    "CreateInterviewQuery",
    "DeleteInterviewParams",
    "DeleteInterviewQuery",
    "ListInterviewsParams",
    "ListInterviewsQuery",
    "RetrieveInterviewParams",
    "UpdateInterviewBody",
    "UpdateInterviewParams",
    "UpdateInterviewQuery",
    "create_interview",
    "delete_interview",
    "list_interviews",
    "retrieve_interview",
    "update_interview",
]
