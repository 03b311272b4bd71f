# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Application endpoints."""

from typing import Any, Literal

from typing_extensions import NotRequired, TypedDict

from ..endpoint import Endpoint, create_endpoint
from ..types.resources import Application, DataResponse, ListResponse
from .common import Empty, ListQuery, OpportunityParams


class RetrieveApplicationParams(TypedDict):
    opportunity: str
    application: str


ListApplicationsParams = OpportunityParams
ListApplicationsQuery = ListQuery


class ApplyToPostingParams(TypedDict):
    posting: str


class ApplyToPostingQuery(TypedDict, total=False):
    send_confirmation_email: Literal["true", "false"] | bool


class CustomQuestionAnswer(TypedDict):
    id: str
    fields: list[dict[str, Any]]


class EeoResponses(TypedDict):
    gender: str
    race: str
    veteran: str
    disability: str
    disabilitySignature: str
    disabilitySignatureDate: str


class DiversitySurveyResponse(TypedDict):
    questionId: str
    questionText: str
    questionType: str
    answer: str


class DiversitySurvey(TypedDict):
    surveyId: str
    candidateSelectedLocation: str
    responses: list[DiversitySurveyResponse]


class NameValue(TypedDict):
    name: str
    value: str


class ApplyToPostingBody(TypedDict):
    customQuestions: list[CustomQuestionAnswer]
    eeoResponses: EeoResponses
    diversitySurvey: NotRequired[DiversitySurvey]
    ipAddress: NotRequired[str]
    source: NotRequired[str]
    consent: NotRequired[dict[str, bool]]
    origin: NotRequired[str]
    personalInformation: NotRequired[list[NameValue]]
    urls: list[NameValue]


retrieve_application: Endpoint[
    RetrieveApplicationParams, Empty, Empty, DataResponse[Application]
] = create_endpoint(
    "GET",
    "/opportunities/:opportunity/applications/:application",
    DataResponse[Application],
    name="retrieve_application",
)

list_applications: Endpoint[
    ListApplicationsParams, ListApplicationsQuery, Empty, ListResponse[Application]
] = create_endpoint(
    "GET",
    "/opportunities/:opportunity/applications",
    ListResponse[Application],
    name="list_applications",
)

apply_to_posting: Endpoint[
    ApplyToPostingParams,
    ApplyToPostingQuery,
    ApplyToPostingBody,
    DataResponse[Application],
] = create_endpoint(
    "POST",
    "/postings/:posting/apply",
    DataResponse[Application],
    name="apply_to_posting",
)

create_application = apply_to_posting


__all__ = [
    "ApplyToPostingBody",
    "ApplyToPostingParams",
    "ApplyToPostingQuery",
    "ListApplicationsParams",
    "ListApplicationsQuery",
    "RetrieveApplicationParams",
    "apply_to_posting",
    "create_application",
    "list_applications",
    "retrieve_application",
]
