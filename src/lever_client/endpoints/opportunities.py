# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Opportunity endpoints.

Covers reading, listing and creating opportunities, plus the write-only
sub-resources for stage, archive state, contact links, tags and sources.
The write-only endpoints return an untyped body.
"""

from typing import Any, Literal

from typing_extensions import NotRequired, TypedDict

from ..endpoint import Endpoint, create_endpoint
from ..types.resources import DataResponse, ListResponse, Opportunity
from .common import Empty, ListQuery, OpportunityParams

RetrieveOpportunityParams = OpportunityParams


class ListOpportunitiesQuery(ListQuery, total=False):
    include: str
    tag: str
    email: str
    origin: str
    source: str
    confidentiality: str
    stage_id: str
    posting_id: str
    archived_posting_id: str
    created_at_start: int
    created_at_end: int
    updated_at_start: int
    updated_at_end: int
    advanced_at_start: int
    advanced_at_end: int
    archived: bool
    archive_reason_id: str
    snoozed: bool
    contact_id: str


class ListDeletedOpportunitiesQuery(TypedDict, total=False):
    deleted_at_start: int
    deleted_at_end: int


class CreateOpportunityQuery(TypedDict):
    perform_as: str
    parse: NotRequired[bool]
    perform_as_posting_owner: NotRequired[bool]


class OpportunityPhone(TypedDict):
    value: str
    type: NotRequired[Literal["mobile", "home", "work", "skype", "other"]]


class ArchivedState(TypedDict):
    # Milliseconds since epoch, defaults to now
    archivedAt: NotRequired[int]
    reason: str


class CreateOpportunityBody(TypedDict):
    name: str
    headline: str
    stage: NotRequired[str]
    location: str
    phones: NotRequired[list[OpportunityPhone]]
    emails: list[str]
    links: list[str]
    tags: list[str]
    sources: list[str]
    origin: Literal["agency", "applied", "internal", "referred", "sourced", "university"]
    owner: NotRequired[str]
    followers: NotRequired[list[str]]
    # Only one posting per request
    postings: list[str]
    createdAt: NotRequired[int]
    archived: NotRequired[ArchivedState]
    contact: NotRequired[str]


class UpdateOpportunityStageBody(TypedDict):
    stage: str


class UpdateOpportunityArchivedStateBody(TypedDict):
    reason: str
    cleanInterviews: NotRequired[bool]
    requisitionId: NotRequired[str]


class ContactLinksBody(TypedDict):
    links: list[str]


class TagsBody(TypedDict):
    tags: list[str]


class SourcesBody(TypedDict):
    sources: list[str]


retrieve_opportunity: Endpoint[
    RetrieveOpportunityParams, Empty, Empty, DataResponse[Opportunity]
] = create_endpoint(
    "GET",
    "/opportunities/:opportunity",
    DataResponse[Opportunity],
    name="retrieve_opportunity",
)

list_opportunities: Endpoint[
    Empty, ListOpportunitiesQuery, Empty, ListResponse[Opportunity]
] = create_endpoint(
    "GET",
    "/opportunities",
    ListResponse[Opportunity],
    name="list_opportunities",
)

list_deleted_opportunities: Endpoint[
    Empty, ListDeletedOpportunitiesQuery, Empty, ListResponse[Opportunity]
] = create_endpoint(
    "GET",
    "/opportunities/deleted",
    ListResponse[Opportunity],
    name="list_deleted_opportunities",
)

create_opportunity: Endpoint[
    Empty, CreateOpportunityQuery, CreateOpportunityBody, DataResponse[Opportunity]
] = create_endpoint(
    "POST",
    "/opportunities",
    DataResponse[Opportunity],
    name="create_opportunity",
)

update_opportunity_stage: Endpoint[
    OpportunityParams, Empty, UpdateOpportunityStageBody, dict[str, Any]
] = create_endpoint(
    "PUT",
    "/opportunities/:opportunity/stage",
    dict[str, Any],
    name="update_opportunity_stage",
)

update_opportunity_archived_state: Endpoint[
    OpportunityParams, Empty, UpdateOpportunityArchivedStateBody, dict[str, Any]
] = create_endpoint(
    "PUT",
    "/opportunities/:opportunity/archived",
    dict[str, Any],
    name="update_opportunity_archived_state",
)

add_contact_links_by_opportunity: Endpoint[
    OpportunityParams, Empty, ContactLinksBody, dict[str, Any]
] = create_endpoint(
    "POST",
    "/opportunities/:opportunity/addLinks",
    dict[str, Any],
    name="add_contact_links_by_opportunity",
)

remove_contact_links_by_opportunity: Endpoint[
    OpportunityParams, Empty, ContactLinksBody, dict[str, Any]
] = create_endpoint(
    "POST",
    "/opportunities/:opportunity/removeLinks",
    dict[str, Any],
    name="remove_contact_links_by_opportunity",
)

add_opportunity_tags: Endpoint[
    OpportunityParams, Empty, TagsBody, dict[str, Any]
] = create_endpoint(
    "POST",
    "/opportunities/:opportunity/addTags",
    dict[str, Any],
    name="add_opportunity_tags",
)

remove_opportunity_tags: Endpoint[
    OpportunityParams, Empty, TagsBody, dict[str, Any]
] = create_endpoint(
    "POST",
    "/opportunities/:opportunity/removeTags",
    dict[str, Any],
    name="remove_opportunity_tags",
)

add_opportunity_sources: Endpoint[
    OpportunityParams, Empty, SourcesBody, dict[str, Any]
] = create_endpoint(
    "POST",
    "/opportunities/:opportunity/addSources",
    dict[str, Any],
    name="add_opportunity_sources",
)

remove_opportunity_sources: Endpoint[
    OpportunityParams, Empty, SourcesBody, dict[str, Any]
] = create_endpoint(
    "POST",
    "/opportunities/:opportunity/removeSources",
    dict[str, Any],
    name="remove_opportunity_sources",
)


__all__ = [
    "ArchivedState",
    "ContactLinksBody",
    "CreateOpportunityBody",
    "CreateOpportunityQuery",
    "ListDeletedOpportunitiesQuery",
    "ListOpportunitiesQuery",
    "OpportunityPhone",
    "RetrieveOpportunityParams",
    "SourcesBody",
    "TagsBody",
    "UpdateOpportunityArchivedStateBody",
    "UpdateOpportunityStageBody",
    "add_contact_links_by_opportunity",
    "add_opportunity_sources",
    "add_opportunity_tags",
    "create_opportunity",
    "list_deleted_opportunities",
    "list_opportunities",
    "remove_contact_links_by_opportunity",
    "remove_opportunity_sources",
    "remove_opportunity_tags",
    "retrieve_opportunity",
    "update_opportunity_archived_state",
    "update_opportunity_stage",
]
