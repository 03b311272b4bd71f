# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Note endpoints."""

from typing import Any

from typing_extensions import NotRequired, TypedDict

from ..endpoint import Endpoint, create_endpoint
from ..types.resources import DataResponse, ListResponse, Note
from .common import Empty, ListQuery, OpportunityParams


class NoteParams(TypedDict):
    opportunity: str
    note: str


RetrieveNoteParams = NoteParams
ListNotesParams = OpportunityParams
ListNotesQuery = ListQuery
CreateNoteParams = OpportunityParams


class CreateNoteQuery(TypedDict, total=False):
    perform_as: str
    # Adds a comment to an existing note instead of creating a new one
    note_id: str


class CreateNoteBody(TypedDict):
    value: str
    # Visible only to users with sensitive information privileges
    secret: NotRequired[bool]
    # 1 (strong no) to 4 (strong yes)
    score: NotRequired[int]
    notifyFollowers: NotRequired[bool]
    # Milliseconds since epoch
    createdAt: NotRequired[int]


UpdateNoteParams = NoteParams


class UpdateNoteBody(TypedDict):
    value: list[str]
    user: str
    secret: NotRequired[bool]
    createdAt: NotRequired[int]
    completedAt: NotRequired[int]
    score: NotRequired[int]


DeleteNoteParams = NoteParams


retrieve_note: Endpoint[
    RetrieveNoteParams, Empty, Empty, DataResponse[Note]
] = create_endpoint(
    "GET",
    "/opportunities/:opportunity/notes/:note",
    DataResponse[Note],
    name="retrieve_note",
)

list_notes: Endpoint[
    ListNotesParams, ListNotesQuery, Empty, ListResponse[Note]
] = create_endpoint(
    "GET",
    "/opportunities/:opportunity/notes",
    ListResponse[Note],
    name="list_notes",
)

create_note: Endpoint[
    CreateNoteParams, CreateNoteQuery, CreateNoteBody, DataResponse[Note]
] = create_endpoint(
    "POST",
    "/opportunities/:opportunity/notes",
    DataResponse[Note],
    name="create_note",
)

update_note: Endpoint[
    UpdateNoteParams, Empty, UpdateNoteBody, DataResponse[Note]
] = create_endpoint(
    "PUT",
    "/opportunities/:opportunity/notes/:note",
    DataResponse[Note],
    name="update_note",
)

delete_note: Endpoint[DeleteNoteParams, Empty, Empty, dict[str, Any]] = create_endpoint(
    "DELETE",
    "/opportunities/:opportunity/notes/:note",
    dict[str, Any],
    name="delete_note",
)


__all__ = [
    "CreateNoteBody",
    "CreateNoteParams",
    "CreateNoteQuery",
    "DeleteNoteParams",
    "ListNotesParams",
    "ListNotesQuery",
    "RetrieveNoteParams",
    "UpdateNoteBody",
    "UpdateNoteParams",
    "create_note",
    "delete_note",
    "list_notes",
    "retrieve_note",
    "update_note",
]
