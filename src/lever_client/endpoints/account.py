# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Account-level endpoints: archive reasons and audit events."""

from typing import Literal

from ..endpoint import Endpoint, create_endpoint
from ..types.resources import ArchiveReason, AuditEvent, ListResponse
from .common import Empty, ListQuery


class ListArchiveReasonsQuery(ListQuery, total=False):
    type: Literal["hired", "non-hired"]


class ListAuditEventsQuery(ListQuery, total=False):
    user_id: str
    type: str
    created_at_start: int
    created_at_end: int


list_archive_reasons: Endpoint[
    Empty, ListArchiveReasonsQuery, Empty, ListResponse[ArchiveReason]
] = create_endpoint(
    "GET",
    "/archive_reasons",
    ListResponse[ArchiveReason],
    name="list_archive_reasons",
)

list_audit_events: Endpoint[
    Empty, ListAuditEventsQuery, Empty, ListResponse[AuditEvent]
] = create_endpoint(
    "GET",
    "/audit_events",
    ListResponse[AuditEvent],
    name="list_audit_events",
)


__all__ = [
    "ListArchiveReasonsQuery",
    "ListAuditEventsQuery",
    "list_archive_reasons",
    "list_audit_events",
]
