# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Lever endpoint declarations.

Each endpoint is an async callable created with create_endpoint(). They are
grouped by resource family:

- applications: retrieve, list, apply to posting
- interviews: retrieve, list, create, update, delete
- notes: retrieve, list, create, update, delete
- opportunities: retrieve, list, create, stage/archive updates, links, tags, sources
- stages: stages and tags
- postings, panels (with offers), feedback (with templates)
- account: archive reasons, audit events

ENDPOINTS maps every endpoint name to its Endpoint object.
"""

from typing import Any

from ..endpoint import Endpoint
from .account import list_archive_reasons, list_audit_events
from .applications import (
    apply_to_posting,
    create_application,
    list_applications,
    retrieve_application,
)
from .feedback import list_feedback, list_feedback_templates, retrieve_feedback
from .interviews import (
    create_interview,
    delete_interview,
    list_interviews,
    retrieve_interview,
    update_interview,
)
from .notes import create_note, delete_note, list_notes, retrieve_note, update_note
from .opportunities import (
    add_contact_links_by_opportunity,
    add_opportunity_sources,
    add_opportunity_tags,
    create_opportunity,
    list_deleted_opportunities,
    list_opportunities,
    remove_contact_links_by_opportunity,
    remove_opportunity_sources,
    remove_opportunity_tags,
    retrieve_opportunity,
    update_opportunity_archived_state,
    update_opportunity_stage,
)
from .panels import list_offers, list_panels, retrieve_panel
from .postings import list_postings, retrieve_posting
from .stages import get_stage, get_stages, get_tags

ENDPOINTS: dict[str, Endpoint[Any, Any, Any, Any]] = {
    endpoint.name: endpoint
    for endpoint in (
        retrieve_application,
        list_applications,
        apply_to_posting,
        retrieve_interview,
        list_interviews,
        create_interview,
        update_interview,
        delete_interview,
        retrieve_note,
        list_notes,
        create_note,
        update_note,
        delete_note,
        retrieve_opportunity,
        list_opportunities,
        list_deleted_opportunities,
        create_opportunity,
        update_opportunity_stage,
        update_opportunity_archived_state,
        add_contact_links_by_opportunity,
        remove_contact_links_by_opportunity,
        add_opportunity_tags,
        remove_opportunity_tags,
        add_opportunity_sources,
        remove_opportunity_sources,
        get_stage,
        get_stages,
        get_tags,
        retrieve_posting,
        list_postings,
        list_panels,
        retrieve_panel,
        list_offers,
        list_feedback,
        retrieve_feedback,
        list_feedback_templates,
        list_archive_reasons,
        list_audit_events,
    )
}

__all__ = [
    "ENDPOINTS",
    "add_contact_links_by_opportunity",
    "add_opportunity_sources",
    "add_opportunity_tags",
    "apply_to_posting",
    "create_application",
    "create_interview",
    "create_note",
    "create_opportunity",
    "delete_interview",
    "delete_note",
    "get_stage",
    "get_stages",
    "get_tags",
    "list_applications",
    "list_archive_reasons",
    "list_audit_events",
    "list_deleted_opportunities",
    "list_feedback",
    "list_feedback_templates",
    "list_interviews",
    "list_notes",
    "list_offers",
    "list_opportunities",
    "list_panels",
    "list_postings",
    "remove_contact_links_by_opportunity",
    "remove_opportunity_sources",
    "remove_opportunity_tags",
    "retrieve_application",
    "retrieve_feedback",
    "retrieve_interview",
    "retrieve_note",
    "retrieve_opportunity",
    "retrieve_panel",
    "retrieve_posting",
    "update_interview",
    "update_note",
    "update_opportunity_archived_state",
    "update_opportunity_stage",
]
