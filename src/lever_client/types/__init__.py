# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Type definitions: endpoint descriptors, call payloads and resource models."""

from .endpoint import EndpointDescriptor, HttpMethod
from .payload import CallPayload, QueryValue, TransportOverrides
from .resources import (
    Application,
    ArchiveReason,
    AuditEvent,
    Contact,
    DataResponse,
    Feedback,
    FeedbackTemplate,
    FileObject,
    Interview,
    ListResponse,
    Note,
    Offer,
    Opportunity,
    Panel,
    Posting,
)

__all__ = [
    # Resources
    "Application",
    "ArchiveReason",
    "AuditEvent",
    # Payloads
    "CallPayload",
    "Contact",
    "DataResponse",
    # Endpoints
    "EndpointDescriptor",
    "Feedback",
    "FeedbackTemplate",
    "FileObject",
    "HttpMethod",
    "Interview",
    "ListResponse",
    "Note",
    "Offer",
    "Opportunity",
    "Panel",
    "Posting",
    "QueryValue",
    "TransportOverrides",
]
