# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Lever resource models.

Pydantic models mirroring the JSON objects returned by the Lever API. Fields
are snake_case in Python and camelCase on the wire. Models are lenient: only
``id`` is required and unknown fields are preserved, so that additions on the
remote side do not break validation.

The executor returns plain decoded JSON. These models are used only when
response validation is requested.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class LeverModel(BaseModel):
    """Base model for Lever payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class LeverResource(LeverModel):
    """A Lever object identified by a UID."""

    id: str


# === Envelopes ===


class DataResponse(LeverModel, Generic[T]):
    """Single-object response: ``{"data": {...}}``."""

    data: T


class ListResponse(LeverModel, Generic[T]):
    """
    Paginated list response.

    When ``has_next`` is true, pass ``next`` as the ``offset`` query parameter
    of the following call to fetch the next page.
    """

    data: list[T] = Field(default_factory=list)
    has_next: bool = False
    next: str | None = None


# === Shared fragments ===


class Phone(LeverModel):
    type: str | None = None
    value: str


class TextOption(LeverModel):
    text: str


class UserRef(LeverModel):
    id: str
    email: str | None = None
    name: str | None = None
    role: str | None = None


class Interviewer(LeverModel):
    id: str
    email: str | None = None
    name: str | None = None
    feedback_template: str | None = None


class FormField(LeverModel):
    """A field of a form, feedback form, note or custom question."""

    id: str | None = None
    type: str | None = None
    text: str | None = None
    description: str | None = None
    required: bool | None = None
    value: Any = None
    prompt: str | None = None
    options: list[TextOption] | None = None
    is_summary: bool | None = None
    summary_text: str | None = None


class Document(LeverModel):
    file_name: str | None = None
    uploaded_at: int | None = None
    download_url: str | None = None


class Urls(LeverModel):
    list_url: str | None = Field(default=None, alias="list")
    show: str | None = None
    apply: str | None = None


# === Resources ===


class CustomQuestion(LeverModel):
    account_id: str | None = None
    created_at: int | None = None
    text: str | None = None
    description: str | None = None
    type: str | None = None
    fields: list[FormField] = Field(default_factory=list)
    base_template_id: str | None = None
    referrer_id: str | None = None
    user_id: str | None = None
    user: str | None = None
    stage: Any = None
    completed_at: int | None = None


class RequisitionForHire(LeverModel):
    id: str
    requisition_code: str | None = None
    hiring_manager_on_hire: str | None = None


class Application(LeverResource):
    """An application linking an opportunity to a posting."""

    opportunity_id: str | None = None
    candidate_id: str | None = None
    created_at: int | None = None
    type: str | None = None
    posting: str | None = None
    user: str | None = None
    name: str | None = None
    email: str | None = None
    phone: Phone | None = None
    company: Any = None
    links: Any = None
    comments: str | None = None
    resume: Any = None
    custom_questions: list[CustomQuestion] | None = None
    requisition_for_hire: RequisitionForHire | None = None
    owner_id: str | None = None
    hiring_manager: str | None = None


class ArchiveReason(LeverResource):
    text: str | None = None
    status: str | None = None
    type: str | None = None


class AuditTarget(LeverModel):
    id: str | None = None
    type: str | None = None
    label: str | None = None


class AuditAuthenticationError(LeverModel):
    message: str | None = None
    type: str | None = None


class AuditAuthentication(LeverModel):
    method: str | None = None
    error: AuditAuthenticationError | None = None


class AuditMeta(LeverModel):
    authentication: AuditAuthentication | None = None
    user: UserRef | None = None


class AuditEvent(LeverResource):
    """An account audit log entry."""

    created_at: int | None = None
    type: str | None = None
    user: UserRef | None = None
    target: AuditTarget | None = None
    meta: AuditMeta | None = None


class ContactLocation(LeverModel):
    name: str | None = None


class Contact(LeverResource):
    name: str | None = None
    headline: str | None = None
    is_anonymized: bool | None = None
    location: ContactLocation | None = None
    emails: list[str] = Field(default_factory=list)
    phones: list[Phone] = Field(default_factory=list)


class Feedback(LeverResource):
    """A completed interview feedback form."""

    type: str | None = None
    text: str | None = None
    instructions: str | None = None
    fields: list[FormField] = Field(default_factory=list)
    base_template_id: str | None = None
    interview: str | None = None
    panel: str | None = None
    user: str | None = None
    created_at: int | None = None
    updated_at: int | None = None
    completed_at: int | None = None
    deleted_at: int | None = None


class TemplateGroup(LeverModel):
    id: str
    name: str | None = None


class StageRef(LeverModel):
    id: str
    text: str | None = None


class FeedbackTemplate(LeverResource):
    text: str | None = None
    group: TemplateGroup | None = None
    created_at: int | None = None
    updated_at: int | None = None
    instructions: str | None = None
    stage: StageRef | None = None
    fields: list[FormField] = Field(default_factory=list)


class FileObject(LeverResource):
    download_url: str | None = None
    ext: str | None = None
    name: str | None = None
    uploaded_at: int | str | None = None
    status: str | None = None
    size: int | str | None = None


class Interview(LeverResource):
    panel: str | None = None
    subject: str | None = None
    note: str | None = None
    interviewers: list[Interviewer] = Field(default_factory=list)
    timezone: str | None = None
    created_at: int | None = None
    date: int | None = None
    duration: int | None = None
    location: str | None = None
    feedback_template: str | None = None
    feedback_forms: list[str] = Field(default_factory=list)
    feedback_reminder: str | None = None
    user: str | None = None
    stage: str | None = None
    canceled_at: Any = None
    postings: list[str] = Field(default_factory=list)


class NoteField(LeverModel):
    type: str | None = None
    text: str | None = None
    value: Any = None
    created_at: int | None = None
    user: str | None = None
    score: int | None = None
    stage: str | None = None


class Note(LeverResource):
    text: str | None = None
    fields: list[NoteField] = Field(default_factory=list)
    user: str | None = None
    secret: bool | None = None
    completed_at: int | None = None
    created_at: int | None = None
    deleted_at: int | None = None


class OfferField(LeverModel):
    text: str | None = None
    identifier: str | None = None
    value: Any = None


class Offer(LeverResource):
    created_at: int | None = None
    status: str | None = None
    creator: str | None = None
    fields: list[OfferField] = Field(default_factory=list)
    sent_document: Document | None = None
    signed_document: Document | None = None


class StageChange(LeverModel):
    to_stage_id: str | None = None
    to_stage_index: int | None = None
    user_id: str | None = None
    updated_at: int | None = None


class DataProtectionEntry(LeverModel):
    allowed: bool | None = None
    expires_at: int | None = None


class DataProtection(LeverModel):
    store: DataProtectionEntry | None = None
    contact: DataProtectionEntry | None = None


class Opportunity(LeverResource):
    """A candidate's progression through the pipeline."""

    name: str | None = None
    headline: str | None = None
    contact: str | None = None
    emails: list[str] = Field(default_factory=list)
    phones: list[Phone] = Field(default_factory=list)
    confidentiality: str | None = None
    location: str | None = None
    links: list[str] = Field(default_factory=list)
    created_at: int | None = None
    updated_at: int | None = None
    last_interaction_at: int | None = None
    last_advanced_at: int | None = None
    snoozed_until: int | None = None
    archived_at: Any = None
    archive_reason: Any = None
    stage: Any = None
    stage_changes: list[StageChange] | None = None
    owner: Any = None
    tags: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    origin: str | None = None
    sourced_by: Any = None
    applications: list[Any] = Field(default_factory=list)
    resume: Any = None
    followers: list[Any] = Field(default_factory=list)
    urls: Urls | None = None
    data_protection: DataProtection | None = None
    is_anonymized: bool | None = None


class PanelInterview(LeverModel):
    id: str
    date: int | None = None
    duration: int | None = None
    feedback_reminder: str | None = None
    feedback_template: str | None = None
    interviewers: list[Interviewer] = Field(default_factory=list)
    location: str | None = None
    note: str | None = None
    subject: str | None = None


class Panel(LeverResource):
    applications: list[str] = Field(default_factory=list)
    canceled_at: Any = None
    created_at: int | None = None
    end: int | None = None
    externally_managed: bool | None = None
    external_url: str | None = None
    interviews: list[PanelInterview] = Field(default_factory=list)
    note: str | None = None
    stage: str | None = None
    start: int | None = None
    timezone: str | None = None
    user: str | None = None


class PostingCategories(LeverModel):
    team: str | None = None
    department: str | None = None
    location: str | None = None
    all_locations: list[str] = Field(default_factory=list)
    commitment: str | None = None
    level: str | None = None


class PostingList(LeverModel):
    text: str | None = None
    content: str | None = None


class PostingContent(LeverModel):
    description: str | None = None
    description_html: str | None = None
    lists: list[PostingList] = Field(default_factory=list)
    closing: str | None = None
    closing_html: str | None = None


class SalaryRange(LeverModel):
    max: float | None = None
    min: float | None = None
    currency: str | None = None
    interval: str | None = None


class Posting(LeverResource):
    """A job posting."""

    text: str | None = None
    created_at: int | None = None
    updated_at: int | None = None
    user: str | None = None
    owner: str | None = None
    hiring_manager: str | None = None
    confidentiality: str | None = None
    categories: PostingCategories | None = None
    content: PostingContent | None = None
    country: str | None = None
    tags: list[Any] = Field(default_factory=list)
    state: str | None = None
    distribution_channels: list[str] = Field(default_factory=list)
    req_code: str | None = None
    requisition_codes: list[str] = Field(default_factory=list)
    salary_description: str | None = None
    salary_description_html: str | None = None
    salary_range: SalaryRange | None = None
    urls: Urls | None = None
    workplace_type: str | None = None


__all__ = [
    "Application",
    "ArchiveReason",
    "AuditEvent",
    "Contact",
    "DataResponse",
    "Feedback",
    "FeedbackTemplate",
    "FileObject",
    "FormField",
    "Interview",
    "Interviewer",
    "LeverModel",
    "LeverResource",
    "ListResponse",
    "Note",
    "Offer",
    "Opportunity",
    "Panel",
    "Phone",
    "Posting",
]
