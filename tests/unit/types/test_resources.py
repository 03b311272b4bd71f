"""
Unit tests for the pydantic resource models.
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from lever_client.types import (
    Application,
    DataResponse,
    Interview,
    ListResponse,
    Note,
    Opportunity,
    Posting,
)


class TestLeverModelAliases:
    """Tests for camelCase wire names and snake_case attributes."""

    def test_parses_camel_case(self):
        """camelCase keys populate snake_case fields."""
        app = Application.model_validate(
            {"id": "app-1", "opportunityId": "op-1", "createdAt": 1700000000000}
        )
        assert app.opportunity_id == "op-1"
        assert app.created_at == 1700000000000

    def test_accepts_field_names(self):
        """Fields can be populated by their Python names."""
        note = Note(id="n1", created_at=5, secret=True)
        assert note.created_at == 5
        assert note.secret is True

    def test_dump_by_alias(self):
        """Dumping by alias restores the wire names."""
        note = Note(id="n1", completed_at=7)
        dumped = note.model_dump(by_alias=True, exclude_none=True)
        assert dumped["completedAt"] == 7
        assert "completed_at" not in dumped

    def test_unknown_fields_kept(self):
        """Fields the model does not declare are preserved."""
        opp = Opportunity.model_validate({"id": "op-1", "newRemoteField": 42})
        assert opp.model_extra == {"newRemoteField": 42}

    def test_only_id_required(self):
        """Resources require nothing but an id."""
        with pytest.raises(ValidationError):
            Interview.model_validate({"subject": "Onsite"})
        assert Interview.model_validate({"id": "iv-1"}).interviewers == []

    def test_urls_list_alias(self):
        """The 'list' URL maps to list_url."""
        posting = Posting.model_validate(
            {"id": "p1", "urls": {"list": "https://l", "show": "https://s"}}
        )
        assert posting.urls is not None
        assert posting.urls.list_url == "https://l"
        assert posting.urls.show == "https://s"

    def test_nested_models(self):
        """Nested objects are parsed into their models."""
        posting = Posting.model_validate(
            {
                "id": "p1",
                "categories": {"team": "Eng", "allLocations": ["Remote"]},
                "content": {"descriptionHtml": "<p>hi</p>", "lists": [{"text": "Req"}]},
                "salaryRange": {"min": 100, "max": 200, "currency": "USD"},
            }
        )
        assert posting.categories.all_locations == ["Remote"]
        assert posting.content.description_html == "<p>hi</p>"
        assert posting.content.lists[0].text == "Req"
        assert posting.salary_range.max == 200


class TestEnvelopes:
    """Tests for DataResponse and ListResponse."""

    def test_data_response(self):
        """DataResponse wraps a single resource."""
        result = TypeAdapter(DataResponse[Opportunity]).validate_python(
            {"data": {"id": "x"}}
        )
        assert isinstance(result.data, Opportunity)
        assert result.data.id == "x"

    def test_list_response_with_next(self):
        """ListResponse exposes the pagination cursor."""
        result = ListResponse[Note].model_validate(
            {"data": [{"id": "n1"}, {"id": "n2"}], "hasNext": True, "next": "cursor-2"}
        )
        assert [n.id for n in result.data] == ["n1", "n2"]
        assert result.has_next is True
        assert result.next == "cursor-2"

    def test_list_response_last_page(self):
        """The last page has no cursor."""
        result = ListResponse[Note].model_validate({"data": [], "hasNext": False})
        assert result.has_next is False
        assert result.next is None

    def test_data_response_rejects_wrong_shape(self):
        """A list where an object is expected fails validation."""
        with pytest.raises(ValidationError):
            DataResponse[Opportunity].model_validate({"data": [{"id": "x"}]})
