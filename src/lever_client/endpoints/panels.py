# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Interview panel and offer endpoints (read-only)."""

from typing_extensions import TypedDict

from ..endpoint import Endpoint, create_endpoint
from ..types.resources import DataResponse, ListResponse, Offer, Panel
from .common import Empty, ListQuery, OpportunityParams


class PanelParams(TypedDict):
    opportunity: str
    panel: str


ListPanelsParams = OpportunityParams
ListPanelsQuery = ListQuery
ListOffersParams = OpportunityParams
ListOffersQuery = ListQuery


list_panels: Endpoint[
    ListPanelsParams, ListPanelsQuery, Empty, ListResponse[Panel]
] = create_endpoint(
    "GET",
    "/opportunities/:opportunity/panels",
    ListResponse[Panel],
    name="list_panels",
)

retrieve_panel: Endpoint[
    PanelParams, Empty, Empty, DataResponse[Panel]
] = create_endpoint(
    "GET",
    "/opportunities/:opportunity/panels/:panel",
    DataResponse[Panel],
    name="retrieve_panel",
)

list_offers: Endpoint[
    ListOffersParams, ListOffersQuery, Empty, ListResponse[Offer]
] = create_endpoint(
    "GET",
    "/opportunities/:opportunity/offers",
    ListResponse[Offer],
    name="list_offers",
)


__all__ = [
    "ListOffersParams",
    "ListOffersQuery",
    "ListPanelsParams",
    "ListPanelsQuery",
    "PanelParams",
    "list_offers",
    "list_panels",
    "retrieve_panel",
]
