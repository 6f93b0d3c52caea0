"""FastAPI dependencies resolving the stores attached to the running app."""

from __future__ import annotations

from fastapi import Request

from localelend.domain.listings.service import ItemRepository, ListingService
from localelend.domain.trust.service import TrustRepository, TrustService


def get_user_repository(request: Request) -> TrustRepository:
    return request.app.state.user_repository


def get_item_repository(request: Request) -> ItemRepository:
    return request.app.state.item_repository


def get_trust_service(request: Request) -> TrustService:
    return TrustService(get_user_repository(request))


def get_listing_service(request: Request) -> ListingService:
    return ListingService(get_item_repository(request))
