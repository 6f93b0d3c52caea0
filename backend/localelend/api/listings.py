"""REST API surface for browsing nearby listings."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from localelend.api.dependencies import get_listing_service
from localelend.domain.listings.models import ItemCategory, SortKey
from localelend.domain.listings.schemas import NearbyQuery, NearbyResponse, RankedItem
from localelend.domain.listings.service import ListingService
from localelend.settings import settings

router = APIRouter()


def _validated(**params) -> NearbyQuery:
    try:
        return NearbyQuery(**params)
    except ValidationError as exc:
        raise HTTPException(422, exc.errors(include_url=False, include_context=False)) from None


async def _build_search_query(
    lon: Optional[float] = Query(default=None),
    lat: Optional[float] = Query(default=None),
    radius_m: Optional[int] = Query(default=None),
    category: Optional[ItemCategory] = Query(default=None),
    sort: SortKey = Query(default=SortKey.NEWEST),
    q: Optional[str] = Query(default=None),
    limit: int = Query(default=50),
) -> NearbyQuery:
    return _validated(lon=lon, lat=lat, radius_m=radius_m, category=category, sort=sort, q=q, limit=limit)


async def _build_nearby_query(
    lon: Optional[float] = Query(default=None),
    lat: Optional[float] = Query(default=None),
    radius_m: Optional[int] = Query(default=None),
    category: Optional[ItemCategory] = Query(default=None),
    sort: SortKey = Query(default=SortKey.DISTANCE),
    limit: int = Query(default=50),
) -> NearbyQuery:
    radius = radius_m if radius_m is not None else settings.nearby_default_radius_m
    return _validated(lon=lon, lat=lat, radius_m=radius, category=category, sort=sort, limit=limit)


async def _respond(query: NearbyQuery, service: ListingService) -> NearbyResponse:
    ranked = await service.search(query)
    return NearbyResponse(
        items=[RankedItem.from_item(item) for item in ranked],
        total=len(ranked),
        radius=query.radius_m,
        center=service.reference_point(query).to_geojson(),
    )


@router.get("/items", response_model=NearbyResponse)
async def search_items(
    query: NearbyQuery = Depends(_build_search_query),
    service: ListingService = Depends(get_listing_service),
) -> NearbyResponse:
    return await _respond(query, service)


@router.get("/items/nearby", response_model=NearbyResponse)
async def nearby_items(
    query: NearbyQuery = Depends(_build_nearby_query),
    service: ListingService = Depends(get_listing_service),
) -> NearbyResponse:
    return await _respond(query, service)
