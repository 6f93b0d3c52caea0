"""Pydantic schemas for item records and listing endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from localelend.domain.listings.geo import GeoPoint
from localelend.domain.listings.models import ItemCategory, ItemStatus, ListableItem, SortKey
from localelend.settings import MAX_SEARCH_RADIUS_M


def _utcnow() -> datetime:
	return datetime.now(timezone.utc)


class ItemRecord(BaseModel):
	"""Item document as stored; only the fields ranking reads are modelled."""

	id: str = Field(..., min_length=1)
	title: str = ""
	category: ItemCategory
	location: Optional[GeoPoint] = None
	status: ItemStatus = ItemStatus.AVAILABLE
	created_at: datetime = Field(default_factory=_utcnow, alias="createdAt")
	borrow_count: int = Field(0, ge=0, alias="borrowCount")

	model_config = {"populate_by_name": True, "arbitrary_types_allowed": True, "extra": "ignore"}

	@field_validator("location", mode="before")
	def _parse_location(cls, value: Any) -> Optional[GeoPoint]:
		if value is None or isinstance(value, GeoPoint):
			return value
		if isinstance(value, dict):
			return GeoPoint.from_geojson(value)
		raise ValueError("location must be a GeoJSON point")

	@field_validator("status", mode="before")
	def _default_status(cls, value: Any) -> Any:
		# Older documents carry no status; they were listed as available.
		return value or ItemStatus.AVAILABLE

	@field_validator("borrow_count", mode="before")
	def _default_borrow_count(cls, value: Any) -> Any:
		return 0 if value is None else value

	def to_listable(self) -> ListableItem:
		return ListableItem(
			id=self.id,
			title=self.title,
			location=self.location,
			category=self.category,
			status=self.status,
			created_at=self.created_at,
			borrow_count=self.borrow_count,
		)


class NearbyQuery(BaseModel):
	"""Query parameters for the listing endpoints."""

	lon: Optional[float] = Field(None, ge=-180.0, le=180.0)
	lat: Optional[float] = Field(None, ge=-90.0, le=90.0)
	radius_m: Optional[int] = Field(None, ge=0, le=MAX_SEARCH_RADIUS_M)
	category: Optional[ItemCategory] = None
	sort: SortKey = SortKey.NEWEST
	q: Optional[str] = Field(None, max_length=100)
	limit: int = Field(default=50, ge=1, le=200)

	@model_validator(mode="after")
	def _require_both_coordinates(self) -> "NearbyQuery":
		if (self.lon is None) != (self.lat is None):
			raise ValueError("lon and lat must be given together")
		return self

	def reference_point(self) -> Optional[GeoPoint]:
		if self.lon is None or self.lat is None:
			return None
		return GeoPoint(longitude=self.lon, latitude=self.lat)


class RankedItem(BaseModel):
	id: str
	title: str
	category: ItemCategory
	status: ItemStatus
	location: Optional[dict[str, Any]] = None
	created_at: datetime = Field(alias="createdAt")
	borrow_count: int = Field(alias="borrowCount")
	distance: int = Field(..., ge=0)

	model_config = {"populate_by_name": True}

	@classmethod
	def from_item(cls, item: ListableItem) -> "RankedItem":
		return cls(
			id=item.id,
			title=item.title,
			category=item.category,
			status=item.status,
			location=item.location.to_geojson() if item.location else None,
			created_at=item.created_at,
			borrow_count=item.borrow_count,
			distance=item.distance_meters or 0,
		)


class NearbyResponse(BaseModel):
	items: list[RankedItem]
	total: int
	radius: Optional[int] = None
	center: dict[str, Any]
