"""Domain models used by the proximity ranking pipeline."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional

from localelend.domain.listings.geo import GeoPoint


class ItemCategory(str, Enum):
	TOOLS = "Tools"
	ELECTRONICS = "Electronics"
	KITCHEN = "Kitchen"
	OUTDOOR = "Outdoor"
	BOOKS = "Books"
	SPORTS = "Sports"


class ItemStatus(str, Enum):
	AVAILABLE = "available"
	LENDED = "lended"
	UNAVAILABLE = "unavailable"


class SortKey(str, Enum):
	DISTANCE = "distance"
	NEWEST = "newest"
	POPULAR = "popular"


@dataclass(frozen=True, slots=True)
class ListableItem:
	"""Read-only projection of an item record; the store owns the original."""

	id: str
	location: Optional[GeoPoint]
	category: ItemCategory
	status: ItemStatus
	created_at: datetime
	borrow_count: int = 0
	title: str = ""
	distance_meters: Optional[int] = None

	@property
	def is_available(self) -> bool:
		return self.status is ItemStatus.AVAILABLE

	def with_distance(self, meters: int) -> "ListableItem":
		return replace(self, distance_meters=meters)


@dataclass(frozen=True, slots=True)
class RankOptions:
	category: Optional[ItemCategory] = None
	max_distance_meters: Optional[float] = None
	sort_key: SortKey = SortKey.NEWEST
	query: Optional[str] = None
	limit: Optional[int] = None
