"""Listings domain exports."""

from .geo import DEFAULT_LOCATION, GeoPoint, InvalidCoordinates, haversine_meters
from .models import ItemCategory, ItemStatus, ListableItem, RankOptions, SortKey
from .ranking import nearby_items, rank_items

__all__ = [
	"DEFAULT_LOCATION",
	"GeoPoint",
	"InvalidCoordinates",
	"ItemCategory",
	"ItemStatus",
	"ListableItem",
	"RankOptions",
	"SortKey",
	"haversine_meters",
	"nearby_items",
	"rank_items",
]
