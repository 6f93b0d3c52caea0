"""Proximity ranking: annotate items with distance, filter, and order them."""

from __future__ import annotations

from datetime import timezone
from typing import Callable, Iterable, List, Optional

from localelend.domain.listings.geo import GeoPoint, haversine_meters
from localelend.domain.listings.models import ItemCategory, ListableItem, RankOptions, SortKey

DEFAULT_NEARBY_RADIUS_M = 2000

SortValue = Callable[[ListableItem], float]


def _timestamp(item: ListableItem) -> float:
	created = item.created_at
	if created.tzinfo is None:
		created = created.replace(tzinfo=timezone.utc)
	return created.timestamp()


# Secondary keys are negated where the order is descending so one ascending
# stable sort handles every mode.
_SECONDARY_KEYS: dict[SortKey, SortValue] = {
	SortKey.DISTANCE: lambda item: float(item.distance_meters or 0),
	SortKey.NEWEST: lambda item: -_timestamp(item),
	SortKey.POPULAR: lambda item: -float(item.borrow_count),
}


def annotate_distances(items: Iterable[ListableItem], reference_point: GeoPoint) -> List[ListableItem]:
	"""Return copies of ``items`` carrying ``distance_meters``.

	Items without a location are given a distance of 0, so they rank as
	nearest under the distance sort.
	"""
	annotated: List[ListableItem] = []
	for item in items:
		if item.location is None:
			annotated.append(item.with_distance(0))
		else:
			annotated.append(item.with_distance(haversine_meters(reference_point, item.location)))
	return annotated


def _matches_query(item: ListableItem, query: str) -> bool:
	return item.title.casefold().startswith(query)


def filter_items(items: Iterable[ListableItem], options: RankOptions) -> List[ListableItem]:
	query = options.query.strip().casefold() if options.query else ""
	results: List[ListableItem] = []
	for item in items:
		if options.category is not None and item.category is not options.category:
			continue
		if query and not _matches_query(item, query):
			continue
		if options.max_distance_meters is not None and (item.distance_meters or 0) > options.max_distance_meters:
			continue
		results.append(item)
	return results


def sort_items(items: Iterable[ListableItem], sort_key: SortKey) -> List[ListableItem]:
	secondary = _SECONDARY_KEYS[sort_key]
	return sorted(items, key=lambda item: (0 if item.is_available else 1, secondary(item)))


def rank_items(
	items: Iterable[ListableItem],
	reference_point: GeoPoint,
	options: Optional[RankOptions] = None,
) -> List[ListableItem]:
	"""Annotate, filter and order ``items`` relative to ``reference_point``.

	Available items always come first; ties inside the chosen sort key keep
	their input order.
	"""
	options = options or RankOptions()
	annotated = annotate_distances(items, reference_point)
	ranked = sort_items(filter_items(annotated, options), options.sort_key)
	if options.limit is not None:
		ranked = ranked[: max(0, options.limit)]
	return ranked


def nearby_items(
	items: Iterable[ListableItem],
	reference_point: GeoPoint,
	radius_meters: float = DEFAULT_NEARBY_RADIUS_M,
	category: Optional[ItemCategory] = None,
) -> List[ListableItem]:
	"""Items within ``radius_meters`` for the home map: available first, then closest."""
	options = RankOptions(category=category, max_distance_meters=radius_meters, sort_key=SortKey.DISTANCE)
	return rank_items(items, reference_point, options)
