"""Listing service: pull item records from the store and rank them for a viewer."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Protocol, Sequence

from pydantic import ValidationError

from localelend.domain.listings.geo import GeoPoint, resolve_reference_point
from localelend.domain.listings.models import ListableItem, RankOptions
from localelend.domain.listings.ranking import rank_items
from localelend.domain.listings.schemas import ItemRecord, NearbyQuery
from localelend.obs import metrics as obs_metrics
from localelend.settings import settings

logger = logging.getLogger(__name__)


class ItemRepository(Protocol):
	"""Storage contract for item documents."""

	async def list_items(self, limit: int, *, title_prefix: Optional[str] = None) -> Sequence[Mapping[str, Any]]:
		"""Newest documents first; ``title_prefix`` narrows the set before ``limit`` applies."""
		...


def parse_records(raw_records: Sequence[Mapping[str, Any]]) -> List[ListableItem]:
	"""Convert raw store documents, skipping the ones that fail validation."""
	items: List[ListableItem] = []
	skipped = 0
	for raw in raw_records:
		try:
			items.append(ItemRecord.model_validate(raw).to_listable())
		except ValidationError as exc:
			skipped += 1
			logger.warning(
				"item record rejected",
				extra={"item_id": raw.get("id"), "errors": exc.error_count()},
			)
	obs_metrics.inc_listing_skipped(skipped)
	return items


class ListingService:
	def __init__(self, repository: ItemRepository, *, fetch_limit: Optional[int] = None) -> None:
		self._repo = repository
		self._fetch_limit = fetch_limit or settings.listing_fetch_limit

	def reference_point(self, query: NearbyQuery) -> GeoPoint:
		return resolve_reference_point(query.reference_point(), settings.default_location())

	async def search(self, query: NearbyQuery) -> List[ListableItem]:
		raw_records = await self._repo.list_items(self._fetch_limit, title_prefix=query.q)
		items = parse_records(raw_records)
		center = self.reference_point(query)
		options = RankOptions(
			category=query.category,
			max_distance_meters=query.radius_m,
			sort_key=query.sort,
			query=query.q,
			limit=query.limit,
		)
		ranked = rank_items(items, center, options)
		obs_metrics.observe_ranking(query.sort.value, len(ranked))
		logger.info(
			"listing ranked",
			extra={
				"sort": query.sort.value,
				"candidates": len(items),
				"returned": len(ranked),
				"fallback_center": query.reference_point() is None,
			},
		)
		return ranked
