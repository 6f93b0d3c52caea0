"""In-memory document stores used in tests and developer environments."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from localelend.domain.trust.models import TrustLevel
from localelend.domain.trust.schemas import UserTrustRecord

_DATETIME = TypeAdapter(datetime)
_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class InMemoryUserRepository:
	"""Holds raw user documents keyed by id, camelCase as the store writes them."""

	def __init__(self, users: Sequence[Mapping[str, Any]] = ()) -> None:
		self.users: Dict[str, Dict[str, Any]] = {}
		for user in users:
			self.add(user)

	def add(self, user: Mapping[str, Any]) -> None:
		self.users[str(user["id"])] = dict(user)

	async def get_aggregates(self, user_id: str) -> UserTrustRecord | None:
		doc = self.users.get(user_id)
		if doc is None:
			return None
		return UserTrustRecord.model_validate(doc)

	async def save_score(self, user_id: str, score: float, level: TrustLevel, computed_at: datetime) -> None:
		doc = self.users.setdefault(user_id, {"id": user_id})
		doc["trustScore"] = score
		doc["trustLevel"] = level.value
		doc["trustScoreUpdatedAt"] = computed_at


class InMemoryItemRepository:
	"""Holds raw item documents; listing returns the newest ``createdAt`` first."""

	def __init__(self, items: Sequence[Mapping[str, Any]] = ()) -> None:
		self.items: List[Dict[str, Any]] = [dict(item) for item in items]

	def add(self, item: Mapping[str, Any]) -> None:
		self.items.append(dict(item))

	async def list_items(self, limit: int, *, title_prefix: Optional[str] = None) -> Sequence[Mapping[str, Any]]:
		prefix = title_prefix.strip().casefold() if title_prefix else ""
		docs = [doc for doc in reversed(self.items) if str(doc.get("title") or "").casefold().startswith(prefix)]
		# Ties on createdAt keep the most recently added document first.
		docs.sort(key=_created_at, reverse=True)
		return docs[: max(0, limit)]


def _created_at(doc: Mapping[str, Any]) -> datetime:
	try:
		created = _DATETIME.validate_python(doc.get("createdAt"))
	except ValidationError:
		# Missing or unparseable timestamps sort oldest.
		return _OLDEST
	if created.tzinfo is None:
		created = created.replace(tzinfo=timezone.utc)
	return created
