"""Geographic primitives for proximity ranking.

Points are longitude-first, matching GeoJSON and the document store's
``location.coordinates`` layout.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

EARTH_RADIUS_M = 6_371_000


class InvalidCoordinates(ValueError):
	"""Raised when a coordinate pair is outside the valid lon/lat ranges."""

	def __init__(self, reason: str):
		super().__init__(reason)
		self.reason = reason


@dataclass(frozen=True, slots=True)
class GeoPoint:
	longitude: float
	latitude: float

	def __post_init__(self) -> None:
		if not math.isfinite(self.longitude) or not -180.0 <= self.longitude <= 180.0:
			raise InvalidCoordinates("longitude_out_of_range")
		if not math.isfinite(self.latitude) or not -90.0 <= self.latitude <= 90.0:
			raise InvalidCoordinates("latitude_out_of_range")

	@classmethod
	def from_geojson(cls, value: Mapping[str, Any]) -> "GeoPoint":
		"""Build a point from ``{"type": "Point", "coordinates": [lng, lat]}``."""
		if value.get("type", "Point") != "Point":
			raise InvalidCoordinates("unsupported_geometry")
		coords = value.get("coordinates")
		if not isinstance(coords, (list, tuple)) or len(coords) != 2:
			raise InvalidCoordinates("malformed_coordinates")
		try:
			lon, lat = float(coords[0]), float(coords[1])
		except (TypeError, ValueError) as exc:
			raise InvalidCoordinates("malformed_coordinates") from exc
		return cls(longitude=lon, latitude=lat)

	def to_geojson(self) -> dict[str, Any]:
		return {"type": "Point", "coordinates": [self.longitude, self.latitude]}


# Fallback reference point when location access is unavailable or denied (Guntur).
DEFAULT_LOCATION = GeoPoint(longitude=80.4365, latitude=16.3067)


def haversine_meters(a: GeoPoint, b: GeoPoint) -> int:
	"""Return the great-circle distance between two points, floored to whole meters."""

	phi1, phi2 = math.radians(a.latitude), math.radians(b.latitude)
	dphi = math.radians(b.latitude - a.latitude)
	dlambda = math.radians(b.longitude - a.longitude)
	h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
	c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
	return math.floor(EARTH_RADIUS_M * c)


def resolve_reference_point(point: Optional[GeoPoint], fallback: GeoPoint = DEFAULT_LOCATION) -> GeoPoint:
	return point if point is not None else fallback
