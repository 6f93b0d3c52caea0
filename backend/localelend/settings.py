"""Settings for the Locale Lend backend."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:  # pragma: no cover
	from localelend.domain.listings.geo import GeoPoint


# Upper bound for any listing search radius, in meters.
MAX_SEARCH_RADIUS_M = 50_000


def _env_field(default: Any, *env_names: str, **constraints: Any):
	if env_names:
		alias = AliasChoices(*env_names) if len(env_names) > 1 else env_names[0]
		return Field(default=default, validation_alias=alias, **constraints)
	return Field(default=default, **constraints)


class Settings(BaseSettings):
	environment: str = _env_field("production", "ENV", "APP_ENV", "ENVIRONMENT")
	service_name: str = _env_field("localelend-api", "SERVICE_NAME")
	git_commit: str = _env_field("unknown", "GIT_COMMIT", "COMMIT_SHA", "SOURCE_VERSION")

	api_host: str = _env_field("0.0.0.0", "API_HOST", "HOST")
	api_port: int = _env_field(8000, "API_PORT", "PORT")

	obs_enabled: bool = _env_field(True, "OBS_ENABLED")
	obs_log_level: str = _env_field("INFO", "LOG_LEVEL")
	obs_log_sampling_rate_info: float = _env_field(1.0, "LOG_SAMPLING_RATE_INFO")

	# Reference point used when the client cannot share its location (Guntur).
	default_location_lon: float = _env_field(80.4365, "DEFAULT_LOCATION_LON")
	default_location_lat: float = _env_field(16.3067, "DEFAULT_LOCATION_LAT")
	nearby_default_radius_m: int = _env_field(2000, "NEARBY_DEFAULT_RADIUS_M", ge=0, le=MAX_SEARCH_RADIUS_M)
	# How many records a single listing view pulls from the document store
	listing_fetch_limit: int = _env_field(50, "LISTING_FETCH_LIMIT", ge=1)

	model_config = SettingsConfigDict(
		env_prefix="",
		env_file=".env",
		case_sensitive=False,
		extra="ignore",
	)

	@field_validator("obs_log_level", mode="after")
	def _normalise_level(cls, value: str) -> str:  # type: ignore[override]
		return value.upper()

	# Environment helpers
	def is_prod(self) -> bool:
		return self.environment.lower() in ("prod", "production", "live")

	def is_dev(self) -> bool:
		return self.environment.lower() in ("dev", "development")

	def default_location(self) -> "GeoPoint":
		from localelend.domain.listings.geo import GeoPoint

		return GeoPoint(longitude=self.default_location_lon, latitude=self.default_location_lat)


settings = Settings()
