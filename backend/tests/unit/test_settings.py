import pytest
from pydantic import ValidationError

from localelend.domain.listings.geo import GeoPoint
from localelend.settings import Settings


def test_env_aliases_and_level_normalisation(monkeypatch):
	monkeypatch.delenv("ENV", raising=False)
	monkeypatch.setenv("APP_ENV", "development")
	monkeypatch.setenv("LOG_LEVEL", "debug")
	monkeypatch.setenv("NEARBY_DEFAULT_RADIUS_M", "1500")

	cfg = Settings(_env_file=None)

	assert cfg.is_dev() is True
	assert cfg.is_prod() is False
	assert cfg.obs_log_level == "DEBUG"
	assert cfg.nearby_default_radius_m == 1500


def test_default_location_override(monkeypatch):
	monkeypatch.setenv("DEFAULT_LOCATION_LON", "-73.5673")
	monkeypatch.setenv("DEFAULT_LOCATION_LAT", "45.5017")

	cfg = Settings(_env_file=None)

	assert cfg.default_location() == GeoPoint(longitude=-73.5673, latitude=45.5017)


def test_default_radius_is_bounded_like_the_query(monkeypatch):
	monkeypatch.setenv("NEARBY_DEFAULT_RADIUS_M", "60000")

	with pytest.raises(ValidationError):
		Settings(_env_file=None)
