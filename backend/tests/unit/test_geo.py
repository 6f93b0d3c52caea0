import pytest

from localelend.domain.listings.geo import (
	DEFAULT_LOCATION,
	GeoPoint,
	InvalidCoordinates,
	haversine_meters,
	resolve_reference_point,
)

GUNTUR = GeoPoint(longitude=80.4365, latitude=16.3067)


def test_distance_to_self_is_zero():
	assert haversine_meters(GUNTUR, GUNTUR) == 0


def test_distance_is_symmetric():
	other = GeoPoint(longitude=80.62, latitude=16.51)
	assert haversine_meters(GUNTUR, other) == haversine_meters(other, GUNTUR)


def test_hundredth_degree_north_is_about_eleven_hundred_meters():
	north = GeoPoint(longitude=80.4365, latitude=16.3167)
	assert 1050 <= haversine_meters(GUNTUR, north) <= 1150


def test_distance_is_truncated_to_whole_meters():
	north = GeoPoint(longitude=80.4365, latitude=16.3068)
	distance = haversine_meters(GUNTUR, north)
	assert isinstance(distance, int)
	assert distance == 11


def test_longitude_comes_first():
	# Swapping the pair would put this point in the Indian Ocean, not 0.5 degrees east.
	east = GeoPoint(longitude=80.9365, latitude=16.3067)
	assert 53_000 <= haversine_meters(GUNTUR, east) <= 53_500


@pytest.mark.parametrize(
	"lon,lat,reason",
	[
		(180.1, 0.0, "longitude_out_of_range"),
		(-181.0, 0.0, "longitude_out_of_range"),
		(0.0, 90.5, "latitude_out_of_range"),
		(0.0, float("nan"), "latitude_out_of_range"),
	],
)
def test_invalid_coordinates_are_rejected(lon, lat, reason):
	with pytest.raises(InvalidCoordinates) as excinfo:
		GeoPoint(longitude=lon, latitude=lat)
	assert excinfo.value.reason == reason


def test_geojson_keeps_coordinate_order():
	geo = {"type": "Point", "coordinates": [80.4365, 16.3067]}
	parsed = GeoPoint.from_geojson(geo)

	assert parsed.longitude == 80.4365
	assert parsed.latitude == 16.3067
	assert parsed.to_geojson() == geo


@pytest.mark.parametrize(
	"geo",
	[
		{"type": "Polygon", "coordinates": [0, 0]},
		{"type": "Point", "coordinates": [1.0]},
		{"type": "Point", "coordinates": ["east", "north"]},
		{"type": "Point"},
	],
)
def test_malformed_geojson_is_rejected(geo):
	with pytest.raises(InvalidCoordinates):
		GeoPoint.from_geojson(geo)


def test_missing_reference_point_falls_back_to_default():
	assert resolve_reference_point(None) == DEFAULT_LOCATION
	assert resolve_reference_point(GUNTUR, fallback=GeoPoint(0.0, 0.0)) is GUNTUR
	assert DEFAULT_LOCATION.to_geojson()["coordinates"] == [80.4365, 16.3067]
