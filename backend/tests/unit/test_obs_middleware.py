from starlette.requests import Request

from localelend.main import create_app
from localelend.obs.middleware import _route_template


def _request(app, method: str, path: str) -> Request:
	return Request(
		{
			"type": "http",
			"app": app,
			"method": method,
			"path": path,
			"root_path": "",
			"query_string": b"",
			"headers": [],
		}
	)


def test_route_template_hides_path_parameters():
	app = create_app()

	assert _route_template(_request(app, "POST", "/users/u-42/trust/recompute")) == "/users/{user_id}/trust/recompute"
	assert _route_template(_request(app, "GET", "/items/nearby")) == "/items/nearby"


def test_route_template_falls_back_to_path_when_unrouted():
	app = create_app()
	assert _route_template(_request(app, "GET", "/nowhere")) == "/nowhere"
