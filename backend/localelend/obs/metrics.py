"""Central registry for Prometheus metrics used across the backend."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNTER = Counter(
	"localelend_http_requests_total",
	"Total HTTP requests processed",
	["route", "method", "status"],
)

REQUEST_LATENCY = Histogram(
	"localelend_http_request_duration_seconds",
	"HTTP request latency in seconds",
	["route", "method"],
	buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0),
)

TRUST_SCORES_COMPUTED = Counter(
	"localelend_trust_scores_computed_total",
	"Trust scores computed, by resulting level",
	["level"],
)

TRUST_INPUT_REJECTS = Counter(
	"localelend_trust_input_rejects_total",
	"Trust inputs rejected by validation",
	["reason"],
)

RANKING_QUERIES = Counter(
	"localelend_ranking_queries_total",
	"Proximity ranking queries, by sort key",
	["sort"],
)

RANKING_RESULT_SIZE = Histogram(
	"localelend_ranking_result_size",
	"Number of items returned by a ranking query",
	buckets=(0, 1, 5, 10, 25, 50, 100, 250),
)

LISTING_RECORDS_SKIPPED = Counter(
	"localelend_listing_records_skipped_total",
	"Item records dropped at the schema boundary",
)


def observe_request(route: str, method: str, status: int, latency_seconds: float) -> None:
	REQUEST_COUNTER.labels(route=route, method=method, status=str(status)).inc()
	REQUEST_LATENCY.labels(route=route, method=method).observe(latency_seconds)


def inc_trust_score(level: str) -> None:
	TRUST_SCORES_COMPUTED.labels(level=level).inc()


def inc_trust_reject(reason: str) -> None:
	TRUST_INPUT_REJECTS.labels(reason=reason).inc()


def observe_ranking(sort: str, result_size: int) -> None:
	RANKING_QUERIES.labels(sort=sort).inc()
	RANKING_RESULT_SIZE.observe(result_size)


def inc_listing_skipped(count: int = 1) -> None:
	if count > 0:
		LISTING_RECORDS_SKIPPED.inc(count)
