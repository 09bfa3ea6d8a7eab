"""Central registry for Prometheus metrics used by the view layer."""

from __future__ import annotations

from prometheus_client import Counter

PROJECTIONS = Counter(
	"chatview_projections_total",
	"Active chat projections by outcome",
	["outcome"],
)

INPUT_REJECTIONS = Counter(
	"chatview_input_rejections_total",
	"Text input values rejected by validation",
	["reason"],
)


def inc_projection(outcome: str) -> None:
	PROJECTIONS.labels(outcome=outcome).inc()


def inc_input_rejection(reason: str) -> None:
	INPUT_REJECTIONS.labels(reason=reason).inc()
