"""
Prometheus metrics for gateway calls.

Counters and histograms live in the default prometheus_client registry, so any
exporter the host application already runs (``start_http_server``, a WSGI/ASGI
metrics app) picks them up without extra wiring.
"""

from prometheus_client import Counter, Histogram

from core.dependencies import get_settings

OUTCOMES = ("success", "failure", "transport_error", "parse_error")

gateway_requests = Counter(
    "gateway_requests_total",
    "Total number of NVP gateway round trips",
    ["family", "outcome"],  # family: nvp or payflow
)

gateway_latency = Histogram(
    "gateway_latency_seconds",
    "Time taken for a gateway round trip to complete",
    ["family"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)


def metrics_enabled() -> bool:
    return get_settings().METRICS_ENABLED


def record_outcome(family: str, outcome: str, duration: float | None = None):
    """
    Count one gateway round trip.

    Args:
        family: API family value ("nvp" or "payflow")
        outcome: one of OUTCOMES
        duration: seconds spent in the HTTP exchange, when one happened
    """
    if outcome not in OUTCOMES:
        raise ValueError(f"Unknown gateway outcome: {outcome}")
    if not metrics_enabled():
        return
    gateway_requests.labels(family=family, outcome=outcome).inc()
    if duration is not None:
        gateway_latency.labels(family=family).observe(duration)
