"""Prometheus metrics for monitoring simulation volume, terms, and request latency"""

from prometheus_client import Counter, Histogram

# Simulation metrics
simulation_counter = Counter(
    "financing_simulation_total",
    "Total financing simulations computed",
    ["regime"],  # SAC | PRICE
)

simulation_rejected_counter = Counter(
    "financing_simulation_rejected_total",
    "Simulations rejected by engine input validation",
    ["reason"],  # invalid_principal | invalid_term | invalid_rate
)

term_months_histogram = Histogram(
    "financing_term_months",
    "Requested financing term in months",
    buckets=[12, 60, 120, 180, 240, 300, 360, 420],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_simulation(regime: str, term_months: int) -> None:
    """Record simulation metrics for regime mix and term distribution"""
    simulation_counter.labels(regime=regime).inc()
    term_months_histogram.observe(term_months)


def record_rejection(reason: str) -> None:
    """Record a simulation rejected for invalid input"""
    simulation_rejected_counter.labels(reason=reason).inc()
