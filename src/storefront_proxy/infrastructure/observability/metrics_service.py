"""Prometheus metrics declarations for the storefront proxy.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never dynamic values (tokens, nonces, product ids).
"""

from prometheus_client import Counter, Histogram

# ── Store relay metrics ────────────────────────────────────────────

UPSTREAM_CALLS_TOTAL = Counter(
    "storefront_upstream_calls_total",
    "Total calls relayed to the store API",
    ["operation", "outcome"],
)

UPSTREAM_LATENCY_SECONDS = Histogram(
    "storefront_upstream_latency_seconds",
    "Store API round-trip latency in seconds",
    ["operation"],
)

# ── Exchange rate metrics ──────────────────────────────────────────

EXCHANGE_RATE_LOOKUPS_TOTAL = Counter(
    "storefront_exchange_rate_lookups_total",
    "Exchange rate lookups by the source that served them",
    ["source"],
)
