"""Prometheus metrics for versioned URIs.

Metrics:

- Rewrite counter by mode (path, query) and result
- Strip counter by result, for the incoming-path undo component

Examples:
    Recording a rewrite::

        from versioned_uri.observability.metrics import record_rewrite

        record_rewrite(mode="query", result="rewritten")
"""

from prometheus_client import Counter

# Labels: mode (path, query), result (rewritten, passthrough, skipped)
rewrites_total = Counter(
    "versioned_uri_rewrites_total",
    "Total number of generated URIs inspected by the versioned URI rewriter",
    ["mode", "result"],
)

# Labels: result (stripped, passthrough)
strips_total = Counter(
    "versioned_uri_strips_total",
    "Total number of incoming paths inspected for a version segment",
    ["result"],
)


def record_rewrite(mode: str, result: str) -> None:
    """Record one rewrite decision.

    Args:
        mode: "path" or "query"
        result: "rewritten", "passthrough" (no match) or "skipped" (already
            versioned)

    Examples:
        >>> record_rewrite("path", "skipped")
    """
    rewrites_total.labels(mode=mode, result=result).inc()


def record_strip(result: str) -> None:
    """Record one incoming path inspection.

    Args:
        result: "stripped" or "passthrough"
    """
    strips_total.labels(result=result).inc()
