"""
Prometheus Metrics - validation observability.

Exposes:
- Validation runs by mode and resulting status
- Stage failures by stage
- Stage latency

Usage
-----
    from formgate.engine.metrics import record_validation, timed_stage

    with timed_stage("format"):
        check_format(fields, document, feedback)

    record_validation("init", feedback.status)
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

# Total validation runs, labelled by mode and final status.
VALIDATIONS: Counter = Counter(
    "formgate_validations_total",
    "Validation runs by mode and resulting status",
    ["mode", "status"],
)

# Stage-level failures (required / format / match).
STAGE_FAILURES: Counter = Counter(
    "formgate_stage_failures_total",
    "Stage runs that recorded at least one failing field",
    ["stage"],
)

# Stage latency in seconds; stages are synchronous and short.
STAGE_LATENCY: Histogram = Histogram(
    "formgate_stage_seconds",
    "Processing time per validation stage in seconds",
    ["stage"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
)


def record_validation(mode: str, status: str) -> None:
    """Increment the validation counter for *mode* / *status*."""
    VALIDATIONS.labels(mode=mode, status=status).inc()


def record_stage_failure(stage: str) -> None:
    """Increment the stage failure counter for *stage*."""
    STAGE_FAILURES.labels(stage=stage).inc()


@contextmanager
def timed_stage(stage: str) -> Generator[None, None, None]:
    """
    Context manager that records stage latency.

    Usage::

        with timed_stage("required"):
            check_required(fields, document, feedback)
    """
    with STAGE_LATENCY.labels(stage=stage).time():
        yield
