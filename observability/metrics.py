from __future__ import annotations

from functools import wraps
from typing import Callable, TypeVar

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

T = TypeVar("T")

LANGUAGE_DETECTIONS = Counter(
    "langid_detections_total", "Language detection results", ["source"]
)
RESOLVER_OVERRIDES = Counter(
    "langid_resolver_overrides_total", "Confusion resolver overrides", ["resolver"]
)
CLASSIFIER_ERRORS = Counter(
    "langid_classifier_errors_total", "Statistical classifier failures"
)
OCR_FAILURES = Counter(
    "langid_ocr_failures_total", "OCR extraction failures during detection"
)
STAGE_LATENCY = Histogram(
    "langid_stage_latency_seconds", "Latency for detection stages", ["stage"]
)


def timed_stage(stage: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs):
            with STAGE_LATENCY.labels(stage=stage).time():
                return func(*args, **kwargs)

        return wrapper

    return decorator


def render_metrics() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "LANGUAGE_DETECTIONS",
    "RESOLVER_OVERRIDES",
    "CLASSIFIER_ERRORS",
    "OCR_FAILURES",
    "STAGE_LATENCY",
    "timed_stage",
    "render_metrics",
]
