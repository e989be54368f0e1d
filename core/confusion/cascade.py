"""Ordered application of the confusion resolvers."""

from __future__ import annotations

import logging
from typing import Dict, Sequence, Tuple

from core.confusion import finnish, indonesian, scandinavian, turkish
from core.confusion.signals import Resolver
from core.languages import UNDETERMINED
from observability.metrics import RESOLVER_OVERRIDES

logger = logging.getLogger(__name__)

# Indonesian has to see the classifier's answer before the Finnish resolver
# can replace it.
RESOLVER_ORDER: Tuple[str, ...] = (
    scandinavian.NAME,
    indonesian.NAME,
    finnish.NAME,
    turkish.NAME,
)

RESOLVERS: Dict[str, Resolver] = {
    scandinavian.NAME: scandinavian.resolve,
    indonesian.NAME: indonesian.resolve,
    finnish.NAME: finnish.resolve,
    turkish.NAME: turkish.resolve,
}


def run_cascade(text: str, provisional: str, candidates: Sequence[str]) -> str:
    """Feed ``provisional`` through every resolver in ``RESOLVER_ORDER``.

    Each resolver sees the code produced by the previous one. An
    undetermined code is returned untouched.
    """
    current = provisional
    if not current or current == UNDETERMINED:
        return current
    for name in RESOLVER_ORDER:
        refined = RESOLVERS[name](text, current, candidates)
        if refined != current:
            logger.info("Resolver %s changed %s -> %s", name, current, refined)
            RESOLVER_OVERRIDES.labels(resolver=name).inc()
            current = refined
    return current


__all__ = ["RESOLVER_ORDER", "RESOLVERS", "run_cascade"]
