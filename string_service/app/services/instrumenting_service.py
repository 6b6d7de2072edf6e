"""
Instrumenting decorator for :class:`StringService`.

For every call, whatever its outcome, the decorator adds one to the
request counter and records the elapsed seconds in the latency
histogram, both labelled with ``method`` and ``error``.  ``error`` is
``"true"`` only for business failures (:class:`StringServiceError`);
infrastructure errors pass through labelled ``"false"``.  ``count``
additionally records its result in the count‑result histogram when the
wrapped service produced one.
"""

from __future__ import annotations

import time

from string_service.app.core.errors import StringServiceError
from string_service.app.core.metrics import MetricsSink
from string_service.app.services.string_service import StringService


class InstrumentingStringService:
    """Wrap a service and record request metrics for it."""

    def __init__(self, metrics: MetricsSink, next_service: StringService) -> None:
        self._metrics = metrics
        self._next = next_service

    def _record(self, method: str, failed: bool, begin: float) -> None:
        lvs = ("method", method, "error", "true" if failed else "false")
        self._metrics.request_count.with_labels(*lvs).add(1)
        self._metrics.request_latency.with_labels(*lvs).observe(time.perf_counter() - begin)

    def uppercase(self, s: str) -> str:
        begin = time.perf_counter()
        failed = False
        try:
            return self._next.uppercase(s)
        except StringServiceError:
            failed = True
            raise
        finally:
            self._record("uppercase", failed, begin)

    def count(self, s: str) -> int:
        begin = time.perf_counter()
        n = None
        try:
            n = self._next.count(s)
            return n
        finally:
            # count has no failure channel
            self._record("count", False, begin)
            if n is not None:
                self._metrics.count_result.observe(n)
