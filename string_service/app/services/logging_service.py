"""
Logging decorator for :class:`StringService`.

Each call produces exactly one record, emitted after the wrapped
service returns or raises, with the fields ``method``, ``input``,
``output``, ``err`` (``uppercase`` only) and ``took`` (seconds).
Failures are re‑raised untouched, and a failing log sink never fails
the call.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

from string_service.app.services.string_service import StringService


class LoggingStringService:
    """Wrap a service and log every call made through it."""

    def __init__(self, logger, next_service: StringService) -> None:
        self._logger = logger
        self._next = next_service

    def _log(self, fields: Dict[str, Any]) -> None:
        try:
            self._logger.info("method call", extra={"fields": fields})
        except Exception:
            # The caller's result must not depend on the log sink.
            pass

    def uppercase(self, s: str) -> str:
        begin = time.perf_counter()
        output = ""
        err: Optional[Exception] = None
        try:
            output = self._next.uppercase(s)
            return output
        except Exception as exc:
            err = exc
            raise
        finally:
            self._log(
                {
                    "method": "uppercase",
                    "input": s,
                    "output": output,
                    "err": None if err is None else str(err),
                    "took": time.perf_counter() - begin,
                }
            )

    def count(self, s: str) -> int:
        begin = time.perf_counter()
        output = 0
        try:
            output = self._next.count(s)
            return output
        finally:
            self._log(
                {
                    "method": "count",
                    "input": s,
                    "output": output,
                    "took": time.perf_counter() - begin,
                }
            )
