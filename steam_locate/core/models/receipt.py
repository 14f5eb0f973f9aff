"""
Receipt model — the outcome of one discovery attempt.

Strategies and the command runner report what happened through a
Receipt instead of raising. A hit carries the useful value in
``output`` (a root path, a command's stdout); a miss carries the reason
in ``error`` so the caller can move on to the next strategy.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ReceiptStatus(StrEnum):
    OK = "ok"
    SKIPPED = "skipped"     # strategy did not apply (unavailable, nothing to probe)
    FAILED = "failed"


class Receipt(BaseModel):
    """Result of a strategy attempt or an external command.

    ``source`` names who produced it: a strategy such as
    ``windows-registry`` or a command such as ``reg``.
    """

    source: str
    status: ReceiptStatus = ReceiptStatus.OK
    output: str = ""
    error: str | None = None
    duration_ms: int = 0
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is ReceiptStatus.OK

    @property
    def failed(self) -> bool:
        return self.status is ReceiptStatus.FAILED

    @property
    def detail(self) -> str:
        """One-line description for logs: the error, else the output."""
        return self.error or self.output

    @classmethod
    def success(cls, source: str, output: str = "", **kwargs: Any) -> Receipt:
        return cls(source=source, status=ReceiptStatus.OK, output=output, **kwargs)

    @classmethod
    def failure(cls, source: str, error: str, **kwargs: Any) -> Receipt:
        return cls(source=source, status=ReceiptStatus.FAILED, error=error, **kwargs)

    @classmethod
    def skip(cls, source: str, reason: str = "", **kwargs: Any) -> Receipt:
        """A strategy that had nothing to try; ``reason`` goes in ``output``."""
        return cls(source=source, status=ReceiptStatus.SKIPPED, output=reason, **kwargs)
