"""
Pontifex Data Models
=====================

Pydantic v2 models shared across the Pontifex toolkit. Every tool
operation produces a :class:`RunResult`, which bundles timing, a
human-readable summary, and the tool-specific payload in ``metadata``
so that console, JSON, and plain-text outputs share one source.

References:
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


class RunResult(BaseModel):
    """Aggregated result of a single tool operation.

    Attributes:
        tool_name:  Name of the Pontifex tool.
        operation:  Operation that was run (``encrypt``, ``keystream``, ...).
        start_time: UTC timestamp when the operation started.
        end_time:   UTC timestamp when the operation ended.
        summary:    Human-readable summary text.
        output:     Primary textual output (ciphertext, plaintext, ...).
        metadata:   Tool-specific model dump.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )

    tool_name: str = Field(
        ...,
        min_length=1,
        description="Tool name",
    )
    operation: str = Field(
        ...,
        min_length=1,
        description="Operation name",
    )
    start_time: _dt.datetime = Field(
        default_factory=_utcnow,
        description="Operation start timestamp (UTC)",
    )
    end_time: Optional[_dt.datetime] = Field(
        default=None,
        description="Operation end timestamp (UTC)",
    )
    summary: str = Field(
        default="",
        description="Human-readable result summary",
    )
    output: str = Field(
        default="",
        description="Primary textual output",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional metadata",
    )

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time in seconds, or ``None`` if *end_time* is unset."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    def finalize(self, summary: str | None = None) -> RunResult:
        """Mark the run as complete by setting *end_time* and *summary*.

        If *summary* is ``None`` a default is generated from the operation
        name and output length.

        Returns:
            ``self`` for fluent chaining.
        """
        self.end_time = _utcnow()
        if summary is not None:
            self.summary = summary
        else:
            self.summary = (
                f"{self.tool_name} {self.operation} complete. "
                f"Output: {len(self.output)} chars"
            )
        return self
