"""
Solitaire Report Generator
===========================

Writes machine-readable JSON reports of Solitaire runs.  The report
wraps the :class:`~shared.models.RunResult` dump with generator
metadata so that files produced by different versions can be told
apart.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from shared.models import RunResult


class SolitaireReportGenerator:
    """Generates JSON reports from Solitaire results.

    Usage::

        gen = SolitaireReportGenerator()
        gen.generate_json(result, Path("report.json"))
    """

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def build(self, result: RunResult) -> dict[str, Any]:
        """Return the report document for *result* as a plain dict."""
        return {
            "generator": {
                "name": "pontifex",
                "tool": result.tool_name,
                "version": self.version,
                "generated_at": datetime.now(timezone.utc).isoformat(),
            },
            "duration_seconds": result.duration_seconds,
            "result": result.model_dump(mode="json"),
        }

    def render_json(self, result: RunResult) -> str:
        return json.dumps(self.build(result), indent=2, ensure_ascii=False, default=str)

    def generate_json(self, result: RunResult, output_path: Path) -> Path:
        """Write the JSON report to *output_path*, creating parent directories.

        Returns:
            The resolved path of the written file.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_json(result) + "\n", encoding="utf-8")
        return output_path.resolve()
