# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Sequence

from rich.console import Console

from sciobench.common.mixins import LoggerMixin
from sciobench.orchestrator.models import EnrichedResult

SEPARATOR = "=" * 80
PLACEHOLDER = "-"


def format_line(label: str, value: str, width: int = 20) -> str:
    return f"{label:<{width}}: {value}"


def render_report_section(result: EnrichedResult, label_width: int = 20) -> str:
    """Render one result as a separator followed by ``label: value`` lines."""
    rows = [
        ("Benchmark", result.name),
        ("Extra arguments", " ".join(result.extra_args)),
        ("State", str(result.state)),
        ("Create time", result.create_time or PLACEHOLDER),
        ("Finish time", result.finish_time or PLACEHOLDER),
        ("Elapsed", result.elapsed or PLACEHOLDER),
    ]
    if result.error is not None:
        rows.append(("Error", result.error))
    rows.extend(result.metrics)

    lines = [SEPARATOR]
    lines.extend(format_line(label, value, label_width) for label, value in rows)
    return "\n".join(lines)


class ConsoleReportExporter(LoggerMixin):
    """Print one report section per result, in the order given."""

    def __init__(
        self, results: Sequence[EnrichedResult], label_width: int = 20, **kwargs
    ) -> None:
        super().__init__(**kwargs)
        self._results = list(results)
        self._label_width = label_width

    def render(self) -> str:
        return "\n".join(
            render_report_section(r, self._label_width) for r in self._results
        )

    def export(self, console: Console) -> None:
        if not self._results:
            self.warning("No benchmark matched; nothing to report")
            return
        for result in self._results:
            console.print(
                render_report_section(result, self._label_width),
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
        console.file.flush()
