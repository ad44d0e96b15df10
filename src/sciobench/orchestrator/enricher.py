# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Post-completion enrichment of results with remote timing and metrics."""

import re
from collections.abc import Iterable
from datetime import datetime

from sciobench.common.exceptions import MetadataFetchError
from sciobench.common.mixins import LoggerMixin
from sciobench.engine.models import JobState, JobView, MetricUpdate
from sciobench.engine.protocols import JobMetadataService
from sciobench.orchestrator.models import BenchmarkResult, EnrichedResult

__all__ = [
    "DEFAULT_EXCLUDED_CONTEXT",
    "DEFAULT_METRIC_PREFIX",
    "MetadataEnricher",
    "elapsed_seconds",
    "filter_metrics",
    "format_period",
    "parse_local_datetime",
]

DEFAULT_METRIC_PREFIX = "Total"
DEFAULT_EXCLUDED_CONTEXT = "tentative"

# Remote timestamps can carry nanoseconds; datetime only holds microseconds.
_EXTRA_FRACTION = re.compile(r"(\.\d{6})\d+")


def parse_local_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp as a local date-time.

    Any UTC offset is dropped without conversion, so two timestamps from the
    same service compare on their wall-clock fields.

    Raises:
        ValueError: If ``value`` is not an ISO-8601 date-time.
    """
    parsed = datetime.fromisoformat(_EXTRA_FRACTION.sub(r"\1", value.strip()))
    return parsed.replace(tzinfo=None)


def elapsed_seconds(start: str, finish: str) -> int:
    """Whole seconds between two timestamps, truncated toward zero."""
    delta = parse_local_datetime(finish) - parse_local_datetime(start)
    return int(delta.total_seconds())


def format_period(seconds: int) -> str:
    """Format a number of seconds as a period, e.g. "1 second", "5 seconds"."""
    unit = "second" if abs(seconds) == 1 else "seconds"
    return f"{seconds} {unit}"


def filter_metrics(
    metrics: Iterable[MetricUpdate],
    prefix: str = DEFAULT_METRIC_PREFIX,
    excluded_context: str = DEFAULT_EXCLUDED_CONTEXT,
) -> list[tuple[str, str]]:
    """Select reportable metrics as (name, value) pairs sorted by name.

    A metric is kept when its name starts with ``prefix`` and its context does
    not contain ``excluded_context``.
    """
    selected = [
        (m.name.name, str(m.scalar))
        for m in metrics
        if m.name.name.startswith(prefix) and excluded_context not in m.name.context
    ]
    return sorted(selected, key=lambda kv: kv[0])


class MetadataEnricher(LoggerMixin):
    """Attaches remote timestamps and filtered metrics to finished results.

    Only successful jobs are enriched. Jobs that ended in any other state get
    a placeholder row carrying their state and an error message.
    """

    def __init__(
        self,
        metadata_service: JobMetadataService,
        project_id: str,
        metric_prefix: str = DEFAULT_METRIC_PREFIX,
        excluded_context: str = DEFAULT_EXCLUDED_CONTEXT,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.metadata_service = metadata_service
        self.project_id = project_id
        self.metric_prefix = metric_prefix
        self.excluded_context = excluded_context

    async def enrich(
        self, result: BenchmarkResult, state: JobState | None = None
    ) -> EnrichedResult:
        """Fetch metadata for ``result`` and build its report row.

        ``state`` is the terminal state its completion marker resolved to. When
        omitted, the handle's own state accessor is consulted instead.

        Raises:
            MetadataFetchError: If the job id is missing, the fetch fails, or the
                returned timestamps cannot be parsed.
        """
        if state is None:
            state = result.handle.state()
        if not state.is_success:
            self.warning(f"Skipping metadata for {result.name}: job finished in state {state}")
            return EnrichedResult(
                result=result, state=state, error=f"job finished in state {state}"
            )

        job_id = result.job_id
        if not job_id:
            raise MetadataFetchError(job_id, f"result '{result.name}' has no job id")

        try:
            metadata = await self.metadata_service.get_job_metadata(
                self.project_id, job_id, JobView.ALL
            )
        except MetadataFetchError:
            raise
        except Exception as e:
            raise MetadataFetchError(job_id, str(e) or type(e).__name__) from e

        try:
            elapsed = elapsed_seconds(metadata.create_time, metadata.current_state_time)
        except ValueError as e:
            raise MetadataFetchError(job_id, f"malformed timestamp: {e}") from e

        metrics = filter_metrics(metadata.metrics, self.metric_prefix, self.excluded_context)
        self.debug(lambda: f"{result.name}: {elapsed}s, {len(metrics)} metric(s) kept")
        return EnrichedResult(
            result=result,
            state=state,
            create_time=metadata.create_time,
            finish_time=metadata.current_state_time,
            elapsed=format_period(elapsed),
            metrics=metrics,
        )
