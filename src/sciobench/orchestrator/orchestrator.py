# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Benchmark orchestrator: expand, submit, wait, enrich."""

import getpass
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sciobench.common.config import BenchmarkSettings, ReportConfig
from sciobench.common.mixins import LoggerMixin
from sciobench.engine.protocols import ExecutionEngine, JobMetadataService
from sciobench.orchestrator.barrier import await_all
from sciobench.orchestrator.enricher import MetadataEnricher
from sciobench.orchestrator.expander import expand
from sciobench.orchestrator.models import BenchmarkResult, EnrichedResult
from sciobench.orchestrator.submitter import JobSubmitter

if TYPE_CHECKING:
    from sciobench.benchmarks.base import Benchmark

__all__ = [
    "BenchmarkOrchestrator",
    "make_run_prefix",
]


def make_run_prefix(prefix: str, now: datetime | None = None) -> str:
    """Return ``{prefix}-MMddHHmmss`` using the UTC time of ``now``."""
    now = now or datetime.now(UTC)
    if now.tzinfo is not None:
        now = now.astimezone(UTC)
    return f"{prefix}-{now:%m%d%H%M%S}"


class BenchmarkOrchestrator(LoggerMixin):
    """Runs a set of benchmarks as one batch of remote jobs.

    Every configuration of every benchmark is submitted first. The orchestrator
    then waits for all jobs at once, and only afterwards fetches metadata for
    each job in submission order. Any submission, tracking or metadata error
    aborts the run.
    """

    def __init__(
        self,
        engine: ExecutionEngine,
        metadata_service: JobMetadataService,
        settings: BenchmarkSettings | None = None,
        report_config: ReportConfig | None = None,
        identity: str | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.settings = settings or BenchmarkSettings()
        report_config = report_config or ReportConfig()
        self.identity = identity or getpass.getuser()
        self.submitter = JobSubmitter(engine)
        self.enricher = MetadataEnricher(
            metadata_service,
            project_id=self.settings.project_id,
            metric_prefix=report_config.metric_prefix,
            excluded_context=report_config.excluded_context,
        )

    def submit_all(
        self, benchmarks: Sequence["Benchmark"], run_prefix: str
    ) -> list[BenchmarkResult]:
        """Submit every configuration of every benchmark, stopping at the first failure."""
        common_args = self.settings.common_args
        results = []
        for benchmark in benchmarks:
            for configuration in expand(benchmark.definition):
                results.append(
                    self.submitter.submit(
                        configuration,
                        common_args,
                        run_prefix,
                        self.identity,
                        benchmark.build,
                    )
                )
        return results

    async def execute(
        self, benchmarks: Sequence["Benchmark"], run_prefix: str | None = None
    ) -> list[EnrichedResult]:
        """Run ``benchmarks`` and return one enriched result per configuration.

        Results follow submission order regardless of completion order.
        """
        run_prefix = run_prefix or make_run_prefix(self.settings.run_prefix)
        self.info(
            f"Starting run {run_prefix} with {len(benchmarks)} benchmark(s) as {self.identity}"
        )

        results = self.submit_all(benchmarks, run_prefix)
        states = await await_all(results)

        enriched = []
        for result, state in zip(results, states, strict=True):
            enriched.append(await self.enricher.enrich(result, state))

        successful = sum(1 for r in enriched if r.success)
        self.info(f"All jobs complete: {successful}/{len(enriched)} successful")
        return enriched
