# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Wires configuration, engine, metadata service, orchestrator and report together."""

import asyncio
import contextlib
import importlib
from collections.abc import Sequence

from rich.console import Console

from sciobench.benchmarks import Benchmark, default_benchmarks, select_benchmarks
from sciobench.common.config import EngineConfig, EngineType, HarnessConfig, MetadataSource
from sciobench.common.environment import Environment
from sciobench.common.exceptions import ConfigurationError
from sciobench.common.logging import SciobenchLogger
from sciobench.engine import (
    DataflowMetadataClient,
    ExecutionEngine,
    JobMetadataService,
    LocalEngine,
)
from sciobench.exporters import ConsoleReportExporter
from sciobench.orchestrator import BenchmarkOrchestrator, EnrichedResult

logger = SciobenchLogger(__name__)


def load_engine_factory(path: str):
    """Resolve ``package.module:callable``."""
    module_name, _, attr = path.partition(":")
    try:
        module = importlib.import_module(module_name)
        return getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(f"Cannot load engine factory {path!r}: {e}") from e


def build_engine(engine_config: EngineConfig) -> ExecutionEngine:
    if engine_config.type == EngineType.LOCAL:
        duration = engine_config.job_duration_seconds
        if duration is None:
            duration = Environment.LOCAL.JOB_DURATION_SECONDS
        return LocalEngine(job_duration_seconds=duration)

    engine = load_engine_factory(engine_config.factory)()
    if not isinstance(engine, ExecutionEngine):
        raise ConfigurationError(
            f"Engine factory {engine_config.factory!r} returned {type(engine).__name__}, "
            "which has no submit() method"
        )
    return engine


def build_metadata_service(
    engine_config: EngineConfig, engine: ExecutionEngine
) -> JobMetadataService:
    if engine_config.metadata_source == MetadataSource.DATAFLOW:
        return DataflowMetadataClient()
    if not isinstance(engine, JobMetadataService):
        raise ConfigurationError(
            f"{type(engine).__name__} does not serve job metadata; "
            "set engine.metadata_source to 'dataflow'"
        )
    return engine


async def _execute(
    config: HarnessConfig, benchmarks: Sequence[Benchmark]
) -> list[EnrichedResult]:
    engine = build_engine(config.engine)
    async with contextlib.AsyncExitStack() as stack:
        metadata_service = build_metadata_service(config.engine, engine)
        if isinstance(metadata_service, DataflowMetadataClient):
            await stack.enter_async_context(metadata_service)

        orchestrator = BenchmarkOrchestrator(
            engine,
            metadata_service,
            settings=config.benchmarks,
            report_config=config.report,
            identity=config.user,
        )
        return await orchestrator.execute(benchmarks)


def run_benchmarks(
    config: HarnessConfig, console: Console | None = None
) -> list[EnrichedResult]:
    """Run every benchmark matching ``config.name_filter`` and print the report.

    Nothing is printed if any step fails; the error propagates to the caller.
    """
    benchmarks = select_benchmarks(default_benchmarks(config.benchmarks), config.name_filter)
    if not benchmarks:
        logger.warning(f"No benchmark matches {config.name_filter!r}")
        return []

    logger.info(f"Selected benchmarks: {', '.join(b.name for b in benchmarks)}")
    results = asyncio.run(_execute(config, benchmarks))

    exporter = ConsoleReportExporter(results, label_width=config.report.label_width)
    exporter.export(console or Console())
    return results
