# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Benchmark orchestration.

Expansion of benchmark definitions into configurations, job submission, the
completion barrier and metadata enrichment.
"""

from sciobench.orchestrator.barrier import await_all
from sciobench.orchestrator.enricher import (
    MetadataEnricher,
    filter_metrics,
    format_period,
)
from sciobench.orchestrator.expander import expand
from sciobench.orchestrator.models import (
    BenchmarkDefinition,
    BenchmarkResult,
    EnrichedResult,
    RunConfiguration,
)
from sciobench.orchestrator.orchestrator import BenchmarkOrchestrator, make_run_prefix
from sciobench.orchestrator.submitter import JobSubmitter, derive_job_name

__all__ = [
    "BenchmarkDefinition",
    "BenchmarkOrchestrator",
    "BenchmarkResult",
    "EnrichedResult",
    "JobSubmitter",
    "MetadataEnricher",
    "RunConfiguration",
    "await_all",
    "derive_job_name",
    "expand",
    "filter_metrics",
    "format_period",
    "make_run_prefix",
]
