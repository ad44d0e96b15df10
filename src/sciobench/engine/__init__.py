# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Execution engine and metadata service interfaces plus bundled implementations."""

from sciobench.engine.context import Collection, ExecutionContext
from sciobench.engine.dataflow_client import DataflowMetadataClient
from sciobench.engine.local_engine import LocalEngine, resolve_pipeline_options
from sciobench.engine.models import (
    JobHandle,
    JobMetadata,
    JobSpecification,
    JobState,
    JobView,
    MetricStructuredName,
    MetricUpdate,
    StepSpec,
)
from sciobench.engine.protocols import ExecutionEngine, JobMetadataService

__all__ = [
    "Collection",
    "DataflowMetadataClient",
    "ExecutionContext",
    "ExecutionEngine",
    "JobHandle",
    "JobMetadata",
    "JobMetadataService",
    "JobSpecification",
    "JobState",
    "JobView",
    "LocalEngine",
    "MetricStructuredName",
    "MetricUpdate",
    "StepSpec",
    "resolve_pipeline_options",
]
