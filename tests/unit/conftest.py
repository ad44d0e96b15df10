# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures and fakes for unit tests."""

import asyncio
from collections.abc import Callable

import pytest

from sciobench.common.config import BenchmarkSettings, ReportConfig
from sciobench.engine.context import ExecutionContext
from sciobench.engine.models import (
    JobHandle,
    JobMetadata,
    JobSpecification,
    JobState,
    JobView,
    MetricStructuredName,
    MetricUpdate,
)

T0 = "2017-10-17T12:00:00.000000Z"
T0_PLUS_5S = "2017-10-17T12:00:05.000000Z"


def make_metric(name: str, scalar, *context: str) -> MetricUpdate:
    """Helper to build a metric update with an optional set of context markers."""
    return MetricUpdate(
        name=MetricStructuredName(name=name, context=set(context)), scalar=scalar
    )


def make_metadata(
    job_id: str,
    create_time: str = T0,
    current_state_time: str = T0_PLUS_5S,
    metrics: list[MetricUpdate] | None = None,
) -> JobMetadata:
    return JobMetadata(
        id=job_id,
        create_time=create_time,
        current_state_time=current_state_time,
        current_state="JOB_STATE_DONE",
        metrics=metrics or [],
    )


def make_handle(job_id: str | None = "job-1") -> JobHandle:
    """Create a handle with an unresolved completion future on the running loop."""
    return JobHandle(job_id, asyncio.get_running_loop().create_future())


def resolve_later(handle: JobHandle, state: JobState, delay: float) -> asyncio.TimerHandle:
    """Resolve ``handle`` with ``state`` after ``delay`` seconds."""
    loop = asyncio.get_running_loop()
    return loop.call_later(delay, handle.completion.set_result, state)


class FakeEngine:
    """Execution engine whose jobs finish only when the test says so.

    Every submitted spec is recorded; handles are created with unresolved futures
    and kept in submission order.
    """

    def __init__(self, fail_on: str | None = None) -> None:
        self.specs: list[JobSpecification] = []
        self.handles: list[JobHandle] = []
        self._fail_on = fail_on

    def submit(self, spec: JobSpecification) -> JobHandle:
        if self._fail_on is not None and spec.app_name == self._fail_on:
            raise RuntimeError(f"engine rejected {spec.app_name}")
        self.specs.append(spec)
        handle = make_handle(f"job-{len(self.specs)}")
        self.handles.append(handle)
        return handle

    def finish_all(self, state: JobState = JobState.DONE) -> None:
        for handle in self.handles:
            if not handle.completion.done():
                handle.completion.set_result(state)


class FakeMetadataService:
    """Metadata service answering from a dict, recording every query."""

    def __init__(
        self,
        metadata: dict[str, JobMetadata] | None = None,
        default: Callable[[str], JobMetadata] | None = make_metadata,
    ) -> None:
        self.metadata = metadata or {}
        self.default = default
        self.calls: list[tuple[str, str, JobView]] = []

    async def get_job_metadata(
        self, project_id: str, job_id: str, view: JobView = JobView.ALL
    ) -> JobMetadata:
        self.calls.append((project_id, job_id, view))
        if job_id in self.metadata:
            return self.metadata[job_id]
        if self.default is None:
            raise LookupError(f"no metadata for {job_id}")
        return self.default(job_id)


def build_single_step(context: ExecutionContext) -> None:
    context.parallelize([1, 2, 3])


@pytest.fixture
def benchmark_settings() -> BenchmarkSettings:
    return BenchmarkSettings(project_id="test-project")


@pytest.fixture
def report_config() -> ReportConfig:
    return ReportConfig()


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def fake_metadata_service() -> FakeMetadataService:
    return FakeMetadataService()
