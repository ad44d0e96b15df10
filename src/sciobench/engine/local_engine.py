# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""In-process dry-run engine.

Jobs are not executed: each one sleeps for a simulated duration on the event
loop and then resolves. Useful for exercising the whole harness (submission,
barrier, enrichment, report) without cloud credentials.
"""

import asyncio
import uuid
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime

from sciobench.common.mixins import LoggerMixin
from sciobench.engine.models import (
    JobHandle,
    JobMetadata,
    JobSpecification,
    JobState,
    JobView,
    MetricStructuredName,
    MetricUpdate,
)

SIMULATE_FAILURE_FLAG = "simulateFailure"

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def resolve_pipeline_options(args: Sequence[str]) -> dict[str, str]:
    """Resolve ``--key=value`` flags into a mapping, later flags win.

    A bare ``--flag`` resolves to ``"true"``. Arguments not starting with
    ``--`` are ignored.
    """
    options: dict[str, str] = {}
    for arg in args:
        if not arg.startswith("--"):
            continue
        key, sep, value = arg[2:].partition("=")
        options[key] = value if sep else "true"
    return options


@dataclass
class _LocalJob:
    spec: JobSpecification
    job_id: str
    options: dict[str, str]
    create_time: datetime
    completion: "asyncio.Future[JobState]"
    state: JobState = JobState.RUNNING
    finish_time: datetime | None = None
    metrics: list[MetricUpdate] = field(default_factory=list)


class LocalEngine(LoggerMixin):
    """Execution engine and metadata service backed by the local event loop."""

    def __init__(
        self,
        job_duration_seconds: float = 1.0,
        clock: Callable[[], datetime] | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        if job_duration_seconds < 0:
            raise ValueError(
                f"Invalid job_duration_seconds: {job_duration_seconds}. Must be non-negative."
            )
        self.job_duration_seconds = job_duration_seconds
        self._clock = clock or (lambda: datetime.now(UTC))
        self._jobs: dict[str, _LocalJob] = {}
        self._tasks: set[asyncio.Task] = set()

    def submit(self, spec: JobSpecification) -> JobHandle:
        loop = asyncio.get_running_loop()
        job = _LocalJob(
            spec=spec,
            job_id=f"local-{uuid.uuid4().hex[:16]}",
            options=resolve_pipeline_options(spec.args),
            create_time=self._clock(),
            completion=loop.create_future(),
        )
        self._jobs[job.job_id] = job

        task = loop.create_task(self._run(job))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        task.add_done_callback(lambda t: _settle(job, t))

        self.info(f"Submitted {spec.job_name} as {job.job_id}")
        return JobHandle(job.job_id, job.completion, state_fn=lambda: job.state)

    async def _run(self, job: _LocalJob) -> None:
        await asyncio.sleep(self.job_duration_seconds)
        job.finish_time = self._clock()
        if job.options.get(SIMULATE_FAILURE_FLAG, "false").lower() == "true":
            job.state = JobState.FAILED
        else:
            job.state = JobState.DONE
            job.metrics = _job_metrics(job.spec)
        self.debug(lambda: f"{job.job_id} finished in state {job.state}")
        job.completion.set_result(job.state)

    async def get_job_metadata(
        self, project_id: str, job_id: str, view: JobView = JobView.ALL
    ) -> JobMetadata:
        job = self._jobs.get(job_id)
        if job is None:
            raise KeyError(f"Unknown job {job_id!r} in project {project_id!r}")

        state_time = job.finish_time or self._clock()
        return JobMetadata(
            id=job.job_id,
            name=job.spec.job_name,
            create_time=job.create_time.strftime(_TIMESTAMP_FORMAT),
            current_state_time=state_time.strftime(_TIMESTAMP_FORMAT),
            current_state=f"JOB_STATE_{job.state}",
            metrics=job.metrics if view == JobView.ALL else [],
        )


def _settle(job: _LocalJob, task: asyncio.Task) -> None:
    """Resolve the marker of a job whose task ended without resolving it."""
    if job.completion.done():
        return
    if task.cancelled():
        job.state = JobState.CANCELLED
        job.completion.cancel()
    else:
        job.state = JobState.UNKNOWN
        job.completion.set_exception(task.exception())


def _job_metrics(spec: JobSpecification) -> list[MetricUpdate]:
    """Build the metrics of a finished job, with tentative twins of each committed value."""
    steps = {step.name: step for step in spec.steps}
    total_elements = 0
    for step in spec.steps:
        if step.transform != "Fill":
            continue
        for upstream in step.inputs:
            source = steps[upstream]
            if source.transform == "Parallelize":
                total_elements += sum(source.params.get("values", []))

    committed = {"TotalSteps": len(spec.steps), "TotalElements": total_elements}
    metrics = []
    for name, value in committed.items():
        metrics.append(
            MetricUpdate(name=MetricStructuredName(name=name, origin="local"), scalar=value)
        )
        metrics.append(
            MetricUpdate(
                name=MetricStructuredName(
                    name=name, origin="local", context={"tentative": "true"}
                ),
                scalar=value,
            )
        )
    return metrics
