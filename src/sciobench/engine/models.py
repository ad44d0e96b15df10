# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models exchanged with execution engines and metadata services."""

import asyncio
from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import AliasChoices, ConfigDict, Field, field_validator

from sciobench.common.models import FrozenModel, SciobenchBaseModel


class JobState(str, Enum):
    """Lifecycle state of a submitted job."""

    UNKNOWN = "UNKNOWN"
    STOPPED = "STOPPED"
    RUNNING = "RUNNING"
    DONE = "DONE"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"
    UPDATED = "UPDATED"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_STATES

    @property
    def is_success(self) -> bool:
        return self is JobState.DONE

    def __str__(self) -> str:
        return self.value


_TERMINAL_STATES = frozenset(
    {JobState.DONE, JobState.FAILED, JobState.CANCELLED, JobState.UPDATED}
)


class JobView(str, Enum):
    """Level of detail requested from the metadata service."""

    SUMMARY = "JOB_VIEW_SUMMARY"
    ALL = "JOB_VIEW_ALL"


class StepSpec(FrozenModel):
    """One node of a job's data-processing graph."""

    name: str = Field(description="Unique step name within the job, e.g. 'GroupBy@3'")
    transform: str = Field(description="Kind of transform, e.g. 'GroupBy'")
    inputs: tuple[str, ...] = Field(default=(), description="Names of upstream steps")
    params: dict[str, Any] = Field(default_factory=dict)


class JobSpecification(FrozenModel):
    """Everything an engine needs to launch one job."""

    app_name: str
    job_name: str
    args: tuple[str, ...] = Field(
        default=(),
        description="Pipeline flags in submission order. Later duplicates override earlier ones.",
    )
    steps: tuple[StepSpec, ...] = Field(default=())


class MetricStructuredName(SciobenchBaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    origin: str | None = None
    context: dict[str, str] = Field(default_factory=dict)

    @field_validator("context", mode="before")
    @classmethod
    def _markers_to_mapping(cls, value: Any) -> Any:
        # A bare collection of markers, e.g. {"tentative"}, is treated as keys.
        if isinstance(value, list | set | frozenset | tuple):
            return {str(marker): "true" for marker in value}
        return value


class MetricUpdate(SciobenchBaseModel):
    """A single metric value reported for a job."""

    model_config = ConfigDict(extra="ignore")

    name: MetricStructuredName
    scalar: Any = None


class JobMetadata(SciobenchBaseModel):
    """Job description returned by a metadata service.

    Field names follow the Dataflow REST API (camelCase) and are also accepted
    in snake_case.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    name: str | None = None
    create_time: str = Field(validation_alias=AliasChoices("createTime", "create_time"))
    current_state_time: str = Field(
        validation_alias=AliasChoices("currentStateTime", "current_state_time")
    )
    current_state: str | None = Field(
        default=None, validation_alias=AliasChoices("currentState", "current_state")
    )
    metrics: list[MetricUpdate] = Field(default_factory=list)


class JobHandle:
    """Reference to a submitted job.

    ``completion`` resolves to the job's terminal :class:`JobState`. It may also
    fail with an exception if the engine loses track of the job. ``state()``
    reports the current state without blocking.
    """

    def __init__(
        self,
        job_id: str | None,
        completion: "asyncio.Future[JobState]",
        state_fn: Callable[[], JobState] | None = None,
    ) -> None:
        self.job_id = job_id
        self.completion = completion
        self._state_fn = state_fn

    def state(self) -> JobState:
        if self._state_fn is not None:
            return self._state_fn()
        if not self.completion.done():
            return JobState.RUNNING
        if self.completion.cancelled():
            return JobState.CANCELLED
        if self.completion.exception() is not None:
            return JobState.UNKNOWN
        return self.completion.result()

    def __repr__(self) -> str:
        return f"JobHandle(job_id={self.job_id!r}, state={self.state()})"
