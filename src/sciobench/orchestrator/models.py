# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models for benchmark orchestration."""

from dataclasses import dataclass, field

from pydantic import Field, field_validator

from sciobench.common.models import FrozenModel
from sciobench.engine.models import JobHandle, JobState


class BenchmarkDefinition(FrozenModel):
    """A named workload plus optional argument variants."""

    name: str = Field(min_length=1, description="Benchmark name, e.g. 'GroupByKey'")
    variants: dict[str, tuple[str, ...]] = Field(
        default_factory=dict,
        description="Variant suffix -> extra submission arguments "
        "(e.g., {'ShuffleService': ('--experiments=shuffle_mode=service',)})",
    )

    @field_validator("variants", mode="before")
    @classmethod
    def _none_means_no_variants(cls, value):
        return {} if value is None else value

    @field_validator("variants")
    @classmethod
    def _check_suffixes(cls, value: dict[str, tuple[str, ...]]) -> dict[str, tuple[str, ...]]:
        if "" in value:
            raise ValueError("Variant suffix must not be empty; it would shadow the base configuration")
        return value


class RunConfiguration(FrozenModel):
    """One concrete configuration of a benchmark, ready for submission."""

    name: str = Field(description="Configuration name, e.g. 'GroupByKeyShuffleService'")
    extra_args: tuple[str, ...] = Field(
        default=(), description="Arguments appended after the common arguments"
    )


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    """A submitted configuration and the handle of its job.

    Created at submission time. Consumers only read it after the completion
    barrier has resolved.
    """

    name: str
    extra_args: tuple[str, ...]
    handle: JobHandle

    @property
    def job_id(self) -> str | None:
        return self.handle.job_id


@dataclass(frozen=True, slots=True)
class EnrichedResult:
    """A finished result with remote timing and filtered metrics.

    Attributes:
        result: The underlying benchmark result
        state: Terminal state observed after the barrier
        create_time: Remote creation timestamp as returned by the metadata service
        finish_time: Remote timestamp of the current (terminal) state
        elapsed: Human readable elapsed period, e.g. "5 seconds"
        metrics: (name, value) pairs sorted by name
        error: Set when the job did not succeed and enrichment was skipped
    """

    result: BenchmarkResult
    state: JobState
    create_time: str | None = None
    finish_time: str | None = None
    elapsed: str | None = None
    metrics: list[tuple[str, str]] = field(default_factory=list)
    error: str | None = None

    @property
    def name(self) -> str:
        return self.result.name

    @property
    def extra_args(self) -> tuple[str, ...]:
        return self.result.extra_args

    @property
    def success(self) -> bool:
        return self.error is None
