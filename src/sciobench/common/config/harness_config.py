# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Harness configuration models."""

import re
from enum import Enum

from pydantic import Field, field_validator, model_validator

from sciobench.common.models import SciobenchBaseModel

DEFAULT_PROJECT_ID = "scio-playground"
SHUFFLE_SERVICE_ARGS = ["--experiments=shuffle_mode=service"]


class EngineType(str, Enum):
    """Execution backends the CLI knows how to construct."""

    LOCAL = "local"
    """In-process dry-run engine. Jobs are simulated, nothing leaves the machine."""

    PLUGIN = "plugin"
    """Engine built by a user factory given as ``module:callable``."""


class MetadataSource(str, Enum):
    """Where job metadata and metrics are fetched from."""

    ENGINE = "engine"
    """The engine itself implements the metadata service (local engine)."""

    DATAFLOW = "dataflow"
    """The Dataflow v1b3 REST API."""


class BenchmarkSettings(SciobenchBaseModel):
    """Arguments shared by every submitted job."""

    project_id: str = Field(
        default=DEFAULT_PROJECT_ID,
        description="Cloud project the jobs run in and metadata is read from.",
    )
    runner: str = Field(default="DataflowRunner")
    num_workers: int = Field(default=4, ge=1)
    worker_machine_type: str = Field(default="n1-standard-4")
    autoscaling_algorithm: str = Field(default="NONE")
    extra_common_args: list[str] = Field(
        default_factory=list,
        description="Additional flags appended after the standard common arguments.",
    )
    shuffle_variants: dict[str, list[str]] = Field(
        default_factory=lambda: {"ShuffleService": list(SHUFFLE_SERVICE_ARGS)},
        description="Variants applied to the shuffle-heavy benchmarks.",
    )
    run_prefix: str = Field(
        default="ScioBenchmark",
        description="Prefix of every job name; a UTC timestamp is appended per run.",
    )

    @property
    def common_args(self) -> list[str]:
        return [
            f"--project={self.project_id}",
            f"--runner={self.runner}",
            f"--numWorkers={self.num_workers}",
            f"--workerMachineType={self.worker_machine_type}",
            f"--autoscalingAlgorithm={self.autoscaling_algorithm}",
            *self.extra_common_args,
        ]


class EngineConfig(SciobenchBaseModel):
    type: EngineType = Field(default=EngineType.LOCAL)
    factory: str | None = Field(
        default=None,
        description="Import path 'package.module:callable' returning an ExecutionEngine. "
        "Required when type is 'plugin'.",
    )
    metadata_source: MetadataSource = Field(default=MetadataSource.ENGINE)
    job_duration_seconds: float | None = Field(
        default=None,
        ge=0,
        description="Simulated job duration for the local engine. "
        "Falls back to SCIOBENCH_LOCAL_JOB_DURATION_SECONDS.",
    )

    @model_validator(mode="after")
    def _check_factory(self) -> "EngineConfig":
        if self.type == EngineType.PLUGIN and not self.factory:
            raise ValueError("engine.factory is required when engine.type is 'plugin'")
        if self.factory is not None and ":" not in self.factory:
            raise ValueError(
                f"engine.factory must look like 'package.module:callable', got {self.factory!r}"
            )
        return self


class ReportConfig(SciobenchBaseModel):
    metric_prefix: str = Field(
        default="Total", description="Only metrics whose name starts with this are reported."
    )
    excluded_context: str = Field(
        default="tentative",
        description="Metrics whose context carries this marker are dropped.",
    )
    label_width: int = Field(default=20, ge=1)


class HarnessConfig(SciobenchBaseModel):
    """Top level configuration of one orchestration run."""

    name_filter: str = Field(
        default=".*",
        description="Regular expression matched against whole benchmark names.",
    )
    user: str | None = Field(
        default=None,
        description="Identity embedded in job names. Defaults to the current OS user.",
    )
    benchmarks: BenchmarkSettings = Field(default_factory=BenchmarkSettings)
    engine: EngineConfig = Field(default_factory=EngineConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @field_validator("name_filter")
    @classmethod
    def _check_name_filter(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid name filter {value!r}: {e}") from e
        return value
