# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Submission of run configurations to an execution engine."""

from collections.abc import Callable, Sequence

from sciobench.common.exceptions import SubmissionError
from sciobench.common.mixins import LoggerMixin
from sciobench.engine.context import ExecutionContext
from sciobench.engine.protocols import ExecutionEngine
from sciobench.orchestrator.models import BenchmarkResult, RunConfiguration

__all__ = [
    "JobSubmitter",
    "derive_job_name",
]

BuildFn = Callable[[ExecutionContext], None]


def derive_job_name(configuration_name: str, run_prefix: str, identity: str) -> str:
    """Return ``{run_prefix}-{configuration_name}-{identity}`` in lowercase."""
    return f"{run_prefix}-{configuration_name}-{identity}".lower()


class JobSubmitter(LoggerMixin):
    """Builds one job per configuration and hands it to the engine.

    ``submit`` never waits for the job to run; the returned result carries a
    handle whose completion marker resolves later.
    """

    def __init__(self, engine: ExecutionEngine, **kwargs) -> None:
        super().__init__(**kwargs)
        self.engine = engine

    def submit(
        self,
        configuration: RunConfiguration,
        common_args: Sequence[str],
        run_prefix: str,
        identity: str,
        build: BuildFn,
    ) -> BenchmarkResult:
        """Build and submit the job for ``configuration``.

        Arguments are passed as common arguments followed by the configuration's
        extra arguments, without de-duplication.

        Raises:
            SubmissionError: If building the job graph or submitting it fails.
        """
        context = ExecutionContext([*common_args, *configuration.extra_args])
        context.set_app_name(configuration.name)
        context.set_job_name(derive_job_name(configuration.name, run_prefix, identity))

        try:
            build(context)
            spec = context.to_job_specification()
            handle = self.engine.submit(spec)
        except Exception as e:
            raise SubmissionError(configuration.name, str(e) or type(e).__name__) from e

        self.info(f"Submitted {configuration.name} as job {context.job_name}")
        return BenchmarkResult(
            name=configuration.name,
            extra_args=configuration.extra_args,
            handle=handle,
        )
