# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Interfaces of the external collaborators the orchestrator drives."""

from typing import Protocol, runtime_checkable

from sciobench.engine.models import JobHandle, JobMetadata, JobSpecification, JobView


@runtime_checkable
class ExecutionEngine(Protocol):
    """Runs submitted jobs remotely.

    ``submit`` must return as soon as the job is accepted; it is called once per
    configuration from inside the orchestrator's event loop.
    """

    def submit(self, spec: JobSpecification) -> JobHandle: ...


@runtime_checkable
class JobMetadataService(Protocol):
    """Answers job metadata queries (timestamps and metrics)."""

    async def get_job_metadata(
        self, project_id: str, job_id: str, view: JobView = JobView.ALL
    ) -> JobMetadata: ...
