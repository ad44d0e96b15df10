# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Declarative job graph builder handed to benchmark bodies.

A benchmark populates an :class:`ExecutionContext` with steps; nothing is
executed here. The finished context is turned into a :class:`JobSpecification`
and handed to an execution engine.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from sciobench.engine.models import JobSpecification, StepSpec


class Collection:
    """Output of a step. Applying a transform to it appends a downstream step."""

    def __init__(self, context: "ExecutionContext", step_name: str) -> None:
        self._context = context
        self.step_name = step_name

    def apply(self, transform: str, *side_inputs: "Collection", **params: Any) -> "Collection":
        """Append ``transform`` reading this collection plus any side inputs."""
        for side in side_inputs:
            if side._context is not self._context:
                raise ValueError(
                    f"Side input {side.step_name!r} belongs to a different context"
                )
        inputs = (self.step_name, *(side.step_name for side in side_inputs))
        return self._context._add_step(transform, inputs, params)

    def __repr__(self) -> str:
        return f"Collection({self.step_name!r})"


class ExecutionContext:
    """Collects pipeline arguments, names and the job graph of one configuration."""

    def __init__(self, args: Sequence[str]) -> None:
        self.args: tuple[str, ...] = tuple(args)
        self.app_name: str | None = None
        self.job_name: str | None = None
        self._steps: list[StepSpec] = []
        self._closed = False

    @property
    def steps(self) -> tuple[StepSpec, ...]:
        return tuple(self._steps)

    def set_app_name(self, name: str) -> None:
        self._check_open()
        self.app_name = name

    def set_job_name(self, name: str) -> None:
        self._check_open()
        self.job_name = name

    def parallelize(self, values: Iterable[Any]) -> Collection:
        """Create a source collection from in-memory values."""
        values = list(values)
        return self._add_step("Parallelize", (), {"values": values})

    def _add_step(
        self, transform: str, inputs: tuple[str, ...], params: dict[str, Any]
    ) -> Collection:
        self._check_open()
        name = f"{transform}@{len(self._steps)}"
        self._steps.append(
            StepSpec(name=name, transform=transform, inputs=inputs, params=params)
        )
        return Collection(self, name)

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("ExecutionContext is closed; the job was already built")

    def to_job_specification(self) -> JobSpecification:
        """Freeze the context into a job specification.

        Raises:
            ValueError: If names are missing or no step was added.
        """
        if not self.app_name or not self.job_name:
            raise ValueError("Both app name and job name must be set before submission")
        if not self._steps:
            raise ValueError(f"Job '{self.job_name}' has an empty graph")
        self._closed = True
        return JobSpecification(
            app_name=self.app_name,
            job_name=self.job_name,
            args=self.args,
            steps=tuple(self._steps),
        )
