# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Base class for benchmark bodies."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

from sciobench.engine.context import ExecutionContext
from sciobench.orchestrator.models import BenchmarkDefinition


class Benchmark(ABC):
    """A workload declared against an :class:`ExecutionContext`.

    The benchmark name is the subclass name. ``variants`` maps a name suffix to
    extra submission arguments; each entry becomes an additional configuration.
    """

    def __init__(self, variants: Mapping[str, Sequence[str]] | None = None) -> None:
        self.definition = BenchmarkDefinition(
            name=type(self).__name__,
            variants={suffix: tuple(args) for suffix, args in (variants or {}).items()},
        )

    @property
    def name(self) -> str:
        return self.definition.name

    @abstractmethod
    def build(self, context: ExecutionContext) -> None:
        """Populate ``context`` with this benchmark's job graph."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(variants={list(self.definition.variants)})"
