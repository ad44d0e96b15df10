# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Expansion of benchmark definitions into run configurations."""

from sciobench.orchestrator.models import BenchmarkDefinition, RunConfiguration

__all__ = [
    "expand",
]


def expand(definition: BenchmarkDefinition) -> list[RunConfiguration]:
    """Expand a definition into its base configuration followed by its variants.

    The base configuration is named after the definition and has no extra
    arguments. Each variant yields ``{name}{suffix}`` with the variant's
    arguments, in the variant mapping's insertion order.
    """
    configurations = [RunConfiguration(name=definition.name)]
    configurations.extend(
        RunConfiguration(name=f"{definition.name}{suffix}", extra_args=args)
        for suffix, args in definition.variants.items()
    )
    return configurations
