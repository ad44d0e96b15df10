# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Benchmark definitions."""

from sciobench.benchmarks.base import Benchmark
from sciobench.benchmarks.catalog import (
    GroupAll,
    GroupByKey,
    HashJoin,
    IterableSideInput,
    Join,
    ListSideInput,
    MapSideInput,
    MultiMapSideInput,
    SingletonSideInput,
)
from sciobench.benchmarks.registry import default_benchmarks, select_benchmarks

__all__ = [
    "Benchmark",
    "GroupAll",
    "GroupByKey",
    "HashJoin",
    "IterableSideInput",
    "Join",
    "ListSideInput",
    "MapSideInput",
    "MultiMapSideInput",
    "SingletonSideInput",
    "default_benchmarks",
    "select_benchmarks",
]
