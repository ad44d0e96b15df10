# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""The fixed, ordered list of benchmarks and name based selection."""

import re
from collections.abc import Iterable

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
from sciobench.common.config import BenchmarkSettings


def default_benchmarks(settings: BenchmarkSettings | None = None) -> tuple[Benchmark, ...]:
    """Return every benchmark in reporting order.

    The shuffle-heavy benchmarks also run once per shuffle variant.
    """
    settings = settings or BenchmarkSettings()
    shuffle = settings.shuffle_variants
    return (
        GroupByKey(shuffle),
        GroupAll(shuffle),
        Join(shuffle),
        HashJoin(),
        SingletonSideInput(),
        IterableSideInput(),
        ListSideInput(),
        MapSideInput(),
        MultiMapSideInput(),
    )


def select_benchmarks(benchmarks: Iterable[Benchmark], pattern: str) -> list[Benchmark]:
    """Keep the benchmarks whose whole name matches ``pattern``, in order."""
    regex = re.compile(pattern)
    return [b for b in benchmarks if regex.fullmatch(b.name)]
