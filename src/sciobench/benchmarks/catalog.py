# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Benchmark bodies: shuffles, joins and side inputs."""

from sciobench.benchmarks.base import Benchmark
from sciobench.benchmarks.generators import K, M, random_kvs, random_uuids
from sciobench.engine.context import ExecutionContext

# ===== GroupByKey =====


class GroupByKey(Benchmark):
    """100M items, 10K keys, average 10K values per key."""

    def build(self, context: ExecutionContext) -> None:
        (
            random_uuids(context, 100 * M)
            .apply("GroupBy", key="random_int", num_keys=10 * K)
            .apply("MapValues", fn="size")
        )


class GroupAll(Benchmark):
    """10M items, 1 key."""

    def build(self, context: ExecutionContext) -> None:
        (
            random_uuids(context, 10 * M)
            .apply("GroupBy", key="constant", num_keys=1)
            .apply("MapValues", fn="size")
        )


# ===== Join =====


class Join(Benchmark):
    """LHS: 100M items, 10M keys. RHS: 50M items, 5M keys. ~10 values per key."""

    def build(self, context: ExecutionContext) -> None:
        lhs = random_kvs(context, 100 * M, 10 * M)
        lhs.apply("Join", random_kvs(context, 50 * M, 5 * M))


class HashJoin(Benchmark):
    """LHS: 100M items, 10M keys. RHS: 1M items, 100K keys. ~10 values per key."""

    def build(self, context: ExecutionContext) -> None:
        lhs = random_kvs(context, 100 * M, 10 * M)
        lhs.apply("HashJoin", random_kvs(context, M, 100 * K))


# ===== SideInput =====

# Main: 100M, side: 1M


class SingletonSideInput(Benchmark):
    def build(self, context: ExecutionContext) -> None:
        main = random_uuids(context, 100 * M)
        side = (
            random_uuids(context, 1 * M)
            .apply("Map", fn="singleton_set")
            .apply("Sum")
            .apply("AsSingletonView")
        )
        main.apply("MapWithSideInputs", side, fn="side_size")


class IterableSideInput(Benchmark):
    def build(self, context: ExecutionContext) -> None:
        main = random_uuids(context, 100 * M)
        side = random_uuids(context, 1 * M).apply("AsIterableView")
        main.apply("MapWithSideInputs", side, fn="side_head")


class ListSideInput(Benchmark):
    def build(self, context: ExecutionContext) -> None:
        main = random_uuids(context, 100 * M)
        side = random_uuids(context, 1 * M).apply("AsListView")
        main.apply("MapWithSideInputs", side, fn="side_head")


# Main: 1M, side: 100K


class MapSideInput(Benchmark):
    def build(self, context: ExecutionContext) -> None:
        main = random_uuids(context, 1 * M)
        side = (
            main.apply("Sample", with_replacement=False, fraction=0.1)
            .apply("Map", fn="pair_with_uuid")
            .apply("AsMapView")
        )
        main.apply("MapWithSideInputs", side, fn="side_lookup")


class MultiMapSideInput(Benchmark):
    def build(self, context: ExecutionContext) -> None:
        main = random_uuids(context, 1 * M)
        side = (
            main.apply("Sample", with_replacement=False, fraction=0.1)
            .apply("Map", fn="pair_with_uuid")
            .apply("AsMultiMapView")
        )
        main.apply("MapWithSideInputs", side, fn="side_lookup")
