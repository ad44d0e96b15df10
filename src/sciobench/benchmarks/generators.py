# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Synthetic data sources used by the benchmark bodies.

Each source is a set of partition seeds, every seed holding the number of
elements its partition must generate, followed by a ``Fill`` step that the
engine expands into random values.
"""

from sciobench.engine.context import Collection, ExecutionContext

M = 1_000_000
K = 1_000
NUM_PARTITIONS = 100


def _partition_seeds(context: ExecutionContext, n: int) -> Collection:
    return context.parallelize([n // NUM_PARTITIONS] * NUM_PARTITIONS)


def random_uuids(context: ExecutionContext, n: int) -> Collection:
    """``n`` random UUID strings."""
    return _partition_seeds(context, n).apply("Fill", generator="uuid")


def random_kvs(context: ExecutionContext, n: int, num_unique_keys: int) -> Collection:
    """``n`` pairs of ``("key<i>", uuid)`` with ``i`` drawn from ``num_unique_keys`` keys."""
    return _partition_seeds(context, n).apply(
        "Fill", generator="kv", key_prefix="key", num_unique_keys=num_unique_keys
    )
