# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the benchmark catalogue and selection."""

import pytest

from sciobench.benchmarks import default_benchmarks, select_benchmarks
from sciobench.benchmarks.generators import M, NUM_PARTITIONS
from sciobench.common.config import BenchmarkSettings
from sciobench.engine.context import ExecutionContext
from sciobench.orchestrator.expander import expand

ALL_NAMES = [
    "GroupByKey",
    "GroupAll",
    "Join",
    "HashJoin",
    "SingletonSideInput",
    "IterableSideInput",
    "ListSideInput",
    "MapSideInput",
    "MultiMapSideInput",
]


class TestDefaultBenchmarks:
    def test_order_and_names(self):
        assert [b.name for b in default_benchmarks()] == ALL_NAMES

    def test_shuffle_variants_only_on_shuffle_benchmarks(self):
        with_variants = [b.name for b in default_benchmarks() if b.definition.variants]

        assert with_variants == ["GroupByKey", "GroupAll", "Join"]

    def test_default_shuffle_variant_args(self):
        group_by_key = default_benchmarks()[0]

        assert [c.name for c in expand(group_by_key.definition)] == [
            "GroupByKey",
            "GroupByKeyShuffleService",
        ]
        assert group_by_key.definition.variants["ShuffleService"] == (
            "--experiments=shuffle_mode=service",
        )

    def test_custom_shuffle_variants(self):
        settings = BenchmarkSettings(shuffle_variants={"Legacy": ["--experiments=x"]})

        join = default_benchmarks(settings)[2]

        assert join.definition.variants == {"Legacy": ("--experiments=x",)}

    @pytest.mark.parametrize("index", range(len(ALL_NAMES)))
    def test_every_body_builds_a_graph(self, index):
        benchmark = default_benchmarks()[index]
        context = ExecutionContext([])
        context.set_app_name(benchmark.name)
        context.set_job_name(benchmark.name.lower())

        benchmark.build(context)
        spec = context.to_job_specification()

        assert spec.steps
        assert any(step.transform == "Fill" for step in spec.steps)

    def test_group_by_key_sizes(self):
        benchmark = default_benchmarks()[0]
        context = ExecutionContext([])

        benchmark.build(context)

        seeds, fill, group_by, map_values = context.steps
        assert seeds.params["values"] == [100 * M // NUM_PARTITIONS] * NUM_PARTITIONS
        assert fill.params == {"generator": "uuid"}
        assert group_by.params == {"key": "random_int", "num_keys": 10_000}
        assert map_values.inputs == (group_by.name,)

    def test_side_input_benchmark_wires_side_step(self):
        benchmark = default_benchmarks()[ALL_NAMES.index("MapSideInput")]
        context = ExecutionContext([])

        benchmark.build(context)

        last = context.steps[-1]
        assert last.transform == "MapWithSideInputs"
        assert len(last.inputs) == 2
        side = next(s for s in context.steps if s.name == last.inputs[1])
        assert side.transform == "AsMapView"


class TestSelectBenchmarks:
    @pytest.mark.parametrize(
        "pattern, expected",
        [
            (".*", ALL_NAMES),
            ("Join", ["Join"]),
            ("Group.*", ["GroupByKey", "GroupAll"]),
            (".*SideInput", ALL_NAMES[4:]),
            ("Joi", []),
        ],
    )
    def test_whole_name_match(self, pattern, expected):
        assert [b.name for b in select_benchmarks(default_benchmarks(), pattern)] == expected
