# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for configuration expansion."""

import pytest
from pydantic import ValidationError

from sciobench.orchestrator.expander import expand
from sciobench.orchestrator.models import BenchmarkDefinition, RunConfiguration


class TestExpand:
    """Tests for expand()."""

    def test_no_variants_yields_only_base_configuration(self):
        """A definition without variants expands to exactly its base configuration."""
        definition = BenchmarkDefinition(name="HashJoin")

        assert expand(definition) == [RunConfiguration(name="HashJoin", extra_args=())]

    def test_none_variants_treated_as_empty(self):
        definition = BenchmarkDefinition(name="HashJoin", variants=None)

        assert [c.name for c in expand(definition)] == ["HashJoin"]

    def test_base_first_then_each_variant(self):
        """Base configuration comes first, then one configuration per variant."""
        definition = BenchmarkDefinition(
            name="GroupByKey",
            variants={
                "ShuffleService": ["--experiments=shuffle_mode=service"],
                "Large": ["--numWorkers=16", "--workerMachineType=n1-highmem-8"],
            },
        )

        configurations = expand(definition)

        assert len(configurations) == 1 + len(definition.variants)
        assert configurations[0] == RunConfiguration(name="GroupByKey")
        assert configurations[1] == RunConfiguration(
            name="GroupByKeyShuffleService",
            extra_args=("--experiments=shuffle_mode=service",),
        )
        assert configurations[2] == RunConfiguration(
            name="GroupByKeyLarge",
            extra_args=("--numWorkers=16", "--workerMachineType=n1-highmem-8"),
        )

    @pytest.mark.parametrize("num_variants", [0, 1, 2, 5])
    def test_count_and_unique_names(self, num_variants):
        """Expansion yields 1 + |V| configurations with pairwise distinct names."""
        variants = {f"V{i}": [f"--flag{i}=x"] for i in range(num_variants)}
        definition = BenchmarkDefinition(name="Join", variants=variants)

        configurations = expand(definition)
        names = [c.name for c in configurations]

        assert len(configurations) == 1 + num_variants
        assert len(set(names)) == len(names)
        for suffix, args in variants.items():
            assert RunConfiguration(name=f"Join{suffix}", extra_args=tuple(args)) in configurations

    def test_expansion_is_deterministic(self):
        definition = BenchmarkDefinition(
            name="Join", variants={"B": ["--b"], "A": ["--a"], "C": ["--c"]}
        )

        assert expand(definition) == expand(definition)
        assert [c.name for c in expand(definition)] == ["Join", "JoinB", "JoinA", "JoinC"]

    def test_empty_suffix_is_rejected(self):
        """An empty suffix would collide with the base configuration name."""
        with pytest.raises(ValidationError, match="must not be empty"):
            BenchmarkDefinition(name="Join", variants={"": ["--a"]})

    def test_definition_is_immutable(self):
        definition = BenchmarkDefinition(name="Join")

        with pytest.raises(ValidationError):
            definition.name = "Other"
