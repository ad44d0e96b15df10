# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for environment settings."""

from pathlib import Path

from sciobench.common.environment import (
    _ConfigSettings,
    _DataflowSettings,
    _LocalSettings,
)


class TestEnvironmentSettings:
    def test_reads_prefixed_variables(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SCIOBENCH_CONFIG_FILE", str(tmp_path / "bench.yaml"))
        monkeypatch.setenv("SCIOBENCH_DATAFLOW_ACCESS_TOKEN", "secret")
        monkeypatch.setenv("SCIOBENCH_LOCAL_JOB_DURATION_SECONDS", "0.25")

        assert _ConfigSettings().FILE == tmp_path / "bench.yaml"
        assert _DataflowSettings().ACCESS_TOKEN == "secret"
        assert _LocalSettings().JOB_DURATION_SECONDS == 0.25

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SCIOBENCH_CONFIG_FILE", raising=False)
        monkeypatch.delenv("SCIOBENCH_DATAFLOW_ENDPOINT", raising=False)

        assert _ConfigSettings().FILE is None
        assert _DataflowSettings().ENDPOINT == "https://dataflow.googleapis.com/v1b3"
