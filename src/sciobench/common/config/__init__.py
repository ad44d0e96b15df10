# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Harness configuration."""

from sciobench.common.config.harness_config import (
    BenchmarkSettings,
    EngineConfig,
    EngineType,
    HarnessConfig,
    MetadataSource,
    ReportConfig,
)
from sciobench.common.config.loader import load_harness_config

__all__ = [
    "BenchmarkSettings",
    "EngineConfig",
    "EngineType",
    "HarnessConfig",
    "MetadataSource",
    "ReportConfig",
    "load_harness_config",
]
