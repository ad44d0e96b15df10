# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment variable settings for the harness.

Every setting can be provided through an environment variable using the
``SCIOBENCH_<GROUP>_<NAME>`` convention, e.g. ``SCIOBENCH_DATAFLOW_ACCESS_TOKEN``.
Settings are read once at import time and may be overridden at runtime by
assigning to the attributes of :data:`Environment`.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _ConfigSettings(BaseSettings):
    """Configuration file discovery."""

    model_config = SettingsConfigDict(env_prefix="SCIOBENCH_CONFIG_")

    FILE: Path | None = Field(
        default=None,
        description="Path to a JSON or YAML harness configuration file.",
    )


class _DataflowSettings(BaseSettings):
    """Settings for the Dataflow job metadata REST client."""

    model_config = SettingsConfigDict(env_prefix="SCIOBENCH_DATAFLOW_")

    ENDPOINT: str = Field(
        default="https://dataflow.googleapis.com/v1b3",
        description="Base URL of the Dataflow REST API.",
    )
    ACCESS_TOKEN: str | None = Field(
        default=None,
        description="OAuth2 bearer token used for metadata requests.",
    )
    TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Timeout applied to each metadata request.",
    )


class _LocalSettings(BaseSettings):
    """Settings for the in-process dry-run engine."""

    model_config = SettingsConfigDict(env_prefix="SCIOBENCH_LOCAL_")

    JOB_DURATION_SECONDS: float = Field(
        default=1.0,
        ge=0,
        description="Simulated wall-clock duration of each local job.",
    )


class _LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SCIOBENCH_LOGGING_")

    LEVEL: str = Field(default="INFO", description="Default log level.")


class _Environment:
    """Namespace grouping all environment settings."""

    def __init__(self) -> None:
        self.CONFIG = _ConfigSettings()
        self.DATAFLOW = _DataflowSettings()
        self.LOCAL = _LocalSettings()
        self.LOGGING = _LoggingSettings()


Environment = _Environment()
