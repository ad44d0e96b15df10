# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration loader for the harness."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import orjson
from ruamel.yaml import YAML

if TYPE_CHECKING:
    from sciobench.common.config.harness_config import HarnessConfig

_JSON_SUFFIXES = (".json",)
_YAML_SUFFIXES = (".yaml", ".yml")


def _load_config_file(path: Path) -> dict[str, Any]:
    """Read a harness config file (JSON or YAML) into a dict. An empty YAML file yields {}."""
    if not path.is_file():
        raise FileNotFoundError(f"Harness config file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in _JSON_SUFFIXES:
        data = orjson.loads(path.read_bytes())
    elif suffix in _YAML_SUFFIXES:
        data = YAML(typ="safe", pure=True).load(path.read_text())
    else:
        raise ValueError(
            f"Unsupported harness config format {suffix!r} for {path}; "
            "expected .json, .yaml or .yml"
        )

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Harness config must be a mapping at the top level, "
            f"got {type(data).__name__}: {path}"
        )
    return data


def load_harness_config(
    path: Path | None = None, **overrides: Any
) -> HarnessConfig:
    """Load the harness configuration from a file or environment variable.

    The configuration file path is resolved in this order:
    1. Explicit path argument (if provided)
    2. SCIOBENCH_CONFIG_FILE environment variable
    3. Default HarnessConfig() if neither is set

    Keyword overrides that are not None replace top level keys of the loaded
    data, so command line flags win over the file.

    Raises:
        ValidationError: If the configuration is invalid.
        FileNotFoundError: If the file does not exist.
    """
    from sciobench.common.config.harness_config import HarnessConfig
    from sciobench.common.environment import Environment

    config_path = path or Environment.CONFIG.FILE

    data = _load_config_file(Path(config_path)) if config_path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return HarnessConfig(**data)
