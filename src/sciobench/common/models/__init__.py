# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared model base classes."""

from sciobench.common.models.base_models import FrozenModel, SciobenchBaseModel

__all__ = [
    "FrozenModel",
    "SciobenchBaseModel",
]
