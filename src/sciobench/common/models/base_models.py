# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import BaseModel, ConfigDict


class SciobenchBaseModel(BaseModel):
    """Base model for all harness data models."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


class FrozenModel(SciobenchBaseModel):
    """Immutable value object. Instances are hashable and cannot be reassigned."""

    model_config = ConfigDict(extra="forbid", frozen=True)
