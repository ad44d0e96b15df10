# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Completion barrier over every submitted job of a run."""

import asyncio
import logging
from collections.abc import Sequence

from sciobench.common.exceptions import JobTrackingError
from sciobench.engine.models import JobState
from sciobench.orchestrator.models import BenchmarkResult

logger = logging.getLogger(__name__)

__all__ = [
    "await_all",
]


async def await_all(results: Sequence[BenchmarkResult]) -> list[JobState]:
    """Wait until every job in ``results`` reaches a terminal state.

    There is no timeout: one job that never finishes stalls the caller.
    Jobs may finish in any order; the returned states follow the order of
    ``results``. A job that ends unsuccessfully is not an error here.

    Completion markers are only observed. Cancelling the caller propagates
    ``CancelledError`` and leaves every marker untouched.

    Raises:
        JobTrackingError: If a completion marker fails or is cancelled
            instead of resolving to a state.
    """
    if not results:
        return []

    pending = len(results)
    logger.info(f"Waiting for {pending} job(s) to finish")

    async def _wait(result: BenchmarkResult) -> JobState:
        nonlocal pending
        try:
            state = await asyncio.shield(result.handle.completion)
        except asyncio.CancelledError as e:
            if not result.handle.completion.cancelled():
                raise
            raise JobTrackingError(result.name, "completion was cancelled") from e
        except Exception as e:
            raise JobTrackingError(result.name, str(e) or type(e).__name__) from e
        pending -= 1
        log = logger.info if state.is_success else logger.warning
        log(f"{result.name} finished in state {state} ({pending} remaining)")
        return state

    return list(await asyncio.gather(*(_wait(r) for r in results)))
