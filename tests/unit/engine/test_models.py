# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for engine data models."""

import asyncio

import pytest

from sciobench.engine.models import JobHandle, JobMetadata, JobState, MetricStructuredName


class TestJobState:
    @pytest.mark.parametrize(
        "state, terminal, success",
        [
            (JobState.DONE, True, True),
            (JobState.FAILED, True, False),
            (JobState.CANCELLED, True, False),
            (JobState.UPDATED, True, False),
            (JobState.RUNNING, False, False),
            (JobState.UNKNOWN, False, False),
            (JobState.STOPPED, False, False),
        ],
    )
    def test_terminal_and_success(self, state, terminal, success):
        assert state.is_terminal is terminal
        assert state.is_success is success

    def test_str_is_value(self):
        assert str(JobState.DONE) == "DONE"


class TestMetricStructuredName:
    def test_marker_set_becomes_mapping_keys(self):
        name = MetricStructuredName(name="TotalElements", context={"tentative"})

        assert "tentative" in name.context

    def test_mapping_context_kept(self):
        name = MetricStructuredName(name="X", context={"step": "s1"})

        assert name.context == {"step": "s1"}


class TestJobMetadata:
    def test_parses_camel_case_payload(self):
        metadata = JobMetadata.model_validate(
            {
                "id": "2017-10-17_05_00_00-123",
                "name": "sciobenchmark-1017120000-join-alice",
                "createTime": "2017-10-17T12:00:00.123Z",
                "currentStateTime": "2017-10-17T12:10:00.456Z",
                "currentState": "JOB_STATE_DONE",
                "type": "JOB_TYPE_BATCH",
                "metrics": [
                    {
                        "name": {
                            "origin": "dataflow/v1b3",
                            "name": "TotalVcpuTime",
                            "context": {"tentative": "true"},
                        },
                        "scalar": 1200,
                        "updateTime": "2017-10-17T12:10:00Z",
                    }
                ],
            }
        )

        assert metadata.create_time == "2017-10-17T12:00:00.123Z"
        assert metadata.current_state_time == "2017-10-17T12:10:00.456Z"
        assert metadata.metrics[0].name.context == {"tentative": "true"}
        assert metadata.metrics[0].scalar == 1200


@pytest.mark.asyncio
class TestJobHandle:
    async def test_state_follows_future_without_state_fn(self):
        handle = JobHandle("j", asyncio.get_running_loop().create_future())

        assert handle.state() == JobState.RUNNING
        handle.completion.set_result(JobState.FAILED)
        assert handle.state() == JobState.FAILED

    async def test_cancelled_future_reports_cancelled(self):
        handle = JobHandle("j", asyncio.get_running_loop().create_future())
        handle.completion.cancel()

        assert handle.state() == JobState.CANCELLED

    async def test_state_fn_takes_precedence(self):
        handle = JobHandle(
            "j", asyncio.get_running_loop().create_future(), state_fn=lambda: JobState.STOPPED
        )

        assert handle.state() == JobState.STOPPED
