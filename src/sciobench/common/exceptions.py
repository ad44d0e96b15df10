# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for the benchmark harness."""


class SciobenchError(Exception):
    """Base class for all harness errors."""


class ConfigurationError(SciobenchError):
    """Raised when the harness configuration is invalid."""


class SubmissionError(SciobenchError):
    """Raised when building or submitting a job fails.

    Submission failures are fatal: no further configuration is submitted once
    one has been raised.
    """

    def __init__(self, configuration_name: str, message: str) -> None:
        super().__init__(f"Failed to submit '{configuration_name}': {message}")
        self.configuration_name = configuration_name


class JobTrackingError(SciobenchError):
    """Raised when a job's completion marker fails instead of resolving to a state."""

    def __init__(self, job_name: str, message: str) -> None:
        super().__init__(f"Lost track of job '{job_name}': {message}")
        self.job_name = job_name


class MetadataFetchError(SciobenchError):
    """Raised when job metadata cannot be retrieved or parsed."""

    def __init__(self, job_id: str | None, message: str) -> None:
        super().__init__(f"Failed to fetch metadata for job '{job_id}': {message}")
        self.job_id = job_id
