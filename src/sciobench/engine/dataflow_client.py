# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Job metadata client for the Dataflow v1b3 REST API."""

from typing import Any

import httpx
from pydantic import ValidationError

from sciobench.common.environment import Environment
from sciobench.common.exceptions import MetadataFetchError
from sciobench.common.mixins import LoggerMixin
from sciobench.engine.models import JobMetadata, JobView


class DataflowMetadataClient(LoggerMixin):
    """Fetches job timestamps and metrics from Dataflow.

    Two calls are made per job: ``projects.jobs.get`` for the job description and
    ``projects.jobs.getMetrics`` for its metric updates.
    """

    def __init__(
        self,
        access_token: str | None = None,
        endpoint: str | None = None,
        timeout_seconds: float | None = None,
        client: httpx.AsyncClient | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._endpoint = (endpoint or Environment.DATAFLOW.ENDPOINT).rstrip("/")
        token = access_token or Environment.DATAFLOW.ACCESS_TOKEN
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        else:
            self.warning("No Dataflow access token configured; requests are unauthenticated")
        self._client = client or httpx.AsyncClient(
            timeout=timeout_seconds or Environment.DATAFLOW.TIMEOUT_SECONDS
        )
        self._headers = headers

    async def __aenter__(self) -> "DataflowMetadataClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_job_metadata(
        self, project_id: str, job_id: str, view: JobView = JobView.ALL
    ) -> JobMetadata:
        job_url = f"{self._endpoint}/projects/{project_id}/jobs/{job_id}"
        job = await self._get_json(job_id, job_url, params={"view": view.value})
        metrics = await self._get_json(job_id, f"{job_url}/metrics")

        try:
            return JobMetadata.model_validate(
                {**job, "metrics": metrics.get("metrics", [])}
            )
        except ValidationError as e:
            raise MetadataFetchError(job_id, f"unexpected response shape: {e}") from e

    async def _get_json(
        self, job_id: str, url: str, params: dict[str, str] | None = None
    ) -> dict[str, Any]:
        self.debug(lambda: f"GET {url} params={params}")
        try:
            response = await self._client.get(url, params=params, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise MetadataFetchError(
                job_id, f"HTTP {e.response.status_code} from {url}"
            ) from e
        except httpx.RequestError as e:
            raise MetadataFetchError(job_id, f"request to {url} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise MetadataFetchError(job_id, f"non-JSON response from {url}") from e
        if not isinstance(data, dict):
            raise MetadataFetchError(job_id, f"expected a JSON object from {url}")
        return data
