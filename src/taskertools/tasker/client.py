from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx

from taskertools.core.console import get_logger
from taskertools.core.result import TaskerRequestError

RUN_TASK_PATH = "/run_task"

logger = get_logger(__name__)


class TaskerClient:
    """Run Tasker tasks by name through Tasker's HTTP endpoint."""

    def __init__(
        self,
        host: str = "0.0.0.0",
        port: int = 1821,
        *,
        api_key: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = f"http://{host}:{port}"
        self.api_key = api_key
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            return {}
        return {"Authorization": f"Bearer {self.api_key}"}

    async def run_task(self, tasker_name: str, arguments: Mapping[str, Any]) -> str:
        """POST ``{name, arguments}`` to ``/run_task`` and return the body text."""
        url = f"{self.base_url}{RUN_TASK_PATH}"
        payload = {"name": tasker_name, "arguments": dict(arguments)}
        logger.debug("Running Tasker task %s via %s", tasker_name, url)

        try:
            resp = await self.client.post(url, json=payload, headers=self._headers())
        except httpx.HTTPError as exc:
            raise TaskerRequestError(
                f"Request to Tasker failed: {exc}",
                context={"task": tasker_name, "url": url},
            ) from exc

        if resp.status_code != httpx.codes.OK:
            raise TaskerRequestError(
                f"HTTP error: {resp.status_code}, body: {resp.text}",
                context={"task": tasker_name},
            )
        return resp.text

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> TaskerClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
