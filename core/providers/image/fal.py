"""HTTP client for the fal.ai queue API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, Optional

import httpx

from config.image.providers import fal as fal_config
from core.exceptions import ProviderError

logger = logging.getLogger(__name__)

LogSink = Callable[[str], None]

PROVIDER_NAME = "fal"


class FalQueueClient:
    """Client handle for submitting and awaiting fal.ai queue jobs."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = fal_config.DEFAULT_QUEUE_BASE_URL,
        timeout: float = fal_config.REQUEST_TIMEOUT_SECONDS,
        poll_interval: float = fal_config.POLL_INTERVAL_SECONDS,
    ):
        """
        Initialize the fal.ai queue client.

        Args:
            api_key: fal.ai API key (``FAL_KEY``); calls fail when missing
            base_url: Queue API base URL
            timeout: Per-request timeout in seconds
            poll_interval: Status polling interval in seconds
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.poll_interval = poll_interval

    def _headers(self) -> Dict[str, str]:
        if not self.api_key:
            raise ProviderError(
                "fal.ai API key not configured. Set the FAL_KEY environment variable.",
                provider=PROVIDER_NAME,
            )
        return {
            "Authorization": f"Key {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _request(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        *,
        json_data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Make an HTTP request to the queue API and return the JSON body.

        Raises:
            ProviderError: On HTTP errors, transport failures or non-JSON bodies
        """
        headers = self._headers()
        try:
            if method == "GET":
                response = await client.get(url, headers=headers, params=params)
            elif method == "POST":
                response = await client.post(url, headers=headers, json=json_data)
            else:
                raise ValueError(f"Unsupported HTTP method: {method}")
        except httpx.RequestError as exc:
            raise ProviderError(
                f"fal.ai request failed: {exc}",
                provider=PROVIDER_NAME,
                original_error=exc,
            ) from exc

        if response.status_code >= 400:
            detail = _error_detail(response)
            logger.error("fal.ai API error %s for %s: %s", response.status_code, url, detail)
            raise ProviderError(
                f"fal.ai API error ({response.status_code}): {detail}",
                provider=PROVIDER_NAME,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError(
                "fal.ai returned a non-JSON response",
                provider=PROVIDER_NAME,
                original_error=exc,
            ) from exc

        if not isinstance(data, dict):
            raise ProviderError("fal.ai returned an unexpected payload", provider=PROVIDER_NAME)
        return data

    async def submit(
        self,
        client: httpx.AsyncClient,
        model_id: str,
        arguments: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Submit a generation job to the queue.

        Args:
            client: Open HTTP client
            model_id: fal.ai endpoint id (e.g. ``fal-ai/recraft-v3``)
            arguments: Model input payload

        Returns:
            Queue handle with ``request_id``, ``status_url`` and ``response_url``

        Raises:
            ProviderError: On API errors
        """
        url = f"{self.base_url}/{model_id.strip('/')}"
        try:
            handle = await self._request(client, "POST", url, json_data=arguments)
        except ProviderError as exc:
            if exc.status_code == 404:
                raise ProviderError(
                    f"fal.ai model '{model_id}' was not found: {exc.message}",
                    provider=PROVIDER_NAME,
                    original_error=exc,
                    status_code=404,
                ) from exc
            raise

        request_id = handle.get("request_id")
        if not request_id:
            raise ProviderError("No request_id in fal.ai queue response", provider=PROVIDER_NAME)

        handle.setdefault("status_url", f"{url}/requests/{request_id}/status")
        handle.setdefault("response_url", f"{url}/requests/{request_id}")
        logger.info("Submitted fal.ai job (model=%s, request_id=%s)", model_id, request_id)
        return handle

    async def poll_until_complete(
        self,
        client: httpx.AsyncClient,
        handle: Dict[str, Any],
        on_log: Optional[LogSink] = None,
    ) -> None:
        """
        Poll job status until the queue reports completion.

        Log lines reported while the job is in progress are forwarded to
        ``on_log`` once each. There is no overall timeout.

        Raises:
            ProviderError: On API errors or an unknown status
        """
        request_id = handle.get("request_id")
        relayed = 0

        while True:
            status_data = await self._request(
                client, "GET", handle["status_url"], params={"logs": 1}
            )
            status = str(status_data.get("status") or "").upper()

            logs = status_data.get("logs") or []
            if status in (fal_config.STATUS_IN_PROGRESS, fal_config.STATUS_COMPLETED):
                relayed = _relay_logs(logs, relayed, on_log)

            if status == fal_config.STATUS_COMPLETED:
                error = status_data.get("error")
                if error:
                    raise ProviderError(f"fal.ai job failed: {error}", provider=PROVIDER_NAME)
                logger.info("fal.ai job completed (request_id=%s)", request_id)
                return

            if status == fal_config.STATUS_IN_QUEUE:
                logger.debug(
                    "fal.ai job queued (request_id=%s, position=%s)",
                    request_id,
                    status_data.get("queue_position"),
                )
            elif status != fal_config.STATUS_IN_PROGRESS:
                raise ProviderError(f"Unknown fal.ai job status: {status or 'missing'}", provider=PROVIDER_NAME)

            await asyncio.sleep(self.poll_interval)

    async def fetch_result(self, client: httpx.AsyncClient, handle: Dict[str, Any]) -> Dict[str, Any]:
        """Return the result payload of a completed job."""

        return await self._request(client, "GET", handle["response_url"])

    async def subscribe(
        self,
        model_id: str,
        arguments: Dict[str, Any],
        on_log: Optional[LogSink] = None,
    ) -> Dict[str, Any]:
        """
        Submit a job, wait for it to finish and return its result.

        Args:
            model_id: fal.ai endpoint id, passed through unmodified
            arguments: Model input payload
            on_log: Optional sink for progress log lines

        Returns:
            Result payload, typically ``{"images": [{"url": ...}], ...}``

        Raises:
            ProviderError: On submission, execution or transport failure
        """
        self._headers()
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            handle = await self.submit(client, model_id, arguments)
            await self.poll_until_complete(client, handle, on_log)
            return await self.fetch_result(client, handle)


def _relay_logs(logs: Any, already_relayed: int, on_log: Optional[LogSink]) -> int:
    """Forward log messages past ``already_relayed`` and return the new count."""

    if not isinstance(logs, list):
        return already_relayed
    if on_log is not None:
        for entry in logs[already_relayed:]:
            message = entry.get("message") if isinstance(entry, dict) else entry
            if message:
                on_log(str(message))
    return max(already_relayed, len(logs))


def _error_detail(response: httpx.Response) -> str:
    """Extract a readable error message from a fal.ai error response."""

    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase or "unknown error"

    detail = body.get("detail") if isinstance(body, dict) else body
    if isinstance(detail, list):
        parts = []
        for item in detail:
            if isinstance(item, dict):
                location = ".".join(str(part) for part in item.get("loc", []) if part != "body")
                message = item.get("msg") or item.get("message") or str(item)
                parts.append(f"{location}: {message}" if location else str(message))
            else:
                parts.append(str(item))
        return "; ".join(parts)
    if detail:
        return str(detail)
    return response.text or "unknown error"


__all__ = ["FalQueueClient", "LogSink", "PROVIDER_NAME"]
