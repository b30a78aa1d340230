"""HTTP data lake tracking client.

Posts each allow-listed event as a JSON document to the data lake
collector. Requests run on a single background worker so ``track``
returns immediately and events keep their order.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, Optional

import httpx
from tenacity import Retrying, retry_if_exception, stop_after_attempt, wait_exponential

from crowdtrack.core.config import Settings

logger = logging.getLogger(__name__)


def should_retry(exception: BaseException) -> bool:
    """Retry rate limits, server errors, timeouts and refused connections.

    Args:
        exception: Exception raised by the POST

    Returns:
        True if the request is worth sending again
    """
    if isinstance(exception, httpx.HTTPStatusError):
        status = exception.response.status_code
        return status == 429 or status >= 500
    return isinstance(exception, (httpx.TimeoutException, httpx.ConnectError))


class HttpDataLakeClient:
    """TrackingClient that POSTs ``{"event", "properties"}`` to the collector."""

    def __init__(self, settings: Settings, http_client: Optional[httpx.Client] = None) -> None:
        """Build the HTTP client, retry policy and worker.

        Args:
            settings: Application settings; ``DATA_LAKE_URL`` must be set.
            http_client: Pre-built client, e.g. with a mock transport in tests.
        """
        if not settings.DATA_LAKE_URL:
            raise ValueError("DATA_LAKE_URL is required for the data lake client")

        self._url = settings.DATA_LAKE_URL
        headers = {"Content-Type": "application/json"}
        if settings.DATA_LAKE_API_KEY:
            headers["Authorization"] = f"Bearer {settings.DATA_LAKE_API_KEY}"
        if settings.USER_AGENT:
            headers["User-Agent"] = settings.USER_AGENT

        self._http = http_client or httpx.Client(timeout=settings.DATA_LAKE_TIMEOUT_SECONDS)
        self._headers = headers
        self._retrying = Retrying(
            stop=stop_after_attempt(settings.DATA_LAKE_MAX_ATTEMPTS),
            retry=retry_if_exception(should_retry),
            wait=wait_exponential(multiplier=settings.DATA_LAKE_RETRY_BACKOFF_SECONDS, max=10),
            reraise=True,
        )
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="data-lake")
        self._closed = False
        self._lock = threading.Lock()
        logger.info("Data lake tracking client initialized (url=%s)", self._url)

    def track(self, event: str, properties: Dict[str, Any]) -> Optional[Future]:
        """Queue the event for delivery. Returns the delivery future."""
        payload = {"event": event, "properties": dict(properties)}
        with self._lock:
            if self._closed:
                logger.warning("Data lake client closed, dropping event '%s'", event)
                return None
            return self._executor.submit(self._send, event, payload)

    def _post(self, payload: Dict[str, Any]) -> None:
        response = self._http.post(self._url, json=payload, headers=self._headers)
        response.raise_for_status()

    def _send(self, event: str, payload: Dict[str, Any]) -> None:
        try:
            self._retrying(self._post, payload)
        except httpx.HTTPStatusError as e:
            logger.error(
                "Data lake rejected event '%s': HTTP %s", event, e.response.status_code
            )
        except httpx.HTTPError as e:
            logger.error("Failed to send event '%s' to data lake: %s", event, e)
        except Exception as e:
            logger.error("Unexpected error sending event '%s' to data lake: %s", event, e)

    def close(self) -> None:
        """Drain queued events, then close the HTTP client."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=True)
        self._http.close()
