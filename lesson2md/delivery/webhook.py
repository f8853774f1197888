# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
Webhook delivery of rendered lessons.

Posts the rendered Markdown (or a failure report) as JSON to a downstream
automation endpoint. Payload shapes:

    success: {"fullMarkdown", "message", "source", "user", "timestamp"}
    failure: {"message", "status": "failed", "reason", "htmlPreview", "user", "timestamp"}

``timestamp`` is the send time in epoch milliseconds. Transport errors
(connection refused, timeouts) are retried with exponential backoff; an HTTP
error status is not retried.
"""

import logging
import time
from typing import Any

import httpx
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..config import RenderSettings

logger = logging.getLogger(__name__)

# Failure reason codes reported by the CLI
REASON_INVALID_JSON = "invalid_json"
REASON_LESSON_PARSE_FAILED = "lesson_parse_failed"


class DeliveryError(Exception):
    """Webhook delivery failed"""

    pass


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


class WebhookDelivery:
    """
    JSON webhook client for rendered lessons.

    Attributes:
        url: Endpoint receiving the payloads
        source: Origin tag sent with successful deliveries
        user: User sent with every payload
        max_attempts: POST attempts before giving up on transport errors

    Example:
        >>> delivery = WebhookDelivery.from_settings(render_settings)
        >>> delivery.deliver_markdown(markdown, message="weekly sync")
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 30.0,
        source: str = "github-ci",
        user: str = "unknown",
        max_attempts: int = 3,
        client: httpx.Client | None = None,
    ):
        """
        Initialize the webhook client.

        Args:
            url: Endpoint URL
            timeout: Per-request timeout in seconds
            source: Origin tag for successful deliveries
            user: User reported in payloads
            max_attempts: POST attempts on transport errors (>= 1)
            client: Optional pre-built httpx client (tests pass one with a MockTransport)

        Raises:
            DeliveryError: If url is empty
        """
        if not url:
            raise DeliveryError("Webhook URL is not configured")
        self.url = url
        self.source = source
        self.user = user
        self.max_attempts = max_attempts
        self.client = client or httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(
        cls, settings: RenderSettings, client: httpx.Client | None = None
    ) -> "WebhookDelivery":
        return cls(
            settings.webhook_url,
            timeout=settings.webhook_timeout,
            source=settings.delivery_source,
            user=settings.delivery_user,
            max_attempts=settings.webhook_max_attempts,
            client=client,
        )

    def _post(self, payload: dict[str, Any]) -> httpx.Response:
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=4, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                response = self.client.post(self.url, json=payload)
                response.raise_for_status()
        return response

    def deliver_markdown(self, markdown: str, message: str = "") -> httpx.Response:
        """
        Post a rendered lesson.

        Args:
            markdown: Full Markdown document
            message: Free-form message forwarded with the lesson

        Returns:
            The endpoint's response

        Raises:
            DeliveryError: On an HTTP error status or when all attempts fail
        """
        payload = {
            "fullMarkdown": markdown,
            "message": message,
            "source": self.source,
            "user": self.user,
            "timestamp": _timestamp_ms(),
        }
        try:
            response = self._post(payload)
        except httpx.HTTPStatusError as e:
            raise DeliveryError(
                f"Webhook returned {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.TransportError as e:
            raise DeliveryError(
                f"Webhook unreachable after {self.max_attempts} attempt(s): {e}"
            ) from e

        logger.info(f"Delivered lesson to webhook ({response.status_code})")
        return response

    def report_failure(
        self, message: str, reason: str, html_preview: str = ""
    ) -> httpx.Response | None:
        """
        Report a failed render to the webhook.

        Best effort: a failure to report is logged and never raised.

        Returns:
            The endpoint's response, or None if reporting failed
        """
        payload = {
            "message": message,
            "status": "failed",
            "reason": reason,
            "htmlPreview": html_preview,
            "user": self.user,
            "timestamp": _timestamp_ms(),
        }
        try:
            response = self._post(payload)
        except httpx.HTTPError as e:
            logger.error(f"Failed to notify webhook of error: {e}")
            return None

        logger.warning(f"Webhook error report response ({response.status_code}): {response.text}")
        return response

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "WebhookDelivery":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
