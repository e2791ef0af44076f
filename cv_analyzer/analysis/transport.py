"""
Single-attempt HTTP transport.

Executes one POST and classifies the outcome. Retrying is not decided here.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from cv_analyzer.analysis.request_builder import WirePayload
from cv_analyzer.backends import BackendDescriptor
from cv_analyzer.errors import truncate

logger = logging.getLogger(__name__)

# httpx logs every request URL at INFO, and query-key backends carry the
# credential in that URL
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


class ProviderResponse(BaseModel):
    status_code: int
    body: dict[str, Any]


class TransportFailure(BaseModel):
    status_code: int | None = None  # None for network errors and timeouts
    message: str
    retryable: bool


def is_retryable_status(status_code: int) -> bool:
    return status_code == 429 or status_code >= 500


def upstream_error_message(response: httpx.Response) -> str:
    """error.message from a JSON error body, else the raw text."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
    text = response.text.strip()
    if text:
        return truncate(text, 200)
    return response.reason_phrase or f"HTTP {response.status_code}"


def classify_response(response: httpx.Response) -> ProviderResponse | TransportFailure:
    status = response.status_code
    if status == 200:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            return ProviderResponse(status_code=status, body=body)
        return TransportFailure(
            status_code=status,
            message="Provider returned a body that is not a JSON object",
            retryable=False,
        )

    return TransportFailure(
        status_code=status,
        message=upstream_error_message(response),
        retryable=is_retryable_status(status),
    )


class TransportClient:
    """Sends one request through a shared httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def send(
        self, payload: WirePayload, descriptor: BackendDescriptor
    ) -> ProviderResponse | TransportFailure:
        try:
            response = await self.client.post(
                payload.url,
                headers=payload.headers,
                params=payload.params or None,
                json=payload.body,
                timeout=descriptor.timeout_seconds,
            )
        except httpx.TimeoutException:
            return TransportFailure(
                message=f"Request timed out after {descriptor.timeout_seconds:.0f}s",
                retryable=True,
            )
        except httpx.RequestError as e:
            return TransportFailure(message=str(e) or type(e).__name__, retryable=True)

        outcome = classify_response(response)
        if isinstance(outcome, TransportFailure):
            logger.debug(f"{descriptor.name} returned {outcome.status_code}: {outcome.message}")
        return outcome
