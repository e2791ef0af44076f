"""
CV analysis entry point.

RequestBuilder -> TransportClient (driven by RetryController)
-> ResponseExtractor -> ResultNormalizer, strictly in sequence.
"""

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from cv_analyzer.analysis.cancellation import CancellationToken
from cv_analyzer.analysis.normalizer import normalize
from cv_analyzer.analysis.request_builder import build_request
from cv_analyzer.analysis.retry import RetryController
from cv_analyzer.analysis.transport import TransportClient
from cv_analyzer.backends import BackendDescriptor, get_strategy
from cv_analyzer.errors import ConfigurationError, ParseError
from cv_analyzer.schemas import AnalysisRequest, AnalysisResult, Filters, Job
from cv_analyzer.utils.parser import extract_json_object

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _http_client(client: httpx.AsyncClient | None) -> AsyncIterator[httpx.AsyncClient]:
    """Use the caller's client, or own one for the duration of the call."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient() as owned:
        yield owned


def _make_request(
    resume_text: str,
    jobs: list[dict[str, Any] | Job] | None,
    filters: dict[str, Any] | Filters | None,
) -> AnalysisRequest:
    try:
        return AnalysisRequest(
            resume_text=resume_text or "",
            jobs=list(jobs or []),
            filters=filters or {},
        )
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid jobs or filters format: {e.error_count()} error(s)") from e


async def analyze(
    resume_text: str,
    jobs: list[dict[str, Any] | Job] | None,
    filters: dict[str, Any] | Filters | None,
    descriptor: BackendDescriptor,
    *,
    client: httpx.AsyncClient | None = None,
    retry: RetryController | None = None,
    cancel_token: CancellationToken | None = None,
) -> AnalysisResult:
    """
    Score a résumé against job postings with the configured backend.

    Args:
        resume_text: Plain text extracted from the résumé
        jobs: Job postings, forwarded to the model as-is
        filters: Caller filters, forwarded to the model as-is
        descriptor: Active backend, including its credential
        client: Optional shared httpx client
        retry: Retry policy (defaults to 3 attempts, 1s base delay)
        cancel_token: Aborts the HTTP call and any backoff sleep when fired

    Returns:
        AnalysisResult with job matches sorted by suitability

    Raises:
        ConfigurationError, TransportError, ParseError, ValidationError,
        AnalysisCancelled
    """
    if not descriptor.has_credential:
        raise ConfigurationError(
            f"{descriptor.name} API key is not configured. Please set it in your .env file."
        )

    request = _make_request(resume_text, jobs, filters)
    payload = build_request(request, descriptor)
    strategy = get_strategy(descriptor)
    retry = retry or RetryController()

    logger.info(
        f"Calling {descriptor.name} API with model: {descriptor.model} "
        f"({len(request.jobs)} jobs, API key present: yes)"
    )

    async with _http_client(client) as http:
        transport = TransportClient(http)
        response = await retry.run(
            lambda: transport.send(payload, descriptor),
            cancel_token=cancel_token,
            label=f"{descriptor.name} API",
        )

    text = strategy.extract_text(response.body)
    if text is None:
        logger.error(f"Invalid {descriptor.name} response structure")
        raise ParseError(
            json.dumps(response.body, ensure_ascii=False),
            reason="Could not parse the analysis from the AI. The response was empty or malformed",
        )

    logger.debug(f"Model output preview: {text[:200]!r}")
    parsed = extract_json_object(text)
    result = normalize(parsed, max_matches=len(request.jobs))

    logger.info(f"Analysis complete: {len(result.job_matches)} job matches")
    return result
