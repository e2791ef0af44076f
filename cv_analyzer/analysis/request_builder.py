"""
Request building.

Turns an AnalysisRequest into the exact URL, headers, query params and JSON
body for the active backend. Pure: no I/O.
"""

from typing import Any

from pydantic import BaseModel, Field

from cv_analyzer.backends import AuthStyle, BackendDescriptor, get_strategy
from cv_analyzer.errors import ConfigurationError
from cv_analyzer.schemas import AnalysisRequest


class WirePayload(BaseModel):
    url: str
    headers: dict[str, str] = Field(repr=False)
    params: dict[str, str] = Field(default_factory=dict, repr=False)
    body: dict[str, Any]


def build_request(request: AnalysisRequest, descriptor: BackendDescriptor) -> WirePayload:
    """Build the wire payload. Raises ConfigurationError for empty résumé text."""
    if not request.resume_text or not request.resume_text.strip():
        raise ConfigurationError("Résumé text is empty. Could not extract text from the document.")

    headers = {"Content-Type": "application/json"}
    params = {}
    if descriptor.auth_style == AuthStyle.BEARER_HEADER:
        headers["Authorization"] = f"Bearer {descriptor.api_key}"
    elif descriptor.auth_style == AuthStyle.QUERY_PARAM_KEY:
        params["key"] = descriptor.api_key

    body = get_strategy(descriptor).build_body(request, descriptor)
    return WirePayload(url=descriptor.url, headers=headers, params=params, body=body)
