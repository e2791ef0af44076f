"""
Backend descriptors.

A descriptor is immutable configuration naming one provider endpoint and
how to authenticate against it. Exactly one is active per analysis.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any, Literal, NamedTuple

from pydantic import BaseModel, Field

from cv_analyzer.schemas import AnalysisRequest


class AuthStyle(str, Enum):
    BEARER_HEADER = "bearer-header"
    QUERY_PARAM_KEY = "query-param-key"


class BackendDescriptor(BaseModel):
    """Provider configuration, including the credential."""

    provider: Literal["groq", "gemini"]
    name: str
    endpoint: str
    auth_style: AuthStyle
    api_key: str = Field(default="", repr=False)
    model: str
    request_timeout_ms: int
    max_output_tokens: int
    response_mime_type: str = "application/json"
    temperature: float = 0.2

    class Config:
        frozen = True

    @property
    def url(self) -> str:
        return self.endpoint.format(model=self.model)

    @property
    def timeout_seconds(self) -> float:
        return self.request_timeout_ms / 1000

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


class ProviderStrategy(NamedTuple):
    """Per-provider request shape and response text path."""

    build_body: Callable[[AnalysisRequest, BackendDescriptor], dict[str, Any]]
    extract_text: Callable[[dict[str, Any]], str | None]
