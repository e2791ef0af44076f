"""
Groq backend (OpenAI-compatible chat completions, bearer token).

Has no formal schema support: the schema is described in the system prompt
and the model is forced into JSON mode.
"""

from typing import Any

from cv_analyzer.backends.base import AuthStyle, BackendDescriptor, ProviderStrategy
from cv_analyzer.backends.prompts import (
    JSON_ONLY_REMINDER,
    SCHEMA_SYSTEM_PROMPT,
    build_user_prompt,
)
from cv_analyzer.schemas import AnalysisRequest

GROQ_API_URL = "https://api.groq.com/openai/v1/chat/completions"
GROQ_TIMEOUT_MS = 60_000
GROQ_MAX_TOKENS = 8192


def groq_descriptor(api_key: str, model: str = "llama-3.1-70b-versatile") -> BackendDescriptor:
    return BackendDescriptor(
        provider="groq",
        name="Groq",
        endpoint=GROQ_API_URL,
        auth_style=AuthStyle.BEARER_HEADER,
        api_key=api_key,
        model=model,
        request_timeout_ms=GROQ_TIMEOUT_MS,
        max_output_tokens=GROQ_MAX_TOKENS,
    )


def build_body(request: AnalysisRequest, descriptor: BackendDescriptor) -> dict[str, Any]:
    user_prompt = build_user_prompt(
        request.resume_text,
        request.jobs_payload(),
        request.filters_payload(),
        reminder=JSON_ONLY_REMINDER,
    )
    return {
        "model": descriptor.model,
        "messages": [
            {"role": "system", "content": SCHEMA_SYSTEM_PROMPT},
            {"role": "user", "content": user_prompt},
        ],
        "temperature": descriptor.temperature,
        "max_tokens": descriptor.max_output_tokens,
        "response_format": {"type": "json_object"},
    }


def extract_text(body: dict[str, Any]) -> str | None:
    """choices[0].message.content"""
    choices = body.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message") or {}
    content = message.get("content")
    return content if isinstance(content, str) and content else None


GROQ = ProviderStrategy(build_body=build_body, extract_text=extract_text)
