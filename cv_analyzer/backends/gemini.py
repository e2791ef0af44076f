"""
Gemini backend (generateContent, key in query string).

Declares the output schema formally through generationConfig.responseSchema.
Structured outputs are large, so the timeout is generous.
"""

from typing import Any

from cv_analyzer.backends.base import AuthStyle, BackendDescriptor, ProviderStrategy
from cv_analyzer.backends.prompts import RESPONSE_SCHEMA, SYSTEM_PROMPT, build_user_prompt
from cv_analyzer.schemas import AnalysisRequest

GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
GEMINI_TIMEOUT_MS = 180_000
GEMINI_MAX_OUTPUT_TOKENS = 65536
GEMINI_TOP_P = 0.95
GEMINI_TOP_K = 64


def gemini_descriptor(api_key: str, model: str = "gemini-2.5-flash") -> BackendDescriptor:
    return BackendDescriptor(
        provider="gemini",
        name="Gemini",
        endpoint=GEMINI_API_URL,
        auth_style=AuthStyle.QUERY_PARAM_KEY,
        api_key=api_key,
        model=model,
        request_timeout_ms=GEMINI_TIMEOUT_MS,
        max_output_tokens=GEMINI_MAX_OUTPUT_TOKENS,
    )


def build_body(request: AnalysisRequest, descriptor: BackendDescriptor) -> dict[str, Any]:
    user_prompt = build_user_prompt(
        request.resume_text,
        request.jobs_payload(),
        request.filters_payload(),
    )
    return {
        "contents": [{"parts": [{"text": user_prompt}]}],
        "systemInstruction": {"parts": [{"text": SYSTEM_PROMPT}]},
        "generationConfig": {
            "responseMimeType": descriptor.response_mime_type,
            "responseSchema": RESPONSE_SCHEMA,
            "temperature": descriptor.temperature,
            "topP": GEMINI_TOP_P,
            "topK": GEMINI_TOP_K,
            "maxOutputTokens": descriptor.max_output_tokens,
        },
    }


def extract_text(body: dict[str, Any]) -> str | None:
    """candidates[0].content.parts[0].text"""
    candidates = body.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return None
    parts = (candidates[0].get("content") or {}).get("parts") or []
    if not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    return text if isinstance(text, str) and text else None


GEMINI = ProviderStrategy(build_body=build_body, extract_text=extract_text)
