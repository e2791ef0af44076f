"""
Backends for CV analysis.

- groq: OpenAI-compatible chat completions, bearer token, JSON mode
- gemini: generateContent, key in URL, formal response schema
"""

from cv_analyzer.backends.base import AuthStyle, BackendDescriptor, ProviderStrategy
from cv_analyzer.backends.gemini import GEMINI, gemini_descriptor
from cv_analyzer.backends.groq import GROQ, groq_descriptor
from cv_analyzer.config import Settings
from cv_analyzer.errors import ConfigurationError

STRATEGIES: dict[str, ProviderStrategy] = {
    "groq": GROQ,
    "gemini": GEMINI,
}


def get_strategy(descriptor: BackendDescriptor) -> ProviderStrategy:
    return STRATEGIES[descriptor.provider]


def descriptor_from_settings(settings: Settings, backend: str | None = None) -> BackendDescriptor:
    """Build the active descriptor. No fallback between providers."""
    name = (backend or settings.analysis_backend or "").strip().lower()
    if name == "gemini":
        return gemini_descriptor(settings.gemini_api_key, model=settings.gemini_model)
    if name == "groq":
        return groq_descriptor(settings.groq_api_key, model=settings.groq_model)
    raise ConfigurationError(
        f"Unknown analysis backend '{name}'. Set ANALYSIS_BACKEND to 'gemini' or 'groq'."
    )


__all__ = [
    "AuthStyle",
    "BackendDescriptor",
    "ProviderStrategy",
    "descriptor_from_settings",
    "gemini_descriptor",
    "get_strategy",
    "groq_descriptor",
]
