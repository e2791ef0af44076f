import pydantic
import pytest

from cv_analyzer.backends import AuthStyle, descriptor_from_settings
from cv_analyzer.config import Settings
from cv_analyzer.errors import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ANALYSIS_BACKEND", "GROQ_API_KEY", "GROQ_MODEL", "GEMINI_API_KEY", "GEMINI_MODEL"):
        monkeypatch.delenv(name, raising=False)


def _settings(**overrides):
    return Settings(_env_file=None, **overrides)


def test_defaults_select_gemini():
    settings = _settings(gemini_api_key="AIza-x")
    descriptor = descriptor_from_settings(settings)

    assert descriptor.provider == "gemini"
    assert descriptor.auth_style == AuthStyle.QUERY_PARAM_KEY
    assert descriptor.model == "gemini-2.5-flash"
    assert descriptor.request_timeout_ms == 180_000
    assert descriptor.max_output_tokens == 65536


def test_groq_selected_from_environment(monkeypatch):
    monkeypatch.setenv("ANALYSIS_BACKEND", "groq")
    monkeypatch.setenv("GROQ_API_KEY", "gsk-env")
    monkeypatch.setenv("GROQ_MODEL", "llama-3.3-70b-versatile")
    descriptor = descriptor_from_settings(_settings())

    assert descriptor.provider == "groq"
    assert descriptor.auth_style == AuthStyle.BEARER_HEADER
    assert descriptor.api_key == "gsk-env"
    assert descriptor.model == "llama-3.3-70b-versatile"
    assert descriptor.request_timeout_ms == 60_000


def test_explicit_backend_overrides_setting():
    settings = _settings(analysis_backend="gemini", groq_api_key="gsk-x")
    assert descriptor_from_settings(settings, "GROQ").provider == "groq"


def test_no_fallback_to_other_provider_key():
    settings = _settings(analysis_backend="groq", gemini_api_key="AIza-only")
    descriptor = descriptor_from_settings(settings)
    assert descriptor.provider == "groq"
    assert not descriptor.has_credential


def test_unknown_backend_is_configuration_error():
    with pytest.raises(ConfigurationError):
        descriptor_from_settings(_settings(analysis_backend="openai"))


def test_descriptor_hides_key_and_is_frozen():
    descriptor = descriptor_from_settings(_settings(groq_api_key="gsk-secret"), "groq")
    assert "gsk-secret" not in repr(descriptor)
    with pytest.raises(pydantic.ValidationError):
        descriptor.api_key = "other"
