"""
Configuration management for CV Analyzer.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Backend selection: "gemini" or "groq"
    analysis_backend: str = "gemini"

    # LLM providers
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    groq_api_key: str = ""
    groq_model: str = "llama-3.1-70b-versatile"

    # Caller-side job cap (the analysis core itself has none)
    max_jobs_to_analyze: int = 200

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()
