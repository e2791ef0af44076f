"""
Error taxonomy for CV analysis.

Every failure surfaces as an AnalysisError subclass carrying enough context
for logging (status code, raw text, missing field) and a message suitable
for end users.
"""

RAW_TEXT_LIMIT = 500

TRY_AGAIN_LATER = "The analysis service is temporarily unavailable. Please try again later."


def truncate(text: str, limit: int = RAW_TEXT_LIMIT) -> str:
    """Shorten text for diagnostics."""
    if text is None:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + "...[truncated]"


class AnalysisError(Exception):
    """Base class for all analysis failures."""

    client_fixable = False

    @property
    def user_message(self) -> str:
        return TRY_AGAIN_LATER


class ConfigurationError(AnalysisError):
    """Missing credential, empty résumé text or unknown backend."""

    client_fixable = True

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def user_message(self) -> str:
        return self.message


class TransportError(AnalysisError):
    """Retries exhausted, or the provider answered with a fatal status."""

    def __init__(self, status_code: int | None, message: str, attempts: int = 1):
        status = status_code if status_code is not None else "Unknown"
        super().__init__(f"Error analyzing CV (Status {status}): {message}")
        self.status_code = status_code
        self.message = message
        self.attempts = attempts


class ParseError(AnalysisError):
    """Provider text could not be reduced to a JSON object."""

    def __init__(self, raw_text: str, reason: str = "Could not parse JSON from model output"):
        self.raw_text = truncate(raw_text)
        super().__init__(f"{reason}: {self.raw_text!r}")
        self.reason = reason


class ValidationError(AnalysisError):
    """Parsed JSON lacks a required field or has the wrong shape."""

    client_fixable = True

    def __init__(self, field: str, detail: str = "missing required field"):
        super().__init__(f"Invalid analysis result: {detail} '{field}'")
        self.field = field
        self.detail = detail

    @property
    def user_message(self) -> str:
        return (
            f"The analysis result was incomplete ({self.field}). "
            "Check the résumé and job list and submit again."
        )


class AnalysisCancelled(AnalysisError):
    """The caller cancelled the analysis before it finished."""

    def __init__(self, message: str = "Analysis cancelled"):
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return "The analysis was cancelled."
