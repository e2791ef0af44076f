"""
Result normalization.

Checks the required top-level shape, fills optional CV findings with empty
lists and orders job matches by suitability (highest first, ties keep the
order the model returned them in).
"""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cv_analyzer.errors import ValidationError
from cv_analyzer.schemas import AnalysisResult, CVAnalysis, JobMatch

logger = logging.getLogger(__name__)

CV_LIST_FIELDS = ("strengths", "weaknesses", "extractedSkills", "suggestedSkillsToLearn")


def _to_job_match(entry: Any, index: int) -> JobMatch | None:
    if not isinstance(entry, dict):
        logger.warning(f"Dropping job match #{index}: not an object")
        return None
    try:
        return JobMatch.model_validate(entry)
    except PydanticValidationError as e:
        logger.warning(f"Dropping job match #{index}: {e.error_count()} invalid field(s)")
        return None


def _string_list(value: Any, field: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ValidationError(f"cvAnalysis.{field}", detail="expected a list for")
    return [str(item) for item in value if item is not None]


def _to_cv_analysis(raw: dict[str, Any]) -> CVAnalysis:
    return CVAnalysis(**{field: _string_list(raw.get(field), field) for field in CV_LIST_FIELDS})


def normalize(parsed: Any, max_matches: int | None = None) -> AnalysisResult:
    """
    Validate and normalize a parsed model response.

    Args:
        parsed: Object recovered from the model output
        max_matches: Number of jobs submitted; extra matches are dropped

    Returns:
        AnalysisResult with matches sorted by suitability

    Raises:
        ValidationError: jobMatches or cvAnalysis missing or of the wrong type
    """
    if not isinstance(parsed, dict):
        raise ValidationError("jobMatches")

    if "jobMatches" not in parsed:
        raise ValidationError("jobMatches")
    raw_matches = parsed["jobMatches"]
    if not isinstance(raw_matches, list):
        raise ValidationError("jobMatches", detail="expected a list for")

    if "cvAnalysis" not in parsed:
        raise ValidationError("cvAnalysis")
    raw_cv = parsed["cvAnalysis"]
    if not isinstance(raw_cv, dict):
        raise ValidationError("cvAnalysis", detail="expected an object for")

    matches = []
    for index, entry in enumerate(raw_matches):
        match = _to_job_match(entry, index)
        if match is not None:
            matches.append(match)

    if max_matches is not None and len(matches) > max_matches:
        logger.warning(f"Model returned {len(matches)} matches for {max_matches} jobs, keeping first {max_matches}")
        matches = matches[:max_matches]

    # sorted() is stable, so equal scores keep their relative order
    matches = sorted(matches, key=lambda m: -m.suitability_percentage)

    return AnalysisResult(job_matches=matches, cv_analysis=_to_cv_analysis(raw_cv))
