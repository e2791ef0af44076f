"""Analysis request/result schemas."""

import math
import re
from typing import Any

from pydantic import BaseModel, Field, field_validator


# Request schemas
class Job(BaseModel):
    """A job posting. Fields are forwarded to the model as-is."""

    id: Any = None
    title: Any = None
    company: Any = None
    description: Any = None
    requirements: Any = None
    location: Any = None
    salary: Any = None
    type: Any = None

    class Config:
        extra = "allow"


class Filters(BaseModel):
    type: str | None = Field(default=None, description="Job type, or 'All'")

    class Config:
        extra = "allow"


class AnalysisRequest(BaseModel):
    """
    Inputs of one analysis.

    Jobs and filters are kept as the caller's mappings, key order included,
    so the prompt carries them exactly as submitted.
    """

    resume_text: str
    jobs: list[dict[str, Any]] = Field(default_factory=list)
    filters: dict[str, Any] = Field(default_factory=dict)

    @field_validator("jobs", mode="before")
    @classmethod
    def _jobs(cls, value):
        if not isinstance(value, list):
            return value
        jobs = []
        for job in value:
            if isinstance(job, Job):
                job = job.model_dump(exclude_unset=True)
            jobs.append(job)
        return jobs

    @field_validator("filters", mode="before")
    @classmethod
    def _filters(cls, value):
        if value is None:
            return {}
        if isinstance(value, Filters):
            return value.model_dump(exclude_unset=True)
        Filters.model_validate(value)
        return value

    def jobs_payload(self) -> list[dict]:
        return list(self.jobs)

    def filters_payload(self) -> dict:
        return self.filters


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _as_coordinate(value: Any) -> float | None:
    """Read a latitude/longitude, or None when it is not a finite number."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


# Result schemas
class Location(BaseModel):
    name: str = ""
    lat: float | None = None
    lng: float | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value):
        return _as_text(value)

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def _coordinate(cls, value):
        return _as_coordinate(value)


def _as_score(value: Any) -> float:
    """Read a 0-100 score from a number or a string like '85%'."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, str):
        match = re.search(r"-?\d+(?:\.\d+)?", value)
        value = float(match.group()) if match else 0.0
    try:
        score = float(value)
    except (TypeError, ValueError):
        return 0.0
    if score != score:  # NaN
        return 0.0
    return min(max(score, 0.0), 100.0)


class JobMatch(BaseModel):
    id: str = ""
    title: str = ""
    company: str = ""
    location: Location = Field(default_factory=Location)
    salary: str = ""
    type: str = ""
    suitability_percentage: float = Field(default=0.0, alias="suitabilityPercentage")

    class Config:
        populate_by_name = True

    @field_validator("id", "title", "company", "salary", "type", mode="before")
    @classmethod
    def _stringify(cls, value):
        return _as_text(value)

    @field_validator("location", mode="before")
    @classmethod
    def _location(cls, value):
        if isinstance(value, str):
            return {"name": value}
        if not isinstance(value, (dict, Location)):
            return {}
        return value

    @field_validator("suitability_percentage", mode="before")
    @classmethod
    def _score(cls, value):
        return _as_score(value)


class CVAnalysis(BaseModel):
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    extracted_skills: list[str] = Field(default_factory=list, alias="extractedSkills")
    suggested_skills_to_learn: list[str] = Field(
        default_factory=list, alias="suggestedSkillsToLearn"
    )

    class Config:
        populate_by_name = True


class AnalysisResult(BaseModel):
    job_matches: list[JobMatch] = Field(default_factory=list, alias="jobMatches")
    cv_analysis: CVAnalysis = Field(default_factory=CVAnalysis, alias="cvAnalysis")

    class Config:
        populate_by_name = True

    def to_response(self) -> dict:
        """Serialize with the camelCase keys callers expect."""
        return self.model_dump(by_alias=True)
