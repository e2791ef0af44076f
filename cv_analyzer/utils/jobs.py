"""
Caller-side job selection.

The analysis core accepts any number of jobs; callers narrow the list by
job type and cap it before sending, to keep requests within provider limits.
"""

from typing import Any


def filter_jobs_by_type(jobs: list[dict[str, Any]], filters: dict[str, Any]) -> list[dict[str, Any]]:
    """Keep jobs matching filters['type'] ('All' or missing keeps everything)."""
    job_type = (filters or {}).get("type")
    if not job_type or job_type == "All":
        return list(jobs)
    return [job for job in jobs if job.get("type") == job_type]


def limit_jobs(jobs: list[dict[str, Any]], max_jobs: int) -> list[dict[str, Any]]:
    if max_jobs <= 0:
        return list(jobs)
    return list(jobs[:max_jobs])
