"""Utility modules."""

from .jobs import filter_jobs_by_type, limit_jobs
from .parser import extract_json_object

__all__ = ["extract_json_object", "filter_jobs_by_type", "limit_jobs"]
