"""
Analysis pipeline.

- request_builder: Wire payload for the active backend
- transport: One HTTP attempt, outcome classification
- retry: Exponential backoff with jitter
- normalizer: Shape validation, defaults, ordering
- analyzer: The `analyze` entry point
"""

from cv_analyzer.analysis.analyzer import analyze
from cv_analyzer.analysis.cancellation import CancellationToken
from cv_analyzer.analysis.retry import RetryController

__all__ = ["CancellationToken", "RetryController", "analyze"]
