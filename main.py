"""
CV Analyzer - CLI Entry Point.

Scores a résumé (plain text) against a JSON list of job postings.

Usage:
    python main.py <resume.txt> <jobs.json> [filters.json] [--backend groq|gemini]
"""

import asyncio
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from cv_analyzer.analysis import analyze
from cv_analyzer.backends import descriptor_from_settings
from cv_analyzer.config import settings
from cv_analyzer.errors import AnalysisError
from cv_analyzer.utils.jobs import filter_jobs_by_type, limit_jobs

logger = logging.getLogger("cv_analyzer.cli")

USAGE = "Usage: python main.py <resume.txt> <jobs.json> [filters.json] [--backend groq|gemini]"


def _read_json(path: Path, expected: type, item: type | None = None):
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, expected):
        raise ValueError(f"{path} must contain a JSON {expected.__name__}")
    if item is not None and not all(isinstance(entry, item) for entry in data):
        raise ValueError(f"{path} must contain only JSON objects")
    return data


def _parse_args(argv: list[str]) -> tuple[list[str], str | None]:
    positional = []
    backend = None
    args = iter(argv)
    for arg in args:
        if arg == "--backend":
            backend = next(args, None)
        elif arg.startswith("--backend="):
            backend = arg.split("=", 1)[1]
        else:
            positional.append(arg)
    return positional, backend


def main(argv: list[str] | None = None) -> int:
    """Run one analysis and print the result as JSON."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    positional, backend = _parse_args(sys.argv[1:] if argv is None else argv)
    if len(positional) not in (2, 3):
        print(USAGE, file=sys.stderr)
        return 2

    try:
        resume_text = Path(positional[0]).read_text(encoding="utf-8")
        jobs = _read_json(Path(positional[1]), list, dict)
        filters = _read_json(Path(positional[2]), dict) if len(positional) == 3 else {}
    except (OSError, ValueError) as e:
        print(f"Error: Invalid input: {e}", file=sys.stderr)
        return 2

    filtered = filter_jobs_by_type(jobs, filters)
    to_analyze = limit_jobs(filtered, settings.max_jobs_to_analyze)
    logger.info(
        f"Analyzing {len(to_analyze)} jobs (out of {len(filtered)} filtered, {len(jobs)} total)"
    )

    try:
        descriptor = descriptor_from_settings(settings, backend)
        result = asyncio.run(analyze(resume_text, to_analyze, filters, descriptor))
    except AnalysisError as e:
        logger.error(f"Analysis error: {e}")
        print(f"Error: {e.user_message}", file=sys.stderr)
        return 1

    output = result.to_response()
    output["totalJobsAnalyzed"] = len(to_analyze)
    output["totalJobsAvailable"] = len(filtered)
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
