"""
Live smoke test against the configured backend.

Sends a small résumé and two jobs to the real provider and prints the
ranked matches. Needs an API key for the selected backend in .env.

Usage:
    python scripts/test_live_analysis.py [groq|gemini]
"""

import asyncio
import json
import sys
import time
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv

load_dotenv()

from cv_analyzer.analysis import analyze
from cv_analyzer.backends import descriptor_from_settings
from cv_analyzer.config import Settings
from cv_analyzer.errors import AnalysisError

RESUME = """Jane Doe
Senior Software Engineer - 6 years
Skills: Python, FastAPI, PostgreSQL, Docker, AWS, React
Experience: Built payment APIs serving 2M requests/day; led a team of 4."""

JOBS = [
    {
        "id": "job-1",
        "title": "Frontend Developer",
        "company": "Pixel Co",
        "description": "Build UI components in Vue",
        "requirements": ["Vue", "CSS"],
        "location": {"name": "Lisbon", "lat": 38.72, "lng": -9.14},
        "salary": "50k",
        "type": "Full-time",
    },
    {
        "id": "job-2",
        "title": "Backend Engineer",
        "company": "Fintech Ltd",
        "description": "Design and scale Python payment services",
        "requirements": ["Python", "PostgreSQL", "AWS"],
        "location": {"name": "Remote", "lat": 0, "lng": 0},
        "salary": "95k",
        "type": "Full-time",
    },
]


def main():
    print("=" * 60)
    print("CV Analyzer - Live Smoke Test")
    print("=" * 60)

    backend = sys.argv[1] if len(sys.argv) > 1 else None
    try:
        descriptor = descriptor_from_settings(Settings(), backend)
    except AnalysisError as e:
        print(f"[FAIL] {e}")
        return 1

    print(f"\n[1/2] Calling {descriptor.name} ({descriptor.model})...")
    t0 = time.time()
    try:
        result = asyncio.run(analyze(RESUME, JOBS, {"type": "All"}, descriptor))
    except AnalysisError as e:
        print(f"[FAIL] {type(e).__name__}: {e}")
        return 1
    print(f"  Completed in {time.time() - t0:.1f}s")

    print("\n[2/2] Checking result...")
    matches = result.job_matches
    scores = [m.suitability_percentage for m in matches]
    assert scores == sorted(scores, reverse=True), "Matches not sorted"
    print(f"[OK] {len(matches)} matches, sorted by suitability")
    if matches and matches[0].id == "job-2":
        print("[OK] Backend role ranked first")
    else:
        print("[WARN] Expected job-2 to rank first")

    print(json.dumps(result.to_response(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
