import pytest

from cv_analyzer.backends import gemini_descriptor, groq_descriptor
from tests.fakes import RecordingSleep


@pytest.fixture
def groq():
    return groq_descriptor("gsk-test-key")


@pytest.fixture
def gemini():
    return gemini_descriptor("AIza-test-key")


@pytest.fixture
def jobs():
    return [
        {
            "id": "A",
            "title": "Backend Engineer",
            "company": "Acme",
            "description": "Build APIs in Python",
            "requirements": ["Python", "FastAPI"],
            "location": {"name": "Berlin", "lat": 52.52, "lng": 13.405},
            "salary": "70k",
            "type": "Full-time",
        },
        {
            "id": "B",
            "title": "ML Engineer",
            "company": "Globex",
            "description": "Train models",
            "requirements": ["PyTorch"],
            "location": {"name": "Remote", "lat": 0, "lng": 0},
            "salary": "90k",
            "type": "Contract",
        },
    ]


@pytest.fixture
def model_output():
    return {
        "jobMatches": [
            {
                "id": "A",
                "title": "Backend Engineer",
                "company": "Acme",
                "location": {"name": "Berlin", "lat": 52.52, "lng": 13.405},
                "salary": "70k",
                "type": "Full-time",
                "suitabilityPercentage": 40,
            },
            {
                "id": "B",
                "title": "ML Engineer",
                "company": "Globex",
                "location": {"name": "Remote", "lat": 0, "lng": 0},
                "salary": "90k",
                "type": "Contract",
                "suitabilityPercentage": 90,
            },
        ],
        "cvAnalysis": {
            "strengths": ["X"],
            "weaknesses": [],
            "extractedSkills": ["Y"],
            "suggestedSkillsToLearn": ["Z"],
        },
    }


@pytest.fixture
def sleep():
    return RecordingSleep()
