"""Shared fixtures: a complete sample resume, isolated settings and log sinks."""

import copy
from pathlib import Path

import pytest
from loguru import logger

from quill.contexts.document import Resume, validate

FIXTURES_PATH = Path(__file__).parent / "fixtures"

CREATED_AT = "2025-01-15T09:30:00.000000+00:00"

ADA_PAYLOAD = {
    "title": "Software Engineer",
    "jobUrl": "https://example.com/jobs/42",
    "personalInfo": {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "555-0100",
        "location": "London",
        "website": "https://ada.example.com",
        "linkedin": "adalovelace",
    },
    "professionalSummary": "Pioneer.",
    "workExperience": [
        {
            "id": "work-1",
            "jobTitle": "Engineer",
            "employer": "Acme",
            "startDate": "2020-01",
            "currentPosition": True,
            "description": "Built things",
        },
        {
            "id": "work-2",
            "jobTitle": "Analyst",
            "employer": "Babbage & Co",
            "startDate": "2017-03",
            "endDate": "2019-12",
            "location": "Manchester",
            "description": "Computed Bernoulli numbers",
        },
    ],
    "education": [
        {
            "id": "edu-1",
            "degree": "BSc Mathematics",
            "institution": "University of London",
            "startDate": "2013-09",
            "endDate": "2016-06",
        }
    ],
    "skills": {"technical": ["C++", "Python"], "soft": ["Writing"]},
    "sections": [
        {"id": "sec-summary", "title": "Professional Summary", "type": "summary", "visible": True, "order": 0},
        {"id": "sec-experience", "title": "Work Experience", "type": "experience", "visible": True, "order": 1},
        {"id": "sec-education", "title": "Education", "type": "education", "visible": True, "order": 2},
        {"id": "sec-skills", "title": "Skills", "type": "skills", "visible": True, "order": 3},
        {
            "id": "sec-publications",
            "title": "Publications",
            "type": "custom",
            "content": "Notes on the Analytical Engine",
            "visible": True,
            "order": 4,
        },
    ],
}


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    """Keep settings and logs of every test inside its own tmp_path."""
    for name in ("QUILL_CONFIG_PATH", "QUILL_STORE_BACKEND", "QUILL_DB_PATH", "RESUME_EVENTS_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("QUILL_LOGS_PATH", str(tmp_path / "logs"))
    yield
    # Drop sinks added during the test (e.g., by the CLI) so none outlive their streams
    logger.remove()


@pytest.fixture
def ada_payload() -> dict:
    """Create payload (no identity fields) for a complete resume."""
    return copy.deepcopy(ADA_PAYLOAD)


@pytest.fixture
def ada_resume(ada_payload) -> Resume:
    """Stored version of ada_payload owned by user 1."""
    return validate(
        {
            **ada_payload,
            "id": "resume-ada",
            "userId": 1,
            "createdAt": CREATED_AT,
            "updatedAt": CREATED_AT,
        }
    )


@pytest.fixture
def events_file(monkeypatch, tmp_path) -> Path:
    """Enable the resume event log in a temporary file."""
    path = tmp_path / "events" / "resume_events.log"
    monkeypatch.setenv("RESUME_EVENTS_FILE", str(path))
    return path
