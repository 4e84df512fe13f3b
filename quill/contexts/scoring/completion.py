"""
Completion Scoring

Derives a 0-100 completion percentage from required-field presence. Used only
as a progress indicator while editing, never as a validation gate.

Checks (filled / total):
- personalInfo firstName, lastName, email: 3, always counted
- professionalSummary: 1, always counted
- first workExperience entry jobTitle, employer, startDate, description: 4,
  only when the list is non-empty (later entries never affect the score)
- first education entry degree, institution, endDate: 3, only when non-empty
- at least one technical skill: 1, always counted

Because empty lists are skipped rather than penalized, the total varies per
resume and scores are not comparable across resumes with different amounts of
list data.
"""

import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Union

from quill.contexts.document.resume_data_structure import Resume

PERSONAL_INFO_FIELDS = ("firstName", "lastName", "email")
WORK_EXPERIENCE_FIELDS = ("jobTitle", "employer", "startDate", "description")
EDUCATION_FIELDS = ("degree", "institution", "endDate")

ResumeLike = Union[Resume, Mapping[str, Any]]


@dataclass
class CompletionCheck:
    """One required-field check and whether it passed."""

    path: str
    filled: bool


def _as_wire_dict(resume: ResumeLike) -> Mapping[str, Any]:
    if isinstance(resume, Resume):
        return resume.model_dump(by_alias=True)
    return resume


def _is_filled(value: Any) -> bool:
    """A field counts as filled when it holds a non-empty string."""
    return isinstance(value, str) and value != ""


def _mapping(value: Any) -> Mapping[str, Any]:
    # Malformed editor state (a string or list where an object belongs) counts as empty
    return value if isinstance(value, Mapping) else {}


def _entries(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def score_breakdown(resume: ResumeLike) -> List[CompletionCheck]:
    """
    Every check counted towards the score, in evaluation order.

    Accepts a validated Resume or a raw editor-state dict; missing keys and
    values of the wrong shape count as unfilled.
    """
    data = _as_wire_dict(resume)
    checks = []

    personal_info = _mapping(data.get("personalInfo"))
    for name in PERSONAL_INFO_FIELDS:
        checks.append(CompletionCheck(f"personalInfo.{name}", _is_filled(personal_info.get(name))))

    checks.append(CompletionCheck("professionalSummary", _is_filled(data.get("professionalSummary"))))

    work_experience = _entries(data.get("workExperience"))
    if work_experience:
        first = _mapping(work_experience[0])
        for name in WORK_EXPERIENCE_FIELDS:
            checks.append(CompletionCheck(f"workExperience.0.{name}", _is_filled(first.get(name))))

    education = _entries(data.get("education"))
    if education:
        first = _mapping(education[0])
        for name in EDUCATION_FIELDS:
            checks.append(CompletionCheck(f"education.0.{name}", _is_filled(first.get(name))))

    technical = _entries(_mapping(data.get("skills")).get("technical"))
    checks.append(CompletionCheck("skills.technical", len(technical) > 0))

    return checks


def score(resume: ResumeLike) -> int:
    """
    Completion percentage of a resume.

    Returns:
        round(filled / total * 100), rounding halves up, clamped to 100
    """
    checks = score_breakdown(resume)
    filled = sum(1 for check in checks if check.filled)
    total = len(checks)

    percentage = math.floor(filled * 100 / total + 0.5)
    return min(percentage, 100)
