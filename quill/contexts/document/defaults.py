"""
Default values for a new QUILL resume.

A new resume starts with the four built-in sections (orders 0-3), an empty
personal info block and empty collections. The editor state returned by
new_resume_draft() is a plain wire dict rather than a model: its required
fields are still blank, so it only validates once the user fills them in.
"""

import uuid
from typing import Any, Dict, List

from quill.contexts.document.resume_data_structure import Section, SectionType

DEFAULT_RESUME_TITLE = "Untitled Resume"

# (type, title) of the built-in sections, in their initial display order
DEFAULT_SECTION_LAYOUT = [
    (SectionType.SUMMARY.value, "Professional Summary"),
    (SectionType.EXPERIENCE.value, "Work Experience"),
    (SectionType.EDUCATION.value, "Education"),
    (SectionType.SKILLS.value, "Skills"),
]


def new_token() -> str:
    """Fresh unique token for resume, section and entry ids."""
    return str(uuid.uuid4())


def default_sections() -> List[Section]:
    """Seeded built-in sections with fresh ids and orders 0-3."""
    return [
        Section(id=new_token(), title=title, type=section_type, content=None, visible=True, order=order)
        for order, (section_type, title) in enumerate(DEFAULT_SECTION_LAYOUT)
    ]


def new_resume_draft(title: str = DEFAULT_RESUME_TITLE) -> Dict[str, Any]:
    """
    Get the initial editor state for a new resume.

    Returns:
        Wire dict with blank personal info, empty collections and the seeded sections
    """
    return {
        "title": title,
        "jobUrl": "",
        "personalInfo": {
            "firstName": "",
            "lastName": "",
            "email": "",
            "phone": "",
            "location": "",
            "website": "",
            "linkedin": "",
        },
        "professionalSummary": "",
        "workExperience": [],
        "education": [],
        "skills": {"technical": [], "soft": []},
        "sections": [section.model_dump(by_alias=True) for section in default_sections()],
    }


def new_work_experience() -> Dict[str, Any]:
    """Blank work experience entry as added by the editor."""
    return {
        "id": new_token(),
        "jobTitle": "",
        "employer": "",
        "startDate": "",
        "endDate": "",
        "currentPosition": False,
        "location": "",
        "description": "",
    }


def new_education() -> Dict[str, Any]:
    """Blank education entry as added by the editor."""
    return {
        "id": new_token(),
        "degree": "",
        "institution": "",
        "startDate": "",
        "endDate": "",
        "currentlyStudying": False,
        "location": "",
        "description": "",
    }
