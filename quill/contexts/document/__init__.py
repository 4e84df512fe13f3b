"""
Document Context

Responsibilities:
- Defines the canonical resume schema (personal info, summary, work history,
  education, skills, sections)
- Validates create payloads and full records, reporting every offending field path
- Merges update payloads over stored records (shallow, top-level)
- Seeds the initial state of a new resume

Owns: Resume schema, validation rules, update merge semantics
Never: Persists resumes or decides section display order
"""

from quill.contexts.document.defaults import (
    DEFAULT_RESUME_TITLE,
    default_sections,
    new_education,
    new_resume_draft,
    new_token,
    new_work_experience,
)
from quill.contexts.document.exceptions import FieldError, ResumeValidationError, SectionIndexError
from quill.contexts.document.resume_data_structure import (
    BUILT_IN_SECTION_TYPES,
    Education,
    PersonalInfo,
    Resume,
    ResumeDraft,
    Section,
    SectionType,
    Skills,
    WorkExperience,
)
from quill.contexts.document.validation import merge_update, strip_server_fields, validate, validate_draft

__all__ = [
    # Schema
    "Resume",
    "ResumeDraft",
    "PersonalInfo",
    "WorkExperience",
    "Education",
    "Skills",
    "Section",
    "SectionType",
    "BUILT_IN_SECTION_TYPES",
    # Validation
    "validate",
    "validate_draft",
    "merge_update",
    "strip_server_fields",
    "FieldError",
    "ResumeValidationError",
    "SectionIndexError",
    # Seeding
    "DEFAULT_RESUME_TITLE",
    "default_sections",
    "new_resume_draft",
    "new_work_experience",
    "new_education",
    "new_token",
]
