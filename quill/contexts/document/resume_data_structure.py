"""
Resume Document Structure

Defines the canonical schema of a resume for QUILL. Every other context
(sections, scoring, export, storage, api) operates on these models.

Wire format uses camelCase keys (personalInfo, workExperience, ...); Python
attributes are snake_case. Models accept either on input and serialize with
camelCase via model_dump(by_alias=True).
"""

from enum import Enum
from typing import Annotated, Any, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


# Required string: present and non-blank
RequiredStr = Annotated[str, AfterValidator(_require_text)]


class SectionType(str, Enum):
    """Fixed vocabulary of section types."""

    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    CUSTOM = "custom"


BUILT_IN_SECTION_TYPES = (
    SectionType.SUMMARY.value,
    SectionType.EXPERIENCE.value,
    SectionType.EDUCATION.value,
    SectionType.SKILLS.value,
)


class ResumeModel(BaseModel):
    """Shared configuration: camelCase aliases, population by either name, unknown keys ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class PersonalInfo(ResumeModel):
    """Contact block at the top of every resume."""

    first_name: RequiredStr
    last_name: RequiredStr
    email: EmailStr
    phone: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    linkedin: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class WorkExperience(ResumeModel):
    """
    One position in the work history.

    Position in the workExperience list is the display order; there is no order field.
    endDate is forced empty when currentPosition is set, and required otherwise.
    """

    id: RequiredStr
    job_title: RequiredStr
    employer: RequiredStr
    start_date: RequiredStr
    current_position: bool = False
    end_date: Optional[str] = Field(default="", validate_default=True)
    location: Optional[str] = None
    description: RequiredStr

    @field_validator("end_date")
    @classmethod
    def _end_date_unless_current(cls, value: Optional[str], info: ValidationInfo) -> str:
        if info.data.get("current_position"):
            return ""
        if not (value or "").strip():
            raise ValueError("required unless currentPosition is true")
        return value


class Education(ResumeModel):
    """
    One education entry.

    endDate is forced empty when currentlyStudying is set, and required otherwise.
    """

    id: RequiredStr
    degree: RequiredStr
    institution: RequiredStr
    start_date: Optional[str] = None
    currently_studying: bool = False
    end_date: Optional[str] = Field(default="", validate_default=True)
    location: Optional[str] = None
    description: Optional[str] = None

    @field_validator("end_date")
    @classmethod
    def _end_date_unless_studying(cls, value: Optional[str], info: ValidationInfo) -> str:
        if info.data.get("currently_studying"):
            return ""
        if not (value or "").strip():
            raise ValueError("required unless currentlyStudying is true")
        return value


class Skills(ResumeModel):
    """
    Technical and soft skills, in the order the user entered them.

    Duplicates are accepted and preserved.
    """

    technical: List[str] = Field(default_factory=list)
    soft: Optional[List[str]] = None


class Section(ResumeModel):
    """
    Orderable, visibility-toggleable display block.

    Attributes:
        id: Unique token within the resume
        title: Display title (uppercased as header in plain text export)
        type: One of SectionType; other values are kept but render nothing
        content: Free text for custom sections; always None for built-in types
        visible: Whether the block is shown
        order: Sort key. Not guaranteed dense or unique; sort, never index.
    """

    id: RequiredStr
    title: str
    type: str
    content: Optional[str] = None
    visible: bool = True
    order: int

    @model_validator(mode="before")
    @classmethod
    def _drop_built_in_content(cls, data: Any) -> Any:
        # Built-in sections derive their content from dedicated resume fields
        if isinstance(data, dict) and data.get("type") != SectionType.CUSTOM.value:
            data = {**data, "content": None}
        return data

    @property
    def is_custom(self) -> bool:
        return self.type == SectionType.CUSTOM.value


class ResumeDraft(ResumeModel):
    """
    Client-authored resume content: everything except server-assigned identity fields.

    This is the body accepted on create.
    """

    title: RequiredStr
    job_url: Optional[str] = None
    personal_info: PersonalInfo
    professional_summary: str = ""
    work_experience: List[WorkExperience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    sections: List[Section] = Field(default_factory=list)


class Resume(ResumeDraft):
    """
    Stored resume: the root aggregate, owned by exactly one user.

    id, userId, createdAt and updatedAt are assigned by the store.
    """

    id: RequiredStr
    user_id: int
    created_at: RequiredStr
    updated_at: RequiredStr

    def to_json(self) -> dict:
        """Wire representation (camelCase keys, JSON-safe values)."""
        return self.model_dump(by_alias=True, mode="json")


# Keys a client may never set; assigned by the store
SERVER_ASSIGNED_FIELDS = ("id", "userId", "createdAt", "updatedAt")

# Top-level wire keys an update may overwrite
CLIENT_FIELDS = tuple(to_camel(name) for name in ResumeDraft.model_fields)
