"""
Section Content

Resolves each Section descriptor into the content it displays. Built-in
sections carry no content of their own: their variant is derived from the
dedicated resume fields. Custom sections own their text.

Variants (tagged by `kind`, which mirrors Section.type):
    SummaryContent     -> professionalSummary
    ExperienceContent  -> workExperience (list order)
    EducationContent   -> education (list order)
    SkillsContent      -> skills.technical / skills.soft
    CustomContent      -> the section's own text
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from quill.contexts.document.resume_data_structure import Education, Resume, Section, SectionType, WorkExperience
from quill.contexts.sections.registry import visible_sections


@dataclass(frozen=True)
class SummaryContent:
    title: str
    text: str
    kind: str = field(default=SectionType.SUMMARY.value, init=False)


@dataclass(frozen=True)
class ExperienceContent:
    title: str
    entries: List[WorkExperience]
    kind: str = field(default=SectionType.EXPERIENCE.value, init=False)


@dataclass(frozen=True)
class EducationContent:
    title: str
    entries: List[Education]
    kind: str = field(default=SectionType.EDUCATION.value, init=False)


@dataclass(frozen=True)
class SkillsContent:
    title: str
    technical: List[str]
    soft: List[str]
    kind: str = field(default=SectionType.SKILLS.value, init=False)


@dataclass(frozen=True)
class CustomContent:
    title: str
    text: str
    kind: str = field(default=SectionType.CUSTOM.value, init=False)


SectionContent = Union[SummaryContent, ExperienceContent, EducationContent, SkillsContent, CustomContent]


def resolve_content(section: Section, resume: Resume) -> Optional[SectionContent]:
    """
    Resolve a section into its display content.

    Args:
        section: Section descriptor
        resume: Resume supplying the built-in section data

    Returns:
        Content variant for the section's type, or None for an unknown type
    """
    if section.type == SectionType.SUMMARY.value:
        return SummaryContent(title=section.title, text=resume.professional_summary)
    elif section.type == SectionType.EXPERIENCE.value:
        return ExperienceContent(title=section.title, entries=list(resume.work_experience))
    elif section.type == SectionType.EDUCATION.value:
        return EducationContent(title=section.title, entries=list(resume.education))
    elif section.type == SectionType.SKILLS.value:
        return SkillsContent(
            title=section.title,
            technical=list(resume.skills.technical),
            soft=list(resume.skills.soft or []),
        )
    elif section.type == SectionType.CUSTOM.value:
        return CustomContent(title=section.title, text=section.content or "")
    return None


def ordered_blocks(resume: Resume) -> List[SectionContent]:
    """
    Content of every visible section in display order.

    Unknown section types are skipped. Duplicate built-in sections each
    resolve independently, so they appear once per descriptor.
    """
    blocks = []
    for section in visible_sections(resume.sections):
        content = resolve_content(section, resume)
        if content is not None:
            blocks.append(content)
    return blocks
