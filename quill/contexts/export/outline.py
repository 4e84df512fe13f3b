"""
Document Outline

Flattens a resume into styled lines shared by the PDF and DOCX renderers, so
both binary formats carry the same content in the same order: name, contact
line, then every visible section in display order.
"""

from dataclasses import dataclass
from typing import List

from quill.contexts.document.resume_data_structure import Resume
from quill.contexts.sections.content import (
    CustomContent,
    EducationContent,
    ExperienceContent,
    SkillsContent,
    SummaryContent,
    ordered_blocks,
)

# Line styles, from most to least prominent
NAME = "name"
CONTACT = "contact"
HEADING = "heading"
SUBHEADING = "subheading"
META = "meta"
BODY = "body"


@dataclass(frozen=True)
class OutlineLine:
    style: str
    text: str


def _contact_line(resume: Resume) -> str:
    info = resume.personal_info
    parts = [info.email] + [value for value in (info.phone, info.location, info.website) if value]
    if info.linkedin:
        parts.append(f"linkedin.com/in/{info.linkedin}")
    return " | ".join(parts)


def _paragraphs(text: str) -> List[OutlineLine]:
    """Split free text on newlines, keeping non-blank lines."""
    return [OutlineLine(BODY, line) for line in text.splitlines() if line.strip()]


def build_outline(resume: Resume) -> List[OutlineLine]:
    """
    Styled lines for a resume.

    Args:
        resume: Validated resume (not modified)

    Returns:
        Lines in render order
    """
    lines = [
        OutlineLine(NAME, resume.personal_info.full_name),
        OutlineLine(CONTACT, _contact_line(resume)),
    ]

    for block in ordered_blocks(resume):
        lines.append(OutlineLine(HEADING, block.title.upper()))

        if isinstance(block, (SummaryContent, CustomContent)):
            lines.extend(_paragraphs(block.text))

        elif isinstance(block, ExperienceContent):
            for entry in block.entries:
                end = "Present" if entry.current_position else entry.end_date
                lines.append(OutlineLine(SUBHEADING, f"{entry.job_title} at {entry.employer}"))
                meta = f"{entry.start_date} - {end}"
                if entry.location:
                    meta += f" | {entry.location}"
                lines.append(OutlineLine(META, meta))
                lines.extend(_paragraphs(entry.description))

        elif isinstance(block, EducationContent):
            for entry in block.entries:
                end = "Present" if entry.currently_studying else entry.end_date
                lines.append(OutlineLine(SUBHEADING, f"{entry.degree} - {entry.institution}"))
                meta = f"{entry.start_date or ''} - {end}"
                if entry.location:
                    meta += f" | {entry.location}"
                lines.append(OutlineLine(META, meta))
                if entry.description:
                    lines.extend(_paragraphs(entry.description))

        elif isinstance(block, SkillsContent):
            lines.append(OutlineLine(BODY, f"Technical: {', '.join(block.technical)}"))
            if block.soft:
                lines.append(OutlineLine(BODY, f"Soft: {', '.join(block.soft)}"))

    return lines
