"""
Markdown Formatting

Formats resolved section content as markdown for previews. Sections follow the
section registry: visible only, in display order.
"""

from typing import List

from quill.contexts.document.resume_data_structure import Education, Resume, WorkExperience
from quill.contexts.sections.content import (
    CustomContent,
    EducationContent,
    ExperienceContent,
    SectionContent,
    SkillsContent,
    SummaryContent,
    ordered_blocks,
)


def format_work_experience_markdown(entry: WorkExperience) -> str:
    """
    Format single work experience entry as markdown.

    Job title and employer are formatted as ### (section header added separately by caller).

    Args:
        entry: Work experience entry

    Returns:
        Markdown-formatted work experience (without section header)
    """
    parts = [f"### {entry.job_title} at {entry.employer}\n"]

    end = "Present" if entry.current_position else entry.end_date
    parts.append(f"*{entry.start_date} - {end}*")
    if entry.location:
        parts.append(entry.location)

    parts.append("")  # Blank line before content
    parts.append(entry.description)

    return "\n".join(parts)


def format_education_markdown(entry: Education) -> str:
    """
    Format single education entry as markdown.

    Args:
        entry: Education entry

    Returns:
        Markdown-formatted education (without section header)
    """
    parts = [f"### {entry.institution}\n"]

    parts.append(f"**{entry.degree}**")
    end = "Present" if entry.currently_studying else entry.end_date
    if entry.start_date:
        parts.append(f"*{entry.start_date} - {end}*")
    elif end:
        parts.append(f"*{end}*")
    if entry.location:
        parts.append(entry.location)

    if entry.description:
        parts.append("")
        parts.append(entry.description)

    return "\n".join(parts)


def format_skills_markdown(block: SkillsContent) -> str:
    """Format skills as two bulleted groups under one header."""
    parts = [f"## {block.title}\n"]

    if block.technical:
        parts.append("**Technical**\n")
        parts.extend(f"- {skill}" for skill in block.technical)
    if block.soft:
        parts.append("\n**Soft**\n")
        parts.extend(f"- {skill}" for skill in block.soft)

    return "\n".join(parts)


def format_block_markdown(block: SectionContent) -> str:
    """Format one resolved section as markdown."""
    if isinstance(block, SummaryContent):
        return f"## {block.title}\n\n{block.text}"
    elif isinstance(block, ExperienceContent):
        parts = [f"## {block.title}\n"]
        parts.extend(format_work_experience_markdown(entry) for entry in block.entries)
        return "\n\n".join(parts)
    elif isinstance(block, EducationContent):
        parts = [f"## {block.title}\n"]
        parts.extend(format_education_markdown(entry) for entry in block.entries)
        return "\n\n".join(parts)
    elif isinstance(block, SkillsContent):
        return format_skills_markdown(block)
    elif isinstance(block, CustomContent):
        return f"## {block.title}\n\n{block.text}"
    raise TypeError(f"Unknown section content: {type(block).__name__}")


def render_markdown(resume: Resume) -> str:
    """
    Render a resume preview as markdown.

    Returns:
        Markdown with the name as # header, a contact line, then one ## block per visible section
    """
    info = resume.personal_info
    contact = [info.email] + [value for value in (info.phone, info.location, info.website) if value]
    if info.linkedin:
        contact.append(f"linkedin.com/in/{info.linkedin}")

    parts: List[str] = [f"# {info.full_name}\n", " | ".join(contact)]
    parts.extend(format_block_markdown(block) for block in ordered_blocks(resume))

    return "\n\n".join(parts) + "\n"
