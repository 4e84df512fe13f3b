"""
Plain Text Rendering

Renders a resume as plain text in a fixed block sequence:

    title, contact block, PROFESSIONAL SUMMARY, WORK EXPERIENCE, EDUCATION,
    SKILLS, then custom sections.

Built-in blocks are always emitted, whatever the visibility or order of their
Section descriptors. Only custom sections honor the section registry: hidden
ones are skipped and the rest follow their `order`. PDF, DOCX and markdown
output apply the registry to every section instead.
"""

from typing import List

from quill.contexts.document.resume_data_structure import Resume
from quill.contexts.sections.registry import visible_sections


def _contact_lines(resume: Resume) -> List[str]:
    info = resume.personal_info
    lines = [info.full_name, info.email]
    if info.phone:
        lines.append(info.phone)
    if info.location:
        lines.append(info.location)
    if info.website:
        lines.append(info.website)
    if info.linkedin:
        lines.append(f"linkedin.com/in/{info.linkedin}")
    return lines


def render_text(resume: Resume) -> str:
    """
    Render a resume as plain text.

    Work experience and education are emitted in list order (not sorted by
    date) and every entry is included.

    Args:
        resume: Validated resume (not modified)

    Returns:
        Text ending with a newline
    """
    lines = [resume.title, ""]
    lines.extend(_contact_lines(resume))

    lines.extend(["", "PROFESSIONAL SUMMARY", resume.professional_summary])

    lines.extend(["", "WORK EXPERIENCE"])
    for entry in resume.work_experience:
        end = "Present" if entry.current_position else entry.end_date
        lines.extend(["", f"{entry.job_title} at {entry.employer}", f"{entry.start_date} - {end}"])
        if entry.location:
            lines.append(entry.location)
        lines.append(entry.description)

    lines.extend(["", "EDUCATION"])
    for entry in resume.education:
        end = "Present" if entry.currently_studying else entry.end_date
        lines.extend(["", f"{entry.degree} - {entry.institution}", f"{entry.start_date or ''} - {end}"])
        if entry.location:
            lines.append(entry.location)
        if entry.description:
            lines.append(entry.description)

    lines.extend(["", "SKILLS", f"Technical: {', '.join(resume.skills.technical)}"])
    if resume.skills.soft:
        lines.append(f"Soft: {', '.join(resume.skills.soft)}")

    for section in visible_sections(resume.sections):
        if section.is_custom:
            lines.extend(["", section.title.upper(), section.content or ""])

    return "\n".join(lines) + "\n"
