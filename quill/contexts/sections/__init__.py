"""
Sections Context

Responsibilities:
- Orders sections for display (stable sort on `order`)
- Reorders sections and renormalizes `order` to 0..n-1
- Toggles section visibility
- Appends, edits and removes custom sections
- Resolves each section into its display content (tagged by section type)

Owns: Section ordering and visibility rules, section content resolution
Never: Persists resumes or formats output
"""

from quill.contexts.sections.content import (
    CustomContent,
    EducationContent,
    ExperienceContent,
    SectionContent,
    SkillsContent,
    SummaryContent,
    ordered_blocks,
    resolve_content,
)
from quill.contexts.sections.registry import (
    SECTION_TITLE_REQUIRED,
    append_custom_section,
    find_section,
    remove_section,
    reorder,
    sort_sections,
    toggle_visibility,
    update_custom_content,
    visible_sections,
)

__all__ = [
    # Registry operations
    "sort_sections",
    "visible_sections",
    "find_section",
    "reorder",
    "toggle_visibility",
    "append_custom_section",
    "update_custom_content",
    "remove_section",
    "SECTION_TITLE_REQUIRED",
    # Content resolution
    "resolve_content",
    "ordered_blocks",
    "SectionContent",
    "SummaryContent",
    "ExperienceContent",
    "EducationContent",
    "SkillsContent",
    "CustomContent",
]
