"""
QUILL - a multi-version resume builder backend.

Users author several versions of a resume (personal info, summary, work history,
education, skills, reorderable custom sections) and persist them server-side.

Architecture:
- Document Context: Canonical resume schema, validation and update merging
- Sections Context: Section ordering, visibility and custom section management
- Scoring Context: Completion percentage derived from required-field presence
- Export Context: Plain text, markdown, PDF and DOCX rendering
- Storage Context: Persistence port with in-memory and SQLite backends
- API Context: Ownership-enforcing service and request dispatcher
"""

__version__ = "0.1.0"
