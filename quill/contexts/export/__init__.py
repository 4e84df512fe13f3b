"""
Export Context

Responsibilities:
- Renders resumes as plain text, markdown, PDF and DOCX
- Names exported files and reports their media types
- Wraps renderer failures so callers can tell export problems apart

Owns: Output formats, filename convention
Never: Modifies the resume being exported
"""

from quill.contexts.export.docx_renderer import render_docx
from quill.contexts.export.exceptions import ExportError, UnsupportedFormatError
from quill.contexts.export.exporter import EXPORT_FORMATS, ExportResult, export_filename, export_resume
from quill.contexts.export.markdown_formatter import render_markdown
from quill.contexts.export.outline import OutlineLine, build_outline
from quill.contexts.export.pdf_renderer import render_pdf
from quill.contexts.export.text_renderer import render_text

__all__ = [
    # Entry point
    "export_resume",
    "export_filename",
    "ExportResult",
    "EXPORT_FORMATS",
    # Renderers
    "render_text",
    "render_markdown",
    "render_pdf",
    "render_docx",
    "build_outline",
    "OutlineLine",
    # Errors
    "ExportError",
    "UnsupportedFormatError",
]
