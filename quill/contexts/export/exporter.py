"""
Resume Export

Single entry point for producing downloadable payloads. Every format renders
from a deep copy of the resume, so a failed or partial export can never change
the document being edited.
"""

import re
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote

from quill.contexts.document.resume_data_structure import Resume
from quill.contexts.export.docx_renderer import render_docx
from quill.contexts.export.exceptions import ExportError, UnsupportedFormatError
from quill.contexts.export.logger import log_export_failure, log_export_result, log_export_start
from quill.contexts.export.markdown_formatter import render_markdown
from quill.contexts.export.pdf_renderer import render_pdf
from quill.contexts.export.text_renderer import render_text
from quill.utils.pdf_processing import page_count

# Format -> media type
EXPORT_FORMATS = {
    "pdf": "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "txt": "text/plain",
    "md": "text/markdown",
}


@dataclass
class ExportResult:
    """Rendered payload ready to be written to disk or returned over HTTP."""

    filename: str
    media_type: str
    payload: bytes
    page_count: Optional[int] = None

    @property
    def content_disposition(self) -> str:
        """Attachment header; quotes are escaped and non-ASCII names also get an RFC 5987 filename*."""
        quoted = self.filename.replace("\\", "\\\\").replace('"', '\\"')
        disposition = f'attachment; filename="{quoted}"'
        if not self.filename.isascii():
            disposition += f"; filename*=UTF-8''{quote(self.filename, safe='')}"
        return disposition


def export_filename(title: str, extension: str) -> str:
    """
    Build the download filename for a resume.

    Examples:
        >>> export_filename("Senior Data  Scientist", "pdf")
        'Senior_Data_Scientist_resume.pdf'
    """
    return re.sub(r"\s+", "_", title) + f"_resume.{extension}"


def _render(resume: Resume, export_format: str, settings: Dict[str, Any]) -> bytes:
    if export_format == "txt":
        return render_text(resume).encode("utf-8")
    if export_format == "md":
        return render_markdown(resume).encode("utf-8")
    if export_format == "pdf":
        return render_pdf(
            resume,
            font=settings.get("pdf_font", "Helvetica"),
            font_size=settings.get("pdf_font_size", 10),
        )
    return render_docx(resume)


def export_resume(
    resume: Resume, export_format: str, settings: Optional[Dict[str, Any]] = None
) -> ExportResult:
    """
    Render a resume in the requested format.

    Args:
        resume: Validated resume (left untouched)
        export_format: One of EXPORT_FORMATS ("pdf", "docx", "txt", "md"), case-insensitive
        settings: Optional `export` settings block (pdf_font, pdf_font_size)

    Returns:
        ExportResult with filename, media type and payload bytes

    Raises:
        UnsupportedFormatError: If the format is not in EXPORT_FORMATS
        ExportError: If the renderer fails
    """
    export_format = (export_format or "").lower().lstrip(".")
    if export_format not in EXPORT_FORMATS:
        raise UnsupportedFormatError(
            f"Unsupported export format: {export_format or '<empty>'}. "
            f"Must be one of {', '.join(EXPORT_FORMATS)}",
            export_format=export_format,
        )

    snapshot = resume.model_copy(deep=True)
    log_export_start(snapshot.id, export_format)
    start_time = time.time()

    try:
        payload = _render(snapshot, export_format, settings or {})
    except Exception as e:
        log_export_failure(snapshot.id, export_format, e)
        raise ExportError(
            f"Failed to export resume {snapshot.id}", export_format=export_format, original_error=e
        ) from e

    result = ExportResult(
        filename=export_filename(snapshot.title, export_format),
        media_type=EXPORT_FORMATS[export_format],
        payload=payload,
        page_count=page_count(payload) if export_format == "pdf" else None,
    )
    log_export_result(snapshot.id, result, time.time() - start_time)

    return result
