"""
DOCX Rendering

Writes the document outline into a Word document with python-docx, mapping
outline styles onto the built-in Title / Heading / Normal paragraph styles.
"""

from io import BytesIO

from docx import Document
from docx.shared import Pt, RGBColor

from quill.contexts.document.resume_data_structure import Resume
from quill.contexts.export.outline import BODY, CONTACT, HEADING, META, NAME, SUBHEADING, build_outline

MUTED = RGBColor(0x55, 0x55, 0x55)


def render_docx(resume: Resume) -> bytes:
    """
    Render a resume as DOCX.

    Args:
        resume: Validated resume (not modified)

    Returns:
        DOCX (OOXML) bytes
    """
    document = Document()
    document.core_properties.title = resume.title
    document.core_properties.author = resume.personal_info.full_name

    for line in build_outline(resume):
        if line.style == NAME:
            document.add_heading(line.text, level=0)
        elif line.style == HEADING:
            document.add_heading(line.text, level=1)
        elif line.style == SUBHEADING:
            paragraph = document.add_paragraph()
            paragraph.add_run(line.text).bold = True
        elif line.style in (CONTACT, META):
            paragraph = document.add_paragraph()
            run = paragraph.add_run(line.text)
            run.italic = line.style == META
            run.font.size = Pt(9)
            run.font.color.rgb = MUTED
        elif line.style == BODY:
            document.add_paragraph(line.text)

    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()
