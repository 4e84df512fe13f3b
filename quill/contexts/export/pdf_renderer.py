"""
PDF Rendering

Draws the document outline onto letter-size pages with reportlab's canvas.
Layout is deliberately simple: one column, wrapped lines, a new page when the
bottom margin is reached.
"""

from io import BytesIO
from typing import Dict, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from quill.contexts.document.resume_data_structure import Resume
from quill.contexts.export.outline import BODY, CONTACT, HEADING, META, NAME, SUBHEADING, build_outline

MARGIN = 54
TOP_MARGIN = 60
LINE_SPACING = 1.35

ACCENT = colors.HexColor("#2e75b6")
MUTED = colors.HexColor("#555555")


def _styles(font: str, font_size: float) -> Dict[str, Tuple[str, float, object, float]]:
    """Map outline styles to (font name, size, color, space before)."""
    bold = f"{font}-Bold" if font in ("Helvetica", "Courier") else font
    oblique = f"{font}-Oblique" if font in ("Helvetica", "Courier") else font
    return {
        NAME: (bold, font_size * 2, colors.black, 0),
        CONTACT: (font, font_size, MUTED, 0),
        HEADING: (bold, font_size * 1.2, ACCENT, font_size * 1.2),
        SUBHEADING: (bold, font_size, colors.black, font_size * 0.6),
        META: (oblique, font_size * 0.9, MUTED, 0),
        BODY: (font, font_size, colors.black, 0),
    }


def render_pdf(resume: Resume, font: str = "Helvetica", font_size: float = 10) -> bytes:
    """
    Render a resume as PDF.

    Args:
        resume: Validated resume (not modified)
        font: Base font name (a standard PDF font such as Helvetica)
        font_size: Body font size in points

    Returns:
        PDF bytes
    """
    buffer = BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=LETTER)
    pdf.setTitle(resume.title)
    pdf.setAuthor(resume.personal_info.full_name)

    page_width, page_height = LETTER
    max_width = page_width - 2 * MARGIN
    styles = _styles(font, font_size)

    y = page_height - TOP_MARGIN
    for line in build_outline(resume):
        font_name, size, color, space_before = styles[line.style]
        y -= space_before

        for wrapped in simpleSplit(line.text, font_name, size, max_width) or [""]:
            if y < MARGIN:
                pdf.showPage()
                y = page_height - TOP_MARGIN

            pdf.setFont(font_name, size)
            pdf.setFillColor(color)
            pdf.drawString(MARGIN, y, wrapped)
            y -= size * LINE_SPACING

        if line.style == HEADING:
            pdf.setStrokeColor(ACCENT)
            pdf.line(MARGIN, y + size * 0.6, page_width - MARGIN, y + size * 0.6)
            y -= size * 0.2

    pdf.save()
    return buffer.getvalue()
