"""Export of contract content to plain text and Word files."""

import logging
import re
from pathlib import Path
from typing import Union

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt


logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Contract Agreement"
TITLE_RULE = "=" * 50
BODY_FONT = "Calibri"
BODY_SIZE = Pt(12)


def export_filename(title: str, extension: str) -> str:
    """File name for an export: non-alphanumerics of the title become ``_``."""
    stem = re.sub(r"[^a-z0-9]", "_", title or "contract", flags=re.IGNORECASE)
    return f"{stem}{extension}"


def render_text(title: str, content: str) -> str:
    """Plain text rendering: title, a rule of ``=``, a blank line, the content."""
    return f"{title or DEFAULT_TITLE}\n{TITLE_RULE}\n\n{content}"


def export_text(title: str, content: str, path: Union[str, Path]) -> Path:
    """
    Write the contract as plain text.

    Returns:
        Path to the exported file.
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_text(title, content), encoding="utf-8")
    logger.info(f"Exported text contract to: {output_path}")
    return output_path


def export_docx(title: str, content: str, path: Union[str, Path]) -> Path:
    """
    Write the contract as a Word document.

    The title becomes a centred Title paragraph; every content line becomes
    a body paragraph.

    Returns:
        Path to the exported file.
    """
    doc = Document()
    heading = doc.add_heading(title or DEFAULT_TITLE, level=0)
    heading.alignment = WD_ALIGN_PARAGRAPH.CENTER

    for line in content.split("\n"):
        paragraph = doc.add_paragraph()
        run = paragraph.add_run(line)
        run.font.name = BODY_FONT
        run.font.size = BODY_SIZE

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(str(output_path))
    logger.info(f"Exported Word contract to: {output_path}")
    return output_path
