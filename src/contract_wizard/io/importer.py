"""Import of contract text from plain text, Word and PDF files."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union
from zipfile import BadZipFile

import pdfplumber
from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from .exceptions import (
    SUPPORTED_IMPORT_FORMATS,
    DocumentCorruptedError,
    UnsupportedFormatError,
)


logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Imported Contract"
TITLE_STYLES = ("Title", "Heading")


@dataclass(frozen=True)
class ImportedContract:
    """Title and content read from a file."""
    title: str
    content: str


def import_contract(file_path: Union[str, Path]) -> ImportedContract:
    """
    Read a contract from a file.

    Args:
        file_path: Path to a .txt, .docx or .pdf file.

    Returns:
        The imported title and content.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnsupportedFormatError: If the extension is not supported.
        DocumentCorruptedError: If the file cannot be read.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix == ".txt":
        imported = _import_text(path)
    elif suffix == ".docx":
        imported = _import_docx(path)
    elif suffix == ".pdf":
        imported = _import_pdf(path)
    else:
        raise UnsupportedFormatError(
            message=f"Unsupported file format: {path.suffix or '(none)'}",
            file_path=str(path),
            details={"supported_formats": SUPPORTED_IMPORT_FORMATS},
        )

    logger.info(f"Imported contract '{imported.title}' from {path.name}")
    return imported


def _import_text(path: Path) -> ImportedContract:
    """The first line is the title, the rest is the content."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentCorruptedError(
            message="Text file is not valid UTF-8",
            file_path=str(path),
            details={"original_error": str(e)},
        ) from e

    lines = text.split("\n")
    title = lines[0].strip() or DEFAULT_TITLE
    content = "\n".join(lines[1:]).strip() or text
    return ImportedContract(title=title, content=content)


def _import_docx(path: Path) -> ImportedContract:
    try:
        doc = Document(str(path))
    except (BadZipFile, PackageNotFoundError, KeyError) as e:
        raise DocumentCorruptedError(
            message="Document is corrupted or not a valid Word file",
            file_path=str(path),
            details={"original_error": str(e)},
        ) from e

    paragraphs: List[Tuple[str, str]] = [
        (p.style.name if p.style is not None else "", p.text)
        for p in doc.paragraphs
    ]

    title = ""
    body: List[str] = []
    for style_name, text in paragraphs:
        if not title and text.strip() and style_name.startswith(TITLE_STYLES):
            title = text.strip()
            continue
        body.append(text)

    return ImportedContract(
        title=title or path.stem,
        content="\n".join(body).strip(),
    )


def _import_pdf(path: Path) -> ImportedContract:
    try:
        with pdfplumber.open(str(path)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        raise DocumentCorruptedError(
            message=f"Failed to read PDF content: {e}",
            file_path=str(path),
            details={"original_error": str(e)},
        ) from e

    return ImportedContract(
        title=path.stem,
        content="\n\n".join(text for text in pages if text.strip()).strip(),
    )
