"""Resume upload text extraction (PDF, DOCX, plain text)."""

import io
import logging
from pathlib import PurePath

import pdfplumber
from docx import Document

logger = logging.getLogger(__name__)


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_text_plain(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace").strip()


def extract_upload_text(filename: str, content: bytes) -> str:
    """Extract resume text from an uploaded file, picking the parser by extension.

    Unreadable files yield an empty string; the caller decides how to
    report that.
    """
    ext = PurePath(filename or "").suffix.lower()
    try:
        if ext == ".pdf":
            return extract_text(content)
        if ext == ".docx":
            return extract_text_docx(content)
        return extract_text_plain(content)
    except Exception as e:
        logger.error("Error reading resume %r: %s", filename, e)
        return ""
