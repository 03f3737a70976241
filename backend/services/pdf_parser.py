import io
import logging

import pdfplumber

from models.errors import ExtractionError

logger = logging.getLogger(__name__)

PARSE_HINT = "Please ensure it's a text-based (not scanned) PDF."


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_resume_text(pdf_bytes: bytes, min_length: int = 5) -> str:
    """Extract resume text, rejecting unreadable or image-only PDFs.

    Raises ExtractionError when the parser fails or the extracted text is
    shorter than ``min_length`` characters. OCR is never attempted.
    """
    logger.debug("Processing PDF of %d bytes", len(pdf_bytes))
    try:
        text = extract_text(pdf_bytes)
    except Exception as e:
        logger.warning("PDF parsing failed: %s", e)
        reason = str(e) or "Unknown error"
        raise ExtractionError(f"Failed to parse PDF file: {reason}. {PARSE_HINT}") from e

    logger.debug("Extracted %d characters of resume text", len(text))
    if len(text.strip()) < min_length:
        logger.warning("PDF yielded %d characters, below minimum of %d", len(text.strip()), min_length)
        raise ExtractionError(
            "Failed to parse PDF file: extracted text is too short or empty. "
            f"The PDF might be image-based or protected. {PARSE_HINT}"
        )
    return text
