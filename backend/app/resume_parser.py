import io
import logging
import re

import fitz  # PyMuPDF
from docx import Document

from backend.app.config import OCR_AVAILABLE

logger = logging.getLogger(__name__)

PDF_TYPES = {"application/pdf"}
DOCX_TYPES = {
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/msword",
}
TEXT_TYPES = {"text/plain"}

# below this, treat the PDF as scanned and try OCR
OCR_THRESHOLD = 50
MIN_TEXT_LENGTH = 10


class ResumeParseError(ValueError):
    pass


def clean_text_basic(s: str) -> str:
    # remove common PDF artifacts
    s = re.sub(r"\(cid:\d+\)", "", s)
    s = s.replace("\u00ad", "")
    s = re.sub(r"[ \t]+", " ", s)
    s = re.sub(r"\n{3,}", "\n\n", s)
    return s.strip()


def _pdf_text(data: bytes) -> str:
    try:
        with fitz.open(stream=data, filetype="pdf") as doc:
            return "\n".join(page.get_text() for page in doc).strip()
    except Exception as e:
        logger.warning("Standard PDF parsing failed, trying OCR: %s", e)
        return ""


def _pdf_ocr(data: bytes) -> str:
    import pytesseract
    from pdf2image import convert_from_bytes

    pages = convert_from_bytes(data)
    logger.info("Converted PDF to %d images for OCR", len(pages))
    return "\n".join(pytesseract.image_to_string(img, lang="eng") for img in pages)


def _docx_text(data: bytes) -> str:
    try:
        doc = Document(io.BytesIO(data))
    except Exception as e:
        raise ResumeParseError("Failed to parse DOCX file.") from e
    return "\n".join(p.text for p in doc.paragraphs)


def extract_resume_text(data: bytes, content_type: str, ocr_enabled: bool = OCR_AVAILABLE) -> str:
    """
    Extract plain text from an uploaded resume (PDF, DOCX, TXT).
    Raises ResumeParseError for unsupported types or when nothing readable is found.
    """
    content_type = (content_type or "").split(";")[0].strip().lower()
    logger.info("Parsing resume (%s, %d bytes)", content_type, len(data))

    if content_type in PDF_TYPES:
        text = _pdf_text(data)
        if len(text) < OCR_THRESHOLD:
            if ocr_enabled:
                try:
                    text += "\n" + _pdf_ocr(data)
                except Exception as e:
                    logger.error("OCR error: %s", e)
            else:
                logger.info("OCR skipped: pytesseract/pdf2image not installed")
    elif content_type in DOCX_TYPES:
        text = _docx_text(data)
    elif content_type in TEXT_TYPES:
        text = data.decode("utf-8", errors="replace")
    else:
        raise ResumeParseError(f"Unsupported file type: {content_type or 'unknown'}")

    text = clean_text_basic(text or "")
    logger.info("Text extracted, length %d chars", len(text))

    if len(text) < MIN_TEXT_LENGTH:
        raise ResumeParseError(
            "Resume parsing failed. The file appears to be an image-only PDF or empty, "
            "which we cannot process. Please try uploading a Word Document (DOCX) or a text-based PDF."
        )
    return text
