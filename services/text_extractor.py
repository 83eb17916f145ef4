# FILE: services/text_extractor.py
import docx
import PyPDF2

from services.errors import TextExtractionError, UnsupportedFileTypeError


PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME = "text/plain"


def _extract_from_pdf(file_path: str) -> str:
    with open(file_path, "rb") as pdf_file:
        reader = PyPDF2.PdfReader(pdf_file)
        pages = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(pages).strip()


def _extract_from_docx(file_path: str) -> str:
    document = docx.Document(file_path)
    return "\n".join(paragraph.text for paragraph in document.paragraphs).strip()


def _extract_from_text(file_path: str) -> str:
    with open(file_path, "r", encoding="utf-8") as file_obj:
        return file_obj.read()


_EXTRACTORS = {
    PDF_MIME: _extract_from_pdf,
    DOCX_MIME: _extract_from_docx,
    TEXT_MIME: _extract_from_text,
}


def extract_text_from_file(file_path: str, mime_type: str) -> str:
    extractor = _EXTRACTORS.get(mime_type)
    if extractor is None:
        raise UnsupportedFileTypeError(f"Unsupported file type: {mime_type}")
    try:
        return extractor(file_path)
    except Exception as exc:
        raise TextExtractionError(f"Could not read {mime_type} file: {exc}") from exc
