# src/qa_kit/parsers/factory.py

from pathlib import PurePath

from .base import TextExtractor
from .docx_parser import DocxTextExtractor
from .odt_parser import OdtTextExtractor
from .pdf_parser import PdfTextExtractor

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)
ODT_MIME_TYPE = "application/vnd.oasis.opendocument.text"

_EXTRACTORS_BY_MIME_TYPE: dict[str, type[TextExtractor]] = {
    PDF_MIME_TYPE: PdfTextExtractor,
    DOCX_MIME_TYPE: DocxTextExtractor,
    ODT_MIME_TYPE: OdtTextExtractor,
}

_EXTRACTORS_BY_EXTENSION: dict[str, type[TextExtractor]] = {
    ".pdf": PdfTextExtractor,
    ".docx": DocxTextExtractor,
    ".odt": OdtTextExtractor,
}


def create_text_extractor(
    filename: str, mime_type: str | None = None
) -> TextExtractor:
    """Pick an extractor by MIME type, falling back to the file extension."""
    if mime_type in _EXTRACTORS_BY_MIME_TYPE:
        return _EXTRACTORS_BY_MIME_TYPE[mime_type]()

    extension = PurePath(filename).suffix.lower()
    if extension in _EXTRACTORS_BY_EXTENSION:
        return _EXTRACTORS_BY_EXTENSION[extension]()

    raise ValueError(
        f"Unsupported document type: {mime_type or extension or filename}"
    )
