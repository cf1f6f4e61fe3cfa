from .base import DocumentDecodeError, DocumentSource, TextExtractor
from .docx_parser import DocxTextExtractor
from .factory import create_text_extractor
from .odt_parser import OdtTextExtractor
from .pdf_parser import PdfTextExtractor

__all__ = [
    "DocumentDecodeError",
    "DocumentSource",
    "DocxTextExtractor",
    "OdtTextExtractor",
    "PdfTextExtractor",
    "TextExtractor",
    "create_text_extractor",
]
