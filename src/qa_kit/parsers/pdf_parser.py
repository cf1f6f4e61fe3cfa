# parsers/pdf_parser.py

from typing import Any, cast

import pdfplumber
from pdfminer.pdfparser import PDFSyntaxError
from pdfplumber.utils.exceptions import PdfminerException

from .base import DocumentDecodeError, DocumentSource, TextExtractor


class PdfTextExtractor(TextExtractor):
    """
    Deterministic PDF text extractor.
    - Uses page order
    - One line of output per text line pdfplumber reports
    """

    document_format = "pdf"

    def extract(self, source: DocumentSource) -> str:
        page_texts: list[str] = []

        try:
            # pdfplumber.open accepts path-like or buffer objects; cast to Any
            with pdfplumber.open(cast(Any, source)) as pdf:
                for page in pdf.pages:
                    page_texts.append(page.extract_text() or "")
        except (PdfminerException, PDFSyntaxError) as e:
            raise DocumentDecodeError(self.document_format, str(e)) from e

        return "\n".join(page_texts)
