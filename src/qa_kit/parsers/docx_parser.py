# parsers/docx_parser.py

import zipfile
from pathlib import Path
from typing import Any, cast

import docx
from docx.opc.exceptions import PackageNotFoundError

from .base import DocumentDecodeError, DocumentSource, TextExtractor


class DocxTextExtractor(TextExtractor):
    """Paragraph text of a Word (.docx) document, one paragraph per line."""

    document_format = "docx"

    def extract(self, source: DocumentSource) -> str:
        # python-docx only treats str as a filesystem path
        if isinstance(source, Path):
            source = str(source)

        try:
            document = docx.Document(cast(Any, source))
        # ValueError: an OPC package whose main part is not a Word document
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
            raise DocumentDecodeError(
                self.document_format, f"invalid DOCX file format ({e})"
            ) from e

        return "\n".join(paragraph.text for paragraph in document.paragraphs)
