# parsers/odt_parser.py

import zipfile
from typing import Any, cast
from xml.etree import ElementTree

from .base import DocumentDecodeError, DocumentSource, TextExtractor

TEXT_NS = "urn:oasis:names:tc:opendocument:xmlns:text:1.0"
PARAGRAPH_TAGS = {f"{{{TEXT_NS}}}p", f"{{{TEXT_NS}}}h"}
SPACE_TAG = f"{{{TEXT_NS}}}s"
TAB_TAG = f"{{{TEXT_NS}}}tab"
LINE_BREAK_TAG = f"{{{TEXT_NS}}}line-break"


class OdtTextExtractor(TextExtractor):
    """
    OpenDocument text extractor.

    An .odt file is a zip archive; the body lives in content.xml. Every
    text:p / text:h element becomes one output line.
    """

    document_format = "odt"

    def extract(self, source: DocumentSource) -> str:
        try:
            with zipfile.ZipFile(cast(Any, source)) as archive:
                content = archive.read("content.xml")
        except zipfile.BadZipFile as e:
            raise DocumentDecodeError(self.document_format, str(e)) from e
        except KeyError as e:
            raise DocumentDecodeError(
                self.document_format, "content.xml not found"
            ) from e

        try:
            root = ElementTree.fromstring(content)
        except ElementTree.ParseError as e:
            raise DocumentDecodeError(self.document_format, str(e)) from e

        lines = [
            _element_text(element).strip()
            for element in root.iter()
            if element.tag in PARAGRAPH_TAGS
        ]
        return "\n".join(line for line in lines if line)


def _element_text(element: ElementTree.Element) -> str:
    parts = [element.text or ""]
    for child in element:
        if child.tag == SPACE_TAG:
            parts.append(" " * _space_count(child))
        elif child.tag == TAB_TAG:
            parts.append("\t")
        elif child.tag == LINE_BREAK_TAG:
            parts.append("\n")
        elif child.tag not in PARAGRAPH_TAGS:
            parts.append(_element_text(child))
        parts.append(child.tail or "")
    return "".join(parts)


def _space_count(element: ElementTree.Element) -> int:
    try:
        return max(int(element.get(f"{{{TEXT_NS}}}c", "1")), 1)
    except ValueError:
        return 1
