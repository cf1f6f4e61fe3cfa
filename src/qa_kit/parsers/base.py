# parsers/base.py

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

DocumentSource = str | Path | BinaryIO


class DocumentDecodeError(Exception):
    def __init__(self, document_format: str, message: str) -> None:
        super().__init__(f"{document_format.upper()} processing failed: {message}")
        self.document_format = document_format


class TextExtractor(ABC):
    document_format: str

    @abstractmethod
    def extract(self, source: DocumentSource) -> str:
        """
        Decode a document into plain text for question extraction.

        Requirements:
        - Deterministic output for same input
        - Reading order preserved, one line per paragraph where known
        - Corrupt input raises DocumentDecodeError
        """
        raise NotImplementedError
