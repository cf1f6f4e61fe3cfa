# Extraction
from .extraction import (
    ExtractionConfig,
    ParsedQuestion,
    RawSection,
    extract_questions,
    parse_section,
    segment,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Document decoding
from .parsers import (
    DocumentDecodeError,
    DocxTextExtractor,
    OdtTextExtractor,
    PdfTextExtractor,
    TextExtractor,
    create_text_extractor,
)

# Pipeline
from .pipeline import decode_document, extract_questions_from_document

__all__ = [
    # Extraction
    "ExtractionConfig",
    "ParsedQuestion",
    "RawSection",
    "extract_questions",
    "parse_section",
    "segment",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Document decoding
    "DocumentDecodeError",
    "DocxTextExtractor",
    "OdtTextExtractor",
    "PdfTextExtractor",
    "TextExtractor",
    "create_text_extractor",
    # Pipeline
    "decode_document",
    "extract_questions_from_document",
]
