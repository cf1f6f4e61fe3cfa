import logging
from time import monotonic

from qa_kit.extraction import ExtractionConfig, ParsedQuestion, extract_questions
from qa_kit.observability import names
from qa_kit.observability.base import MetricsHook, NoOpMetricsHook
from qa_kit.parsers import DocumentDecodeError, DocumentSource, create_text_extractor

logger = logging.getLogger(__name__)


def decode_document(
    source: DocumentSource,
    *,
    filename: str,
    mime_type: str | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    extractor = create_text_extractor(filename, mime_type)
    labels = {"format": extractor.document_format}

    start = monotonic()
    try:
        text = extractor.extract(source)
    except DocumentDecodeError:
        metrics_hook.increment(names.DOCUMENT_DECODE_ERRORS_TOTAL, labels=labels)
        logger.warning("Failed to decode %s as %s", filename, labels["format"])
        raise

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.DOCUMENT_DECODE_DURATION, elapsed_ms, labels)
    logger.info(
        "Decoded %s (%s): %d characters, latency=%.0fms",
        filename,
        labels["format"],
        len(text),
        elapsed_ms,
    )
    return text


def extract_questions_from_document(
    source: DocumentSource,
    *,
    filename: str,
    mime_type: str | None = None,
    config: ExtractionConfig = ExtractionConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[ParsedQuestion]:
    """
    Decode an uploaded PDF, DOCX or ODT document and extract its questions.

    Raises ValueError for unsupported types and DocumentDecodeError for
    documents that cannot be read. An empty list means the document was
    readable but held no parseable questions.
    """
    text = decode_document(
        source, filename=filename, mime_type=mime_type, metrics_hook=metrics_hook
    )
    return extract_questions(text, config=config, metrics_hook=metrics_hook)
