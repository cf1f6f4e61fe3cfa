import logging
from time import monotonic

from qa_kit.observability import names
from qa_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import ExtractionConfig
from .models import ParsedQuestion
from .section_parser import parse_section
from .segmenter import segment

logger = logging.getLogger(__name__)


def extract_questions(
    text: str,
    *,
    config: ExtractionConfig = ExtractionConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[ParsedQuestion]:
    """
    Segment document text into numbered sections and parse each one.

    Sections that cannot be parsed are dropped. Returns an empty list when
    nothing usable is found.
    """
    start = monotonic()

    sections = segment(text)
    mode = "fallback" if sections and sections[0].label is None else "boundary"
    metrics_hook.record_gauge(
        names.EXTRACTION_SECTIONS_FOUND, len(sections), labels={"mode": mode}
    )

    questions: list[ParsedQuestion] = []
    for section in sections:
        parsed = parse_section(section, config=config, metrics_hook=metrics_hook)
        if parsed is not None:
            questions.append(parsed)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.EXTRACTION_DURATION, elapsed_ms)
    metrics_hook.increment(names.EXTRACTION_QUESTIONS_CREATED, len(questions))
    logger.info(
        "Extracted %d questions from %d sections (%s)",
        len(questions),
        len(sections),
        mode,
    )
    return questions
