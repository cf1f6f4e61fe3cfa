import logging
import re
from collections.abc import Callable

from qa_kit.observability import names
from qa_kit.observability.base import MetricsHook, NoOpMetricsHook

from .classification import determine_category, determine_difficulty, extract_tags
from .config import ExtractionConfig
from .models import ParsedQuestion, RawSection

logger = logging.getLogger(__name__)

Split = tuple[str, str]
SplitStrategy = Callable[[str], Split | None]

PREFIX_RE = re.compile(r"^(\*?\*?)\d+\.\s*(\*?\*?)")
BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")
CODE_RE = re.compile(r"`([^`]+)`")

LEADING_BULLET_RE = re.compile(r"^\*\s*")
INNER_BULLET_RE = re.compile(r"\n\s*\*\s*")
TRAILING_PERIOD_RE = re.compile(r"\.\s*$")

QUESTION_WITH_BULLETS_RE = re.compile(
    r"^(.*?\?)\s*\n?\s*((?:\*\s*.+(?:\n|$))+)", re.DOTALL
)
QUESTION_MARK_RE = re.compile(r"^(.*?\?)\s*(.+)", re.DOTALL)
QUESTION_WORDS = ("what", "how", "why", "when", "where", "which", "who")
QUESTION_WORD_RES = tuple(
    re.compile(rf"^(.*?{word}[^.?!]*[.?!])\s*(.+)", re.IGNORECASE | re.DOTALL)
    for word in QUESTION_WORDS
)
SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")


def clean_section_text(text: str) -> str:
    """
    Remove the question number and markdown emphasis/code markup.

    When the number prefix opens "**" emphasis that is closed later on the
    same line (as in "**1. What is X?** ..."), the closing marker goes too.
    Markers already paired on that line are left to the bold cleanup.
    """
    match = PREFIX_RE.match(text)
    if match:
        opening, inner = match.groups()
        text = text[match.end() :]
        first_line = text.split("\n", 1)[0]
        if (opening == "**") != (inner == "**") and first_line.count("**") % 2:
            text = text.replace("**", "", 1)
    text = BOLD_RE.sub(r"\1", text)
    text = CODE_RE.sub(r"\1", text)
    return text.strip()


def decode_entities(text: str) -> str:
    return text.replace("&lt;", "<").replace("&gt;", ">").replace("&amp;", "&")


def split_question_with_bullets(content: str) -> Split | None:
    match = QUESTION_WITH_BULLETS_RE.match(content)
    if not match:
        return None

    bullets = LEADING_BULLET_RE.sub("", match.group(2), count=1)
    items = [item.strip() for item in INNER_BULLET_RE.split(bullets) if item.strip()]
    answer = TRAILING_PERIOD_RE.sub("", ". ".join(items)).strip()
    return match.group(1).strip(), answer


def split_on_question_mark(content: str) -> Split | None:
    match = QUESTION_MARK_RE.match(content)
    if not match:
        return None

    answer = LEADING_BULLET_RE.sub("", match.group(2).strip(), count=1)
    answer = INNER_BULLET_RE.sub(". ", answer).strip()
    return match.group(1).strip(), answer


def split_on_question_word(content: str) -> Split | None:
    for pattern in QUESTION_WORD_RES:
        match = pattern.match(content)
        if match and match.group(2).strip():
            return match.group(1).strip(), match.group(2).strip()
    return None


def split_on_first_sentence(content: str) -> Split | None:
    sentences = SENTENCE_SPLIT_RE.split(content)
    if len(sentences) < 2:
        return None
    return sentences[0].strip(), " ".join(sentences[1:]).strip()


# Tried in order, first non-None result wins
SPLIT_STRATEGIES: tuple[SplitStrategy, ...] = (
    split_question_with_bullets,
    split_on_question_mark,
    split_on_question_word,
    split_on_first_sentence,
)


def split_question_answer(content: str, config: ExtractionConfig) -> Split:
    for strategy in SPLIT_STRATEGIES:
        result = strategy(content)
        if result is not None:
            logger.debug("Split with %s", strategy.__name__)
            return result

    logger.debug("Could not separate answer from question")
    return content, config.unseparated_answer


def parse_section(
    section: RawSection,
    *,
    config: ExtractionConfig = ExtractionConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParsedQuestion | None:
    """
    Turn one raw section into a classified question, or None if the section
    does not yield a long enough question and answer.
    """
    content = clean_section_text(section.text)
    question, answer = split_question_answer(content, config)
    question = decode_entities(question)
    answer = decode_entities(answer)

    if len(question) < config.min_question_length:
        return _reject(section, "question_too_short", metrics_hook)
    if len(answer) < config.min_answer_length:
        return _reject(section, "answer_too_short", metrics_hook)

    combined = f"{question} {answer}"
    return ParsedQuestion(
        question=question,
        answer=answer,
        category=determine_category(combined),
        difficulty=determine_difficulty(combined),
        tags=extract_tags(combined),
    )


def _reject(section: RawSection, reason: str, metrics_hook: MetricsHook) -> None:
    logger.debug(
        "Dropped section %d at offset %d: %s",
        section.ordinal,
        section.offset_start,
        reason,
    )
    metrics_hook.increment(
        names.EXTRACTION_SECTIONS_REJECTED, labels={"reason": reason}
    )
    return None
