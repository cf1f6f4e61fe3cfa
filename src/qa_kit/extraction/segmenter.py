import logging
import re

from .models import RawSection

logger = logging.getLogger(__name__)

# Line-leading "1." with optional "*"/"**" emphasis around the number.
# Group 3 is the rest of the marker line, trailing emphasis excluded.
BOUNDARY_RE = re.compile(
    r"(?:^|\n)(\*?\*?)?(\d+)\.\s*(?:\*?\*?)?(.*?)(?:\*?\*?)?(?=\n|\Z)"
)

# Any position followed by digits, a period and whitespace
FALLBACK_SPLIT_RE = re.compile(r"(?=\d+\.\s)")


def normalize_text(text: str) -> str:
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    # Decoders can leave a byte-order mark in front of the first marker
    return text.strip().lstrip("\ufeff").strip()


def segment(text: str) -> list[RawSection]:
    """
    Split document text into one raw section per numbered question.

    Boundaries are line-leading numeric labels. Each section runs from its
    boundary up to the next one (or end of text). When no boundary exists
    the text is cut before every digits-period-whitespace run instead and
    the fragments are numbered by position.

    A numbered list inside an answer is indistinguishable from the next
    question and starts a new section.
    """
    content = normalize_text(text)
    if not content:
        return []

    # Offsets point at the marker itself, past the newline that precedes it
    boundaries = [
        (m.start(2) - len(m.group(1) or ""), m.group(2), m.group(3))
        for m in BOUNDARY_RE.finditer(content)
    ]
    logger.debug("Found %d question boundaries", len(boundaries))

    if not boundaries:
        logger.debug("No question boundaries found, using fallback split")
        return _fallback_sections(content)

    sections: list[RawSection] = []
    for index, (offset, label, inline) in enumerate(boundaries):
        if index + 1 < len(boundaries):
            end = boundaries[index + 1][0]
        else:
            end = len(content)
        logger.debug("Question %s at offset %d: %.50s", label, offset, inline)
        sections.append(
            RawSection(
                text=content[offset:end].strip(),
                ordinal=_ordinal(label, index + 1),
                offset_start=offset,
                label=label,
            )
        )
    return sections


def _ordinal(label: str, position: int) -> int:
    try:
        return int(label)
    except ValueError:
        # Longer than the interpreter's int string-conversion limit
        logger.debug("Label of %d digits numbered by position", len(label))
        return position


def _fallback_sections(content: str) -> list[RawSection]:
    cuts = sorted({0, *(m.start() for m in FALLBACK_SPLIT_RE.finditer(content))})
    cuts.append(len(content))

    sections: list[RawSection] = []
    for start, end in zip(cuts, cuts[1:]):
        fragment = content[start:end]
        stripped = fragment.strip()
        if not stripped:
            continue
        sections.append(
            RawSection(
                text=stripped,
                ordinal=len(sections) + 1,
                offset_start=start + len(fragment) - len(fragment.lstrip()),
            )
        )

    logger.debug("Fallback split found %d sections", len(sections))
    return sections
