from .classification import determine_category, determine_difficulty, extract_tags
from .config import ExtractionConfig
from .extractor import extract_questions
from .models import Category, Difficulty, ParsedQuestion, RawSection
from .section_parser import parse_section
from .segmenter import segment

__all__ = [
    "Category",
    "Difficulty",
    "ExtractionConfig",
    "ParsedQuestion",
    "RawSection",
    "determine_category",
    "determine_difficulty",
    "extract_questions",
    "extract_tags",
    "parse_section",
    "segment",
]
