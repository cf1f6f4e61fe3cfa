from .models import Category, Difficulty

# Checked in order, first match wins
CATEGORY_RULES: tuple[tuple[tuple[str, ...], Category], ...] = (
    (("html", "css", "javascript"), "Web Development"),
    (("python", "java", "programming"), "Programming"),
    (("database", "sql"), "Database"),
    (("network", "server"), "Networking"),
    (("algorithm", "data structure"), "Computer Science"),
)

ADVANCED_KEYWORDS = (
    "optimization",
    "performance",
    "architecture",
    "advanced",
    "complex",
)
INTERMEDIATE_KEYWORDS = (
    "implementation",
    "design pattern",
    "framework",
    "integration",
)

TECH_KEYWORDS = (
    "html",
    "css",
    "javascript",
    "python",
    "java",
    "sql",
    "react",
    "node",
    "angular",
    "vue",
)
CONCEPT_KEYWORDS = (
    "semantic",
    "responsive",
    "accessibility",
    "seo",
    "performance",
    "security",
)


def determine_category(content: str) -> Category:
    lower = content.lower()
    for keywords, category in CATEGORY_RULES:
        if any(keyword in lower for keyword in keywords):
            return category
    return "General"


def determine_difficulty(content: str) -> Difficulty:
    lower = content.lower()
    if any(keyword in lower for keyword in ADVANCED_KEYWORDS):
        return "Advanced"
    if any(keyword in lower for keyword in INTERMEDIATE_KEYWORDS):
        return "Intermediate"
    return "Beginner"


def extract_tags(content: str) -> list[str]:
    """
    Keyword tags in keyword-list order, not order of appearance.

    Matching is by substring, so "javascript" yields both JAVASCRIPT and
    JAVA. Duplicates across the two lists are kept.
    """
    lower = content.lower()
    tags = [tech.upper() for tech in TECH_KEYWORDS if tech in lower]
    tags.extend(
        concept.capitalize() for concept in CONCEPT_KEYWORDS if concept in lower
    )
    return tags
