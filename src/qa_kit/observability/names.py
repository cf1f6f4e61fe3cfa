# src/qa_kit/observability/names.py

"""Standard metric names for qa-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Question Extraction Metrics
# ============================================================================

# Duration
EXTRACTION_DURATION = "extraction_duration"

# Gauges (labelled with mode="boundary" or mode="fallback")
EXTRACTION_SECTIONS_FOUND = "extraction_sections_found"

# Counters
EXTRACTION_QUESTIONS_CREATED = "extraction_questions_created"
# Labelled with reason="question_too_short" or reason="answer_too_short"
EXTRACTION_SECTIONS_REJECTED = "extraction_sections_rejected"


# ============================================================================
# Document Decoding Metrics
# ============================================================================

# Duration (labelled with format)
DOCUMENT_DECODE_DURATION = "document_decode_duration"

# Counters (labelled with format)
DOCUMENT_DECODE_ERRORS_TOTAL = "document_decode_errors_total"
