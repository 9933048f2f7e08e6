"""
Intent Configuration - Single Source of Truth for all keyword/phrase definitions.

Every engine that needs keyword matching (intent_classifier, relevance_scorer,
conversation_context, ux_engine) imports from here. The classification rules are
plain ordered data so they can be inspected and tested independently of the
code that walks them: order is significant and the first match wins.
"""

import re
from functools import lru_cache
from typing import Iterable, List, Tuple

# =============================================================================
# CONVERSATIONAL INTENTS - checked before anything else
# (intent name, trigger phrases). A phrase matches when every one of its
# words appears among the message words, in any order.
# =============================================================================

CONVERSATIONAL_INTENTS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("greeting", ("hello", "hi", "hey")),
    ("identity", ("who are you", "what are you", "tell me about yourself", "introduce yourself")),
    ("wellbeing", ("how are you", "how do you do")),
    ("thanks", ("thank you", "thanks", "thx")),
    ("farewell", ("bye", "goodbye", "see you", "good night")),
    ("help", ("help", "what can you do", "capabilities", "features")),
)

# =============================================================================
# PROGRAM-SPECIFIC INDICATORS - degree abbreviations and subject names
# =============================================================================

PROGRAM_INDICATORS: Tuple[str, ...] = (
    "bsc", "bcom", "bba", "bca", "mba", "m.sc", "m.a", "phd",
    "computer science", "ai", "machine learning", "data science",
    "cyber security", "digital forensic", "biotechnology", "psychology",
    "visual communication", "commerce", "management", "english",
    "mathematics", "physics", "costume design", "fashion",
)

PROGRAM_SPECIFIC_INTENT = "program_specific"
PROGRAM_SPECIFIC_SENTIMENT = "curious"
GENERAL_INTENT = "general"
GENERAL_SENTIMENT = "neutral"

# =============================================================================
# INTENT BUCKETS - (intent type, vocabulary, sentiment), checked in order
# =============================================================================

INTENT_BUCKETS: Tuple[Tuple[str, Tuple[str, ...], str], ...] = (
    ("academic_advice", ("study", "learn", "course", "program", "curriculum", "syllabus"), "curious"),
    ("campus_life", ("campus", "facility", "club", "event", "activity", "student life"), "interested"),
    ("career_guidance", ("career", "job", "future", "placement", "opportunity", "profession"), "concerned"),
    ("comparison", ("vs", "compare", "difference", "better", "which", "versus"), "analytical"),
    ("personalized", ("my", "i want", "i need", "help me", "advice"), "personal"),
    ("creative", ("imagine", "what if", "suppose", "creative", "interesting", "unique"), "exploratory"),
)

# =============================================================================
# KEYWORD VOCABULARY - extracted from every classified message
# =============================================================================

KEYWORD_VOCABULARY: Tuple[str, ...] = (
    "admission", "apply", "application", "program", "course", "fee", "payment",
    "scholarship", "hostel", "library", "lab", "faculty", "teacher", "exam",
    "result", "certificate", "document", "form", "deadline", "eligibility",
    "requirement", "contact", "phone", "email", "address", "location",
    "transport", "bus", "train", "airport", "campus", "facility", "club",
    "sport", "cultural", "event", "festival", "placement", "job", "career",
    "internship", "research", "phd", "mba", "bsc", "msc", "bcom", "mcom",
    "study", "learn", "curriculum", "syllabus", "future", "opportunity",
    "compare", "difference", "better", "vs", "versus", "imagine", "creative",
    "unique", "interesting", "my", "i want", "i need", "help me", "advice",
)

# =============================================================================
# SPECIFIC PROGRAM FRAGMENTS - secondary FAQ matching, highest priority first
# =============================================================================

SPECIFIC_PROGRAM_FRAGMENTS: Tuple[str, ...] = (
    "bsc digital and cyber forensic science",
    "bsc digital cyber forensic",
    "digital forensic",
    "cyber forensic",
    "cyber security",
    "digital forensics",
    "cyber forensics",
    "bsc computer science",
    "bsc ai ml",
    "bsc data science",
    "bsc biotechnology",
    "bsc psychology",
    "bsc visual communication",
    "bcom ca",
    "bcom accounting finance",
    "bcom banking insurance",
    "bcom international business",
    "bba logistics",
    "bca",
    "mba",
    "mba iev",
    "m sc data science",
    "m sc microbiology",
    "m a public administration",
    "m a journalism",
    "phd",
)

# =============================================================================
# PROGRAM OVERVIEW - "what programs do you offer" style questions
# =============================================================================

PROGRAM_OVERVIEW_PHRASES: Tuple[str, ...] = (
    "ug programs", "undergraduate programs", "what programs", "which programs",
    "programs offered", "courses offered", "degrees offered", "bachelor programs",
    "bachelor degrees", "all programs", "list of programs", "available programs",
    "what courses", "what degrees", "tell me about programs", "show me programs",
    "programs available", "courses available", "degrees available",
    "what departments", "which departments", "academic departments",
    "faculty departments", "what schools", "which schools", "academic schools",
    "study areas", "what can i study", "what subjects", "what fields",
    "academic fields", "study programs", "academic programs", "college programs",
    "university programs",
)

# =============================================================================
# ADMISSION GUIDANCE - extra fallback section for application questions
# =============================================================================

ADMISSION_KEYWORDS: Tuple[str, ...] = (
    "apply", "application", "admission", "enroll", "enrollment",
    "how to apply", "how do i apply", "application process",
    "admission procedure", "admission process", "apply online",
    "online application", "admission form", "application form",
)

# =============================================================================
# MOOD WORDS - conversation context analysis
# =============================================================================

POSITIVE_WORDS: Tuple[str, ...] = ("excited", "happy", "great", "wonderful", "amazing", "love", "like")
NEGATIVE_WORDS: Tuple[str, ...] = ("worried", "concerned", "anxious", "confused", "frustrated", "hate", "dislike")


# =============================================================================
# HELPER FUNCTIONS - reusable across all engines
# =============================================================================

SHORT_TERM_LENGTH = 2


@lru_cache(maxsize=1024)
def _term_pattern(term: str) -> "re.Pattern[str]":
    """
    Pattern for a vocabulary term starting at a word boundary.

    Longer terms also match inflected forms ("study" in "studying",
    "program" in "programmes"). Two-letter terms ("ai", "vs", "my") must be
    whole words so that "ai" never matches inside "email".
    """
    term = term.lower().strip()
    if len(term) <= SHORT_TERM_LENGTH:
        return re.compile(r"(?<!\w)" + re.escape(term) + r"(?!\w)")
    if term.endswith("y"):
        body = re.escape(term[:-1]) + r"(?:y|ies)"
    else:
        body = re.escape(term)
    return re.compile(r"(?<!\w)" + body)


def contains_term(text: str, term: str) -> bool:
    """Check if a vocabulary term occurs in text at the start of a word."""
    if not term:
        return False
    return _term_pattern(term).search(str(text or "").lower()) is not None


def find_terms(text: str, terms: Iterable[str]) -> List[str]:
    """Vocabulary terms present in text, in vocabulary order."""
    lowered = str(text or "").lower()
    return [term for term in terms if _term_pattern(term).search(lowered)]


def has_program_indicator(text: str) -> bool:
    return bool(find_terms(text, PROGRAM_INDICATORS))


def is_admission_related(text: str) -> bool:
    return bool(find_terms(text, ADMISSION_KEYWORDS))


def is_program_overview_question(text: str) -> bool:
    lowered = str(text or "").lower()
    return any(phrase in lowered for phrase in PROGRAM_OVERVIEW_PHRASES)
