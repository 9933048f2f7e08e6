"""
Rule-based Intent Classifier for the Campus FAQ assistant

Classification Flow:
1. Conversational check - greetings, thanks, farewells... (short-circuits)
2. Program-specific check - degree/subject indicators or a directory hit
3. Intent buckets - academic_advice, campus_life, career_guidance,
   comparison, personalized, creative (first overlap wins)
4. Default - general

All vocabularies live in intent_config.py.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from campus_faq.engines.conversation_context import normalize_message
from campus_faq.engines.intent_config import (
    CONVERSATIONAL_INTENTS,
    GENERAL_INTENT,
    GENERAL_SENTIMENT,
    INTENT_BUCKETS,
    KEYWORD_VOCABULARY,
    PROGRAM_SPECIFIC_INTENT,
    PROGRAM_SPECIFIC_SENTIMENT,
    find_terms,
    has_program_indicator,
    is_program_overview_question,
)
from campus_faq.engines.program_directory import ProgramDirectory
from campus_faq.utils.logging_utils import get_logger

logger = get_logger("intent_classifier")

PROGRAM_INDICATOR_SOURCE = "program_indicator"
PROGRAM_DIRECTORY_SOURCE = "program_directory"


@dataclass
class UserIntent:
    type: str
    keywords: List[str] = field(default_factory=list)
    sentiment: str = GENERAL_SENTIMENT
    # program source, or the bucket term that fired
    matched_on: Optional[str] = None


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _phrase_matches(phrase: str, message_words: set) -> bool:
    """Every word of the phrase appears somewhere in the message."""
    return all(word in message_words for word in phrase.lower().split())


# =============================================================================
# MAIN CLASSIFIER
# =============================================================================

class IntentClassifier:
    """
    Fixed-order, first-match-wins classifier.

    The program directory is optional; without one only the indicator
    vocabulary is used for the program-specific check.
    """

    def __init__(self, directory: Optional[ProgramDirectory] = None):
        self.directory = directory

    def match_conversational(self, message: str) -> Optional[str]:
        """Name of the first conversational intent whose trigger phrase matches, or None."""
        words = set(normalize_message(message).split())
        if not words:
            return None
        for intent, phrases in CONVERSATIONAL_INTENTS:
            if any(_phrase_matches(phrase, words) for phrase in phrases):
                return intent
        return None

    def is_program_overview_question(self, message: str) -> bool:
        return is_program_overview_question(message)

    def is_program_specific(self, message: str) -> bool:
        return self._program_match_source(message) is not None

    def classify(self, message: str) -> UserIntent:
        text = str(message or "")
        keywords = find_terms(text, KEYWORD_VOCABULARY)

        source = self._program_match_source(text)
        if source is not None:
            return UserIntent(
                type=PROGRAM_SPECIFIC_INTENT,
                keywords=keywords,
                sentiment=PROGRAM_SPECIFIC_SENTIMENT,
                matched_on=source,
            )

        for intent_type, vocabulary, sentiment in INTENT_BUCKETS:
            hits = find_terms(text, vocabulary)
            if hits:
                return UserIntent(
                    type=intent_type,
                    keywords=keywords,
                    sentiment=sentiment,
                    matched_on=hits[0],
                )

        return UserIntent(type=GENERAL_INTENT, keywords=keywords, sentiment=GENERAL_SENTIMENT)

    def _program_match_source(self, message: str) -> Optional[str]:
        if has_program_indicator(message):
            return PROGRAM_INDICATOR_SOURCE
        if self._directory_hits(message):
            return PROGRAM_DIRECTORY_SOURCE
        return None

    def _directory_hits(self, message: str) -> list:
        if self.directory is None:
            return []
        try:
            return self.directory.search_programs(message)
        except Exception as e:
            logger.warning(f"Program directory lookup failed: {e}")
            return []
