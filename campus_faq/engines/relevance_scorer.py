"""
Relevance Scorer - lexical ranking of FAQ items against free text

Scoring (all substring tests on lowercased text):
    10 * [whole query in question]
  +  5 * [whole query in answer]
  +  3 * [whole query in category]
  + sum over query words of (2 * [word in question] + 1 * [word in answer])

Items scoring 0 are dropped; the rest are sorted by score, highest first, with
ties kept in corpus order. Queries shorter than 3 characters match nothing.
"""

from typing import List, Optional

from campus_faq.config import Config
from campus_faq.engines.faq_index import FAQCorpusIndex
from campus_faq.engines.intent_config import (
    KEYWORD_VOCABULARY,
    SPECIFIC_PROGRAM_FRAGMENTS,
    find_terms,
)
from campus_faq.schemas import FAQItem
from campus_faq.utils.logging_utils import get_logger

logger = get_logger("relevance_scorer")

MIN_QUERY_LENGTH = 3

PHRASE_IN_QUESTION = 10
PHRASE_IN_ANSWER = 5
PHRASE_IN_CATEGORY = 3
WORD_IN_QUESTION = 2
WORD_IN_ANSWER = 1


def normalize_query(query: str) -> str:
    return str(query or "").strip().lower()


def score_item(faq: FAQItem, query: str) -> int:
    """Raw relevance score of one item for an already-normalized query."""
    question = faq.question.lower()
    answer = faq.answer.lower()
    category = faq.category.lower()

    score = 0
    if query in question:
        score += PHRASE_IN_QUESTION
    if query in answer:
        score += PHRASE_IN_ANSWER
    if query in category:
        score += PHRASE_IN_CATEGORY

    for word in query.split():
        if word in question:
            score += WORD_IN_QUESTION
        if word in answer:
            score += WORD_IN_ANSWER
    return score


def word_overlap(faq: FAQItem, message: str) -> int:
    """Number of message words contained in the FAQ question."""
    question = faq.question.lower()
    return sum(1 for word in str(message or "").lower().split() if word in question)


class RelevanceScorer:
    def __init__(self, index: FAQCorpusIndex):
        self.index = index

    def search(self, query: str) -> List[FAQItem]:
        normalized = normalize_query(query)
        if len(normalized) < MIN_QUERY_LENGTH:
            return []

        results = []
        for faq in self.index.get_all():
            score = score_item(faq, normalized)
            if score > 0:
                results.append(faq.model_copy(update={"score": float(score)}))

        # list.sort is stable: equal scores keep corpus order
        results.sort(key=lambda faq: faq.score, reverse=True)
        return results

    def find_best_match(self, query: str) -> Optional[FAQItem]:
        results = self.search(query)
        return results[0] if results else None

    @staticmethod
    def confidence(faq: Optional[FAQItem], query: str) -> float:
        """
        Map a raw score onto [0, 1].

        Full confidence is a query found verbatim in the question whose every
        word also appears in both question and answer; the category bonus is
        not needed to reach it.
        """
        if faq is None or not faq.score:
            return 0.0
        words = normalize_query(query).split()
        ceiling = PHRASE_IN_QUESTION + (WORD_IN_QUESTION + WORD_IN_ANSWER) * len(words)
        return min(1.0, faq.score / ceiling) if ceiling else 0.0

    def find_by_specific_program(self, message: str) -> Optional[FAQItem]:
        """Match on a known program/course name when the full message scores too low."""
        lowered = normalize_query(message)
        for fragment in SPECIFIC_PROGRAM_FRAGMENTS:
            if fragment not in lowered:
                continue
            best = self.find_best_match(fragment)
            if best is not None and self.confidence(best, fragment) > Config.PROGRAM_MATCH_CONFIDENCE:
                logger.debug(f"Program fragment '{fragment}' matched '{best.question}'")
                return best
        return None

    def find_faq_match(self, message: str) -> Optional[FAQItem]:
        """
        Best single FAQ for a message.

        1. Whole-message match, if confident enough
        2. Specific program/course name
        3. Weak whole-message match
        4. Vocabulary keywords present in the message, one at a time
        5. A category name mentioned in the message
        """
        primary = self.find_best_match(message)
        if primary is not None and self.confidence(primary, message) >= Config.WEAK_MATCH_CONFIDENCE:
            return primary

        program_match = self.find_by_specific_program(message)
        if program_match is not None:
            return program_match

        if primary is not None:
            return primary

        for keyword in find_terms(message, KEYWORD_VOCABULARY):
            match = self.find_best_match(keyword)
            if match is not None:
                return match

        lowered = normalize_query(message)
        for category in self.index.get_categories():
            if category.lower() in lowered:
                items = self.index.get_by_category(category)
                if items:
                    return items[0]
        return None
