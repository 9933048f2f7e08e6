"""
Related Question Rotator - anti-repetition selection of "related questions"

State (one instance per conversation session):
- a rotation offset per category
- one "recently shown" set of question texts, cleared wholesale on overflow

Given the same offsets and recently-shown set the output is deterministic; for a
category with at least 2 * limit candidates two consecutive calls never return
the same set.
"""

from typing import Dict, List, Optional, Sequence, Set

from campus_faq.config import Config
from campus_faq.engines.relevance_scorer import word_overlap
from campus_faq.schemas import FAQItem
from campus_faq.utils.logging_utils import get_logger

logger = get_logger("question_rotator")


class RelatedQuestionRotator:
    def __init__(self, limit: Optional[int] = None, recent_capacity: Optional[int] = None):
        self.limit = limit if limit is not None else Config.RELATED_QUESTION_LIMIT
        self.recent_capacity = recent_capacity if recent_capacity is not None else Config.RECENTLY_SHOWN_LIMIT
        self._offsets: Dict[str, int] = {}
        self._recently_shown: Set[str] = set()

    @property
    def recently_shown(self) -> Set[str]:
        return set(self._recently_shown)

    def offset_for(self, category: str) -> int:
        return self._offsets.get(category, 0)

    def rotate(self, category: str, candidates: Sequence[FAQItem]) -> List[FAQItem]:
        """Select up to `limit` candidates, starting at the category's stored offset."""
        candidates = list(candidates)
        if not candidates:
            return []

        offset = self._offsets.get(category, 0) % len(candidates)
        rotated = candidates[offset:] + candidates[:offset]

        available = [q for q in rotated if q.question not in self._recently_shown]
        if len(available) < self.limit:
            # Not enough fresh questions left: forget history and top up.
            self._recently_shown.clear()
            chosen = {q.question for q in available}
            for q in rotated:
                if len(available) >= self.limit:
                    break
                if q.question not in chosen:
                    available.append(q)
                    chosen.add(q.question)

        selected = available[:self.limit]
        self._recently_shown.update(q.question for q in selected)
        self._offsets[category] = (offset + len(selected)) % len(candidates)

        if len(self._recently_shown) > self.recent_capacity:
            self._recently_shown.clear()

        logger.debug(
            f"Rotated '{category}': offset {offset} -> {self._offsets[category]}, selected {len(selected)}"
        )
        return selected

    def related_for(self, answered: FAQItem, message: str, same_category: Sequence[FAQItem]) -> List[FAQItem]:
        """Related questions for an answered FAQ, best word overlap first."""
        candidates = [faq for faq in same_category if faq.question != answered.question]
        # sorted() is stable, so ties keep corpus order
        ranked = sorted(candidates, key=lambda faq: word_overlap(faq, message), reverse=True)
        return self.rotate(answered.category, ranked)

    def reset(self) -> None:
        self._offsets.clear()
        self._recently_shown.clear()
