"""
Conversation Context Tracker - short-term memory across turns

Keeps a bounded FIFO window of the most recent normalized user messages and
derives a lightweight summary (topic, mood, depth) from it.
"""

import re
from collections import Counter, deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from campus_faq.config import Config
from campus_faq.engines.intent_config import (
    KEYWORD_VOCABULARY,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    find_terms,
)

ANALYSIS_WINDOW = 3


def normalize_message(message: str) -> str:
    """Lowercase, replace punctuation with spaces and collapse whitespace."""
    text = re.sub(r"[^\w\s]", " ", str(message or "").lower())
    return re.sub(r"\s+", " ", text).strip()


@dataclass(frozen=True)
class ContextSummary:
    topic: str = "general"
    mood: str = "neutral"
    depth: str = "surface"


class ConversationContextTracker:
    """Rolling window of the last N user messages (oldest evicted first)."""

    def __init__(self, max_messages: Optional[int] = None):
        self.max_messages = max_messages if max_messages is not None else Config.CONTEXT_WINDOW
        self._history: Deque[str] = deque(maxlen=self.max_messages)

    def push(self, message: str) -> None:
        self._history.append(normalize_message(message))

    def messages(self) -> List[str]:
        return list(self._history)

    def clear(self) -> None:
        self._history.clear()

    def __len__(self) -> int:
        return len(self._history)

    def analyze(self) -> ContextSummary:
        if not self._history:
            return ContextSummary()

        recent = list(self._history)[-ANALYSIS_WINDOW:]
        topics = Counter(kw for msg in recent for kw in find_terms(msg, KEYWORD_VOCABULARY))
        common = topics.most_common(1)

        return ContextSummary(
            topic=common[0][0] if common else "general",
            mood=self._detect_mood(recent),
            depth="deep" if len(self._history) > 2 else "surface",
        )

    @staticmethod
    def _detect_mood(messages: List[str]) -> str:
        positive = sum(len(find_terms(msg, POSITIVE_WORDS)) for msg in messages)
        negative = sum(len(find_terms(msg, NEGATIVE_WORDS)) for msg in messages)
        if positive > negative:
            return "positive"
        if negative > positive:
            return "negative"
        return "neutral"
