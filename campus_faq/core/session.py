import secrets
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from campus_faq.config import Config
from campus_faq.engines.conversation_context import ConversationContextTracker
from campus_faq.engines.question_rotator import RelatedQuestionRotator

EPHEMERAL_PREFIX = "ephemeral:"


@dataclass
class ConversationSession:
    """Per-conversation mutable state. Hold `lock` while touching it."""

    key: str
    context: ConversationContextTracker = field(default_factory=ConversationContextTracker)
    rotator: RelatedQuestionRotator = field(default_factory=RelatedQuestionRotator)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class SessionStore:
    """In-memory session store, least recently used sessions evicted first."""

    def __init__(self, limit: Optional[int] = None):
        self.limit = limit if limit is not None else Config.SESSION_STORE_LIMIT
        self._sessions: "OrderedDict[str, ConversationSession]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, session_key: Optional[str] = None) -> ConversationSession:
        """
        Session for a key, created on first use.

        Without a key the caller gets a fresh session that is never stored, so
        anonymous calls do not share context or rotation state.
        """
        if not session_key:
            return ConversationSession(key=EPHEMERAL_PREFIX + secrets.token_hex(8))

        key = str(session_key)
        with self._lock:
            session = self._sessions.get(key)
            if session is None:
                session = ConversationSession(key=key)
                self._sessions[key] = session
                while len(self._sessions) > self.limit:
                    self._sessions.popitem(last=False)
            else:
                self._sessions.move_to_end(key)
            return session

    def peek(self, session_key: str) -> Optional[ConversationSession]:
        with self._lock:
            return self._sessions.get(str(session_key))

    def drop(self, session_key: str) -> bool:
        with self._lock:
            return self._sessions.pop(str(session_key), None) is not None

    def sessions(self) -> List[ConversationSession]:
        with self._lock:
            return list(self._sessions.values())

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._sessions.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


def get_conversation_history(store: SessionStore, session_key: str) -> List[str]:
    session = store.peek(session_key)
    if session is None:
        return []
    with session.lock:
        return session.context.messages()


def session_stats(store: SessionStore) -> Dict[str, int]:
    return {"active_sessions": len(store), "limit": store.limit}
