"""
Campus FAQ Chat API

Endpoints:
1. POST /chat         - answer one message within a conversation session
2. GET  /suggestions  - popular starter questions
3. GET  /faq/stats    - corpus size and per-category counts
4. GET  /health       - liveness and corpus readiness

Handlers are plain `def`: the engine is synchronous and FastAPI runs them in
its thread pool, so per-session locks keep concurrent requests apart.
"""

import secrets
from typing import Tuple

from fastapi import APIRouter, Depends, HTTPException, status

from campus_faq.api.dependencies import get_engine
from campus_faq.config import Config
from campus_faq.engines.response_synthesizer import ResponseSynthesizer
from campus_faq.schemas import ChatReply, ChatRequest, FAQStats
from campus_faq.utils.logging_utils import anonymize_text, get_logger

router = APIRouter()
logger = get_logger("api.chat")


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _resolve_session(body: ChatRequest) -> Tuple[str, str, bool]:
    """Resolve session key and conversation ID."""
    cid = str(body.conversation_id or "").strip()
    if cid:
        return f"guest:{cid}", cid, False
    new_id = secrets.token_hex(8)
    return f"guest:{new_id}", new_id, True


# =============================================================================
# CHAT ENDPOINTS
# =============================================================================

@router.post("/chat", response_model=ChatReply)
def chat(body: ChatRequest, engine: ResponseSynthesizer = Depends(get_engine)):
    session_key, conversation_id, is_new = _resolve_session(body)
    user_msg = (body.message or "").strip()

    if not user_msg:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Message is required")

    if is_new:
        logger.info(f"New conversation {conversation_id}")
    logger.info(f"[{conversation_id}] Q: {anonymize_text(user_msg)[:120]}")

    response = engine.process_message(user_msg, session_key)
    reply = ChatReply(**response.model_dump(), session_id=conversation_id)
    if not Config.DEBUG_REASONING:
        reply = reply.model_copy(update={"reasoning": None})
    return reply


@router.get("/suggestions")
def suggestions(engine: ResponseSynthesizer = Depends(get_engine)):
    return {"suggestions": engine.get_suggested_questions()}


@router.get("/faq/stats", response_model=FAQStats)
def faq_stats(engine: ResponseSynthesizer = Depends(get_engine)):
    return engine.get_faq_stats()


@router.get("/health")
def health(engine: ResponseSynthesizer = Depends(get_engine)):
    return {
        "status": "ok",
        "faq_ready": engine.index.is_ready(),
        "faq_count": engine.index.total_count(),
        "active_sessions": len(engine.sessions),
    }
