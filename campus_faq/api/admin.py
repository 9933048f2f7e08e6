from typing import Optional

from fastapi import APIRouter, Depends

from campus_faq.api.dependencies import get_engine, require_admin_token
from campus_faq.core.session import session_stats
from campus_faq.engines.response_synthesizer import ResponseSynthesizer
from campus_faq.schemas import RotationResetRequest
from campus_faq.utils.logging_utils import log_audit

router = APIRouter()


@router.post("/rotation/reset")
def reset_rotation(
    body: Optional[RotationResetRequest] = None,
    engine: ResponseSynthesizer = Depends(get_engine),
    _token: str = Depends(require_admin_token),
):
    session_id = body.session_id if body else None
    session_key = f"guest:{session_id}" if session_id else None
    reset_count = engine.reset_rotation_state(session_key)
    log_audit("ROTATION_RESET", "admin", f"session={session_id or 'all'} reset={reset_count}")
    return {"success": True, "sessions_reset": reset_count}


@router.get("/sessions")
def sessions(
    engine: ResponseSynthesizer = Depends(get_engine),
    _token: str = Depends(require_admin_token),
):
    return session_stats(engine.sessions)
