from hmac import compare_digest
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from campus_faq import extensions
from campus_faq.config import Config
from campus_faq.engines.response_synthesizer import ResponseSynthesizer

admin_token_scheme = APIKeyHeader(name="X-Admin-Token", auto_error=False)


def get_engine() -> ResponseSynthesizer:
    if extensions.faq_engine is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="FAQ engine is not initialized",
        )
    return extensions.faq_engine


def require_admin_token(token: Optional[str] = Depends(admin_token_scheme)) -> str:
    configured = str(Config.ADMIN_TOKEN or "").strip()
    # No configured token means the admin surface is disabled.
    if not configured or not token or not compare_digest(str(token), configured):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin token required",
        )
    return token
