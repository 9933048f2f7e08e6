"""
Campus FAQ Assistant - Main Server (FastAPI)
Features:
- Lexical FAQ retrieval over the campus knowledge base
- Rule-based intent classification with persona responses
- Per-session conversation context and related-question rotation
- Log Anonymization
"""
import logging
import traceback
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

# Load environment variables
load_dotenv()

from campus_faq import extensions
from campus_faq.api import admin, chat
from campus_faq.config import Config, _env_bool, _env_int
from campus_faq.engines.response_synthesizer import ResponseSynthesizer
from campus_faq.utils import logging_utils

# Setup Logging
logger = logging_utils.get_logger()

# Suppress noisy external libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Initialize Engines
    extensions.faq_engine = ResponseSynthesizer.from_config()
    index = extensions.faq_engine.index
    print(f"[Startup] Loaded {index.total_count()} FAQs in {len(index.get_categories())} categories")
    if not index.is_ready():
        logger.warning("FAQ corpus is empty; every question will get the fallback answer")
    yield
    extensions.faq_engine = None


app = FastAPI(title=f"{Config.ASSISTANT_NAME} Campus FAQ Assistant", lifespan=lifespan)
app.include_router(chat.router, prefix="/api", tags=["chat"])
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])


if __name__ == "__main__":
    import uvicorn

    try:
        # Setup File Logging
        file_handler = logging.FileHandler("server.log")
        file_handler.setLevel(logging.INFO)
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        print(f"Starting {Config.ASSISTANT_NAME} for {Config.COLLEGE_NAME}")
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=_env_int("PORT", 5000),
            reload=_env_bool("UVICORN_RELOAD", False),
        )
    except Exception as e:
        tb = traceback.format_exc()
        with open("crash_log.txt", "w") as f:
            f.write(f"Server Crashed: {str(e)}\n\n{tb}")
        print(f"Server Crashed: {e}")
