import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = str(os.getenv(name, "")).strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = str(os.getenv(name, "")).strip()
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


class Config:
    # Branding / persona
    COLLEGE_NAME = os.getenv("COLLEGE_NAME", "Rathinam College of Arts and Science")
    COLLEGE_SHORT_NAME = os.getenv("COLLEGE_SHORT_NAME", "Rathinam College")
    ASSISTANT_NAME = os.getenv("ASSISTANT_NAME", "RACAD IO")
    COLLEGE_SITE_URL = os.getenv("COLLEGE_SITE_URL", "https://rathinamcollege.ac.in").rstrip("/")
    PROGRAMS_PAGE_URL = os.getenv("PROGRAMS_PAGE_URL", "/programs")

    # Corpus & directory sources
    FAQ_MAIN_PATH = os.getenv("FAQ_MAIN_PATH", str(DATA_DIR / "faq_main.json"))
    FAQ_WEB_PATH = os.getenv("FAQ_WEB_PATH", str(DATA_DIR / "faq_web.json"))
    PROGRAMS_PATH = os.getenv("PROGRAMS_PATH", str(DATA_DIR / "programs.json"))
    DEFAULT_CATEGORY = "General Information"

    # Engine tuning
    CONTEXT_WINDOW = max(1, _env_int("CONTEXT_WINDOW", 5))
    RELATED_QUESTION_LIMIT = max(1, _env_int("RELATED_QUESTION_LIMIT", 3))
    RECENTLY_SHOWN_LIMIT = max(1, _env_int("RECENTLY_SHOWN_LIMIT", 100))
    PROGRAM_MATCH_CONFIDENCE = _env_float("PROGRAM_MATCH_CONFIDENCE", 0.7)
    WEAK_MATCH_CONFIDENCE = _env_float("WEAK_MATCH_CONFIDENCE", 0.5)
    SESSION_STORE_LIMIT = max(1, _env_int("SESSION_STORE_LIMIT", 1000))

    # Operations
    ADMIN_TOKEN = os.getenv("ADMIN_TOKEN", "")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    DEBUG_REASONING = _env_bool("DEBUG_REASONING", True)

    # Categories whose first FAQ is offered as a "popular" question
    POPULAR_CATEGORIES = [
        "Admissions",
        "Programs & Departments",
        "Fees & Financial Aid",
        "Facilities & Campus Life",
        "General Information",
    ]

    @staticmethod
    def site_link(path: str = "") -> str:
        """Absolute URL on the college website."""
        return f"{Config.COLLEGE_SITE_URL}/{path.lstrip('/')}"
