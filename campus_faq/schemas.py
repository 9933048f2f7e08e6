from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional

from campus_faq.config import Config

ResponseSource = Literal["ai_generated", "faq_enhanced", "conversational", "creative", "fallback"]
ProgramLevel = Literal["undergraduate", "postgraduate"]


class FAQItem(BaseModel):
    question: str
    answer: str
    category: str = Config.DEFAULT_CATEGORY
    link: str = ""
    score: Optional[float] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("category", mode="before")
    @classmethod
    def _default_category(cls, value):
        text = str(value or "").strip()
        return text or Config.DEFAULT_CATEGORY

    @field_validator("link", mode="before")
    @classmethod
    def _default_link(cls, value):
        return str(value or "")


class ChatResponse(BaseModel):
    answer: str
    confidence: float = Field(ge=0.0, le=1.0)
    source: ResponseSource
    related_faqs: List[FAQItem] = Field(default_factory=list, alias="relatedFAQs")
    category: Optional[str] = None
    link: Optional[str] = None
    reasoning: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class ChatRequest(BaseModel):
    message: str
    conversation_id: Optional[str] = Field(default=None, alias="session_id")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ChatReply(ChatResponse):
    session_id: str


class CategoryCount(BaseModel):
    category: str
    count: int


class FAQStats(BaseModel):
    total: int
    categories: List[CategoryCount] = []


class RotationResetRequest(BaseModel):
    session_id: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


# =============================================================================
# PROGRAM DIRECTORY RECORDS (read-only collaborator data)
# =============================================================================

class Department(BaseModel):
    id: str
    name: str
    description: str = ""
    icon: str = ""

    model_config = ConfigDict(frozen=True, extra="ignore")


class CareerOpportunities(BaseModel):
    india: List[str] = []
    international: List[str] = []

    model_config = ConfigDict(frozen=True, extra="ignore")


class Program(BaseModel):
    id: str
    name: str
    overview: str = ""
    department: str
    level: ProgramLevel = "undergraduate"
    duration: str = ""
    core_subjects: List[str] = []
    skills_gained: List[str] = []
    career_opportunities: CareerOpportunities = CareerOpportunities()
    salary_scope: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")
