"""
UX Engine for the Campus FAQ assistant

Persona templates and structured response building:
1. Conversational replies - greeting, identity, thanks, farewell, help
2. Link bundles - category-keyed quick-access links
3. Natural lead-ins - phrasing chosen from the user's question word
4. ResponseBuilder - named sections held as data, rendered to markdown last
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from campus_faq.config import Config
from campus_faq.schemas import FAQItem


# =============================================================================
# CONVERSATIONAL REPLIES
# =============================================================================

CONVERSATIONAL_RESPONSES: Dict[str, str] = {
    "greeting": (
        "Hello! I'm {assistant}, your AI assistant for {college}. I'm here to help you with "
        "information about our programs, admissions, campus life, and more. How can I assist you today?"
    ),
    "identity": (
        "I'm {assistant}, an AI-powered chatbot designed specifically for {college}. I can help you with:\n\n"
        "• Academic programs and courses\n"
        "• Admission procedures and requirements\n"
        "• Campus facilities and student life\n"
        "• Faculty information and research\n"
        "• Fees, scholarships, and financial aid\n"
        "• And much more!\n\n"
        "I'm here to make your college experience easier by providing quick, accurate information. "
        "What would you like to know?"
    ),
    "wellbeing": (
        "I'm functioning perfectly and ready to help you with all your questions about {short}! "
        "What information are you looking for today?"
    ),
    "thanks": "You're welcome! I'm happy to help. Is there anything else you'd like to know about {short}?",
    "farewell": (
        "Goodbye! Feel free to come back anytime if you have more questions about {short}. Have a great day!"
    ),
    "help": (
        "I'm {assistant}, your comprehensive guide to {short}! Here's what I can help you with:\n\n"
        "📚 **Academic Information**: Programs, courses, curriculum, faculty\n"
        "🎓 **Admissions**: Application process, requirements, deadlines\n"
        "💰 **Financial**: Fees, scholarships, payment options\n"
        "🏫 **Campus Life**: Facilities, clubs, events, student activities\n"
        "📞 **Contact**: Department contacts, office locations\n\n"
        "Just ask me anything specific, and I'll provide detailed information. What would you like to explore?"
    ),
}


def persona_values() -> Dict[str, str]:
    return {
        "assistant": Config.ASSISTANT_NAME,
        "college": Config.COLLEGE_NAME,
        "short": Config.COLLEGE_SHORT_NAME,
    }


def get_conversational_reply(intent: str) -> str:
    template = CONVERSATIONAL_RESPONSES.get(intent, CONVERSATIONAL_RESPONSES["help"])
    return template.format(**persona_values())


# =============================================================================
# ERROR MESSAGES
# =============================================================================

ERROR_MESSAGES = {
    "generic": "I apologize, but I encountered an issue. Please try asking your question again.",
}


def get_error_message(error_type: str) -> str:
    return ERROR_MESSAGES.get(error_type, ERROR_MESSAGES["generic"])


# =============================================================================
# LINK BUNDLES
# =============================================================================

@dataclass(frozen=True)
class LinkBundle:
    name: str
    message_keywords: Tuple[str, ...]
    category_fragments: Tuple[str, ...]
    links: Tuple[Tuple[str, str], ...]

    def matches(self, message: str, category: str) -> bool:
        return (
            any(kw in message for kw in self.message_keywords)
            or any(fragment in category for fragment in self.category_fragments)
        )

    def resolved_links(self) -> List[Tuple[str, str]]:
        return [(label, Config.site_link(path)) for label, path in self.links]


# Checked in order; the first bundle whose keywords or category fragments match wins.
LINK_BUNDLES: Tuple[LinkBundle, ...] = (
    LinkBundle(
        "academic",
        ("program", "course", "curriculum", "syllabus", "study", "learn", "education",
         "degree", "bachelor", "master", "phd", "subject", "class", "lecture", "faculty",
         "teacher", "professor", "academic", "scholarly", "intellectual"),
        ("academic", "program"),
        (("All Programs", "programmes-offered/"), ("Admissions", "adminssion-procedure/"),
         ("Campus Facilities", "infrastructure")),
    ),
    LinkBundle(
        "admission",
        ("apply", "application", "admission", "enroll", "enrollment"),
        ("admission",),
        (("Apply Online", "adminssion-procedure/"), ("Program Details", "programmes-offered/"),
         ("Fee Structure", "pay-fees/")),
    ),
    LinkBundle(
        "campus",
        ("campus", "facility", "infrastructure", "library", "lab", "laboratory",
         "sport", "gym", "cafeteria", "hostel", "dormitory", "ground", "field",
         "building", "classroom", "auditorium", "seminar", "conference"),
        ("campus", "facility", "facilities"),
        (("Campus Overview", "infrastructure"), ("Virtual Tour", "virtual-tour/"),
         ("Photo Gallery", "gallery/")),
    ),
    LinkBundle(
        "financial",
        ("fee", "payment", "cost", "price", "scholarship", "financial", "money",
         "tuition", "expense", "budget", "afford", "cheap", "expensive", "discount",
         "loan", "grant", "fund", "sponsor"),
        ("fee", "scholarship", "financial"),
        (("Fee Structure", "pay-fees/"), ("Payment Portal", "pay-fees/"), ("Scholarships", "pay-fees/")),
    ),
    LinkBundle(
        "career",
        ("career", "job", "placement", "employment", "work", "profession", "vocation",
         "future", "opportunity", "industry", "company", "corporate", "business",
         "entrepreneur", "startup", "internship", "training", "skill"),
        ("career", "placement", "job"),
        (("Placement Cell", "placement-cell/"), ("Career Guidance", "placement-cell/"),
         ("Alumni Network", "alumni/")),
    ),
    LinkBundle(
        "research",
        ("research", "innovation", "discovery", "experiment", "investigation",
         "analysis", "development", "technology", "science", "doctorate",
         "publication", "paper", "journal", "symposium"),
        ("research", "innovation", "phd"),
        (("Research Centers", "research/"), ("PhD Programs", "programmes-offered/"),
         ("Publications", "research/")),
    ),
    LinkBundle(
        "international",
        ("international", "global", "worldwide", "foreign", "abroad", "overseas",
         "exchange", "collaboration", "partnership", "alliance", "network",
         "cultural", "diversity", "multicultural", "cross-border"),
        ("international", "exchange", "global"),
        (("International Programs", "international/"), ("Global Partnerships", "international/"),
         ("Study Abroad", "international/")),
    ),
    LinkBundle(
        "student_support",
        ("student", "support", "help", "assist", "service", "welfare", "care",
         "counseling", "guidance", "advice", "mentor", "tutor", "coach",
         "health", "medical", "transport", "accommodation"),
        ("student", "support", "service"),
        (("Student Welfare", "student-welfare/"), ("Hostel Info", "infrastructure"),
         ("Transportation", "infrastructure")),
    ),
    LinkBundle(
        "contact",
        ("contact", "reach", "call", "phone", "email", "address", "location",
         "place", "where", "find", "locate", "direction", "map", "route",
         "office", "department", "staff", "person"),
        ("contact", "location", "address"),
        (("Contact Us", "contact-us/"), ("Campus Location", "contact-us/"), ("Office Hours", "contact-us/")),
    ),
    LinkBundle(
        "events",
        ("event", "activity", "festival", "celebration", "ceremony", "function",
         "show", "performance", "exhibition", "fair", "competition",
         "contest", "tournament", "meet", "gathering", "assembly"),
        ("event", "activity", "festival"),
        (("Events Calendar", "events/"), ("Student Clubs", "events/"), ("Cultural Programs", "events/")),
    ),
)

DEFAULT_LINK_BUNDLE = LinkBundle(
    "default",
    (),
    (),
    (("College Homepage", ""), ("Programs", "programmes-offered/"), ("Admissions", "adminssion-procedure/")),
)


def select_link_bundle(message: str, category: str = "") -> LinkBundle:
    lowered_message = str(message or "").lower()
    lowered_category = str(category or "").lower()
    for bundle in LINK_BUNDLES:
        if bundle.matches(lowered_message, lowered_category):
            return bundle
    return DEFAULT_LINK_BUNDLE


# =============================================================================
# NATURAL LEAD-INS
# =============================================================================

# (trigger words in the user's message, template, prefixes stripped from the FAQ question)
LEAD_IN_RULES: Tuple[Tuple[Tuple[str, ...], str, Tuple[str, ...]], ...] = (
    (("how", "procedure", "process"), "Here's how to {topic}:", ("how do i ", "how can i ")),
    (("what", "information", "details"), "Here's what you need to know about {topic}:", ("what is ", "what are ")),
    (("when", "deadline", "schedule"), "Regarding the timing for {topic}:", ("when ", "deadline ")),
    (("where", "location", "place"), "Here's where you can {topic}:", ("where ", "location ")),
    (("why", "reason", "purpose"), "Here's why {topic}:", ("why ", "reason ")),
)


def natural_lead_in(faq: FAQItem, message: str) -> str:
    """Opening sentence for an FAQ answer, phrased after the user's question word."""
    text = str(message or "").strip()
    for triggers, template, prefixes in LEAD_IN_RULES:
        if any(trigger in text for trigger in triggers):
            topic = faq.question.lower()
            for prefix in prefixes:
                topic = topic.replace(prefix, "", 1)
            return template.format(topic=topic)
    return f'Based on your question about "{faq.question}", here\'s the information:'


# =============================================================================
# RESPONSE BUILDING
# =============================================================================

def format_bullets(items: Sequence[str]) -> str:
    return "\n".join(f"• {item}" for item in items)


@dataclass
class ResponseSection:
    title: str = ""
    body: str = ""
    bullets: List[str] = field(default_factory=list)

    def render(self) -> str:
        parts = []
        if self.title:
            parts.append(f"**{self.title}**")
        if self.body:
            parts.append(self.body)
        if self.bullets:
            parts.append(format_bullets(self.bullets))
        return "\n\n".join(parts)


@dataclass
class ResponseBuilder:
    """Assembles an answer from named parts; nothing is concatenated until render()."""

    summary: str = ""
    sections: List[ResponseSection] = field(default_factory=list)
    links: Optional[LinkBundle] = None
    related: List[FAQItem] = field(default_factory=list)
    related_heading: str = "Related questions you might find helpful:"
    closing: str = ""

    def add_paragraph(self, text: str) -> "ResponseBuilder":
        if text:
            self.sections.append(ResponseSection(body=text))
        return self

    def add_section(self, title: str, body: str = "", bullets: Sequence[str] = ()) -> "ResponseBuilder":
        if body or bullets:
            self.sections.append(ResponseSection(title=title, body=body, bullets=list(bullets)))
        return self

    def with_links(self, bundle: LinkBundle) -> "ResponseBuilder":
        self.links = bundle
        return self

    def with_related(self, related: Sequence[FAQItem], heading: Optional[str] = None) -> "ResponseBuilder":
        self.related = list(related)
        if heading:
            self.related_heading = heading
        return self

    def render(self) -> str:
        blocks = []
        if self.summary:
            blocks.append(self.summary)
        blocks.extend(section.render() for section in self.sections)
        if self.links is not None:
            link_lines = format_bullets(f"[{label}]({url})" for label, url in self.links.resolved_links())
            blocks.append(
                f"**🔗 Quick Access Links:**\n\n{link_lines}\n\n💡 **Click any link above for detailed information**"
            )
        if self.related:
            blocks.append(f"**{self.related_heading}**\n" + format_bullets(q.question for q in self.related))
        if self.closing:
            blocks.append(self.closing)
        return "\n\n".join(block for block in blocks if block)


# =============================================================================
# ADMISSION GUIDANCE
# =============================================================================

def admission_guidance_sections(message: str) -> List[ResponseSection]:
    """Step-by-step admission help appended to fallback answers for application questions."""
    lowered = str(message or "").lower()
    sections = []

    if "apply online" in lowered or "online application" in lowered:
        sections.append(ResponseSection(
            title="📱 Online Application Steps:",
            bullets=[
                f"**Step 1**: Visit [Admissions Portal]({Config.site_link('adminssion-procedure/')})",
                '**Step 2**: Click "Apply Now"',
                "**Step 3**: Fill personal & academic details",
                "**Step 4**: Upload documents",
                "**Step 5**: Pay fee online",
                "**Step 6**: Submit & confirm",
            ],
        ))
        sections.append(ResponseSection(
            title="📋 Required Documents:",
            bullets=[
                "10th & 12th mark sheets",
                "Transfer certificate (if applicable)",
                "Community certificate (if applicable)",
                "Passport photos & ID proof",
            ],
        ))

    if "upload" in lowered or "document" in lowered:
        sections.append(ResponseSection(
            title="📎 Document Guidelines:",
            bullets=[
                "**Format**: PDF, JPG, PNG (max 2MB each)",
                "**Quality**: Clear, legible scans",
                "**Required**: All documents before submission",
                "**Verification**: Originals during admission",
            ],
        ))

    if "contact" in lowered or "office" in lowered:
        sections.append(ResponseSection(
            title="📞 Admissions Office:",
            body=f"Reach the admissions team through the [Contact Us]({Config.site_link('contact-us/')}) page.",
        ))

    sections.append(ResponseSection(
        title="🔗 Essential Links:",
        bullets=[
            f"[Apply Now]({Config.site_link('adminssion-procedure/')})",
            f"[Program Details]({Config.site_link('programmes-offered/')})",
            f"[Fee Structure]({Config.site_link('pay-fees/')})",
        ],
    ))
    return sections


# =============================================================================
# PERSONA PROFILES - one per intent generator
# =============================================================================

@dataclass(frozen=True)
class PersonaProfile:
    intro: str
    insight_title: str
    # (keywords that trigger the insight, insight text)
    insights: Tuple[Tuple[Tuple[str, ...], str], ...]
    takeaway: str
    closing: str
    confidence: float
    source: str = "ai_generated"
    reasoning: str = "Generated {intent} response based on keywords: {keywords}"

    def insights_for(self, keywords: Sequence[str]) -> List[str]:
        found = set(keywords)
        return [text.format(**persona_values()) for triggers, text in self.insights if found.intersection(triggers)]


PERSONA_PROFILES: Dict[str, PersonaProfile] = {
    "academic_advice": PersonaProfile(
        intro="Based on your interest in {keywords}, let me provide you with some thoughtful academic guidance:",
        insight_title="My AI Analysis & Recommendations:",
        insights=(
            (("study",), "🎯 **Study Strategy**: Consider your learning style - are you more visual, auditory, "
                         "or kinesthetic? {short} offers various learning environments to accommodate different preferences."),
            (("program", "course"), "📚 **Program Selection**: Think about your long-term goals. What excites you "
                                    "intellectually? What problems do you want to solve? This will help guide your program choice."),
            (("curriculum",), "📖 **Curriculum Insight**: The curriculum is designed to build both theoretical knowledge "
                              "and practical skills. Look for courses that offer hands-on projects and real-world applications."),
        ),
        takeaway="**Pro Tip**: Don't just focus on grades - engage with faculty, participate in research opportunities, "
                 "and build a network of like-minded peers. Your college experience is what you make of it!",
        closing="Would you like me to dive deeper into any specific aspect of academic planning?",
        confidence=0.85,
        reasoning="Generated contextual academic advice based on user intent: {intent} and keywords: {keywords}",
    ),
    "campus_life": PersonaProfile(
        intro="Let me paint you a picture of campus life at {short} that goes beyond the basics:",
        insight_title="🎭 The Campus Experience - Beyond the Classroom:",
        insights=(
            (("facility",), "🏗️ **Facilities That Inspire**: Our campus isn't just buildings - it's a living ecosystem "
                            "designed to spark creativity, from modern labs to cozy study nooks that become your second home."),
            (("club", "activity"), "🌟 **Clubs & Activities**: Imagine finding your tribe among 20+ student organizations. "
                                   "Whether you're into coding marathons, cultural performances, or environmental activism, "
                                   "there's a space for your passion."),
            (("event",), "🎪 **Events That Connect**: We host hackathons, TEDx-style talks, cultural festivals, and "
                         "industry meetups that bridge the gap between academia and the real world."),
        ),
        takeaway="**💡 My Perspective**: Campus life is about creating memories and connections that last a lifetime. "
                 "It's where you'll discover not just what you want to study, but who you want to become.",
        closing="What aspect of campus life excites you most? I can share more specific details!",
        confidence=0.88,
        reasoning="Generated immersive campus life response based on user interest in {keywords}",
    ),
    "career_guidance": PersonaProfile(
        intro="Let me help you think strategically about your career path at {short}:",
        insight_title="🚀 Career Strategy - My AI Insights:",
        insights=(
            (("placement",), "📊 **Placement Reality**: While placement statistics are impressive, focus on building "
                             "skills that make you placement-ready. What industries are you drawn to?"),
            (("future", "career"), "🔮 **Future-Proofing**: The job market is evolving rapidly. Focus on developing "
                                   "transferable skills like critical thinking, communication, and adaptability "
                                   "alongside your technical expertise."),
            (("opportunity",), "💼 **Opportunity Creation**: Don't just wait for opportunities - create them. Start "
                               "projects, build a portfolio, and network with professionals."),
        ),
        takeaway="**🎯 My Recommendation**: Choose a program that aligns with your interests, but also consider how it "
                 "positions you for the future. The best career paths often emerge from the intersection of passion, "
                 "skills, and market demand.",
        closing="What's your vision for your future career? I can help you align your academic choices with your "
                "professional goals.",
        confidence=0.87,
        reasoning="Generated strategic career guidance based on user career intent and keywords: {keywords}",
    ),
    "comparison": PersonaProfile(
        intro="Great question! Let me break down this comparison with some nuanced insights:",
        insight_title="🔍 Comparative Analysis - My AI Perspective:",
        insights=(
            (("vs", "versus", "compare"), "**The Reality Check**: Every comparison depends on your personal goals and "
                                          "circumstances. What matters most to you - academic rigor, practical skills, "
                                          "career outcomes, or campus culture?"),
            (("better",), '**Beyond "Better"**: Instead of asking what\'s "better," ask what\'s "better for you." Your '
                          "ideal choice depends on your learning style, career goals, and personal preferences."),
            (("difference",), "**Key Differentiators**: Look beyond surface-level differences. Consider faculty "
                              "expertise, industry connections, research opportunities, and alumni networks."),
        ),
        takeaway="**💡 My Approach**: I can help you analyze specific aspects, but remember that the \"best\" choice "
                 "is highly personal.",
        closing="What factors are most important to you in this decision?",
        confidence=0.82,
        reasoning="Generated comparative analysis based on user's analytical intent and comparison keywords: {keywords}",
    ),
    "personalized": PersonaProfile(
        intro="I appreciate you sharing this with me. Let me provide some personalized guidance:",
        insight_title="🎯 Personalized Recommendations - Just for You:",
        insights=(
            (("my",), "**Your Unique Path**: Everyone's journey is different. Let's focus on what makes your situation "
                      "special and how we can tailor the information to your specific needs."),
            (("i want", "i need"), "**Understanding Your Goals**: I can see you have clear objectives. Let me help you "
                                   "find the most direct path to achieving them at {short}."),
            (("help me", "advice"), "**Supporting Your Success**: I'm here to guide you through this process. Let's "
                                    "break down your question into manageable steps and find the answers you need."),
        ),
        takeaway="**🤝 My Commitment**: I want to make sure you get exactly what you need.",
        closing="Can you tell me a bit more about your specific situation so I can provide even more targeted help?",
        confidence=0.90,
        reasoning="Generated personalized response based on user's personal intent and context: {topic}",
    ),
    "creative": PersonaProfile(
        intro="What an interesting and creative question! Let me think outside the box for you:",
        insight_title="🌈 Creative Exploration - Beyond the Obvious:",
        insights=(
            (("imagine",), "**Let's Dream Together**: Imagine {short} not just as a place to study, but as a launchpad "
                           "for your wildest dreams. What if your classroom became a laboratory for innovation?"),
            (("creative", "unique", "interesting"), "**Unconventional Thinking**: Sometimes the most creative solutions "
                                                    "come from asking unusual questions. How can you turn your unique "
                                                    "perspective into an advantage?"),
        ),
        takeaway="**🚀 My Creative Challenge**: Don't just follow the path - create your own. {short} provides the "
                 "tools, but you bring the imagination.",
        closing="What's your boldest vision for your future?",
        confidence=0.85,
        source="creative",
        reasoning="Generated creative, imaginative response based on user's exploratory intent and keywords: {keywords}",
    ),
}
