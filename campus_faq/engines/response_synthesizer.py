"""
Response Synthesizer - turns one user message into one ChatResponse

Message Flow:
1. Record the message in the session's conversation context
2. Conversational intents -> canned persona reply (0.95)
3. Program overview questions -> department overview (0.95)
4. Classified intents -> intent generator (program_specific, academic_advice,
   campus_life, career_guidance, comparison, personalized, creative)
5. general -> best FAQ match, enhanced with a lead-in, links and related questions (0.9)
6. Nothing matched -> helpful fallback (0.3)

Any exception on the way is logged and answered with the fallback; callers
always get a response.
"""

from functools import partial
from typing import Callable, Dict, List, Optional

from campus_faq.config import Config
from campus_faq.core.session import ConversationSession, SessionStore
from campus_faq.engines.conversation_context import ContextSummary, normalize_message
from campus_faq.engines.faq_index import FAQCorpusIndex
from campus_faq.engines.intent_classifier import IntentClassifier, UserIntent
from campus_faq.engines.intent_config import PROGRAM_SPECIFIC_INTENT, is_admission_related
from campus_faq.engines.program_directory import ProgramDirectory, StaticProgramDirectory
from campus_faq.engines.relevance_scorer import RelevanceScorer
from campus_faq.engines.ux_engine import (
    PERSONA_PROFILES,
    PersonaProfile,
    ResponseBuilder,
    admission_guidance_sections,
    get_conversational_reply,
    get_error_message,
    natural_lead_in,
    persona_values,
    select_link_bundle,
)
from campus_faq.schemas import ChatResponse, Department, FAQItem, FAQStats, Program
from campus_faq.utils.logging_utils import anonymize_text, get_logger

logger = get_logger("response_synthesizer")

CONVERSATIONAL_CONFIDENCE = 0.95
OVERVIEW_CONFIDENCE = 0.95
PROGRAM_CONFIDENCE = 0.95
DEPARTMENT_CONFIDENCE = 0.90
PROGRAM_SEARCH_CONFIDENCE = 0.85
FAQ_CONFIDENCE = 0.9
FALLBACK_CONFIDENCE = 0.3

GENERAL_ROTATION_KEY = "general"
SUGGESTION_COUNT = 3

# (message keywords, heading, program families) shown when a program search finds no program record
RELATED_PROGRAM_FAMILIES = (
    (("computer", "ai", "data"), "Technology & Computing Programs",
     ["B.Sc Computer Science", "B.Sc Artificial Intelligence & Machine Learning", "B.Sc Data Science", "BCA"]),
    (("commerce", "business", "management"), "Business & Commerce Programs",
     ["B.Com", "B.Com Professional Accounting", "BBA", "MBA"]),
    (("science", "bio", "psychology"), "Science & Life Sciences Programs",
     ["B.Sc Biotechnology", "B.Sc Microbiology", "B.Sc Psychology", "M.Sc Psychology"]),
)

Generator = Callable[[str, UserIntent, ContextSummary, ConversationSession], Optional[ChatResponse]]


class ResponseSynthesizer:
    def __init__(
        self,
        index: FAQCorpusIndex,
        directory: Optional[ProgramDirectory] = None,
        sessions: Optional[SessionStore] = None,
    ):
        self.index = index
        self.directory = directory if directory is not None else StaticProgramDirectory()
        self.scorer = RelevanceScorer(index)
        self.classifier = IntentClassifier(self.directory)
        self.sessions = sessions if sessions is not None else SessionStore()

        self._generators: Dict[str, Generator] = {PROGRAM_SPECIFIC_INTENT: self._program_specific_response}
        for intent_type, profile in PERSONA_PROFILES.items():
            self._generators[intent_type] = partial(self._persona_response, profile)

    @classmethod
    def from_config(cls) -> "ResponseSynthesizer":
        index = FAQCorpusIndex.from_files([Config.FAQ_MAIN_PATH, Config.FAQ_WEB_PATH])
        directory = StaticProgramDirectory.from_file(Config.PROGRAMS_PATH)
        return cls(index, directory, SessionStore(Config.SESSION_STORE_LIMIT))

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def process_message(self, text: str, session_id: Optional[str] = None) -> ChatResponse:
        """Answer one message. Without a session id the call gets a throwaway session."""
        message = str(text or "")
        session = self.sessions.get(session_id)

        with session.lock:
            session.context.push(message)
            try:
                response = self._respond(message, session)
            except Exception:
                logger.exception(f"Response generation failed for: {anonymize_text(message)[:80]}")
                response = self._safe_fallback(message, session)

        logger.info(
            f"[{session.key}] source={response.source} confidence={response.confidence:.2f} "
            f"category={response.category}"
        )
        return response

    def get_suggested_questions(self) -> List[str]:
        return [faq.question for faq in self.index.get_popular()]

    def get_faq_stats(self) -> FAQStats:
        return FAQStats(total=self.index.total_count(), categories=self.index.category_stats())

    def reset_rotation_state(self, session_id: Optional[str] = None) -> int:
        """Reset rotation for one session, or for every session when none is given."""
        if session_id is not None:
            session = self.sessions.peek(session_id)
            targets = [session] if session is not None else []
        else:
            targets = self.sessions.sessions()

        for session in targets:
            with session.lock:
                session.rotator.reset()
        logger.info(f"Rotation state reset for {len(targets)} session(s)")
        return len(targets)

    def end_session(self, session_id: str) -> bool:
        return self.sessions.drop(session_id)

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def _respond(self, message: str, session: ConversationSession) -> ChatResponse:
        normalized = normalize_message(message)

        conversational = self.classifier.match_conversational(normalized)
        if conversational:
            return self._conversational_response(conversational)

        if self.classifier.is_program_overview_question(message):
            overview = self._program_overview_response()
            if overview is not None:
                return overview

        intent = self.classifier.classify(message)
        context = session.context.analyze()
        logger.debug(
            f"Intent: {intent.type} matched_on={intent.matched_on} keywords={intent.keywords} context={context}"
        )

        generator = self._generators.get(intent.type)
        if generator is not None:
            response = generator(message, intent, context, session)
            if response is not None:
                return response

        match = self.scorer.find_faq_match(normalized)
        if match is not None:
            return self._faq_enhanced_response(match, message, session)

        return self._fallback_response(message, session)

    def _conversational_response(self, intent: str) -> ChatResponse:
        return ChatResponse(
            answer=get_conversational_reply(intent),
            confidence=CONVERSATIONAL_CONFIDENCE,
            source="conversational",
            related_faqs=self.index.get_popular()[:SUGGESTION_COUNT],
        )

    # =========================================================================
    # FAQ MATCH / FALLBACK
    # =========================================================================

    def _faq_enhanced_response(self, faq: FAQItem, message: str, session: ConversationSession) -> ChatResponse:
        related = session.rotator.related_for(faq, message, self.index.get_by_category(faq.category))

        builder = ResponseBuilder(summary=natural_lead_in(faq, message.strip().lower()))
        builder.add_paragraph(faq.answer)
        builder.with_links(select_link_bundle(message, faq.category))
        builder.with_related(related)

        return ChatResponse(
            answer=builder.render(),
            confidence=FAQ_CONFIDENCE,
            source="faq_enhanced",
            related_faqs=related,
            category=faq.category,
            link=faq.link or None,
        )

    def _fallback_response(self, message: str, session: ConversationSession) -> ChatResponse:
        popular = session.rotator.rotate(GENERAL_ROTATION_KEY, self.index.get_popular())
        categories = self.index.get_categories()
        words = [w for w in normalize_message(message).split() if len(w) >= 3]
        relevant = [c for c in categories if any(w in c.lower() for w in words)]

        builder = ResponseBuilder(summary=f'I understand you\'re asking about "{message.strip()}".')

        if is_admission_related(message):
            builder.add_paragraph("Let me provide you with comprehensive admission information:")
            builder.sections.extend(admission_guidance_sections(message))
            builder.add_section(
                "💡 Need More Help?",
                bullets=["Ask about specific programs", "Inquire about fees", "Check eligibility criteria"],
            )
        else:
            if relevant:
                builder.add_paragraph(f"This seems related to: **{', '.join(relevant)}**")
            builder.add_section(
                "While I don't have a specific answer for that, I can help you with information about:",
                bullets=[faq.question for faq in popular],
            )
            builder.add_section("📂 Available categories:", body=", ".join(categories))
            builder.with_links(select_link_bundle(message, GENERAL_ROTATION_KEY))
            builder.closing = "Please try rephrasing your question or ask about one of these topics!"

        return ChatResponse(
            answer=builder.render(),
            confidence=FALLBACK_CONFIDENCE,
            source="fallback",
            related_faqs=popular,
            reasoning="No matching FAQ or intent; provided general guidance",
        )

    def _safe_fallback(self, message: str, session: ConversationSession) -> ChatResponse:
        try:
            return self._fallback_response(message, session)
        except Exception:
            logger.exception("Fallback generation failed")
            return ChatResponse(
                answer=get_error_message("generic"),
                confidence=FALLBACK_CONFIDENCE,
                source="fallback",
            )

    # =========================================================================
    # INTENT GENERATORS
    # =========================================================================

    def _keyword_results(self, intent: UserIntent) -> List[FAQItem]:
        return self.scorer.search(" ".join(intent.keywords))

    def _related_questions(self, session: ConversationSession, top: Optional[FAQItem], message: str) -> List[FAQItem]:
        if top is not None:
            return session.rotator.related_for(top, message, self.index.get_by_category(top.category))
        return session.rotator.rotate(GENERAL_ROTATION_KEY, self.index.get_popular())

    def _persona_response(
        self,
        profile: PersonaProfile,
        message: str,
        intent: UserIntent,
        context: ContextSummary,
        session: ConversationSession,
    ) -> ChatResponse:
        results = self._keyword_results(intent)
        top = results[0] if results else None
        related = self._related_questions(session, top, message)
        keywords = ", ".join(intent.keywords) or "your question"
        values = dict(persona_values(), keywords=keywords)

        builder = ResponseBuilder(summary=profile.intro.format(**values))
        if top is not None:
            builder.add_paragraph(top.answer)
        builder.add_section(profile.insight_title, body="\n\n".join(profile.insights_for(intent.keywords)))
        builder.add_paragraph(profile.takeaway.format(**values))
        builder.with_links(select_link_bundle(message, top.category if top else ""))
        builder.with_related(related)
        builder.closing = profile.closing.format(**values)

        reasoning = profile.reasoning.format(intent=intent.type, keywords=keywords, topic=context.topic)
        return ChatResponse(
            answer=builder.render(),
            confidence=profile.confidence,
            source=profile.source,
            related_faqs=related,
            category=top.category if top else None,
            link=(top.link or None) if top else None,
            reasoning=(
                f"{reasoning} (matched on: {intent.matched_on}, topic: {context.topic}, "
                f"mood: {context.mood}, depth: {context.depth})"
            ),
        )

    def _program_specific_response(
        self,
        message: str,
        intent: UserIntent,
        context: ContextSummary,
        session: ConversationSession,
    ) -> ChatResponse:
        programs = self._search_directory(message)
        if programs:
            return self._program_details_response(programs, message, context)

        department = self._find_department(message)
        if department is not None:
            return self._department_response(department, context)

        results = self._keyword_results(intent)
        top = results[0] if results else None
        related = self._related_questions(session, top, message)
        lowered = message.lower()

        builder = ResponseBuilder(summary="🎓 **Program Search Results**")
        if intent.keywords:
            builder.add_paragraph(f"I found information related to: **{', '.join(intent.keywords)}**")
        if top is not None:
            builder.add_section("📋 Details:", body=top.answer)
        for triggers, heading, families in RELATED_PROGRAM_FAMILIES:
            if any(trigger in lowered for trigger in triggers):
                builder.add_section(f"💡 Related {heading}:", bullets=families)
                break
        builder.add_section(
            "🔍 Explore More:",
            bullets=[
                f"[All Programs]({Config.site_link(Config.PROGRAMS_PAGE_URL)})",
                f"[Admission Process]({Config.site_link('adminssion-procedure/')})",
                f"[Fee Structure]({Config.site_link('pay-fees/')})",
            ],
        )
        builder.with_related(related)
        builder.closing = "Would you like more specific information about any particular program?"

        return ChatResponse(
            answer=builder.render(),
            confidence=PROGRAM_SEARCH_CONFIDENCE,
            source="ai_generated",
            related_faqs=related,
            category=top.category if top else None,
            reasoning=(
                f"Searched FAQs for program keywords: {', '.join(intent.keywords) or 'none'} "
                f"(matched on: {intent.matched_on}, topic: {context.topic}, depth: {context.depth})"
            ),
        )

    # =========================================================================
    # PROGRAM DIRECTORY RESPONSES
    # =========================================================================

    def _search_directory(self, message: str) -> List[Program]:
        try:
            return self.directory.search_programs(message)
        except Exception as e:
            logger.warning(f"Program search failed: {e}")
            return []

    def _find_department(self, message: str) -> Optional[Department]:
        try:
            return self.directory.find_department(message)
        except Exception as e:
            logger.warning(f"Department lookup failed: {e}")
            return None

    def _department_name(self, department_id: str) -> str:
        for dept in self.directory.departments:
            if dept.id == department_id:
                return dept.name
        return department_id.replace("-", " ").title()

    def _program_details_response(
        self, programs: List[Program], message: str, context: ContextSummary
    ) -> ChatResponse:
        program = programs[0]
        builder = ResponseBuilder(summary=f"🎓 **{program.name}**")
        builder.add_paragraph(
            f"**Department:** {self._department_name(program.department)}\n"
            f"**Level:** {program.level.title()}\n"
            f"**Duration:** {program.duration}"
        )
        builder.add_section("📋 Overview:", body=program.overview)
        builder.add_section("📚 Core Subjects:", bullets=program.core_subjects[:5])
        builder.add_section("🛠️ Skills You'll Gain:", bullets=program.skills_gained[:4])
        builder.add_section(
            "💼 Career Opportunities:",
            bullets=program.career_opportunities.india[:3] + program.career_opportunities.international[:2],
        )
        if program.salary_scope:
            builder.add_section("💰 Salary Scope:", body=program.salary_scope)
        if len(programs) > 1:
            builder.add_section("🔎 Other matching programs:", bullets=[p.name for p in programs[1:4]])
        builder.add_section(
            "🔗 Next Steps:",
            bullets=[
                f"[Apply Now]({Config.site_link('adminssion-procedure/')})",
                f"[All Programs]({Config.site_link(Config.PROGRAMS_PAGE_URL)})",
                f"[Fee Structure]({Config.site_link('pay-fees/')})",
            ],
        )

        return ChatResponse(
            answer=builder.render(),
            confidence=PROGRAM_CONFIDENCE,
            source="ai_generated",
            category="Programs & Departments",
            reasoning=(
                f"Found {len(programs)} program(s) matching the question; showing {program.name} "
                f"(topic: {context.topic}, depth: {context.depth})"
            ),
        )

    def _department_response(self, department: Department, context: ContextSummary) -> ChatResponse:
        programs = self.directory.get_programs_by_department(department.id)

        builder = ResponseBuilder(summary=f"{department.icon} **{department.name}**".strip())
        builder.add_paragraph(department.description)
        for level, title in (("undergraduate", "🎓 Undergraduate Programs:"), ("postgraduate", "🎓 Postgraduate Programs:")):
            builder.add_section(
                title,
                bullets=[f"**{p.name}** ({p.duration})" for p in programs if p.level == level],
            )
        builder.add_section(
            "🔗 Learn More:",
            bullets=[
                f"[All Programs]({Config.site_link(Config.PROGRAMS_PAGE_URL)})",
                f"[Admission Process]({Config.site_link('adminssion-procedure/')})",
            ],
        )
        builder.closing = "Ask me about any of these programs for subjects, skills and career options!"

        return ChatResponse(
            answer=builder.render(),
            confidence=DEPARTMENT_CONFIDENCE,
            source="ai_generated",
            category="Programs & Departments",
            reasoning=f"Matched department {department.id} (topic: {context.topic}, depth: {context.depth})",
        )

    def _program_overview_response(self) -> Optional[ChatResponse]:
        departments = list(self.directory.departments)
        if not departments:
            return None

        builder = ResponseBuilder(
            summary=f"🏫 **Departments & Programs at {Config.COLLEGE_SHORT_NAME}**",
        )
        builder.add_paragraph(
            f"{Config.COLLEGE_NAME} offers programs across {len(departments)} departments:"
        )
        for dept in departments:
            programs = self.directory.get_programs_by_department(dept.id)
            sample = ", ".join(p.name for p in programs[:3])
            more = f" and {len(programs) - 3} more" if len(programs) > 3 else ""
            builder.add_section(
                f"{dept.icon} {dept.name} ({len(programs)} programs)".strip(),
                body=f"{dept.description}\n{sample}{more}".strip(),
            )
        builder.add_section(
            "🔗 Explore:",
            bullets=[
                f"[Full Program Catalogue]({Config.site_link(Config.PROGRAMS_PAGE_URL)})",
                f"[Admission Process]({Config.site_link('adminssion-procedure/')})",
                f"[Fee Structure]({Config.site_link('pay-fees/')})",
            ],
        )
        builder.closing = "Tell me which department interests you and I'll share its programs in detail!"

        return ChatResponse(
            answer=builder.render(),
            confidence=OVERVIEW_CONFIDENCE,
            source="ai_generated",
            category="Programs & Departments",
            reasoning="Program overview question; listed departments from the program directory",
        )
