import pytest

from campus_faq.core.session import SessionStore
from campus_faq.engines.faq_index import FAQCorpusIndex
from campus_faq.engines.program_directory import StaticProgramDirectory
from campus_faq.engines.relevance_scorer import RelevanceScorer
from campus_faq.engines.response_synthesizer import ResponseSynthesizer
from campus_faq.schemas import Department, Program

SAMPLE_FAQS = [
    {"question": "What is the admission deadline?", "answer": "Applications close on 30 June every year.",
     "category": "Admissions", "link": "https://example.edu/admissions"},
    {"question": "How do I apply online?", "answer": "Fill in the application form on the admissions portal.",
     "category": "Admissions"},
    {"question": "What is the fee structure?", "answer": "Fees depend on the program you choose.",
     "category": "Fees & Financial Aid"},
    {"question": "Are scholarships available?", "answer": "Merit scholarships are offered to top students.",
     "category": "Fees & Financial Aid"},
    {"question": "What is the duration of the BCA course?", "answer": "The BCA course lasts three years.",
     "category": "Programs & Departments"},
    {"question": "Does the college offer an MBA program?", "answer": "Yes, a two-year MBA with four specializations.",
     "category": "Programs & Departments"},
    {"question": "Is hostel accommodation available?", "answer": "Hostels are available on campus.",
     "category": "Facilities & Campus Life"},
    {"question": "What are the library timings?", "answer": "The library is open from 8 AM to 8 PM.",
     "category": "Facilities & Campus Life"},
    {"question": "Which clubs can students join?", "answer": "There are coding, music and drama clubs.",
     "category": "Facilities & Campus Life"},
    {"question": "Where is the college located?", "answer": "The college is in Coimbatore.",
     "category": "General Information"},
    {"question": "How can I contact the office?", "answer": "Use the Contact Us page.",
     "category": "General Information"},
    {"question": "What is the placement record?", "answer": "Most eligible students are placed every year.",
     "category": "Placements & Careers"},
    {"question": "Is there a counselling service?", "answer": "Counsellors are available on weekdays."},
]


@pytest.fixture
def sample_faqs():
    return [dict(faq) for faq in SAMPLE_FAQS]


@pytest.fixture
def index(sample_faqs):
    return FAQCorpusIndex([sample_faqs])


@pytest.fixture
def scorer(index):
    return RelevanceScorer(index)


@pytest.fixture
def directory():
    departments = [
        Department(id="computer-science", name="Department of Computer Science",
                   description="Software, AI and systems.", icon="💻"),
        Department(id="commerce", name="Department of Commerce",
                   description="Accounting and finance.", icon="📊"),
        Department(id="psychology", name="Department of Psychology",
                   description="Human behavior and counselling.", icon="🧠"),
    ]
    programs = [
        Program(id="cs-1", name="B.Sc Computer Science", overview="Programming and algorithms.",
                department="computer-science", level="undergraduate", duration="3 years",
                core_subjects=["Data Structures", "Operating Systems"], skills_gained=["Programming"],
                career_opportunities={"india": ["Software Developer"], "international": ["Cloud Engineer"]},
                salary_scope="₹3–4 LPA entry"),
        Program(id="cs-12", name="M.Sc Computer Science", overview="Advanced algorithms and research.",
                department="computer-science", level="postgraduate", duration="2 years"),
        Program(id="com-1", name="B.Com", overview="Accounting, taxation and business law.",
                department="commerce", level="undergraduate", duration="3 years"),
        Program(id="psy-1", name="B.Sc Psychology", overview="Human behavior and cognition.",
                department="psychology", level="undergraduate", duration="3 years",
                core_subjects=["General Psychology"], skills_gained=["Counselling basics"]),
    ]
    return StaticProgramDirectory(departments, programs)


@pytest.fixture
def engine(index, directory):
    return ResponseSynthesizer(index, directory, SessionStore(limit=50))
