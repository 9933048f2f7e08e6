"""
Program Directory - read-only lookup of programs and departments

The directory is owned outside the FAQ engine; the engine only depends on the
narrow `ProgramDirectory` protocol below. `StaticProgramDirectory` is the
JSON-backed implementation used by the application.
"""
import json
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union

from pydantic import ValidationError

from campus_faq.schemas import Department, Program
from campus_faq.utils.logging_utils import get_logger

logger = get_logger("program_directory")

DEPARTMENT_PREFIXES = ("department of ", "school of ")


class ProgramDirectory(Protocol):
    departments: Sequence[Department]

    def search_programs(self, text: str) -> List[Program]: ...

    def get_programs_by_department(self, department_id: str) -> List[Program]: ...

    def find_department(self, text: str) -> Optional[Department]: ...


class StaticProgramDirectory:
    def __init__(self, departments: Sequence[Department] = (), programs: Sequence[Program] = ()):
        self.departments = tuple(departments)
        self._programs = tuple(programs)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "StaticProgramDirectory":
        """Load `{"departments": [...], "programs": [...]}`; failures yield an empty directory."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            departments = [Department.model_validate(d) for d in data.get("departments", [])]
            programs = [Program.model_validate(p) for p in data.get("programs", [])]
        except (OSError, json.JSONDecodeError, AttributeError, ValidationError) as e:
            logger.error(f"Program directory load failed ({path}): {e}")
            return cls()

        logger.info(f"Loaded {len(departments)} departments and {len(programs)} programs")
        return cls(departments, programs)

    def search_programs(self, text: str) -> List[Program]:
        query = str(text or "").strip().lower()
        if not query:
            return []
        return [
            program for program in self._programs
            if query in program.name.lower()
            or query in program.overview.lower()
            or any(query in subject.lower() for subject in program.core_subjects)
            or any(query in skill.lower() for skill in program.skills_gained)
            or query in program.department.lower()
        ]

    def get_programs_by_department(self, department_id: str) -> List[Program]:
        return [program for program in self._programs if program.department == department_id]

    def find_department(self, text: str) -> Optional[Department]:
        """Department whose subject (name without prefix, or id) is mentioned in text."""
        lowered = str(text or "").lower()
        if not lowered.strip():
            return None
        for dept in self.departments:
            subject = dept.name.lower()
            for prefix in DEPARTMENT_PREFIXES:
                if subject.startswith(prefix):
                    subject = subject[len(prefix):]
            if subject in lowered or dept.id.replace("-", " ").lower() in lowered:
                return dept
        return None
