"""
Core data models for requirement screening and answer autofill.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import NamedTuple, Optional
import logging


logger = logging.getLogger(__name__)


class RequirementKind(Enum):
    """Screening requirement that a job posting can imply."""
    CITIZENSHIP = "citizenship"
    SECURITY_CLEARANCE = "security_clearance"
    BACKGROUND_CHECK = "background_check"
    SPONSORSHIP = "sponsorship"
    LANGUAGE = "language"
    LOCATION = "location"  # on-site work
    RELOCATION = "relocation"
    DRUG_TEST = "drug_test"


class RequirementStatus(Enum):
    """How well a candidate satisfies a detected requirement."""
    MET = "met"
    RISK = "risk"
    UNKNOWN = "unknown"


class WorkAuthorization(Enum):
    """Candidate work-authorization category."""
    CITIZEN = "citizen"
    PERMANENT_RESIDENT = "permanent_resident"
    VISA = "visa"
    OTHER = "other"


class ClearanceLevel(Enum):
    """Security clearance, ordered by level."""
    NONE = 0
    PUBLIC_TRUST = 1
    SECRET = 2
    TOP_SECRET = 3
    TS_SCI = 4

    @classmethod
    def parse(cls, value) -> Optional["ClearanceLevel"]:
        """Parse 'ts_sci', 'Top Secret', 'public-trust' and similar."""
        if value is None or isinstance(value, cls):
            return value
        key = str(value).strip().upper().replace("-", "_").replace(" ", "_").replace("/", "_")
        return cls.__members__.get(key)

    @property
    def label(self) -> str:
        return self.name.lower()


class RemotePreference(Enum):
    """Where the candidate prefers to work."""
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"
    FLEXIBLE = "flexible"


class QuestionKind(Enum):
    """Known application question categories."""
    WHY_INTERESTED = "why_interested"
    GREATEST_STRENGTH = "greatest_strength"
    GREATEST_WEAKNESS = "greatest_weakness"
    LEADERSHIP_EXAMPLE = "leadership_example"
    TEAMWORK_EXAMPLE = "teamwork_example"
    CHALLENGE_OVERCOME = "challenge_overcome"
    FAILURE_LEARNED = "failure_learned"
    WHY_LEAVING = "why_leaving"
    SALARY_EXPECTATIONS = "salary_expectations"
    CAREER_GOALS = "career_goals"
    TECHNICAL_ACHIEVEMENT = "technical_achievement"
    WORK_STYLE = "work_style"
    HANDLE_PRESSURE = "handle_pressure"
    CONFLICT_RESOLUTION = "conflict_resolution"
    DIVERSITY_CONTRIBUTION = "diversity_contribution"


def _parse_enum(enum_cls, value):
    """Map a stored string onto an enum member, or None when unrecognised."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        logger.debug(f"Ignoring unrecognised {enum_cls.__name__} value: {value!r}")
        return None


def _pick(data: dict, *keys):
    """Return the first key present in data (snake_case or camelCase)."""
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass
class DetectedRequirement:
    """A requirement found in a job posting."""
    kind: RequirementKind
    label: str
    requirement_text: str

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "label": self.label,
            "requirement_text": self.requirement_text,
        }


@dataclass
class CandidateRequirementProfile:
    """
    Sparse candidate data used to resolve screening requirements.

    Every field is optional. A missing field always resolves to an
    unknown status.
    """
    work_authorization: Optional[WorkAuthorization] = None
    requires_sponsorship: Optional[bool] = None
    security_clearance: Optional[ClearanceLevel] = None
    can_pass_background_check: Optional[bool] = None
    can_pass_drug_test: Optional[bool] = None
    languages: Optional[list[str]] = None
    city: Optional[str] = None
    state: Optional[str] = None
    willing_to_relocate: Optional[bool] = None
    remote_preference: Optional[RemotePreference] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CandidateRequirementProfile":
        languages = _pick(data, "languages")
        return cls(
            work_authorization=_parse_enum(
                WorkAuthorization, _pick(data, "work_authorization", "workAuthorization")
            ),
            requires_sponsorship=_pick(data, "requires_sponsorship", "requiresSponsorship"),
            security_clearance=ClearanceLevel.parse(
                _pick(data, "security_clearance", "securityClearance")
            ),
            can_pass_background_check=_pick(
                data, "can_pass_background_check", "canPassBackgroundCheck"
            ),
            can_pass_drug_test=_pick(data, "can_pass_drug_test", "canPassDrugTest"),
            languages=list(languages) if languages is not None else None,
            city=_pick(data, "city"),
            state=_pick(data, "state"),
            willing_to_relocate=_pick(data, "willing_to_relocate", "willingToRelocate"),
            remote_preference=_parse_enum(
                RemotePreference, _pick(data, "remote_preference", "remotePreference")
            ),
        )

    def to_dict(self) -> dict:
        return {
            "work_authorization": self.work_authorization.value if self.work_authorization else None,
            "requires_sponsorship": self.requires_sponsorship,
            "security_clearance": self.security_clearance.label if self.security_clearance else None,
            "can_pass_background_check": self.can_pass_background_check,
            "can_pass_drug_test": self.can_pass_drug_test,
            "languages": self.languages,
            "city": self.city,
            "state": self.state,
            "willing_to_relocate": self.willing_to_relocate,
            "remote_preference": self.remote_preference.value if self.remote_preference else None,
        }


class StatusResolution(NamedTuple):
    """Result of resolving one requirement against a profile."""
    status: RequirementStatus
    candidate_value: Optional[str] = None


@dataclass
class RequirementGap:
    """A detected requirement the candidate does not clearly meet."""
    kind: RequirementKind
    label: str
    requirement_text: str
    status: RequirementStatus
    candidate_value: Optional[str] = None

    @property
    def is_risk(self) -> bool:
        return self.status == RequirementStatus.RISK

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "label": self.label,
            "requirement_text": self.requirement_text,
            "status": self.status.value,
            "candidate_value": self.candidate_value,
        }


@dataclass
class CachedAnswer:
    """A stored answer for one question category."""
    kind: QuestionKind
    question: str
    answer: str
    generated_at: datetime = field(default_factory=datetime.now)
    usage_count: int = 0
    short_answer: Optional[str] = None  # for character-limited fields

    @classmethod
    def from_dict(cls, data: dict) -> Optional["CachedAnswer"]:
        kind = _parse_enum(QuestionKind, _pick(data, "kind", "question_type", "questionType"))
        if kind is None:
            return None

        generated_at = _pick(data, "generated_at", "generatedAt")
        if isinstance(generated_at, str):
            generated_at = datetime.fromisoformat(generated_at.replace("Z", "+00:00"))

        return cls(
            kind=kind,
            question=data.get("question", ""),
            answer=data.get("answer", ""),
            generated_at=generated_at or datetime.now(),
            usage_count=int(_pick(data, "usage_count", "usageCount") or 0),
            short_answer=_pick(data, "short_answer", "shortAnswer"),
        )

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "question": self.question,
            "answer": self.answer,
            "generated_at": self.generated_at.isoformat(),
            "usage_count": self.usage_count,
            "short_answer": self.short_answer,
        }


@dataclass
class AnswerBank:
    """
    A candidate's cache of categorized and free-form answers.

    common_questions holds at most one entry per QuestionKind.
    custom_answers maps a regex source to an answer; its insertion order
    is the order patterns are tried in.
    """
    common_questions: list[CachedAnswer] = field(default_factory=list)
    patterns: list[dict] = field(default_factory=list)
    custom_answers: dict[str, str] = field(default_factory=dict)

    def get_cached(self, kind: QuestionKind) -> Optional[CachedAnswer]:
        for cached in self.common_questions:
            if cached.kind == kind:
                return cached
        return None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "AnswerBank":
        if not data:
            return cls()

        common_questions = []
        for entry in _pick(data, "common_questions", "commonQuestions") or []:
            cached = CachedAnswer.from_dict(entry)
            if cached is None:
                logger.warning(f"Skipping cached answer with unknown kind: {entry!r}")
                continue
            common_questions.append(cached)

        return cls(
            common_questions=common_questions,
            patterns=list(data.get("patterns") or []),
            custom_answers=dict(_pick(data, "custom_answers", "customAnswers") or {}),
        )

    def to_dict(self) -> dict:
        return {
            "common_questions": [c.to_dict() for c in self.common_questions],
            "patterns": self.patterns,
            "custom_answers": dict(self.custom_answers),
        }


@dataclass
class ProfileSummary:
    """Candidate summary used to seed a starter answer bank."""
    name: str = ""
    title: str = "Software Engineer"
    years_experience: float = 0
    skills: list[str] = field(default_factory=list)
    summary: Optional[str] = None

    @property
    def top_skills(self) -> str:
        return ", ".join(self.skills[:5])

    @classmethod
    def from_dict(cls, data: dict) -> "ProfileSummary":
        return cls(
            name=data.get("name", ""),
            title=data.get("title") or "Software Engineer",
            years_experience=_pick(data, "years_experience", "yearsExperience") or 0,
            skills=list(data.get("skills") or []),
            summary=data.get("summary"),
        )


@dataclass
class AnswerSuggestion:
    """Suggested answer for a question, with where it came from."""
    answer: Optional[str] = None
    source: Optional[str] = None  # "bank" or None
    confidence: float = 0.0
    kind: Optional[QuestionKind] = None

    def to_dict(self) -> dict:
        return {
            "answer": self.answer,
            "source": self.source,
            "confidence": self.confidence,
            "kind": self.kind.value if self.kind else None,
        }
