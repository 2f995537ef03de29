"""Core models, pattern catalogs and requirement screening."""

from .models import (
    AnswerBank,
    AnswerSuggestion,
    CachedAnswer,
    CandidateRequirementProfile,
    ClearanceLevel,
    DetectedRequirement,
    ProfileSummary,
    QuestionKind,
    RemotePreference,
    RequirementGap,
    RequirementKind,
    RequirementStatus,
    StatusResolution,
    WorkAuthorization,
)
from .patterns import (
    QUESTION_CATALOG,
    REQUIREMENT_CATALOG,
    QuestionCategory,
    RequirementCategory,
    catalog_snapshot,
)
from .status_resolver import StatusResolver, resolve_status
from .requirement_scanner import RequirementScanner, format_gap, scan_requirements
from .profile_loader import ProfileLoader

__all__ = [
    "AnswerBank",
    "AnswerSuggestion",
    "CachedAnswer",
    "CandidateRequirementProfile",
    "ClearanceLevel",
    "DetectedRequirement",
    "ProfileSummary",
    "QuestionKind",
    "RemotePreference",
    "RequirementGap",
    "RequirementKind",
    "RequirementStatus",
    "StatusResolution",
    "WorkAuthorization",
    "QUESTION_CATALOG",
    "REQUIREMENT_CATALOG",
    "QuestionCategory",
    "RequirementCategory",
    "catalog_snapshot",
    "StatusResolver",
    "resolve_status",
    "RequirementScanner",
    "format_gap",
    "scan_requirements",
    "ProfileLoader",
]
