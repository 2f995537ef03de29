"""
Status Resolver - Decides whether a candidate meets a detected requirement.

Every branch falls back to UNKNOWN when the profile field that decides it is
missing. A requirement is only MET when the profile says so explicitly.
"""

from typing import Optional
import logging

from .models import (
    CandidateRequirementProfile,
    ClearanceLevel,
    RemotePreference,
    RequirementKind,
    RequirementStatus,
    StatusResolution,
    WorkAuthorization,
)
from .patterns import LANGUAGES


MET = RequirementStatus.MET
RISK = RequirementStatus.RISK
UNKNOWN = RequirementStatus.UNKNOWN


def required_clearance(job_text_lower: str) -> tuple[ClearanceLevel, bool]:
    """
    Infer the clearance level a posting asks for.

    Returns:
        Tuple of (level, explicit). explicit is False when no level is named
        and the public-trust default was used.
    """
    if "ts/sci" in job_text_lower or "ts sci" in job_text_lower:
        return ClearanceLevel.TS_SCI, True
    if "top secret" in job_text_lower:
        return ClearanceLevel.TOP_SECRET, True
    if "secret" in job_text_lower:
        return ClearanceLevel.SECRET, True
    if "public trust" in job_text_lower:
        return ClearanceLevel.PUBLIC_TRUST, True
    return ClearanceLevel.PUBLIC_TRUST, False


def required_language(job_text_lower: str) -> Optional[str]:
    """Return the first known natural language named in the posting."""
    for language in LANGUAGES:
        if language in job_text_lower:
            return language
    return None


class StatusResolver:
    """Compares a candidate requirement profile against a detected requirement."""

    AUTHORIZATION_LABELS = {
        WorkAuthorization.CITIZEN: "US Citizen",
        WorkAuthorization.PERMANENT_RESIDENT: "Permanent Resident",
        WorkAuthorization.VISA: "Visa holder",
        WorkAuthorization.OTHER: "Other",
    }

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)
        self._handlers = {
            RequirementKind.CITIZENSHIP: self._resolve_citizenship,
            RequirementKind.SECURITY_CLEARANCE: self._resolve_clearance,
            RequirementKind.BACKGROUND_CHECK: self._resolve_background_check,
            RequirementKind.SPONSORSHIP: self._resolve_sponsorship,
            RequirementKind.LANGUAGE: self._resolve_language,
            RequirementKind.LOCATION: self._resolve_location,
            RequirementKind.RELOCATION: self._resolve_relocation,
            RequirementKind.DRUG_TEST: self._resolve_drug_test,
        }

    def resolve(
        self,
        kind: RequirementKind,
        profile: CandidateRequirementProfile,
        job_text_lower: str,
    ) -> StatusResolution:
        """
        Resolve the candidate's status for one requirement kind.

        Args:
            kind: Requirement kind detected in the posting
            profile: Candidate requirement profile
            job_text_lower: Lower-cased posting text

        Returns:
            StatusResolution with status and a display value for the candidate
        """
        handler = self._handlers.get(kind)
        if handler is None:
            return StatusResolution(UNKNOWN)

        resolution = handler(profile, job_text_lower)
        self.logger.debug(f"{kind.value}: {resolution.status.value} ({resolution.candidate_value})")
        return resolution

    def _resolve_citizenship(self, profile, _text) -> StatusResolution:
        authorization = profile.work_authorization
        if authorization is None:
            return StatusResolution(UNKNOWN, "Not set")
        label = self.AUTHORIZATION_LABELS[authorization]
        if authorization == WorkAuthorization.CITIZEN:
            return StatusResolution(MET, label)
        return StatusResolution(RISK, label)

    def _resolve_clearance(self, profile, text) -> StatusResolution:
        held = profile.security_clearance
        if held is None:
            return StatusResolution(UNKNOWN, "Not set")

        required, explicit = required_clearance(text)

        if held == ClearanceLevel.NONE:
            # No named level: the posting may only ask for the ability to obtain one
            return StatusResolution(RISK if explicit else UNKNOWN, held.label)

        if held.value >= required.value:
            return StatusResolution(MET, held.label)
        return StatusResolution(RISK, held.label)

    def _resolve_background_check(self, profile, _text) -> StatusResolution:
        return self._resolve_flag(
            profile.can_pass_background_check,
            met="Can pass",
            risk="May not pass",
            unset="Not confirmed",
        )

    def _resolve_sponsorship(self, profile, _text) -> StatusResolution:
        needs = profile.requires_sponsorship
        if needs is None:
            return StatusResolution(UNKNOWN, "Not set")
        if needs:
            return StatusResolution(RISK, "Needs sponsorship")
        return StatusResolution(MET, "No sponsorship needed")

    def _resolve_language(self, profile, text) -> StatusResolution:
        spoken = profile.languages
        if not spoken:
            return StatusResolution(UNKNOWN, "Not set")

        language = required_language(text)
        if language is None:
            return StatusResolution(UNKNOWN)

        joined = ", ".join(spoken)
        if any(language in entry.lower() for entry in spoken):
            return StatusResolution(MET, joined)
        return StatusResolution(RISK, joined)

    def _resolve_location(self, profile, _text) -> StatusResolution:
        preference = profile.remote_preference
        if preference is None:
            return StatusResolution(UNKNOWN, "Not set")
        if preference == RemotePreference.REMOTE:
            return StatusResolution(RISK, "Prefers remote")
        return StatusResolution(MET, preference.value)

    def _resolve_relocation(self, profile, _text) -> StatusResolution:
        return self._resolve_flag(
            profile.willing_to_relocate,
            met="Willing to relocate",
            risk="Not willing to relocate",
            unset="Not set",
        )

    def _resolve_drug_test(self, profile, _text) -> StatusResolution:
        return self._resolve_flag(
            profile.can_pass_drug_test,
            met="Can pass",
            risk="May not pass",
            unset="Not confirmed",
        )

    @staticmethod
    def _resolve_flag(value: Optional[bool], met: str, risk: str, unset: str) -> StatusResolution:
        if value is None:
            return StatusResolution(UNKNOWN, unset)
        return StatusResolution(MET, met) if value else StatusResolution(RISK, risk)


_default_resolver = StatusResolver()


def resolve_status(
    kind: RequirementKind,
    profile: CandidateRequirementProfile,
    job_text_lower: str,
) -> StatusResolution:
    """Resolve a requirement with the default resolver."""
    return _default_resolver.resolve(kind, profile, job_text_lower)
