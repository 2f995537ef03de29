"""
Requirement Scanner - Finds implicit screening requirements in job postings.

Detects requirements such as:
- US citizenship and security clearance
- Background checks and drug tests
- No visa sponsorship
- Spoken language requirements
- On-site work and relocation

and reconciles them with a candidate requirement profile. Only gaps (requirements
that are at risk or cannot be decided) are reported.
"""

from typing import Optional
import logging

from .models import (
    CandidateRequirementProfile,
    DetectedRequirement,
    RequirementGap,
    RequirementStatus,
)
from .patterns import REQUIREMENT_CATALOG, RequirementCategory
from .status_resolver import StatusResolver


class RequirementScanner:
    """Applies a requirement catalog to job posting text."""

    def __init__(
        self,
        catalog: tuple[RequirementCategory, ...] = REQUIREMENT_CATALOG,
        resolver: Optional[StatusResolver] = None,
    ):
        """
        Initialize the scanner.

        Args:
            catalog: Ordered requirement categories (declaration order is precedence)
            resolver: Status resolver (default: StatusResolver())
        """
        self.catalog = tuple(catalog)
        self.resolver = resolver or StatusResolver()
        self.logger = logging.getLogger(self.__class__.__name__)

    def detect(self, job_text: str) -> list[DetectedRequirement]:
        """
        Detect requirements in a job posting.

        At most one requirement is reported per category: the first matching
        rule wins and the rest of that category's rules are skipped.
        """
        if not job_text or not job_text.strip():
            return []

        detected = []
        for category in self.catalog:
            match = category.first_match(job_text)
            if not match:
                continue

            requirement_text = ""
            if category.extract_value:
                requirement_text = category.extract_value(match, job_text)
            if not requirement_text:
                requirement_text = f"{category.label} required"

            detected.append(DetectedRequirement(
                kind=category.kind,
                label=category.label,
                requirement_text=requirement_text,
            ))

        self.logger.debug(f"Detected {len(detected)} requirements")
        return detected

    def scan(self, job_text: str, profile: CandidateRequirementProfile) -> list[RequirementGap]:
        """
        Scan a job posting and compare it with the candidate profile.

        Args:
            job_text: Plain posting text
            profile: Candidate requirement profile

        Returns:
            Gaps in catalog order. Requirements the candidate meets are left out.
        """
        job_text_lower = (job_text or "").lower()
        gaps = []

        for requirement in self.detect(job_text):
            resolution = self.resolver.resolve(requirement.kind, profile, job_text_lower)
            if resolution.status == RequirementStatus.MET:
                continue

            gaps.append(RequirementGap(
                kind=requirement.kind,
                label=requirement.label,
                requirement_text=requirement.requirement_text,
                status=resolution.status,
                candidate_value=resolution.candidate_value,
            ))

        return gaps


_default_scanner = RequirementScanner()


def scan_requirements(job_text: str, profile: CandidateRequirementProfile) -> list[RequirementGap]:
    """Scan a job posting with the default catalog."""
    return _default_scanner.scan(job_text, profile)


def format_gap(gap: RequirementGap) -> str:
    """Render a gap as a single display line."""
    marker = "[RISK]" if gap.is_risk else "[UNKNOWN]"
    suffix = f" - {gap.candidate_value}" if gap.candidate_value else ""
    return f"{marker} {gap.requirement_text}{suffix}"
