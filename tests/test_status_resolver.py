"""Tests for per-kind status resolution."""

import pytest

from job_screener.core.models import (
    CandidateRequirementProfile,
    ClearanceLevel,
    RemotePreference,
    RequirementKind,
    RequirementStatus,
    WorkAuthorization,
)
from job_screener.core.status_resolver import (
    StatusResolver,
    required_clearance,
    required_language,
    resolve_status,
)

MET = RequirementStatus.MET
RISK = RequirementStatus.RISK
UNKNOWN = RequirementStatus.UNKNOWN

EVERYTHING = (
    "us citizenship required. ts/sci clearance required. background check required. "
    "no sponsorship. spanish required. on-site only. must relocate. drug test required."
)


@pytest.mark.parametrize("kind", list(RequirementKind))
def test_missing_profile_field_is_unknown(kind, empty_profile):
    """An empty profile never resolves to met."""
    assert resolve_status(kind, empty_profile, EVERYTHING).status == UNKNOWN


@pytest.mark.parametrize("authorization,status,value", [
    (WorkAuthorization.CITIZEN, MET, "US Citizen"),
    (WorkAuthorization.PERMANENT_RESIDENT, RISK, "Permanent Resident"),
    (WorkAuthorization.VISA, RISK, "Visa holder"),
    (WorkAuthorization.OTHER, RISK, "Other"),
])
def test_citizenship(authorization, status, value):
    profile = CandidateRequirementProfile(work_authorization=authorization)

    resolution = resolve_status(RequirementKind.CITIZENSHIP, profile, "")

    assert resolution.status == status
    assert resolution.candidate_value == value


class TestClearance:
    """Tests for the ordinal clearance comparison."""

    @pytest.mark.parametrize("text,level,explicit", [
        ("active ts/sci required", ClearanceLevel.TS_SCI, True),
        ("ts sci with polygraph", ClearanceLevel.TS_SCI, True),
        ("top secret clearance", ClearanceLevel.TOP_SECRET, True),
        ("secret clearance", ClearanceLevel.SECRET, True),
        ("public trust", ClearanceLevel.PUBLIC_TRUST, True),
        ("clearance required", ClearanceLevel.PUBLIC_TRUST, False),
    ])
    def test_required_clearance(self, text, level, explicit):
        assert required_clearance(text) == (level, explicit)

    @pytest.mark.parametrize("held,text,status", [
        (ClearanceLevel.TOP_SECRET, "top secret clearance required", MET),
        (ClearanceLevel.TS_SCI, "secret clearance required", MET),
        (ClearanceLevel.SECRET, "top secret clearance required", RISK),
        (ClearanceLevel.PUBLIC_TRUST, "secret clearance required", RISK),
        (ClearanceLevel.PUBLIC_TRUST, "clearance required", MET),
    ])
    def test_held_clearance_compared_by_level(self, held, text, status):
        profile = CandidateRequirementProfile(security_clearance=held)

        resolution = resolve_status(RequirementKind.SECURITY_CLEARANCE, profile, text)

        assert resolution.status == status
        assert resolution.candidate_value == held.label

    def test_no_clearance_against_named_level(self):
        profile = CandidateRequirementProfile(security_clearance=ClearanceLevel.NONE)

        resolution = resolve_status(RequirementKind.SECURITY_CLEARANCE, profile, "secret clearance required")

        assert resolution.status == RISK

    def test_no_clearance_against_unnamed_level(self):
        """Ability to obtain a clearance cannot be decided from 'none'."""
        profile = CandidateRequirementProfile(security_clearance=ClearanceLevel.NONE)

        resolution = resolve_status(
            RequirementKind.SECURITY_CLEARANCE, profile, "ability to obtain a security clearance"
        )

        assert resolution.status == UNKNOWN


@pytest.mark.parametrize("kind,field", [
    (RequirementKind.BACKGROUND_CHECK, "can_pass_background_check"),
    (RequirementKind.DRUG_TEST, "can_pass_drug_test"),
    (RequirementKind.RELOCATION, "willing_to_relocate"),
])
def test_boolean_fields(kind, field):
    """True meets the requirement and False puts it at risk."""
    assert resolve_status(kind, CandidateRequirementProfile(**{field: True}), "").status == MET
    assert resolve_status(kind, CandidateRequirementProfile(**{field: False}), "").status == RISK


def test_sponsorship_polarity():
    """Needing sponsorship is the risky answer for a no-sponsorship posting."""
    needs = CandidateRequirementProfile(requires_sponsorship=True)
    does_not = CandidateRequirementProfile(requires_sponsorship=False)

    assert resolve_status(RequirementKind.SPONSORSHIP, needs, "").status == RISK
    assert resolve_status(RequirementKind.SPONSORSHIP, does_not, "").status == MET


class TestLanguage:
    """Tests for language resolution."""

    def test_required_language_uses_list_order(self):
        assert required_language("french or spanish speakers") == "spanish"
        assert required_language("bilingual candidates") is None

    def test_empty_language_list_is_unknown(self):
        profile = CandidateRequirementProfile(languages=[])

        assert resolve_status(RequirementKind.LANGUAGE, profile, "spanish required").status == UNKNOWN

    def test_unnamed_language_is_unknown(self):
        profile = CandidateRequirementProfile(languages=["English"])

        resolution = resolve_status(RequirementKind.LANGUAGE, profile, "bilingual in english")

        assert resolution.status == UNKNOWN
        assert resolution.candidate_value is None

    def test_case_insensitive_match(self):
        profile = CandidateRequirementProfile(languages=["GERMAN"])

        resolution = resolve_status(RequirementKind.LANGUAGE, profile, "fluent in german")

        assert resolution.status == MET
        assert resolution.candidate_value == "GERMAN"


@pytest.mark.parametrize("preference,status", [
    (RemotePreference.REMOTE, RISK),
    (RemotePreference.HYBRID, MET),
    (RemotePreference.ONSITE, MET),
    (RemotePreference.FLEXIBLE, MET),
])
def test_location_preference(preference, status):
    profile = CandidateRequirementProfile(remote_preference=preference)

    assert resolve_status(RequirementKind.LOCATION, profile, "on-site only").status == status


def test_resolver_logs_decisions(caplog):
    """Each resolution is logged at debug level."""
    resolver = StatusResolver()
    profile = CandidateRequirementProfile(requires_sponsorship=True)

    with caplog.at_level("DEBUG", logger="StatusResolver"):
        resolver.resolve(RequirementKind.SPONSORSHIP, profile, "")

    assert "sponsorship: risk" in caplog.text
