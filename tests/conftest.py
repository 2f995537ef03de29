"""Shared fixtures for job screener tests."""

import json

import pytest

from job_screener.core.models import (
    AnswerBank,
    CachedAnswer,
    CandidateRequirementProfile,
    ProfileSummary,
    QuestionKind,
)


@pytest.fixture
def empty_profile():
    """A profile with no fields set."""
    return CandidateRequirementProfile()


@pytest.fixture
def profile_summary():
    """A candidate summary for seeding answer banks."""
    return ProfileSummary(
        name="Jordan Lee",
        title="Backend Engineer",
        years_experience=6,
        skills=["Python", "PostgreSQL", "AWS", "Docker", "Kafka", "Terraform"],
    )


@pytest.fixture
def salary_bank():
    """A bank with a cached salary answer and nothing else."""
    return AnswerBank(
        common_questions=[
            CachedAnswer(
                kind=QuestionKind.SALARY_EXPECTATIONS,
                question="What are your salary expectations?",
                answer="Cached salary answer",
                usage_count=1,
            ),
        ],
    )


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document under tmp_path and return its path."""
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
