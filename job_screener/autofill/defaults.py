"""
Default answer bank templates for new profiles.
"""

from datetime import datetime

from job_screener.core.models import AnswerBank, CachedAnswer, ProfileSummary, QuestionKind
from job_screener.core.patterns import catalog_snapshot


def generate_default_answer_bank(profile: ProfileSummary) -> AnswerBank:
    """
    Build a starter answer bank from a profile summary.

    Answers mentioning the employer use the {company} placeholder, which is
    filled in at lookup time.
    """
    title = profile.title
    years = profile.years_experience
    top_skills = profile.top_skills
    now = datetime.now()

    common_questions = [
        CachedAnswer(
            kind=QuestionKind.WHY_INTERESTED,
            question="Why are you interested in this role?",
            answer=(
                f"With {years} years of experience as a {title}, I'm excited about the "
                f"opportunity to bring my expertise in {top_skills} to {{company}}. "
                "I'm particularly drawn to roles where I can make a meaningful impact "
                "while continuing to grow professionally."
            ),
            generated_at=now,
        ),
        CachedAnswer(
            kind=QuestionKind.GREATEST_STRENGTH,
            question="What is your greatest strength?",
            answer=(
                "My greatest strength is my ability to combine technical expertise with "
                f"strong problem-solving skills. With {years} years of experience working "
                f"with {top_skills}, I've developed a systematic approach to tackling "
                "complex challenges while delivering practical solutions."
            ),
            generated_at=now,
        ),
        CachedAnswer(
            kind=QuestionKind.CAREER_GOALS,
            question="Where do you see yourself in 5 years?",
            answer=(
                "In 5 years, I see myself as a senior technical leader, having deepened my "
                f"expertise in {top_skills} while mentoring others and contributing to "
                "impactful projects. I'm looking for a role at {company} that offers "
                "growth opportunities aligned with this vision."
            ),
            generated_at=now,
        ),
        CachedAnswer(
            kind=QuestionKind.WORK_STYLE,
            question="Describe your work style.",
            answer=(
                "I'm a collaborative professional who values clear communication and "
                "structured problem-solving. I enjoy working in agile environments where I "
                "can contribute ideas while learning from teammates. I'm self-motivated but "
                "also thrive in team settings."
            ),
            generated_at=now,
        ),
    ]

    additional_info = profile.summary or (
        f"I'm a {title} with {years} years of experience specializing in {top_skills}. "
        "I'm excited about opportunities where I can contribute to meaningful projects "
        "while continuing to grow."
    )

    return AnswerBank(
        common_questions=common_questions,
        patterns=catalog_snapshot(),
        custom_answers={
            "anything.*else|additional.*info": additional_info,
            "interview.*availab": "I am available for interviews at your earliest convenience during business hours.",
            "hear.*about|how.*find": "I found this position through an online job board.",
        },
    )
