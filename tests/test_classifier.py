"""Tests for question classification."""

import pytest

from job_screener.autofill.classifier import QuestionClassifier, classify_question
from job_screener.core.models import QuestionKind
from job_screener.core.patterns import QUESTION_CATALOG, QuestionCategory


class TestRulePass:
    """Tests for regex rule matching."""

    def test_why_interested(self):
        assert classify_question("Why are you interested in joining our team?") == QuestionKind.WHY_INTERESTED

    def test_unrelated_question(self):
        assert classify_question("What color is your favorite fruit?") is None

    @pytest.mark.parametrize("question,kind", [
        ("What is your greatest weakness?", QuestionKind.GREATEST_WEAKNESS),
        ("Tell us about a time you led a team through a migration.", QuestionKind.LEADERSHIP_EXAMPLE),
        ("Why are you leaving your current job?", QuestionKind.WHY_LEAVING),
        ("What are your salary expectations?", QuestionKind.SALARY_EXPECTATIONS),
        ("Where do you see yourself in five years?", QuestionKind.CAREER_GOALS),
        ("How do you handle pressure?", QuestionKind.HANDLE_PRESSURE),
        ("Describe a conflict with a coworker.", QuestionKind.CONFLICT_RESOLUTION),
        ("How would you contribute to diversity at our company?", QuestionKind.DIVERSITY_CONTRIBUTION),
    ])
    def test_known_questions(self, question, kind):
        assert classify_question(question) == kind

    def test_catalog_order_breaks_ties(self):
        """A question matching two categories gets the earlier one."""
        question = "Why do you want to work on our team?"

        assert QUESTION_CATALOG[4].kind == QuestionKind.TEAMWORK_EXAMPLE
        assert QUESTION_CATALOG[4].matches(question.lower())
        assert classify_question(question) == QuestionKind.WHY_INTERESTED


class TestKeywordPass:
    """Tests for the keyword fallback."""

    def test_two_keywords_classify(self):
        """No rule matches, but two strength keywords do."""
        assert classify_question("Which quality do you consider your best?") == QuestionKind.GREATEST_STRENGTH

    def test_single_keyword_is_not_enough(self):
        assert classify_question("What is the best?") is None

    def test_threshold_is_configurable(self):
        catalog = (
            QuestionCategory(
                kind=QuestionKind.WORK_STYLE,
                rules=(),
                keywords=("remote", "office"),
            ),
        )

        strict = QuestionClassifier(catalog=catalog)
        lenient = QuestionClassifier(catalog=catalog, keyword_threshold=1)

        assert strict.classify("Do you prefer remote?") is None
        assert lenient.classify("Do you prefer remote?") == QuestionKind.WORK_STYLE


@pytest.mark.parametrize("question", ["", "   "])
def test_blank_question(question):
    assert classify_question(question) is None
