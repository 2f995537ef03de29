"""
Question Classifier - Maps free-text application questions to known categories.
"""

from typing import Optional
import logging

from job_screener.core.models import QuestionKind
from job_screener.core.patterns import QUESTION_CATALOG, QuestionCategory


class QuestionClassifier:
    """
    Classifies questions in two passes.

    Pass 1 tests every category's regex rules in catalog order. Pass 2 runs
    only when nothing matched and picks the first category with at least
    keyword_threshold of its keywords present in the question.
    """

    def __init__(
        self,
        catalog: tuple[QuestionCategory, ...] = QUESTION_CATALOG,
        keyword_threshold: int = 2,
    ):
        self.catalog = tuple(catalog)
        self.keyword_threshold = keyword_threshold
        self.logger = logging.getLogger(self.__class__.__name__)

    def classify(self, question_text: str) -> Optional[QuestionKind]:
        """Return the question's category, or None when uncategorized."""
        if not question_text or not question_text.strip():
            return None

        lower_text = question_text.lower()

        for category in self.catalog:
            if category.matches(lower_text):
                self.logger.debug(f"Rule match: {category.kind.value}")
                return category.kind

        for category in self.catalog:
            if category.keyword_hits(lower_text) >= self.keyword_threshold:
                self.logger.debug(f"Keyword match: {category.kind.value}")
                return category.kind

        return None


_default_classifier = QuestionClassifier()


def classify_question(question_text: str) -> Optional[QuestionKind]:
    """Classify a question with the default catalog."""
    return _default_classifier.classify(question_text)
