"""
Question classification and answer bank lookups for form autofill.
"""

from .classifier import QuestionClassifier, classify_question
from .answer_bank import (
    AnswerMatcher,
    add_answer_to_bank,
    derive_custom_pattern,
    find_matching_answer,
    get_suggested_answer,
)
from .defaults import generate_default_answer_bank

__all__ = [
    "QuestionClassifier",
    "classify_question",
    "AnswerMatcher",
    "add_answer_to_bank",
    "derive_custom_pattern",
    "find_matching_answer",
    "get_suggested_answer",
    "generate_default_answer_bank",
]
