"""
Answer Bank - Retrieves and stores answers for application questions.

Lookup order for a question:
1. Custom answers, whose keys are case-insensitive regexes tried in insertion order
2. The cached answer for the question's classified category
3. A cached answer whose question shares enough significant words

All operations return new values and never modify the bank passed in.
"""

from dataclasses import replace
from datetime import datetime
from typing import Optional
import logging
import re

from job_screener.core.models import AnswerBank, AnswerSuggestion, CachedAnswer

from .classifier import QuestionClassifier


COMPANY_PLACEHOLDER = "{company}"
BANK_CONFIDENCE = 0.8

_MAX_FALLBACK_KEY_CHARS = 80


def significant_words(text: str, min_length: int = 3) -> set[str]:
    """Lower-cased words longer than min_length characters."""
    return {word for word in re.findall(r"\w+", text.lower()) if len(word) > min_length}


def derive_custom_pattern(question_text: str, max_words: int = 5, min_length: int = 3) -> str:
    """
    Build the custom-answer key for an uncategorized question.

    Keeps the first max_words words longer than min_length characters and
    joins them with ".*". When the question has no such word, falls back to
    an anchored pattern of the whole question so the answer is not lost.
    Questions longer than the fallback limit are anchored at the start only.
    Returns "" only for a question without any word characters.
    """
    cleaned = re.sub(r"[^\w\s]", "", question_text.lower())
    words = [word for word in cleaned.split() if len(word) > min_length][:max_words]
    if words:
        return ".*".join(words)

    collapsed = " ".join(cleaned.split())
    tokens = collapsed[:_MAX_FALLBACK_KEY_CHARS].split()
    if not tokens:
        return ""
    body = r"\W+".join(re.escape(token) for token in tokens)
    # A truncated key only covers a prefix of the question
    tail = "" if len(collapsed) > _MAX_FALLBACK_KEY_CHARS else r"\W*$"
    return rf"^\W*{body}{tail}"


class AnswerMatcher:
    """Matches questions against an answer bank and builds updated banks."""

    def __init__(
        self,
        classifier: Optional[QuestionClassifier] = None,
        placeholder: str = COMPANY_PLACEHOLDER,
        min_shared_words: int = 2,
    ):
        """
        Initialize the matcher.

        Args:
            classifier: Question classifier (default: QuestionClassifier())
            placeholder: Token replaced with the company name in answers
            min_shared_words: Shared significant words needed for a fuzzy match
        """
        self.classifier = classifier or QuestionClassifier()
        self.placeholder = placeholder
        self.min_shared_words = min_shared_words
        self.logger = logging.getLogger(self.__class__.__name__)

    def find(
        self,
        question_text: str,
        bank: AnswerBank,
        company_name: Optional[str] = None,
    ) -> Optional[str]:
        """
        Find the best cached answer for a question.

        Args:
            question_text: Question as shown on the application form
            bank: Candidate's answer bank
            company_name: Replaces the company placeholder when given

        Returns:
            The answer, or None when nothing in the bank fits
        """
        if not question_text:
            return None

        answer = self._match_custom(question_text, bank)

        if answer is None:
            kind = self.classifier.classify(question_text)
            cached = bank.get_cached(kind) if kind else None
            if cached:
                answer = cached.answer

        if answer is None:
            answer = self._match_similar(question_text, bank)

        if answer is None:
            return None
        return self._fill_company(answer, company_name)

    def suggest(
        self,
        question_text: str,
        bank: AnswerBank,
        company_name: Optional[str] = None,
    ) -> AnswerSuggestion:
        """Find an answer and report its source and confidence."""
        kind = self.classifier.classify(question_text)
        answer = self.find(question_text, bank, company_name)
        if answer is None:
            return AnswerSuggestion(kind=kind)
        return AnswerSuggestion(answer=answer, source="bank", confidence=BANK_CONFIDENCE, kind=kind)

    def add(self, question_text: str, answer: str, bank: AnswerBank) -> AnswerBank:
        """
        Return a copy of the bank with the answer stored.

        A classified question replaces any cached answer of the same kind.
        Anything else is stored under a derived custom-answer pattern.
        """
        kind = self.classifier.classify(question_text)

        if kind:
            entry = CachedAnswer(
                kind=kind,
                question=question_text,
                answer=answer,
                generated_at=datetime.now(),
                usage_count=1,
            )
            common_questions = list(bank.common_questions)
            for index, cached in enumerate(common_questions):
                if cached.kind == kind:
                    common_questions[index] = entry
                    break
            else:
                common_questions.append(entry)

            self.logger.info(f"Cached answer for {kind.value}")
            return replace(
                bank,
                common_questions=common_questions,
                patterns=list(bank.patterns),
                custom_answers=dict(bank.custom_answers),
            )

        custom_answers = dict(bank.custom_answers)
        key = derive_custom_pattern(question_text)
        if key:
            custom_answers[key] = answer
            self.logger.info(f"Saved custom answer under pattern: {key}")
        else:
            self.logger.warning("Question has no text to match on, answer not saved")

        return replace(
            bank,
            common_questions=list(bank.common_questions),
            patterns=list(bank.patterns),
            custom_answers=custom_answers,
        )

    def _match_custom(self, question_text: str, bank: AnswerBank) -> Optional[str]:
        for pattern, answer in bank.custom_answers.items():
            try:
                regex = re.compile(pattern, re.IGNORECASE)
            except re.error as e:
                self.logger.warning(f"Skipping invalid custom pattern {pattern!r}: {e}")
                continue
            if regex.search(question_text):
                return answer
        return None

    def _match_similar(self, question_text: str, bank: AnswerBank) -> Optional[str]:
        question_words = significant_words(question_text)
        if len(question_words) < self.min_shared_words:
            return None

        for cached in bank.common_questions:
            shared = question_words & significant_words(cached.question)
            if len(shared) >= self.min_shared_words:
                self.logger.debug(f"Similar to cached {cached.kind.value}: {sorted(shared)}")
                return cached.answer
        return None

    def _fill_company(self, answer: str, company_name: Optional[str]) -> str:
        if not company_name:
            return answer
        return re.sub(re.escape(self.placeholder), lambda _: company_name, answer, flags=re.IGNORECASE)


_default_matcher = AnswerMatcher()


def find_matching_answer(
    question_text: str,
    bank: AnswerBank,
    company_name: Optional[str] = None,
) -> Optional[str]:
    """Find a matching answer with the default matcher."""
    return _default_matcher.find(question_text, bank, company_name)


def get_suggested_answer(
    question_text: str,
    bank: AnswerBank,
    company_name: Optional[str] = None,
) -> AnswerSuggestion:
    """Suggest an answer with the default matcher."""
    return _default_matcher.suggest(question_text, bank, company_name)


def add_answer_to_bank(question_text: str, answer: str, bank: AnswerBank) -> AnswerBank:
    """Store an answer with the default matcher, returning a new bank."""
    return _default_matcher.add(question_text, answer, bank)
