"""
Pattern catalogs for requirement detection and question classification.

Both catalogs are ordered. Categories are evaluated in declaration order and,
inside a category, rules are tried in order with the first match winning, so
more specific rules must come before generic ones. Scanners and classifiers
accept a catalog argument so callers can substitute their own.
"""

from dataclasses import dataclass
from typing import Callable, Optional
import re

from .models import QuestionKind, RequirementKind


def _rules(*sources: str) -> tuple[re.Pattern, ...]:
    return tuple(re.compile(source, re.IGNORECASE) for source in sources)


@dataclass(frozen=True)
class RequirementCategory:
    """A screening requirement and the rules that recognise it."""
    kind: RequirementKind
    label: str
    rules: tuple[re.Pattern, ...]
    extract_value: Optional[Callable[[re.Match, str], str]] = None

    def first_match(self, text: str) -> Optional[re.Match]:
        for rule in self.rules:
            match = rule.search(text)
            if match:
                return match
        return None


@dataclass(frozen=True)
class QuestionCategory:
    """A question category with its regex rules and fallback keywords."""
    kind: QuestionKind
    rules: tuple[re.Pattern, ...]
    keywords: tuple[str, ...]

    def matches(self, text: str) -> bool:
        return any(rule.search(text) for rule in self.rules)

    def keyword_hits(self, lower_text: str) -> int:
        return sum(1 for keyword in self.keywords if keyword in lower_text)


# Natural languages a posting may ask for, in lookup order
LANGUAGES = (
    "spanish", "mandarin", "chinese", "french", "german", "japanese",
    "korean", "portuguese", "arabic", "hindi", "russian", "italian",
)

_LANGUAGE_GROUP = "|".join(LANGUAGES)


def _clearance_level_text(_match: re.Match, text: str) -> str:
    lower = text.lower()
    if "ts/sci" in lower or "ts sci" in lower:
        return "TS/SCI"
    if "top secret" in lower:
        return "Top Secret"
    if "secret" in lower:
        return "Secret"
    if "public trust" in lower:
        return "Public Trust"
    return "Required"


def _language_text(match: re.Match, _text: str) -> str:
    matched = match.group(0).lower()
    for language in LANGUAGES:
        if language in matched:
            return language.capitalize()
    return "Bilingual"


def _onsite_text(_match: re.Match, text: str) -> str:
    days = re.search(r"(\d+)\s*days?\s*(per\s*week\s*)?(on-?site|in-?office)", text, re.IGNORECASE)
    if days:
        return f"{days.group(1)} days/week on-site"
    if re.search(r"on-?site\s*only", text, re.IGNORECASE):
        return "On-site only"
    if re.search(r"no\s*remote", text, re.IGNORECASE):
        return "No remote"
    return "On-site required"


def _relocation_text(_match: re.Match, text: str) -> str:
    # Destination is the run of capitalised words after the verb
    place = re.search(
        r"(?i:located|based|relocate)\s*(?i:in|to|near)\s+([A-Z][a-zA-Z.]*(?:[ ,]+[A-Z][a-zA-Z.]*)*)",
        text,
    )
    if place:
        return f"Relocate to {place.group(1).rstrip('.')}"
    # Lower-case destination: stop at the first punctuation other than a comma
    place = re.search(
        r"(?:located|based|relocate)\s*(?:in|to|near)\s+([a-z]+(?:[ ,]+[a-z]+)*)",
        text,
        re.IGNORECASE,
    )
    if place:
        return f"Relocate to {place.group(1)}"
    return "Relocation required"


REQUIREMENT_CATALOG: tuple[RequirementCategory, ...] = (
    RequirementCategory(
        kind=RequirementKind.CITIZENSHIP,
        label="US Citizenship",
        rules=_rules(
            r"\b(us|u\.s\.|united states)\s*(citizen(ship)?)\s*(required|only|must|is required)",
            r"must be\s*(a\s*)?(us|u\.s\.|united states)\s*citizen",
            r"citizen(ship)?\s*(of|in)\s*(the\s*)?(us|u\.s\.|united states)\s*(required|is required)",
            r"requires?\s*(us|u\.s\.)\s*citizen(ship)?",
            r"proof of\s*(us|u\.s\.)\s*citizen(ship)?",
        ),
    ),
    RequirementCategory(
        kind=RequirementKind.SECURITY_CLEARANCE,
        label="Security Clearance",
        rules=_rules(
            r"\b(active\s*)?(security\s*)?clearance\s*(required|needed|is required)",
            r"\b(ts/sci|top secret|secret|public trust)\s*(clearance)?\s*(required|needed|is required)?",
            r"must\s*(have|hold|possess)\s*(an?\s*)?(active\s*)?(security\s*)?clearance",
            r"ability to obtain\s*(a\s*)?(security\s*)?clearance",
            r"clearance:\s*(ts/sci|top secret|secret|public trust)",
        ),
        extract_value=_clearance_level_text,
    ),
    RequirementCategory(
        kind=RequirementKind.BACKGROUND_CHECK,
        label="Background Check",
        rules=_rules(
            r"background\s*(check|investigation|screening)\s*(required|is required|will be conducted)",
            r"must\s*(pass|clear|undergo)\s*(a\s*)?background\s*(check|investigation|screening)",
            r"subject to\s*(a\s*)?background\s*(check|investigation)",
            r"criminal\s*(background|history)\s*(check|screening)",
        ),
    ),
    RequirementCategory(
        kind=RequirementKind.SPONSORSHIP,
        label="Visa Sponsorship",
        rules=_rules(
            r"no\s*(visa\s*)?sponsorship",
            r"cannot\s*(provide\s*)?(visa\s*)?sponsor(ship)?",
            r"will\s*not\s*(provide\s*)?(visa\s*)?sponsor(ship)?",
            r"not\s*(able|willing)\s*to\s*sponsor",
            r"without\s*(visa\s*)?sponsorship",
            r"must be authorized to work.*(without|no).*sponsor",
            r"sponsorship\s*(is\s*)?not\s*(available|offered|provided)",
        ),
    ),
    RequirementCategory(
        kind=RequirementKind.LANGUAGE,
        label="Language",
        rules=_rules(
            rf"\b({_LANGUAGE_GROUP})\s*(required|preferred|fluency|proficiency|speaking)",
            rf"(fluent|proficient|fluency)\s*(in\s*)?({_LANGUAGE_GROUP})",
            r"bilingual\s*(in\s*)?(spanish|mandarin|chinese|french|english)",
            r"(speak|speaking)\s*(spanish|mandarin|chinese|french|german|japanese|korean)",
        ),
        extract_value=_language_text,
    ),
    RequirementCategory(
        kind=RequirementKind.LOCATION,
        label="On-site Work",
        rules=_rules(
            r"\b(on-?site|in-?office)\s*(only|required|position|work|days?)",
            r"must\s*(work|be)\s*(on-?site|in-?office|in\s*person)",
            r"no\s*remote",
            r"not\s*(a\s*)?remote\s*(position|role|job)",
            r"this\s*(is\s*)?(an?\s*)?(on-?site|in-?office)\s*(position|role)",
            r"\d+\s*days?\s*(per\s*week\s*)?(on-?site|in-?office)",
        ),
        extract_value=_onsite_text,
    ),
    RequirementCategory(
        kind=RequirementKind.RELOCATION,
        label="Relocation",
        rules=_rules(
            r"(must|willing\s*to)\s*relocate",
            r"relocation\s*(required|necessary|needed)",
            r"candidates?\s*(must|should)\s*be\s*(located|based)\s*(in|near)",
            r"local\s*candidates?\s*(only|preferred)",
        ),
        extract_value=_relocation_text,
    ),
    RequirementCategory(
        kind=RequirementKind.DRUG_TEST,
        label="Drug Test",
        rules=_rules(
            r"drug\s*(test|screen|screening)\s*(required|is required|will be conducted)?",
            r"must\s*pass\s*(a\s*)?drug\s*(test|screen)",
            r"subject to\s*(a\s*)?drug\s*(test|screening)",
            r"pre-?employment\s*drug\s*(test|screening)",
        ),
    ),
)


QUESTION_CATALOG: tuple[QuestionCategory, ...] = (
    QuestionCategory(
        kind=QuestionKind.WHY_INTERESTED,
        rules=_rules(r"why.*interested", r"why.*join", r"why.*want.*work", r"why.*apply",
                     r"why.*this.*company", r"why.*this.*role"),
        keywords=("why", "interested", "join", "apply", "company", "role", "position"),
    ),
    QuestionCategory(
        kind=QuestionKind.GREATEST_STRENGTH,
        rules=_rules(r"greatest.*strength", r"your.*strength", r"best.*quality", r"strongest.*skill"),
        keywords=("strength", "strongest", "best", "quality"),
    ),
    QuestionCategory(
        kind=QuestionKind.GREATEST_WEAKNESS,
        rules=_rules(r"greatest.*weakness", r"your.*weakness", r"area.*improve", r"development.*area"),
        keywords=("weakness", "improve", "development", "challenge"),
    ),
    QuestionCategory(
        kind=QuestionKind.LEADERSHIP_EXAMPLE,
        rules=_rules(r"leadership.*example", r"led.*team", r"manage.*team", r"leadership.*experience"),
        keywords=("leadership", "lead", "led", "manage", "team"),
    ),
    QuestionCategory(
        kind=QuestionKind.TEAMWORK_EXAMPLE,
        rules=_rules(r"teamwork", r"work.*team", r"collaborate", r"team.*project"),
        keywords=("teamwork", "team", "collaborate", "together"),
    ),
    QuestionCategory(
        kind=QuestionKind.CHALLENGE_OVERCOME,
        rules=_rules(r"challenge.*overcome", r"difficult.*situation", r"problem.*solved", r"obstacle"),
        keywords=("challenge", "overcome", "difficult", "problem", "obstacle"),
    ),
    QuestionCategory(
        kind=QuestionKind.WHY_LEAVING,
        rules=_rules(r"why.*leaving", r"reason.*leaving", r"why.*left", r"leaving.*current"),
        keywords=("leaving", "left", "reason", "current"),
    ),
    QuestionCategory(
        kind=QuestionKind.SALARY_EXPECTATIONS,
        rules=_rules(r"salary.*expect", r"compensation.*expect", r"desired.*salary", r"pay.*expect"),
        keywords=("salary", "compensation", "pay", "expect"),
    ),
    QuestionCategory(
        kind=QuestionKind.CAREER_GOALS,
        rules=_rules(r"career.*goal", r"where.*see.*yourself", r"5.*years", r"future.*plan"),
        keywords=("career", "goal", "future", "plan", "years"),
    ),
    QuestionCategory(
        kind=QuestionKind.TECHNICAL_ACHIEVEMENT,
        rules=_rules(r"technical.*achievement", r"proud.*project", r"best.*project", r"accomplishment"),
        keywords=("achievement", "proud", "project", "accomplishment"),
    ),
    QuestionCategory(
        kind=QuestionKind.WORK_STYLE,
        rules=_rules(r"work.*style", r"how.*you.*work", r"working.*style", r"prefer.*work"),
        keywords=("work", "style", "prefer", "working"),
    ),
    QuestionCategory(
        kind=QuestionKind.HANDLE_PRESSURE,
        rules=_rules(r"handle.*pressure", r"stress", r"deadline", r"under.*pressure"),
        keywords=("pressure", "stress", "deadline", "handle"),
    ),
    QuestionCategory(
        kind=QuestionKind.CONFLICT_RESOLUTION,
        rules=_rules(r"conflict", r"disagree", r"difficult.*coworker", r"resolve.*issue"),
        keywords=("conflict", "disagree", "resolve", "difficult"),
    ),
    QuestionCategory(
        kind=QuestionKind.DIVERSITY_CONTRIBUTION,
        rules=_rules(r"diversity", r"inclusion", r"diverse.*team", r"contribute.*culture"),
        keywords=("diversity", "inclusion", "culture", "contribute"),
    ),
)


def catalog_snapshot(catalog: tuple[QuestionCategory, ...] = QUESTION_CATALOG) -> list[dict]:
    """Export a question catalog as plain records for storage alongside a bank."""
    return [
        {
            "type": category.kind.value,
            "patterns": [rule.pattern for rule in category.rules],
            "keywords": list(category.keywords),
        }
        for category in catalog
    ]
