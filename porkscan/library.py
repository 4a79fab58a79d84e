"""
Pattern Library — Immutable Detection Registries

Defines what the engine looks for:
  1. Pork keywords (phrase-level evidence)
  2. Suspicious spending patterns ("$AMOUNT ... for ... PROJECT" shapes)
  3. Location indicators (geographically targeted beneficiaries)
  4. Category item patterns (dollar-anchored provisions that become PorkItems)
  5. Public-benefit keywords (claimed justifications)

A PatternLibrary is built once and shared by reference. Every regular
expression is compiled at construction; a bad expression raises
PatternLibraryError there and never during analysis.

Built-in expressions keep every gap inside one sentence (a point between
digits does not count as a sentence end). Gaps before a keyword stop at its
first occurrence, and gaps between an amount and its noun stop at the next
"$", so matching work grows linearly with the text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional


class PatternLibraryError(ValueError):
    """Raised when a pattern library is constructed from invalid data."""


# ============================================================
# REGEX BUILDING BLOCKS
# ============================================================

# Longest stretch between two anchors of one pattern (same sentence only)
MAX_GAP_CHARS = 150
# Longest trailing stretch captured after the qualifying noun
MAX_TAIL_CHARS = 200

# Figures never give back digits once read, so a failed match cannot retry
# the rest of the pattern from inside a number.
_FIGURE = r"\$\s?\d[\d,]*(?![\d,])(?:\.\d+(?!\d))?"
AMOUNT = _FIGURE + r"(?:\s*(?:thousand|million|billion|mil|bil)\b)?"
LARGE_AMOUNT = _FIGURE + r"\s*(?:million|billion)\b"

# A point between digits ("$2.5") does not end the sentence
SENTENCE_CHAR = r"(?:[^.]|\.(?=\d))"
# Same, but also stops at the next "$": a gap belongs to one amount only
CLAUSE_CHAR = r"(?:[^.$]|\.(?=\d))"

FOR_OR_TO = r"\b(?:for|to)\b"

# Lazy gap up to the next amount
GAP = CLAUSE_CHAR + r"{0,%d}?" % MAX_GAP_CHARS
TAIL = SENTENCE_CHAR + r"{0,%d}" % MAX_TAIL_CHARS
# Greedy lead-in that halts at the first "$"
LEAD = CLAUSE_CHAR + r"{0,%d}" % MAX_GAP_CHARS


def _gap_until(anchor: str) -> str:
    """Greedy gap that cannot step over `anchor`, so it stops at its first occurrence."""
    return r"(?:(?!" + anchor + r")" + CLAUSE_CHAR + r"){0,%d}" % MAX_GAP_CHARS


def _amount_then(nouns: str) -> str:
    """Dollar amount, then the first 'for'/'to', then one of the nouns."""
    return (
        AMOUNT + _gap_until(FOR_OR_TO) + FOR_OR_TO + GAP
        + r"\b(?:" + nouns + r")\b"
    )


def _item(nouns: str) -> str:
    """Nearest dollar amount, then a qualifying noun, then the rest of the sentence."""
    return AMOUNT + GAP + r"\b(?:" + nouns + r")\b" + TAIL


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class SpendingPattern:
    """A named regular expression tagged with a human-readable category."""
    id: str
    category: str
    pattern: str
    description: str = ""


# ============================================================
# DEFAULT REGISTRIES
# ============================================================

DEFAULT_KEYWORDS: tuple[str, ...] = (
    "earmark", "special project", "bridge to nowhere", "museum",
    "cultural center", "visitor center", "renovation", "beautification",
    "arts center", "sports facility", "stadium", "arena",
    "conference center", "community center", "festival", "celebration",
    "commemoration", "memorial", "monument", "statue", "naming rights",
    "research facility", "laboratory", "university project",
    "college project", "local project", "hometown project",
    "district project", "hometown", "various districts",
)

SUSPICIOUS_PATTERNS: tuple[SpendingPattern, ...] = (
    SpendingPattern(
        id="MEMORIAL_PROJECT",
        category="Memorial/Monument",
        pattern=_amount_then(
            r"memorials?|monuments?|statues?|commemorat\w*"
        ),
        description="Dollar amount directed to a memorial or monument.",
    ),
    SpendingPattern(
        id="BRIDGE_PROJECT",
        category="Bridge/Road",
        pattern=_amount_then(
            r"bridges?|highways?|overpass(?:es)?|roads?"
        ),
        description="Dollar amount directed to a named bridge or road.",
    ),
    SpendingPattern(
        id="STADIUM_PROJECT",
        category="Stadium/Sports Facility",
        pattern=_amount_then(
            r"stadiums?|arenas?|ballparks?|sports\s+(?:facility|facilities|complex)"
        ),
        description="Dollar amount directed to a stadium or sports venue.",
    ),
    SpendingPattern(
        id="MUSEUM_PROJECT",
        category="Museum/Cultural Center",
        pattern=_amount_then(
            r"museums?|(?:cultural|arts?|heritage)\s+centers?"
        ),
        description="Dollar amount directed to a museum or cultural venue.",
    ),
    SpendingPattern(
        id="FESTIVAL_PROJECT",
        category="Festival/Celebration",
        pattern=_amount_then(
            r"festivals?|celebrations?|fairs?|parades?"
        ),
        description="Dollar amount directed to a festival or celebration.",
    ),
    SpendingPattern(
        id="RESEARCH_FACILITY",
        category="Research Facility",
        pattern=_amount_then(
            r"research\s+(?:facility|facilities|centers?)|laborator(?:y|ies)|institutes?"
        ),
        description="Dollar amount directed to a specific research facility.",
    ),
    SpendingPattern(
        id="LOCATION_TARGETED",
        category="Location-Targeted Spending",
        pattern=(
            LARGE_AMOUNT + _gap_until(FOR_OR_TO) + FOR_OR_TO + r"\s" + GAP
            + r"\b(?:in|at|near)\s+\w[\w ,]{0,60}"
        ),
        description="Large amount tied to a project at a named place.",
    ),
    SpendingPattern(
        id="CONSTRUCTION_APPROPRIATION",
        category="Construction Appropriation",
        pattern=(
            r"\bappropriat\w*\b" + LEAD + AMOUNT
            + _gap_until(r"\bfor\b") + r"\bfor\b" + GAP
            + r"\b(?:construct|build|establish|create)\w*"
        ),
        description="Appropriation earmarked for building something new.",
    ),
    SpendingPattern(
        id="FACILITY_FUNDING",
        category="Facility Funding",
        pattern=(
            r"\bfund\w*\b" + LEAD + AMOUNT + GAP
            + r"\b(?:projects?|facility|facilities|centers?|institutes?)\b"
        ),
        description="Funding routed to a single project or facility.",
    ),
)

ITEM_PATTERNS: tuple[SpendingPattern, ...] = (
    SpendingPattern(
        id="ITEM_MEMORIAL_BRIDGE",
        category="Memorial/Bridge",
        pattern=_item(r"memorials?|monuments?|statues?|bridges?|commemorat\w*"),
    ),
    SpendingPattern(
        id="ITEM_STADIUM_ARENA",
        category="Stadium/Arena",
        pattern=_item(
            r"stadiums?|arenas?|ballparks?|sports\s+(?:facility|facilities|complex)"
        ),
    ),
    SpendingPattern(
        id="ITEM_MUSEUM_CULTURAL",
        category="Museum/Cultural Center",
        pattern=_item(r"museums?|(?:cultural|arts?|heritage)\s+centers?"),
    ),
    SpendingPattern(
        id="ITEM_TOURISM_VISITOR",
        category="Tourism/Visitor Center",
        pattern=_item(r"tourism|tourists?|(?:visitor|welcome)\s+centers?"),
    ),
    SpendingPattern(
        id="ITEM_RESEARCH_UNIVERSITY",
        category="Research/University",
        pattern=_item(r"research|universit(?:y|ies)|colleges?|laborator(?:y|ies)"),
    ),
    SpendingPattern(
        id="ITEM_COMMUNITY_MISC",
        category="Community/Miscellaneous",
        pattern=_item(
            r"various|miscellaneous|community|hometown|targeted"
            r"|(?:local|district)\s+projects?|festivals?|celebrations?"
        ),
    ),
)

LOCATION_INDICATORS: tuple[str, ...] = (
    "in the district of", "in the state of", "located in", "situated in",
    "serving", "benefiting", "for the benefit of",
)

BENEFIT_KEYWORDS: tuple[str, ...] = (
    "infrastructure", "economic development", "job creation", "safety",
    "education", "research", "healthcare", "transportation",
)


# ============================================================
# LIBRARY
# ============================================================

# Run of capitalized words on one line: "Springfield", "Lake County Parks"
CAPITALIZED_PHRASE = r"([A-Z][\w'-]*(?:[ \t]+[A-Z][\w'-]*)*)"


def _normalize_phrases(phrases: Iterable[str], kind: str) -> tuple[str, ...]:
    """Lowercase, strip and dedupe phrases, preserving first-seen order."""
    seen: dict[str, None] = {}
    for phrase in phrases:
        if not isinstance(phrase, str) or not phrase.strip():
            raise PatternLibraryError(f"Empty {kind} phrase: {phrase!r}")
        seen.setdefault(phrase.strip().lower(), None)
    return tuple(seen)


def _compile(pattern: SpendingPattern) -> re.Pattern:
    try:
        return re.compile(pattern.pattern, re.IGNORECASE)
    except re.error as exc:
        raise PatternLibraryError(
            f"Invalid regular expression for {pattern.id}: {exc}"
        ) from exc


@dataclass(frozen=True)
class PatternLibrary:
    """
    Read-only registry of everything the engine matches against.

    Construct a custom instance to swap in a smaller or different
    vocabulary (tests do this for deterministic fixtures):

        lib = PatternLibrary(keywords=("earmark",), suspicious_patterns=())
    """
    keywords: tuple[str, ...] = DEFAULT_KEYWORDS
    suspicious_patterns: tuple[SpendingPattern, ...] = SUSPICIOUS_PATTERNS
    location_indicators: tuple[str, ...] = LOCATION_INDICATORS
    item_patterns: tuple[SpendingPattern, ...] = ITEM_PATTERNS
    benefit_keywords: tuple[str, ...] = BENEFIT_KEYWORDS

    _keyword_regexes: tuple = field(init=False, repr=False, compare=False)
    _suspicious_regexes: tuple = field(init=False, repr=False, compare=False)
    _item_regexes: tuple = field(init=False, repr=False, compare=False)
    _location_regex: Optional[re.Pattern] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        keywords = _normalize_phrases(self.keywords, "keyword")
        object.__setattr__(self, "keywords", keywords)
        object.__setattr__(
            self, "location_indicators",
            _normalize_phrases(self.location_indicators, "location indicator"),
        )
        object.__setattr__(
            self, "benefit_keywords",
            _normalize_phrases(self.benefit_keywords, "benefit keyword"),
        )
        object.__setattr__(self, "suspicious_patterns", tuple(self.suspicious_patterns))
        object.__setattr__(self, "item_patterns", tuple(self.item_patterns))

        object.__setattr__(self, "_keyword_regexes", tuple(
            (kw, re.compile(r"\b" + re.escape(kw) + r"\b", re.IGNORECASE))
            for kw in keywords
        ))
        object.__setattr__(self, "_suspicious_regexes", tuple(
            (p, _compile(p)) for p in self.suspicious_patterns
        ))
        object.__setattr__(self, "_item_regexes", tuple(
            (p, _compile(p)) for p in self.item_patterns
        ))

        # Indicator phrase is case-insensitive; the beneficiary name after it
        # must stay capitalized, so only the phrase group carries (?i:...)
        location_regex = None
        if self.location_indicators:
            phrases = "|".join(
                re.escape(p).replace(r"\ ", r"\s+") for p in self.location_indicators
            )
            location_regex = re.compile(
                r"\b(?i:" + phrases + r")\s+(?:the\s+)?" + CAPITALIZED_PHRASE
            )
        object.__setattr__(self, "_location_regex", location_regex)

    @property
    def keyword_regexes(self) -> tuple[tuple[str, re.Pattern], ...]:
        return self._keyword_regexes

    @property
    def suspicious_regexes(self) -> tuple[tuple[SpendingPattern, re.Pattern], ...]:
        return self._suspicious_regexes

    @property
    def item_regexes(self) -> tuple[tuple[SpendingPattern, re.Pattern], ...]:
        return self._item_regexes

    @property
    def location_regex(self) -> Optional[re.Pattern]:
        """Location-indicator phrase followed by a capitalized place name."""
        return self._location_regex

    def describe(self) -> dict:
        """Expose the detection surface (used by GET /patterns)."""
        return {
            "keywords": list(self.keywords),
            "suspicious_patterns": [
                {"id": p.id, "category": p.category, "description": p.description}
                for p in self.suspicious_patterns
            ],
            "item_patterns": [
                {"id": p.id, "category": p.category}
                for p in self.item_patterns
            ],
            "location_indicators": list(self.location_indicators),
            "benefit_keywords": list(self.benefit_keywords),
        }


# Process-wide default, built once at import
DEFAULT_LIBRARY = PatternLibrary()
