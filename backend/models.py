"""Data models and types used across the backend.

API request/response schemas are in schemas.py.
Types for the fetcher and the scoring engine live here.
"""

from dataclasses import dataclass
from typing import Mapping, TypedDict

CRITERIA_ORDER = (
    "structure",
    "author",
    "metadata",
    "keywords",
    "tone",
    "credibility",
    "readability",
    "freshness",
    "comprehensiveness",
    "citations",
)


class FetchedPage(TypedDict):
    """Raw page returned by the fetcher."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class Finding:
    """One pass/fail note attached to a criterion."""

    passed: bool
    message: str


@dataclass(frozen=True)
class CriterionResult:
    name: str
    score: int
    max_score: int
    findings: tuple[Finding, ...] = ()
    description: str = ""

    def __post_init__(self) -> None:
        if not 0 <= self.score <= self.max_score:
            raise ValueError(f"{self.name} score {self.score} outside [0, {self.max_score}]")


class CriterionBuilder:
    """Accumulates points and findings for a single criterion.

    Evaluators award points through this and call ``build`` once at the end,
    which produces the immutable CriterionResult.
    """

    def __init__(self, name: str, max_score: int, description: str = "") -> None:
        self.name = name
        self.max_score = max_score
        self.description = description
        self.score = 0
        self.findings: list[Finding] = []

    def passed(self, message: str, points: int = 0) -> None:
        self.score += points
        self.findings.append(Finding(passed=True, message=message))

    def failed(self, message: str, points: int = 0) -> None:
        self.score += points
        self.findings.append(Finding(passed=False, message=message))

    def build(self) -> CriterionResult:
        return CriterionResult(
            name=self.name,
            score=min(self.score, self.max_score),
            max_score=self.max_score,
            findings=tuple(self.findings),
            description=self.description,
        )


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregate score for one analyzed page."""

    url: str
    criteria: Mapping[str, CriterionResult]
    total_score: int
    max_score: int
    percentage: float
    rating: str
    recommendations: tuple[str, ...] = ()
    research_insights: tuple[str, ...] = ()
