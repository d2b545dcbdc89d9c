"""Pydantic schemas for API request/response."""

from pydantic import BaseModel, field_validator

from models import AnalysisResult, CriterionResult


class AnalyzeRequest(BaseModel):
    """Request body for POST /analyze."""

    url: str = ""

    @field_validator("url", mode="before")
    @classmethod
    def normalize_url(cls, value: object) -> str:
        return str(value or "").strip()


class FindingItem(BaseModel):
    """Single pass/fail note for a criterion."""

    passed: bool
    message: str


class CriterionScore(BaseModel):
    """Score and findings for one criterion."""

    score: int
    max_score: int
    description: str = ""
    findings: list[FindingItem]

    @classmethod
    def from_result(cls, result: CriterionResult) -> "CriterionScore":
        return cls(
            score=result.score,
            max_score=result.max_score,
            description=result.description,
            findings=[FindingItem(passed=f.passed, message=f.message) for f in result.findings],
        )


class AnalyzeResponse(BaseModel):
    """Full citation-likelihood analysis returned by POST /analyze."""

    url: str
    total_score: int
    max_score: int
    percentage: float
    rating: str
    criteria: dict[str, CriterionScore]
    recommendations: list[str]
    research_insights: list[str]

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalyzeResponse":
        return cls(
            url=result.url,
            total_score=result.total_score,
            max_score=result.max_score,
            percentage=result.percentage,
            rating=result.rating,
            criteria={name: CriterionScore.from_result(c) for name, c in result.criteria.items()},
            recommendations=list(result.recommendations),
            research_insights=list(result.research_insights),
        )


class ErrorResponse(BaseModel):
    """Body returned for 400/500 failures."""

    error: str


class CriterionInfo(BaseModel):
    """Static description of one criterion."""

    name: str
    max_score: int
    description: str


class ResearchResponse(BaseModel):
    """Static research notes on how AI systems pick sources to cite."""

    research_insights: list[str]
    criteria: list[CriterionInfo]
