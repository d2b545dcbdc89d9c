"""Scoring engine: fetch -> parse -> ten criteria -> aggregate.

``score_document`` is pure and works on any PageDocument.
``analyze_url`` adds the network fetch and is what the API calls.
"""

import logging
from datetime import datetime
from types import MappingProxyType
from typing import Callable, Optional

from criteria import (
    score_author,
    score_citations,
    score_comprehensiveness,
    score_credibility,
    score_freshness,
    score_keywords,
    score_metadata,
    score_readability,
    score_structure,
    score_tone,
)
from document import PageDocument, build_document
from models import CRITERIA_ORDER, AnalysisResult, CriterionResult
from rules import MAX_TOTAL_SCORE, RATING_BANDS, RECOMMENDATIONS, RESEARCH_INSIGHTS
from scraper import fetch_page, validate_url

logger = logging.getLogger(__name__)

Evaluator = Callable[[PageDocument], CriterionResult]


def _evaluators(now: Optional[datetime]) -> dict[str, Evaluator]:
    return {
        "structure": score_structure,
        "author": score_author,
        "metadata": score_metadata,
        "keywords": score_keywords,
        "tone": score_tone,
        "credibility": score_credibility,
        "readability": score_readability,
        "freshness": lambda document: score_freshness(document, now=now),
        "comprehensiveness": score_comprehensiveness,
        "citations": score_citations,
    }


def build_recommendations(criteria: dict[str, CriterionResult]) -> list[str]:
    """One advisory per criterion whose score falls below its threshold."""
    out: list[str] = []
    for name in CRITERIA_ORDER:
        threshold, advice = RECOMMENDATIONS[name]
        if criteria[name].score < threshold:
            out.append(advice)
    return out


def rating_for(percentage: float) -> str:
    for floor, label in RATING_BANDS:
        if percentage >= floor:
            return label
    return RATING_BANDS[-1][1]


def score_document(document: PageDocument, now: Optional[datetime] = None) -> AnalysisResult:
    """Run every criterion against `document` and aggregate the result."""
    evaluators = _evaluators(now)
    criteria = {name: evaluators[name](document) for name in CRITERIA_ORDER}

    total = sum(result.score for result in criteria.values())
    percentage = total / MAX_TOTAL_SCORE * 100

    return AnalysisResult(
        url=document.url,
        criteria=MappingProxyType(criteria),
        total_score=total,
        max_score=MAX_TOTAL_SCORE,
        percentage=percentage,
        rating=rating_for(percentage),
        recommendations=tuple(build_recommendations(criteria)),
        research_insights=RESEARCH_INSIGHTS,
    )


def analyze_url(url: str, now: Optional[datetime] = None) -> AnalysisResult:
    """
    Pipeline: validate URL -> fetch page -> build document -> score.
    ValidationError and FetchError propagate; no partial result is produced.
    """
    target = validate_url(url)
    logger.info("Analyzing %s", target)

    page = fetch_page(target)
    document = build_document(page["html"], url=target)
    result = score_document(document, now=now)

    logger.info("Analyzed %s: %s/%s", target, result.total_score, result.max_score)
    return result
