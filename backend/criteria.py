"""The ten citation-likelihood criteria.

Each ``score_*`` function is a pure function of a PageDocument and its rule
table: it checks signals in the text, markup or tree, awards points from
the table's thresholds, and records one finding per check.
"""

import re
from datetime import datetime, timezone
from typing import Iterable, Optional

from dateutil import parser as dateparser

from document import PageDocument
from models import CriterionBuilder, CriterionResult
from rules import (
    AUTHOR_RULES,
    CITATION_RULES,
    COMPREHENSIVENESS_RULES,
    CREDIBILITY_RULES,
    CRITERION_DESCRIPTIONS,
    FRESHNESS_RULES,
    KEYWORD_RULES,
    METADATA_RULES,
    READABILITY_RULES,
    STRUCTURE_RULES,
    TONE_RULES,
    AuthorRules,
    CitationRules,
    ComprehensivenessRules,
    CredibilityRules,
    FreshnessRules,
    KeywordRules,
    MetadataRules,
    ReadabilityRules,
    StructureRules,
    ToneRules,
)

_SENTENCE_SPLIT = re.compile(r"[.!?]+")


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------


def count_terms(text: str, terms: Iterable[str]) -> int:
    """Number of distinct terms that occur anywhere in `text`."""
    return sum(1 for term in terms if term in text)


def has_any(text: str, terms: Iterable[str]) -> bool:
    return any(term in text for term in terms)


def split_words(text: str) -> list[str]:
    return text.split()


def split_sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def readability_estimate(text: str, rules: ReadabilityRules = READABILITY_RULES) -> float:
    """Simplified Flesch reading ease, clamped to [0, 100].

    Uses the share of words longer than ``rules.long_word_length`` in place
    of a syllable count. Higher means easier to read.
    """
    words = split_words(text)
    sentences = split_sentences(text)
    if not words or not sentences:
        return 0.0

    avg_words_per_sentence = len(words) / len(sentences)
    long_words = sum(1 for word in words if len(word) > rules.long_word_length)
    percent_long_words = long_words / len(words) * 100

    score = rules.base - rules.sentence_weight * avg_words_per_sentence - rules.long_word_weight * percent_long_words
    return min(100.0, max(0.0, score))


def find_publish_date(document: PageDocument, sources: Iterable[tuple[str, str]]) -> Optional[str]:
    for selector, attribute in sources:
        value = document.attribute(selector, attribute)
        if value:
            return value
    return None


def months_since(value: str, now: datetime, days_per_month: int = 30) -> Optional[float]:
    """
    Months between a date string and `now`, or None if it will not parse.
    Missing parts fall back to January 1st, so "2026" is 2026-01-01.
    """
    if not value.strip():
        return None
    try:
        published = dateparser.parse(value, default=datetime(now.year, 1, 1))
    except (ValueError, OverflowError):
        return None
    if published.tzinfo is None:
        published = published.replace(tzinfo=timezone.utc)
    return (now - published).total_seconds() / 86400 / days_per_month


def _builder(name: str, max_score: int) -> CriterionBuilder:
    return CriterionBuilder(name, max_score, CRITERION_DESCRIPTIONS.get(name, ""))


# ---------------------------------------------------------------------------
# Criteria
# ---------------------------------------------------------------------------


def score_structure(document: PageDocument, rules: StructureRules = STRUCTURE_RULES) -> CriterionResult:
    result = _builder("structure", rules.max_score)

    if document.count(rules.heading_selector) >= rules.min_headings:
        result.passed(f"Good heading structure ({rules.min_headings}+ headings)", 3)
    else:
        result.failed("Limited heading structure")

    if document.count(rules.list_selector) >= rules.min_lists:
        result.passed("Contains lists/bullet points", 2)
    else:
        result.failed("No lists or bullet points found")

    if document.count(rules.paragraph_selector) >= rules.min_paragraphs:
        result.passed("Well-structured paragraphs", 2)
    else:
        result.failed("Limited paragraph structure")

    if has_any(document.text, rules.contents_phrases):
        result.passed("Table of contents present", 2)
    else:
        result.failed("No table of contents")

    if document.raw_length > rules.min_markup_length:
        result.passed("Substantial content length", 1)
    else:
        result.failed("Content appears too short")

    return result.build()


def score_author(document: PageDocument, rules: AuthorRules = AUTHOR_RULES) -> CriterionResult:
    result = _builder("author", rules.max_score)

    selector_match = any(document.count(selector) > 0 for selector in rules.selectors)
    if selector_match or has_any(document.text, rules.attribution_phrases):
        result.passed("Author information present", 4)
    else:
        result.failed("No clear author attribution")

    if has_any(document.text, rules.bio_keywords):
        result.passed("Author bio/credentials found", 2)
    else:
        result.failed("No author bio or credentials")

    if has_any(document.text, rules.expertise_keywords):
        result.passed("Expertise indicators found", 2)
    else:
        result.failed("No clear expertise indicators")

    return result.build()


def score_metadata(document: PageDocument, rules: MetadataRules = METADATA_RULES) -> CriterionResult:
    result = _builder("metadata", rules.max_score)

    if len(document.title) > rules.min_title_length:
        result.passed("Descriptive title present", 2)
    else:
        result.failed("Missing or poor title")

    description = document.attribute(rules.description_selector, "content") or ""
    if len(description) > rules.min_description_length:
        result.passed("Good meta description", 3)
    else:
        result.failed("Missing or poor meta description")

    if find_publish_date(document, rules.publish_date_sources):
        result.passed("Publication date found", 2)
    else:
        result.failed("No publication date")

    if has_any(document.markup, rules.structured_data_markers):
        result.passed("Structured data present", 1)
    else:
        result.failed("No structured data")

    return result.build()


def score_keywords(document: PageDocument, rules: KeywordRules = KEYWORD_RULES) -> CriterionResult:
    result = _builder("keywords", rules.max_score)

    ai_count = count_terms(document.text, rules.ai_terms)
    if ai_count >= 3:
        result.passed("Rich AI-related keywords", 4)
    elif ai_count >= 1:
        result.passed("Some AI-related keywords", 2)
    else:
        result.failed("No AI-related keywords")

    if count_terms(document.text, rules.tech_terms) >= 3:
        result.passed("Technology keywords present", 2)
    else:
        result.failed("Limited technology keywords")

    if has_any(document.text, rules.educational_phrases):
        result.passed("Educational/informational keywords", 2)
    else:
        result.failed("No educational keywords")

    return result.build()


def score_tone(document: PageDocument, rules: ToneRules = TONE_RULES) -> CriterionResult:
    result = _builder("tone", rules.max_score)

    if count_terms(document.text, rules.promotional_terms) <= rules.max_promotional:
        result.passed("Non-promotional tone", 3)
    else:
        result.failed("Overly promotional language")

    if count_terms(document.text, rules.neutral_terms) >= rules.min_neutral:
        result.passed("Objective, research-based tone", 3)
    else:
        result.failed("Limited objective language")

    return result.build()


def score_credibility(document: PageDocument, rules: CredibilityRules = CREDIBILITY_RULES) -> CriterionResult:
    result = _builder("credibility", rules.max_score)
    text = document.text

    citations = count_terms(text, rules.citation_phrases)
    if citations >= 3:
        result.passed("Multiple references to external sources", 4)
    elif citations >= 1:
        result.passed("Some references to external sources", 2)
    else:
        result.failed("No references to external sources")

    stats = count_terms(text, rules.statistics_phrases)
    if stats >= 3:
        result.passed("Contains statistics and data", 4)
    elif stats >= 1:
        result.passed("Some statistics or data", 2)
    else:
        result.failed("No statistics or data")

    academic = count_terms(text, rules.academic_signals)
    if academic >= 2:
        result.passed("Strong academic/institutional signals", 4)
    elif academic >= 1:
        result.passed("Some academic/institutional signals", 2)
    else:
        result.failed("No academic/institutional signals")

    if count_terms(text, rules.fact_checking_signals) >= 2:
        result.passed("Contains fact-checking signals", 3)
    else:
        result.failed("No fact-checking signals")

    return result.build()


def score_readability(document: PageDocument, rules: ReadabilityRules = READABILITY_RULES) -> CriterionResult:
    result = _builder("readability", rules.max_score)

    ease = readability_estimate(document.plain_text, rules)
    low, high = rules.optimal_range
    if low <= ease <= high:
        result.passed("Optimal readability level (8th-9th grade)", 6)
    elif rules.good_floor <= ease < low:
        result.passed("Good readability level (10th-12th grade)", 4)
    elif ease > high:
        result.passed("Very simple readability (may lack depth)", 3)
    else:
        result.failed("Complex readability (college level or higher)", 1)

    word_count = len(split_words(document.plain_text))
    sentence_count = len(split_sentences(document.plain_text))
    avg_sentence_length = word_count / sentence_count if sentence_count else 0.0
    shortest, longest = rules.sentence_length_range
    if shortest <= avg_sentence_length <= longest:
        result.passed("Optimal average sentence length", 3)
    elif avg_sentence_length < shortest:
        result.failed("Sentences may be too short", 1)
    else:
        result.failed("Sentences may be too long", 1)

    transitions = count_terms(document.text, rules.transition_words)
    if transitions >= 3:
        result.passed("Good use of transition words", 3)
    elif transitions >= 1:
        result.passed("Some transition words present", 1)
    else:
        result.failed("No transition words found")

    # Rough estimate: distinct passive markers per ten words
    if word_count:
        passive = count_terms(document.text, rules.passive_markers)
        active_ratio = 1 - passive / (word_count / rules.words_per_passive_unit)
        if active_ratio > 0.7:
            result.passed("Primarily active voice", 3)
        elif active_ratio > 0.5:
            result.passed("Mix of active and passive voice", 2)
        else:
            result.failed("Excessive passive voice")
    else:
        result.failed("Not enough text to estimate active voice")

    return result.build()


def score_freshness(
    document: PageDocument,
    rules: FreshnessRules = FRESHNESS_RULES,
    now: Optional[datetime] = None,
) -> CriterionResult:
    result = _builder("freshness", rules.max_score)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    points = 0
    dated = False

    published = find_publish_date(document, rules.publish_date_sources)
    if published:
        dated = True
        months = months_since(published, now, rules.days_per_month)
        if months is not None:
            for bound, step_points in rules.age_steps:
                if months <= bound:
                    points = step_points
                    break
    elif str(now.year) in document.text:
        points = rules.current_year_points
        dated = True
    elif str(now.year - 1) in document.text:
        points = rules.previous_year_points
        dated = True

    if count_terms(document.text, rules.recency_signals) >= rules.min_recency_signals:
        points = min(rules.max_score, points + rules.recency_bonus)
        result.passed("Contains recency signals")

    if not dated:
        result.failed("No clear publication date found")
    elif points >= 8:
        result.passed("Very recent content (within 3 months)")
    elif points >= 4:
        result.passed("Relatively recent content (within a year)")
    else:
        result.failed("Content may be outdated")

    result.score = points
    return result.build()


def score_comprehensiveness(
    document: PageDocument,
    rules: ComprehensivenessRules = COMPREHENSIVENESS_RULES,
) -> CriterionResult:
    result = _builder("comprehensiveness", rules.max_score)

    word_count = len(split_words(document.plain_text))
    for minimum, tier_points, label in rules.word_count_tiers:
        if word_count >= minimum:
            result.passed(f"{label} ({minimum}+ words)", tier_points)
            break
    else:
        result.failed("Content may be too brief")

    if has_any(document.text, rules.claim_phrases):
        result.passed("Claims to be comprehensive", 2)

    if count_terms(document.text, rules.perspective_phrases) >= 2:
        result.passed("Presents multiple perspectives", 2)
    else:
        result.failed("May present limited perspective")

    if count_terms(document.text, rules.example_phrases) >= 2:
        result.passed("Includes examples or case studies", 2)
    else:
        result.failed("Limited examples or illustrations")

    return result.build()


def score_citations(document: PageDocument, rules: CitationRules = CITATION_RULES) -> CriterionResult:
    result = _builder("citations", rules.max_score)

    links = document.external_link_count()
    if links >= 5:
        result.passed("Multiple external links (5+)", 4)
    elif links >= 2:
        result.passed("Some external links", 2)
    else:
        result.failed("Few or no external links")

    if count_terms(document.text, rules.formal_citation_phrases) >= 2:
        result.passed("Formal citations present", 3)
    else:
        result.failed("No formal citations")

    quote_pairs = document.text.count(rules.quote_char) / 2
    if quote_pairs >= 3:
        result.passed("Multiple quoted sources", 3)
    elif quote_pairs >= 1:
        result.passed("Some quoted content", 1)
    else:
        result.failed("No quoted sources")

    return result.build()
