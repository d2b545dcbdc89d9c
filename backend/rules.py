"""Scoring tables for the ten citation-likelihood criteria.

Every vocabulary list, threshold and advisory string the engine uses is
defined here once, as frozen data. Evaluators in criteria.py take the
matching *Rules object as an argument so each one can be exercised with a
custom table.
"""

from dataclasses import dataclass
from types import MappingProxyType

# (selector, attribute) pairs that may carry a publish date, checked in order
PUBLISH_DATE_SOURCES = (
    ('meta[property="article:published_time"]', "content"),
    ('meta[name="date"]', "content"),
    ("time", "datetime"),
)


@dataclass(frozen=True)
class StructureRules:
    max_score: int = 10
    heading_selector: str = "h1, h2, h3, h4, h5, h6"
    list_selector: str = "ul, ol"
    paragraph_selector: str = "p"
    contents_phrases: tuple[str, ...] = ("table of contents", "contents")
    min_headings: int = 3
    min_lists: int = 2
    min_paragraphs: int = 5
    min_markup_length: int = 2000


@dataclass(frozen=True)
class AuthorRules:
    max_score: int = 8
    selectors: tuple[str, ...] = (
        "author",
        "byline",
        "writer",
        "by-author",
        "post-author",
        '[rel="author"]',
        ".author",
        "#author",
        '[class*="author"]',
    )
    attribution_phrases: tuple[str, ...] = ("written by", "author:", "by ", "published by")
    bio_keywords: tuple[str, ...] = ("bio", "about the author", "profile", "credentials")
    expertise_keywords: tuple[str, ...] = (
        "expert",
        "specialist",
        "phd",
        "professor",
        "researcher",
        "years of experience",
    )


@dataclass(frozen=True)
class MetadataRules:
    max_score: int = 8
    min_title_length: int = 10
    min_description_length: int = 50
    description_selector: str = 'meta[name="description"]'
    publish_date_sources: tuple[tuple[str, str], ...] = PUBLISH_DATE_SOURCES
    structured_data_markers: tuple[str, ...] = ("schema.org", "application/ld+json")


@dataclass(frozen=True)
class KeywordRules:
    max_score: int = 8
    ai_terms: tuple[str, ...] = (
        "artificial intelligence",
        "ai",
        "machine learning",
        "chatgpt",
        "gpt",
        "openai",
        "gemini",
        "claude",
        "llm",
        "large language model",
        "deep learning",
        "neural network",
        "automation",
        "algorithm",
    )
    tech_terms: tuple[str, ...] = (
        "technology",
        "software",
        "programming",
        "development",
        "coding",
        "data science",
        "analytics",
        "digital",
        "innovation",
        "tech",
    )
    educational_phrases: tuple[str, ...] = (
        "how to",
        "guide",
        "tutorial",
        "tips",
        "best practices",
        "explained",
    )


@dataclass(frozen=True)
class ToneRules:
    max_score: int = 6
    promotional_terms: tuple[str, ...] = (
        "buy now",
        "purchase",
        "sale",
        "discount",
        "limited time",
        "act now",
        "special offer",
        "deal",
        "price",
        "$",
        "order now",
        "subscribe now",
    )
    neutral_terms: tuple[str, ...] = (
        "according to",
        "research shows",
        "studies indicate",
        "experts say",
        "analysis reveals",
        "data suggests",
        "findings show",
        "evidence",
    )
    max_promotional: int = 2
    min_neutral: int = 2


@dataclass(frozen=True)
class CredibilityRules:
    max_score: int = 15
    citation_phrases: tuple[str, ...] = (
        "according to",
        "cited in",
        "reference",
        "source",
        "study",
        "research",
        "published in",
        "journal",
    )
    statistics_phrases: tuple[str, ...] = ("%", "percent", "statistics", "data shows", "survey", "study found")
    academic_signals: tuple[str, ...] = (
        "university",
        "institute",
        "research center",
        "laboratory",
        "academic",
        "study",
        "paper",
        "journal",
    )
    fact_checking_signals: tuple[str, ...] = ("fact", "verified", "evidence-based", "proven", "confirmed")


@dataclass(frozen=True)
class ReadabilityRules:
    max_score: int = 15
    # Flesch-style constants; fixed scoring inputs, not a calibrated formula
    base: float = 206.835
    sentence_weight: float = 1.015
    long_word_weight: float = 0.846
    long_word_length: int = 6
    optimal_range: tuple[float, float] = (60.0, 70.0)
    good_floor: float = 50.0
    sentence_length_range: tuple[float, float] = (10.0, 20.0)
    transition_words: tuple[str, ...] = (
        "however",
        "therefore",
        "furthermore",
        "moreover",
        "consequently",
        "additionally",
        "in addition",
        "for example",
        "for instance",
        "in conclusion",
    )
    passive_markers: tuple[str, ...] = (" is ", " are ", " was ", " were ", " be ", " been ", " by ")
    words_per_passive_unit: int = 10


@dataclass(frozen=True)
class FreshnessRules:
    max_score: int = 10
    publish_date_sources: tuple[tuple[str, str], ...] = PUBLISH_DATE_SOURCES
    days_per_month: int = 30
    # (months elapsed upper bound, points), first match wins
    age_steps: tuple[tuple[int, int], ...] = ((1, 10), (3, 8), (6, 6), (12, 4), (24, 2))
    current_year_points: int = 6
    previous_year_points: int = 4
    recency_signals: tuple[str, ...] = (
        "recent",
        "latest",
        "new",
        "update",
        "current",
        "today",
        "this month",
        "this year",
    )
    min_recency_signals: int = 2
    recency_bonus: int = 2


@dataclass(frozen=True)
class ComprehensivenessRules:
    max_score: int = 10
    # (minimum words, points, label), first match wins
    word_count_tiers: tuple[tuple[int, int, str], ...] = (
        (1500, 4, "In-depth content"),
        (800, 3, "Substantial content"),
        (400, 2, "Moderate content length"),
    )
    claim_phrases: tuple[str, ...] = (
        "complete",
        "comprehensive",
        "in-depth",
        "detailed",
        "thorough",
        "ultimate guide",
        "everything you need to know",
    )
    perspective_phrases: tuple[str, ...] = (
        "on the other hand",
        "alternatively",
        "however",
        "in contrast",
        "different perspective",
        "another view",
        "pros and cons",
        "advantages and disadvantages",
    )
    example_phrases: tuple[str, ...] = ("example", "case study", "instance", "for instance", "such as", "e.g.")


@dataclass(frozen=True)
class CitationRules:
    max_score: int = 10
    formal_citation_phrases: tuple[str, ...] = (
        "et al",
        "cited in",
        "reference",
        "bibliography",
        "works cited",
        "references",
        "citation",
    )
    quote_char: str = '"'


STRUCTURE_RULES = StructureRules()
AUTHOR_RULES = AuthorRules()
METADATA_RULES = MetadataRules()
KEYWORD_RULES = KeywordRules()
TONE_RULES = ToneRules()
CREDIBILITY_RULES = CredibilityRules()
READABILITY_RULES = ReadabilityRules()
FRESHNESS_RULES = FreshnessRules()
COMPREHENSIVENESS_RULES = ComprehensivenessRules()
CITATION_RULES = CitationRules()

CRITERION_RULES = MappingProxyType(
    {
        "structure": STRUCTURE_RULES,
        "author": AUTHOR_RULES,
        "metadata": METADATA_RULES,
        "keywords": KEYWORD_RULES,
        "tone": TONE_RULES,
        "credibility": CREDIBILITY_RULES,
        "readability": READABILITY_RULES,
        "freshness": FRESHNESS_RULES,
        "comprehensiveness": COMPREHENSIVENESS_RULES,
        "citations": CITATION_RULES,
    }
)

MAX_TOTAL_SCORE = 100

CRITERION_DESCRIPTIONS = MappingProxyType(
    {
        "structure": "How well-organized the content is with headings, lists, and clear sections",
        "author": "Presence of author information, credentials, and expertise signals",
        "metadata": "Quality of title, description, publication date, and structured data",
        "keywords": "Presence of relevant AI and technology terminology",
        "tone": "Objectivity and educational nature of the content",
        "credibility": "Signals that indicate trustworthiness and authority",
        "readability": "How easy the content is to read and understand",
        "freshness": "How recent and up-to-date the content appears to be",
        "comprehensiveness": "Depth and breadth of information provided",
        "citations": "References to external sources and research",
    }
)

# criterion -> (score below which the advice applies, advice)
RECOMMENDATIONS = MappingProxyType(
    {
        "structure": (7, "Add more headings, lists, and a table of contents to improve content structure"),
        "author": (5, "Include clear author attribution, credentials, and expertise signals"),
        "metadata": (5, "Improve meta description, add publication date, and implement schema markup"),
        "keywords": (5, "Include more relevant AI and technology keywords"),
        "tone": (4, "Use more neutral, research-based language and reduce promotional content"),
        "credibility": (8, "Add references to research, statistics, and academic sources to boost credibility"),
        "readability": (8, "Improve readability by using shorter sentences, active voice, and transition words"),
        "freshness": (5, "Update content with current information and clearly display publication date"),
        "comprehensiveness": (
            5,
            "Expand content depth with more examples, multiple perspectives, and detailed coverage",
        ),
        "citations": (5, "Add more external links, formal citations, and quoted sources"),
    }
)

RESEARCH_INSIGHTS = (
    "AI systems like ChatGPT prefer to cite content with clear authorship and expertise signals",
    "Content with factual statements, statistics, and research citations is more likely to be referenced",
    "Well-structured content with clear headings and organization is prioritized by AI systems",
    "Recent and up-to-date information is more likely to be cited than outdated content",
    "Content from domains with established authority receives preferential treatment in AI citations",
    "Educational and informational content is cited more frequently than promotional material",
    "Content with neutral, objective tone is preferred over opinionated or biased writing",
)

# (minimum percentage, label), first match wins
RATING_BANDS = ((80.0, "high"), (60.0, "medium"), (0.0, "low"))
