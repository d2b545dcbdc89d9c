"""
Shared fixtures for the citation checker tests.

FakeDocument stands in for the BeautifulSoup adapter so each criterion can
be scored against exactly the signals a test sets up.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

import pytest

FIXED_NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@dataclass
class FakeDocument:
    """Hand-built PageDocument."""

    url: str = "https://example.com/article"
    text: str = ""
    markup: str = ""
    plain_text: str = ""
    raw_length: int = 0
    title: str = ""
    counts: dict[str, int] = field(default_factory=dict)
    attributes: dict[tuple[str, str], str] = field(default_factory=dict)
    external_links: int = 0

    def count(self, selector: str) -> int:
        return self.counts.get(selector, 0)

    def attribute(self, selector: str, name: str) -> Optional[str]:
        return self.attributes.get((selector, name))

    def external_link_count(self) -> int:
        return self.external_links


def _padding(length: int) -> str:
    return "<!-- " + "x" * length + " -->"


RICH_ARTICLE_HTML = f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <title>How Machine Learning Models Learn: A Practical Guide</title>
    <meta name="description" content="A detailed guide to how machine learning models are trained, evaluated and deployed in practice.">
    <meta property="article:published_time" content="2026-10-05T09:00:00Z">
    <script type="application/ld+json">{{"@context": "https://schema.org", "@type": "Article"}}</script>
</head>
<body>
    <nav>Table of contents</nav>
    <h1>How Machine Learning Models Learn</h1>
    <p class="author">Written by Dr. Jane Smith, PhD, a researcher at a university institute.</p>
    <h2>Training</h2>
    <p>According to a study published in a journal, models improve with more data.</p>
    <ul><li>Data</li><li>Models</li></ul>
    <h2>Evaluation</h2>
    <p>Research shows that 80% of teams track statistics during a survey of practice.</p>
    <ol><li>Split</li><li>Measure</li></ol>
    <p>However, data suggests evidence matters. For example, verified results are confirmed.</p>
    <p>"Models learn patterns," said one professor. "Data is key," said another. "Test often," a third added.</p>
    <a href="https://arxiv.org/abs/1">Paper</a>
    <a href="https://www.nature.com/articles/2">Nature</a>
    <a href="https://scholar.google.com/3">Scholar</a>
    <a href="https://openai.com/research">OpenAI</a>
    <a href="https://en.wikipedia.org/wiki/Machine_learning">Wikipedia</a>
    <a href="https://example.com/other-post">Related post</a>
    <a href="/about">About</a>
    {_padding(2000)}
</body>
</html>
"""


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def blank_document() -> FakeDocument:
    return FakeDocument()


@pytest.fixture
def rich_html() -> str:
    return RICH_ARTICLE_HTML
