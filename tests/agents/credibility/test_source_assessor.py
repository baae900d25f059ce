"""Tests for SourceAssessor tier classification, ranking and priority brief.

Tests cover:
- Tier lookups for each tier, www. stripping, subdomain suffix matching
- Unknown, malformed and empty URLs
- Suffix matching on label boundaries only
- Stable ranking with unranked items last
- Priority brief format and determinism
"""

import pytest

from factcheck_system.agents.credibility.source_assessor import SourceAssessor
from factcheck_system.config.source_tiers import SOURCE_TIERS
from factcheck_system.data_management.schemas import EvidenceItem


@pytest.fixture
def assessor() -> SourceAssessor:
    return SourceAssessor()


def _item(url: str, title: str = "") -> EvidenceItem:
    return EvidenceItem(title=title or url, url=url, snippet="", source="brave")


class TestClassify:
    def test_tier_one_with_www(self, assessor: SourceAssessor) -> None:
        info = assessor.classify("https://www.who.int/x")
        assert info is not None
        assert info.tier == 1
        assert info.weight == 1.0
        assert info.domain == "who.int"
        assert info.trust_level == "highest"

    @pytest.mark.parametrize(
        "url,tier,weight",
        [
            ("https://apnews.com/article/abc", 2, 0.85),
            ("https://www.nytimes.com/2024/01/01/story.html", 3, 0.65),
            ("https://edition.cnn.com/2024/politics", 4, 0.4),
        ],
    )
    def test_each_tier(self, assessor: SourceAssessor, url: str, tier: int, weight: float) -> None:
        info = assessor.classify(url)
        assert info is not None
        assert info.tier == tier
        assert info.weight == weight

    def test_subdomain_matches(self, assessor: SourceAssessor) -> None:
        info = assessor.classify("https://news.bbc.co.uk/story")
        assert info is not None
        assert info.tier == 2
        assert info.domain == "news.bbc.co.uk"

    def test_suffix_requires_label_boundary(self, assessor: SourceAssessor) -> None:
        assert assessor.classify("https://notreuters.com/story") is None

    def test_case_insensitive_host(self, assessor: SourceAssessor) -> None:
        info = assessor.classify("https://WWW.Reuters.COM/world")
        assert info is not None
        assert info.tier == 2

    def test_unknown_domain(self, assessor: SourceAssessor) -> None:
        assert assessor.classify("https://random-blog.example/post") is None

    @pytest.mark.parametrize("url", ["", None, "not a url", "reuters.com/no-scheme", "http://[::1"])
    def test_malformed_yields_none(self, assessor: SourceAssessor, url) -> None:
        assert assessor.classify(url) is None

    def test_lowest_tier_number_wins(self) -> None:
        tiers = {
            1: {"label": "A", "trust": "t", "weight": 1.0, "domains": ("example.org",)},
            2: {"label": "B", "trust": "t", "weight": 0.5, "domains": ("example.org",)},
        }
        info = SourceAssessor(tiers=tiers).classify("https://example.org")
        assert info is not None
        assert info.tier == 1


class TestRank:
    def test_sorted_by_tier_unranked_last(self, assessor: SourceAssessor) -> None:
        items = [
            _item("https://blog.example/post"),
            _item("https://cnn.com/a"),
            _item("https://snopes.com/fact-check/x"),
            _item("https://reuters.com/b"),
        ]
        ranked = assessor.rank(items)
        assert [i.tier_info.tier if i.tier_info else None for i in ranked] == [1, 2, 4, None]

    def test_stable_for_equal_tiers(self, assessor: SourceAssessor) -> None:
        items = [
            _item("https://reuters.com/1", "first"),
            _item("https://unknown-a.example", "u1"),
            _item("https://apnews.com/2", "second"),
            _item("https://unknown-b.example", "u2"),
            _item("https://bbc.com/3", "third"),
        ]
        ranked = assessor.rank(items)
        assert [i.title for i in ranked] == ["first", "second", "third", "u1", "u2"]

    def test_does_not_mutate_input(self, assessor: SourceAssessor) -> None:
        items = [_item("https://reuters.com/1")]
        assessor.rank(items)
        assert items[0].tier_info is None

    def test_empty(self, assessor: SourceAssessor) -> None:
        assert assessor.rank([]) == []


class TestPriorityBrief:
    def test_lists_every_tier(self, assessor: SourceAssessor) -> None:
        brief = assessor.priority_brief()
        assert brief.startswith("SOURCE PRIORITY")
        for number, data in SOURCE_TIERS.items():
            assert f"TIER {number} - {data['label']} ({data['trust']} trust):" in brief
        assert brief.rstrip().endswith("unknown sites as primary evidence.")

    def test_first_eight_domains_with_ellipsis(self, assessor: SourceAssessor) -> None:
        brief = assessor.priority_brief()
        tier_one = list(SOURCE_TIERS[1]["domains"])
        assert ", ".join(tier_one[:8]) + "..." in brief
        assert tier_one[8] not in brief.split("TIER 2")[0]

    def test_no_ellipsis_for_short_tier(self) -> None:
        tiers = {1: {"label": "Only", "trust": "high", "weight": 1.0, "domains": ("a.org", "b.org")}}
        brief = SourceAssessor(tiers=tiers).priority_brief()
        assert "a.org, b.org\n" in brief
        assert "..." not in brief

    def test_deterministic(self, assessor: SourceAssessor) -> None:
        assert assessor.priority_brief() == SourceAssessor().priority_brief()
