"""Source credibility tiering for gathered evidence.

Classifies a URL's hostname against the static tier table in
config.source_tiers, ranks evidence so the most trusted sources come first,
and renders the priority brief that the verdict prompt embeds verbatim.
"""

from typing import Any, Mapping, Optional
from urllib.parse import urlparse

from loguru import logger

from factcheck_system.config.source_tiers import (
    PRIORITY_BRIEF_DOMAIN_LIMIT,
    SOURCE_TIERS,
    UNRANKED_TIER,
)
from factcheck_system.data_management.schemas import EvidenceItem, TierInfo


class SourceAssessor:
    """
    Maps evidence URLs onto credibility tiers.

    Usage:
        assessor = SourceAssessor()
        ranked = assessor.rank(evidence_items)
        brief = assessor.priority_brief()

    Attributes:
        tiers: Mapping of tier number to label/trust/weight/domains
    """

    def __init__(self, tiers: Optional[Mapping[int, Mapping[str, Any]]] = None):
        self.tiers = tiers or SOURCE_TIERS
        self.logger = logger.bind(component="SourceAssessor")

    def classify(self, url: Optional[str]) -> Optional[TierInfo]:
        """
        Find the credibility tier for a URL.

        A hostname matches a domain when it equals it or ends with
        "." + domain, after a leading "www." is stripped. Tiers are checked in
        ascending order and the first match wins.

        Args:
            url: Absolute URL of the source

        Returns:
            TierInfo for the matched tier, or None when unranked or malformed
        """
        hostname = self._extract_hostname(url)
        if not hostname:
            return None

        for tier_number in sorted(self.tiers):
            data = self.tiers[tier_number]
            if any(hostname == d or hostname.endswith("." + d) for d in data["domains"]):
                return TierInfo(
                    tier=tier_number,
                    label=data["label"],
                    trust_level=data["trust"],
                    weight=data["weight"],
                    domain=hostname,
                )
        return None

    def priority_brief(self) -> str:
        """Render the tier digest used inside the verdict prompt."""
        text = "SOURCE PRIORITY (use this ranking when weighing evidence):\n\n"
        for tier_number in sorted(self.tiers):
            data = self.tiers[tier_number]
            domains = list(data["domains"])
            text += f"TIER {tier_number} - {data['label']} ({data['trust']} trust):\n"
            text += ", ".join(domains[:PRIORITY_BRIEF_DOMAIN_LIMIT])
            text += "..." if len(domains) > PRIORITY_BRIEF_DOMAIN_LIMIT else ""
            text += "\n\n"
        text += (
            "UNRANKED sources: treat with skepticism. Do NOT cite blogs, social "
            "media posts, or unknown sites as primary evidence.\n"
        )
        return text

    def rank(self, items: list[EvidenceItem]) -> list[EvidenceItem]:
        """
        Decorate evidence with tier info and order it best tier first.

        The sort is stable, so items of equal tier keep their input order.
        Unranked items sort after every tier.

        Args:
            items: Evidence items from the aggregator

        Returns:
            New list of items with tier_info set
        """
        decorated = [
            item.model_copy(update={"tier_info": self.classify(item.url)})
            for item in items
        ]
        decorated.sort(
            key=lambda item: item.tier_info.tier if item.tier_info else UNRANKED_TIER
        )

        ranked_count = sum(1 for item in decorated if item.tier_info)
        self.logger.debug(
            f"Ranked {len(decorated)} sources ({ranked_count} tiered)",
            unranked=len(decorated) - ranked_count,
        )
        return decorated

    @staticmethod
    def _extract_hostname(url: Optional[str]) -> str:
        """Lowercased hostname without a leading www., or "" if unparseable."""
        if not url or not isinstance(url, str):
            return ""
        try:
            hostname = urlparse(url.strip()).hostname or ""
        except ValueError:
            return ""
        if hostname.startswith("www."):
            hostname = hostname[4:]
        return hostname
