"""Source credibility tiers used for prioritizing evidence.

Source hierarchy (from most to least credible):
1. Dedicated fact-checkers, government and scientific primary sources: 1.0
2. Wire services and premium journalism: 0.85
3. Major established outlets: 0.65
4. Known outlets with more editorial bias or lower standards: 0.4

Domains are root domains; subdomains match by suffix (news.bbc.co.uk -> bbc.co.uk).
Anything not listed is unranked.
"""

from types import MappingProxyType
from typing import Any, Mapping

# Key: tier number (lower is more trusted)
SOURCE_TIERS: Mapping[int, Mapping[str, Any]] = MappingProxyType({
    1: MappingProxyType({
        "label": "Fact-Check / Primary Source",
        "trust": "highest",
        "weight": 1.0,
        "domains": (
            "snopes.com",
            "politifact.com",
            "factcheck.org",
            "fullfact.org",
            "africacheck.org",
            "checkyourfact.com",
            "leadstories.com",
            "truthorfiction.com",
            "misbar.com",
            # Government / official
            "who.int",
            "cdc.gov",
            "nih.gov",
            "nasa.gov",
            "fda.gov",
            "epa.gov",
            "state.gov",
            "un.org",
            "europa.eu",
            "gov.uk",
            # Academic / scientific
            "nature.com",
            "science.org",
            "thelancet.com",
            "nejm.org",
            "bmj.com",
            "pubmed.ncbi.nlm.nih.gov",
            "scholar.google.com",
            "arxiv.org",
            "pnas.org",
            "cell.com",
        ),
    }),
    2: MappingProxyType({
        "label": "Wire Service / Premium",
        "trust": "very high",
        "weight": 0.85,
        "domains": (
            "apnews.com",
            "reuters.com",
            "bbc.com",
            "bbc.co.uk",
            "npr.org",
            "pbs.org",
            "aljazeera.com",
            "economist.com",
            "ft.com",
            "propublica.org",
            "theintercept.com",
        ),
    }),
    3: MappingProxyType({
        "label": "Major Outlet",
        "trust": "high",
        "weight": 0.65,
        "domains": (
            "nytimes.com",
            "washingtonpost.com",
            "theguardian.com",
            "wsj.com",
            "usatoday.com",
            "cbsnews.com",
            "nbcnews.com",
            "abcnews.go.com",
            "thehill.com",
            "politico.com",
            "theatlantic.com",
            "newyorker.com",
            "bloomberg.com",
            "time.com",
            "latimes.com",
            "chicagotribune.com",
            "bostonchannel.com",
            "cbc.ca",
            "abc.net.au",
            "smh.com.au",
        ),
    }),
    4: MappingProxyType({
        "label": "Known Outlet (use cautiously)",
        "trust": "moderate",
        "weight": 0.4,
        "domains": (
            "cnn.com",
            "foxnews.com",
            "msnbc.com",
            "nypost.com",
            "dailymail.co.uk",
            "thesun.co.uk",
            "buzzfeednews.com",
            "vice.com",
            "vox.com",
            "axios.com",
            "huffpost.com",
            "salon.com",
            "breitbart.com",
            "dailywire.com",
            "newsweek.com",
            "independent.co.uk",
            "mirror.co.uk",
        ),
    }),
})

# Sort key assigned to evidence with no tier so it ranks after every tier
UNRANKED_TIER = 99

# Domains used for the trusted-site search variant
TRUSTED_SEARCH_DOMAINS = ("reuters.com", "apnews.com", "bbc.com")

# Domains listed per tier in the prompt digest
PRIORITY_BRIEF_DOMAIN_LIMIT = 8
