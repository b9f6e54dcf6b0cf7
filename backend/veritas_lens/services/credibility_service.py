"""
Source Credibility Service

Labels evidence URLs by the credibility of their domain. This is a plain
membership check against curated domain lists, nothing more:

- high:    wire services, public broadcasters, science/health agencies,
           government and academic hosts
- medium:  established newspapers, news networks, fact-checkers, Wikipedia
- low:     user-generated platforms (social media, forums, blog hosts)
- unknown: anything else, including URLs without a host
"""

from urllib.parse import urlparse
from typing import Optional


class CredibilityService:
    """
    Determines the credibility label of an evidence source from its domain.
    """

    def __init__(self):
        self.high_credibility_sources = {
            # International news agencies
            "reuters.com", "apnews.com", "afp.com",
            # Public broadcasters
            "bbc.com", "bbc.co.uk", "npr.org", "pbs.org",
            # Science, health and intergovernmental bodies
            "nasa.gov", "nih.gov", "cdc.gov", "noaa.gov", "usgs.gov",
            "who.int", "un.org", "europa.eu", "esa.int",
            # Academic and research publishers
            "nature.com", "science.org", "sciencedirect.com",
            "pubmed.ncbi.nlm.nih.gov", "britannica.com",
        }

        self.medium_credibility_sources = {
            # Major newspapers
            "nytimes.com", "washingtonpost.com", "theguardian.com", "wsj.com",
            "economist.com", "ft.com", "thehindu.com", "indianexpress.com",
            "bangkokpost.com", "lemonde.fr", "spiegel.de",
            # News networks
            "cnn.com", "nbcnews.com", "abcnews.go.com", "cbsnews.com",
            "aljazeera.com", "dw.com", "france24.com",
            # Fact-checkers
            "snopes.com", "factcheck.org", "politifact.com", "fullfact.org",
            # Reference works and official sites of the subjects themselves
            "wikipedia.org", "nationalgeographic.com", "smithsonianmag.com",
            "toureiffel.paris",
        }

        self.low_credibility_sources = {
            "reddit.com", "quora.com", "facebook.com", "twitter.com", "x.com",
            "instagram.com", "tiktok.com", "youtube.com", "youtu.be",
            "pinterest.com", "tumblr.com", "medium.com", "substack.com",
            "blogspot.com", "wordpress.com", "fandom.com",
        }

        # TLD-based high-credibility hosts
        self.high_credibility_suffixes = (
            ".gov", ".edu", ".mil", ".int", ".gov.uk", ".ac.uk", ".gov.in", ".ac.th",
        )

    def get_credibility(self, url: str) -> str:
        """
        Determine the credibility label of a URL.

        Args:
            url (str): Evidence source URL

        Returns:
            str: Credibility label (high, medium, low, unknown)
        """
        domain = self.extract_domain(url)
        if not domain:
            return "unknown"

        if self._matches(domain, self.high_credibility_sources):
            return "high"

        for suffix in self.high_credibility_suffixes:
            if domain.endswith(suffix):
                return "high"

        if self._matches(domain, self.medium_credibility_sources):
            return "medium"

        if self._matches(domain, self.low_credibility_sources):
            return "low"

        return "unknown"

    def tag(self, item: dict) -> dict:
        """Return a copy of an evidence item with its credibility label set."""
        tagged = dict(item)
        tagged["credibility"] = self.get_credibility(item.get("source", ""))
        return tagged

    def extract_domain(self, url: str) -> Optional[str]:
        """
        Extract the normalized host of a URL.

        Args:
            url (str): URL, with or without scheme

        Returns:
            str or None: Lower-cased host without 'www.' and port
        """
        if not url or not isinstance(url, str):
            return None

        url = url.strip()
        if "://" not in url:
            url = f"https://{url}"

        try:
            host = urlparse(url).hostname
        except ValueError:
            return None

        if not host:
            return None

        host = host.lower().rstrip(".")
        if host.startswith("www."):
            host = host[4:]
        return host or None

    def _matches(self, domain: str, sources: set) -> bool:
        # Exact domain or any subdomain of it
        return any(domain == source or domain.endswith("." + source) for source in sources)
