"""
Page Collector - Extract health signals from page HTML.
"""
import re
from dataclasses import dataclass, field
from typing import Optional, List, Dict
from bs4 import BeautifulSoup
from urllib.parse import urljoin, urldefrag, urlparse

from agentic_maintainer.logger import logger


HEADING_LEVELS = ("h1", "h2", "h3", "h4", "h5", "h6")
NON_VISIBLE_TAGS = ["script", "style", "noscript", "template"]
LINK_SCHEMES = ("http", "https")


def _empty_headings() -> Dict[str, int]:
    return {level: 0 for level in HEADING_LEVELS}


@dataclass
class PageSignals:
    """Signals extracted from a page."""
    title: str = ""
    meta_description: Optional[str] = None
    word_count: int = 0
    headings: Dict[str, int] = field(default_factory=_empty_headings)
    image_count: int = 0
    images_missing_alt: int = 0
    links: List[str] = field(default_factory=list)


class PageCollector:
    """Collects page signals from HTML content."""

    def collect(self, html: str, url: str) -> PageSignals:
        """Extract signals from HTML; never raises."""
        if not html:
            return PageSignals()

        try:
            soup = BeautifulSoup(html, 'html.parser')
            data = PageSignals()

            # Title
            title_tag = soup.find('title')
            if title_tag:
                data.title = " ".join(title_tag.get_text().split())

            # Meta description
            desc_tag = soup.find('meta', attrs={'name': re.compile(r'^\s*description\s*$', re.I)})
            if desc_tag and desc_tag.get('content') is not None:
                data.meta_description = desc_tag['content'].strip()

            # Headings
            for level in HEADING_LEVELS:
                data.headings[level] = len(soup.find_all(level))

            # Images
            images = soup.find_all('img')
            data.image_count = len(images)
            data.images_missing_alt = sum(1 for img in images if not (img.get('alt') or '').strip())

            # Links, resolved against <base href> when present
            base_url = url
            base_tag = soup.find('base', href=True)
            if base_tag:
                base_url = urljoin(url, base_tag['href'].strip())
            data.links = self._collect_links(soup, base_url)

            # Visible text, last because it mutates the tree
            for tag in soup.find_all(NON_VISIBLE_TAGS):
                tag.decompose()
            root = soup.find('body') or soup
            data.word_count = len(root.get_text(separator=' ').split())

            return data

        except Exception as e:
            logger.error(f"PageCollector error for {url}: {e}")
            return PageSignals()

    def _collect_links(self, soup: BeautifulSoup, base_url: str) -> List[str]:
        """Absolute http(s) hrefs, deduplicated in first-seen order."""
        links: List[str] = []
        seen = set()

        for anchor in soup.find_all('a', href=True):
            href = anchor['href'].strip()
            if not href:
                continue
            try:
                absolute, _ = urldefrag(urljoin(base_url, href))
                parsed = urlparse(absolute)
            except ValueError:
                continue
            if parsed.scheme not in LINK_SCHEMES or not parsed.netloc:
                continue
            if absolute not in seen:
                seen.add(absolute)
                links.append(absolute)

        return links
