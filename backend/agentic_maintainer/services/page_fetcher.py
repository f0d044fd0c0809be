"""
Page Fetcher - Single timed GET against the audit target.

Transport failures never propagate: they come back as a FetchResult with no
status and no timing so reachability can be judged downstream.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Optional

import httpx

from agentic_maintainer.config import settings
from agentic_maintainer.logger import logger


HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


@dataclass
class FetchResult:
    """Fetched page data container."""
    url: str
    final_url: str
    status_code: Optional[int] = None
    response_time_ms: Optional[int] = None
    last_modified: Optional[str] = None
    content_type: Optional[str] = None
    html: str = ""
    error: Optional[str] = None

    @property
    def is_reachable(self) -> bool:
        return self.status_code is not None

    @property
    def is_success(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 400

    @property
    def is_html(self) -> bool:
        """True when the server labelled the body as HTML, or sent no label."""
        if not self.content_type:
            return True
        return self.content_type.split(";")[0].strip().lower() in HTML_CONTENT_TYPES


class PageFetcher:
    """Fetches the target page with a bounded timeout and no retries."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.http_timeout = settings.HTTP_TIMEOUT
        self.max_redirects = settings.HTTP_MAX_REDIRECTS
        self.user_agent = settings.USER_AGENT
        self.transport = transport

    async def fetch(self, url: str) -> FetchResult:
        """Fetch page and time the round trip.

        `http_timeout` bounds the whole exchange, body included, not just
        each connect or read.

        Args:
            url: Validated absolute http(s) URL

        Returns:
            FetchResult with status, timing and body, or an unreachable result
        """
        logger.info(f"Fetching {url}")

        try:
            return await asyncio.wait_for(self._get(url), timeout=self.http_timeout)

        except (httpx.TimeoutException, asyncio.TimeoutError):
            logger.warning(f"HTTP timeout after {self.http_timeout}s for {url}")
            return FetchResult(url=url, final_url=url, error="HTTP timeout")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"HTTP error for {url}: {e}")
            return FetchResult(url=url, final_url=url, error=str(e) or type(e).__name__)
        except ValueError as e:
            # Hosts httpx cannot encode (bad IDNA labels) raise UnicodeError
            logger.warning(f"Malformed URL {url}: {e}")
            return FetchResult(url=url, final_url=url, error=f"Malformed URL: {e}")

    async def _get(self, url: str) -> FetchResult:
        started = time.perf_counter()

        async with httpx.AsyncClient(
            follow_redirects=True,
            max_redirects=self.max_redirects,
            timeout=self.http_timeout,
            transport=self.transport
        ) as client:
            response = await client.get(
                url,
                headers={
                    "User-Agent": self.user_agent,
                    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                }
            )
            elapsed_ms = int(round((time.perf_counter() - started) * 1000))

            return FetchResult(
                url=url,
                final_url=str(response.url),
                status_code=response.status_code,
                response_time_ms=elapsed_ms,
                last_modified=response.headers.get("last-modified"),
                content_type=response.headers.get("content-type"),
                html=response.text or ""
            )
