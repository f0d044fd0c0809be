"""
Link Sampler - Probe a bounded sample of outbound links in parallel.

Every probe owns its client and timeout, so one slow or dead link cannot
hold up or fail the rest of the sample.
"""
import asyncio
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import httpx

from agentic_maintainer.config import settings
from agentic_maintainer.logger import logger


# Servers that refuse HEAD get one GET instead
HEAD_REJECTED = {405, 501}


@dataclass(frozen=True)
class LinkCheckResult:
    """Outcome of probing one link."""
    href: str
    status: Optional[int] = None

    @property
    def broken(self) -> bool:
        return self.status is None or not (200 <= self.status < 400)


@dataclass
class LinkSample:
    """Aggregated link probe results."""
    results: List[LinkCheckResult] = field(default_factory=list)

    @property
    def sample_size(self) -> int:
        return len(self.results)

    @property
    def broken(self) -> List[LinkCheckResult]:
        return [r for r in self.results if r.broken]


class LinkSampler:
    """Checks reachability of a capped set of links."""

    def __init__(
        self,
        limit: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.limit = settings.LINK_SAMPLE_LIMIT if limit is None else limit
        self.timeout = settings.LINK_CHECK_TIMEOUT if timeout is None else timeout
        self.user_agent = settings.USER_AGENT
        self.transport = transport

    def select(self, links: Sequence[str]) -> List[str]:
        """First `limit` links, the ones actually probed."""
        return list(links[:max(self.limit, 0)])

    async def check(self, links: Sequence[str]) -> LinkSample:
        """Probe the sampled links concurrently."""
        sample = self.select(links)
        if not sample:
            return LinkSample()

        logger.info(f"Checking {len(sample)} of {len(links)} discovered links")
        results = await asyncio.gather(*(self._check_one(href) for href in sample))

        link_sample = LinkSample(results=list(results))
        logger.info(f"Link sample: {len(link_sample.broken)}/{link_sample.sample_size} broken")
        return link_sample

    async def _check_one(self, href: str) -> LinkCheckResult:
        try:
            status = await asyncio.wait_for(self._probe(href), timeout=self.timeout)
            return LinkCheckResult(href=href, status=status)
        except asyncio.TimeoutError:
            logger.debug(f"Link check timed out: {href}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"Link check failed for {href}: {e}")
        except ValueError as e:
            # Hosts httpx cannot encode (bad IDNA labels) raise UnicodeError
            logger.debug(f"Link check skipped malformed URL {href}: {e}")
        return LinkCheckResult(href=href, status=None)

    async def _probe(self, href: str) -> int:
        async with httpx.AsyncClient(
            follow_redirects=True,
            timeout=self.timeout,
            transport=self.transport
        ) as client:
            headers = {"User-Agent": self.user_agent}
            response = await client.head(href, headers=headers)
            if response.status_code in HEAD_REJECTED:
                response = await client.get(href, headers=headers)
            return response.status_code
