"""
Rule Engine - Fixed set of maintenance heuristics.

Pure: the same fetch, signals and link results always give the same checks,
in the same order, one per rule.
"""

from typing import List, Sequence

from agentic_maintainer.services.page_fetcher import FetchResult
from agentic_maintainer.services.collectors.page_collector import PageSignals
from agentic_maintainer.services.link_sampler import LinkCheckResult
from agentic_maintainer.services.rules.models import Check
from agentic_maintainer.services.rules.thresholds import THRESHOLDS, AuditThresholds


# Statuses meaning the page itself is gone rather than access being restricted
MISSING_PAGE_STATUSES = {404, 410}


class RuleEngine:
    """Evaluates every rule against the gathered signals."""

    def __init__(self, thresholds: AuditThresholds = THRESHOLDS):
        self.t = thresholds

    def evaluate(
        self,
        fetch: FetchResult,
        signals: PageSignals,
        link_results: Sequence[LinkCheckResult]
    ) -> List[Check]:
        """Run all rules in their fixed order."""
        return [
            self.check_uptime(fetch),
            self.check_response_time(fetch),
            self.check_content_depth(signals),
            self.check_seo_metadata(signals),
            self.check_image_alt_text(signals),
            self.check_link_health(link_results),
        ]

    def check_uptime(self, fetch: FetchResult) -> Check:
        status = fetch.status_code
        def verdict(s, details, fix=""):
            return Check("uptime", "reliability", "Uptime & reachability", s, details, fix)

        if status is None:
            reason = fetch.error or "no response"
            return verdict(
                "fail", f"The page could not be reached ({reason}).",
                "Confirm DNS, TLS and the web server are up and accepting connections, then re-run the audit."
            )
        if status >= 500:
            return verdict(
                "fail", f"The server answered with HTTP {status}.",
                "Inspect server and application logs for the 5xx error and restore a healthy response."
            )
        if status in MISSING_PAGE_STATUSES:
            return verdict(
                "fail", f"The page returned HTTP {status}; it no longer exists at this address.",
                "Restore the page or add a permanent (301) redirect to its replacement, and update links pointing here."
            )
        if 400 <= status < 500:
            return verdict(
                "warn", f"The page returned HTTP {status}; visitors may be blocked.",
                "Review access rules, authentication and rate limits so public visitors receive a 200 response."
            )
        if fetch.is_success:
            details = f"The page responded with HTTP {status}."
            if not fetch.is_html:
                details += f" It was served as {fetch.content_type}, not HTML, so page signals may be empty."
            return verdict(
                "pass", details,
                "Keep uptime monitoring in place to catch regressions early."
            )
        return verdict(
            "warn", f"The page returned an unexpected HTTP {status}.",
            "Make sure the server completes the request with a final 2xx response."
        )

    def check_response_time(self, fetch: FetchResult) -> Check:
        elapsed = fetch.response_time_ms
        def verdict(s, details, fix=""):
            return Check("response-time", "performance", "Response time", s, details, fix)

        if elapsed is None:
            return verdict(
                "fail", "Response time could not be measured because the request failed.",
                "Restore availability first, then verify the page responds in under "
                f"{self.t.response_fast_ms} ms."
            )
        if elapsed < self.t.response_fast_ms:
            return verdict(
                "pass", f"Responded in {elapsed} ms.",
                "Keep caching and asset budgets in place to hold this response time."
            )
        if elapsed < self.t.response_slow_ms:
            return verdict(
                "warn", f"Responded in {elapsed} ms (target under {self.t.response_fast_ms} ms).",
                "Enable server-side caching or a CDN and trim slow backend queries to reduce time to first byte."
            )
        return verdict(
            "fail", f"Responded in {elapsed} ms, slower than {self.t.response_slow_ms} ms.",
            "Profile the request path, add full-page caching or a CDN, and move heavy work off the request."
        )

    def check_content_depth(self, signals: PageSignals) -> Check:
        words = signals.word_count
        def verdict(s, details, fix=""):
            return Check("content-depth", "content", "Content depth", s, details, fix)

        if words < self.t.words_minimum:
            return verdict(
                "fail", f"Only {words} words of visible text found.",
                f"Expand the page with at least {self.t.words_healthy} words of useful copy that answers visitor questions."
            )
        if words < self.t.words_healthy:
            return verdict(
                "warn", f"{words} words of visible text found; thin for most pages.",
                f"Add supporting sections, FAQs or examples to bring the page above {self.t.words_healthy} words."
            )
        return verdict(
            "pass", f"{words} words of visible text found.",
            "Review the copy periodically so it stays accurate and current."
        )

    def check_seo_metadata(self, signals: PageSignals) -> Check:
        title = signals.title.strip()
        description = (signals.meta_description or "").strip()
        def verdict(s, details, fix=""):
            return Check("seo-metadata", "seo", "Title & meta description", s, details, fix)

        if not title and not description:
            return verdict(
                "fail", "The page has neither a <title> nor a meta description.",
                "Add a descriptive <title> and a <meta name=\"description\"> summarizing the page."
            )
        if not title:
            return verdict(
                "warn", "Meta description present but the <title> is missing.",
                f"Add a unique <title> of {self.t.title_min_length}-{self.t.title_max_length} characters."
            )
        if not description:
            return verdict(
                "warn", f"Title present ({len(title)} chars) but no meta description.",
                f"Add a <meta name=\"description\"> of {self.t.description_min_length}-"
                f"{self.t.description_max_length} characters."
            )

        problems = []
        if not self.t.title_min_length <= len(title) <= self.t.title_max_length:
            problems.append(
                f"title is {len(title)} chars (aim for {self.t.title_min_length}-{self.t.title_max_length})"
            )
        if not self.t.description_min_length <= len(description) <= self.t.description_max_length:
            problems.append(
                f"meta description is {len(description)} chars "
                f"(aim for {self.t.description_min_length}-{self.t.description_max_length})"
            )
        if problems:
            return verdict(
                "warn", "Both present, but " + "; ".join(problems) + ".",
                "Rewrite the title and meta description to fit the recommended lengths so search results do not truncate them."
            )
        return verdict(
            "pass", f"Title ({len(title)} chars) and meta description ({len(description)} chars) present.",
            "Revisit titles and descriptions when page content changes."
        )

    def check_image_alt_text(self, signals: PageSignals) -> Check:
        total = signals.image_count
        missing = signals.images_missing_alt
        def verdict(s, details, fix=""):
            return Check("image-alt-text", "accessibility", "Image alt text", s, details, fix)

        if total == 0:
            return verdict(
                "pass", "No images found on the page.",
                "Give any future images descriptive alt text."
            )
        if missing == 0:
            return verdict(
                "pass", f"All {total} images have alt text.",
                "Keep alt text descriptive as images change."
            )
        ratio = missing / total
        if ratio > self.t.alt_missing_fail_ratio:
            return verdict(
                "fail", f"{missing} of {total} images ({ratio:.0%}) are missing alt text.",
                f"Add descriptive alt text to the {missing} images without it; use alt=\"\" only for purely decorative images."
            )
        return verdict(
            "warn", f"{missing} of {total} images are missing alt text.",
            f"Add descriptive alt text to the remaining {missing} image(s)."
        )

    def check_link_health(self, link_results: Sequence[LinkCheckResult]) -> Check:
        sampled = len(link_results)
        broken = [r for r in link_results if r.broken]
        def verdict(s, details, fix=""):
            return Check("link-health", "reliability", "Link health", s, details, fix)

        if sampled == 0:
            return verdict(
                "pass", "No outbound links were sampled.",
                "Re-run the audit after adding links to verify them."
            )
        if not broken:
            return verdict(
                "pass", f"All {sampled} sampled links responded.",
                "Re-check links periodically; external pages move over time."
            )
        ratio = len(broken) / sampled
        examples = ", ".join(r.href for r in broken[:3])
        if ratio > self.t.broken_link_fail_ratio:
            return verdict(
                "fail", f"{len(broken)} of {sampled} sampled links are broken ({ratio:.0%}), e.g. {examples}.",
                "Fix or remove the broken links, and redirect moved internal pages to their new URLs."
            )
        return verdict(
            "warn", f"{len(broken)} of {sampled} sampled links are broken, e.g. {examples}.",
            "Update or remove the broken links listed in this report."
        )
