"""
Audit Runner - Main orchestrator for maintenance audits.

Coordinates page fetching, signal collection, link sampling, rule evaluation
and report assembly.
"""
from typing import Optional

import httpx

from agentic_maintainer.logger import logger
from agentic_maintainer.schemas.audit_request import validate_audit_url
from agentic_maintainer.schemas.audit_result import AuditResponse
from agentic_maintainer.services.collectors.page_collector import PageCollector
from agentic_maintainer.services.errors import AuditPipelineError
from agentic_maintainer.services.link_sampler import LinkSampler
from agentic_maintainer.services.page_fetcher import PageFetcher
from agentic_maintainer.services.report_builder import build_report
from agentic_maintainer.services.rules.engine import RuleEngine
from agentic_maintainer.services.tasks import TaskPlanner


class AuditRunner:
    """Orchestrates the complete audit process."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.page_fetcher = PageFetcher(transport=transport)
        self.page_collector = PageCollector()
        self.link_sampler = LinkSampler(transport=transport)
        self.rule_engine = RuleEngine()
        self.task_planner = TaskPlanner()

    async def run(self, url: str) -> AuditResponse:
        """
        Run complete audit on a URL.

        Args:
            url: Absolute http(s) URL to audit

        Returns:
            AuditResponse with checks, tasks and insights

        Raises:
            InvalidAuditUrl: url is missing or not http(s); nothing was fetched
            AuditPipelineError: unexpected internal fault
        """
        target_url = validate_audit_url(url)

        try:
            logger.info(f"Starting audit for {target_url}")

            # 1. Fetch the page
            fetch_result = await self.page_fetcher.fetch(target_url)

            # 2. Extract signals, resolving links against where we landed
            base_url = fetch_result.final_url or target_url
            signals = self.page_collector.collect(fetch_result.html, base_url)

            # 3. Probe a bounded link sample
            link_sample = await self.link_sampler.check(signals.links)

            # 4. Rules, then follow-ups
            checks = self.rule_engine.evaluate(fetch_result, signals, link_sample.results)
            tasks = self.task_planner.build_tasks(checks)
            insights = self.task_planner.build_insights(checks)

            report = build_report(
                target_url, fetch_result, signals, link_sample, checks, tasks, insights
            )

            failing = sum(1 for c in checks if c.status == "fail")
            logger.info(
                f"Audit complete for {target_url}: status={fetch_result.status_code}, "
                f"failing={failing}, tasks={len(tasks)}"
            )
            return report

        except Exception as e:
            logger.exception(f"Audit failed for {target_url}: {e}")
            raise AuditPipelineError() from e


async def run_audit(url: str) -> AuditResponse:
    """Run one audit with a fresh runner."""
    return await AuditRunner().run(url)
