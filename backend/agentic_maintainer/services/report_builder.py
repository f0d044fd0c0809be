"""
Report Builder - Assemble the immutable audit report.
"""
from datetime import datetime, timezone
from typing import Sequence

from agentic_maintainer.schemas.audit_result import (
    AuditCheck,
    AuditInsight,
    AuditResponse,
    BrokenLink,
    MaintenanceTask,
)
from agentic_maintainer.services.collectors.page_collector import PageSignals
from agentic_maintainer.services.link_sampler import LinkSample
from agentic_maintainer.services.page_fetcher import FetchResult
from agentic_maintainer.services.rules.models import Check


def build_report(
    target_url: str,
    fetch: FetchResult,
    signals: PageSignals,
    links: LinkSample,
    checks: Sequence[Check],
    tasks: Sequence[MaintenanceTask],
    insights: Sequence[AuditInsight],
) -> AuditResponse:
    """Merge pipeline outputs; generated_at is stamped here."""
    return AuditResponse(
        target_url=target_url,
        status_code=fetch.status_code,
        response_time_ms=fetch.response_time_ms,
        last_modified=fetch.last_modified,
        title=signals.title,
        meta_description=signals.meta_description,
        word_count=signals.word_count,
        headings=dict(signals.headings),
        image_count=signals.image_count,
        images_missing_alt=signals.images_missing_alt,
        link_sample_size=links.sample_size,
        broken_links=[BrokenLink(href=r.href, status=r.status) for r in links.broken],
        checks=[
            AuditCheck(
                id=c.id,
                label=c.label,
                status=c.status,
                details=c.details,
                recommendation=c.recommendation
            )
            for c in checks
        ],
        tasks=list(tasks),
        insights=list(insights),
        generated_at=datetime.now(timezone.utc),
    )
