"""
Tests for report rendering. Only the HTML stage is exercised; PDF conversion
needs native WeasyPrint libraries.
"""

from datetime import datetime, timezone

from agentic_maintainer.schemas.audit_result import (
    AuditCheck,
    AuditInsight,
    AuditResponse,
    BrokenLink,
    MaintenanceTask,
)
from agentic_maintainer.services.pdf_generator import PdfGenerator


def report(**kwargs) -> AuditResponse:
    fields = dict(
        target_url="https://example.com/",
        generated_at=datetime(2024, 3, 5, 9, 30, tzinfo=timezone.utc),
        checks=[
            AuditCheck(id="uptime", label="Uptime & reachability", status="pass", details="HTTP 200", recommendation="Keep monitoring."),
            AuditCheck(id="content-depth", label="Content depth", status="fail", details="Only 12 words", recommendation="Expand the page."),
        ],
        tasks=[
            MaintenanceTask(id="task-seo-metadata", priority="low", title="Improve title & meta description", description="Add a meta description."),
            MaintenanceTask(id="task-content-depth", priority="high", title="Fix content depth", description="Expand the page."),
        ],
        insights=[AuditInsight(id="insight-content", category="content", message="Content is at risk.")],
        broken_links=[BrokenLink(href="https://example.com/dead", status=None)],
    )
    fields.update(kwargs)
    return AuditResponse(**fields)


class TestRenderHtml:

    def test_renders_checks_tasks_and_insights(self):
        html = PdfGenerator().render_html(report())

        assert "https://example.com/" in html
        assert "50%" in html
        assert "Content is at risk." in html
        assert "https://example.com/dead (no response)" in html
        assert "March 05, 2024 09:30 UTC" in html

    def test_tasks_sorted_by_priority(self):
        html = PdfGenerator().render_html(report())
        assert html.index("Fix content depth") < html.index("Improve title &amp; meta description")

    def test_unreachable_report(self):
        html = PdfGenerator().render_html(report(checks=[], tasks=[], insights=[], broken_links=[]))
        assert "unreachable" in html
        assert "No open maintenance tasks." in html
