"""
PDF Generator Service - Render the audit report for sharing.

Uses Jinja2 for the HTML and WeasyPrint to convert it into PDF.
"""

import os
from jinja2 import Environment, FileSystemLoader, select_autoescape

from agentic_maintainer.logger import logger
from agentic_maintainer.schemas.audit_result import AuditResponse

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}


class PdfGenerator:
    """Generate PDF reports from audit data."""

    def __init__(self):
        self.template_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html"])
        )

    def render_html(self, report: AuditResponse) -> str:
        """Render the report template to an HTML string."""
        passed = sum(1 for c in report.checks if c.status == "pass")
        health_score = round(passed / max(len(report.checks), 1) * 100)
        tasks = sorted(report.tasks, key=lambda t: PRIORITY_ORDER.get(t.priority, len(PRIORITY_ORDER)))

        template = self.env.get_template("audit_report.html")
        return template.render(
            report=report,
            tasks=tasks,
            health_score=health_score,
            date=report.generated_at.strftime("%B %d, %Y %H:%M UTC")
        )

    def generate(self, report: AuditResponse) -> bytes:
        """Generate PDF bytes from an audit report.

        Args:
            report: Completed audit report

        Returns:
            bytes: PDF file content
        """
        # WeasyPrint needs Pango at import time; only load it when rendering
        from weasyprint import HTML

        try:
            html_string = self.render_html(report)
            pdf_bytes = HTML(string=html_string, base_url=self.template_dir).write_pdf()

            logger.info(f"Generated PDF report for {report.target_url} ({len(pdf_bytes)} bytes)")
            return pdf_bytes

        except Exception as e:
            logger.error(f"Failed to generate PDF: {e}")
            raise
