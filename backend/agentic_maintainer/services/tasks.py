"""
Task Planner - Turn non-passing checks into maintenance tasks and insights.
"""

from typing import Dict, List, Sequence

from agentic_maintainer.schemas.audit_result import AuditInsight, MaintenanceTask
from agentic_maintainer.services.rules.models import Check


# Warnings in these categories affect every visitor
URGENT_CATEGORIES = {"reliability", "performance"}

# check id -> status -> priority; wins over the default mapping
PRIORITY_OVERRIDES: Dict[str, Dict[str, str]] = {
    "image-alt-text": {"fail": "low", "warn": "low"},
}

CATEGORY_NAMES = {
    "reliability": "Reliability",
    "performance": "Performance",
    "content": "Content",
    "seo": "Search visibility",
    "accessibility": "Accessibility",
}

CATEGORY_FOCUS = {
    "reliability": "visitors may not reach the page or the pages it links to",
    "performance": "slow responses cost visitors and rankings",
    "content": "the page may not give visitors or search engines enough to work with",
    "seo": "search results may show weak or missing snippets",
    "accessibility": "assistive technology users may miss information",
}


def task_priority(check: Check) -> str:
    """Deterministic priority for a non-passing check."""
    override = PRIORITY_OVERRIDES.get(check.id, {}).get(check.status)
    if override:
        return override
    if check.status == "fail":
        return "high"
    if check.category in URGENT_CATEGORIES:
        return "medium"
    return "low"


class TaskPlanner:
    """Derives tasks and insights from rule verdicts."""

    def build_tasks(self, checks: Sequence[Check]) -> List[MaintenanceTask]:
        """One task per warn/fail check, in check order."""
        tasks = []
        for check in checks:
            if check.passed:
                continue
            verb = "Fix" if check.status == "fail" else "Improve"
            tasks.append(MaintenanceTask(
                id=f"task-{check.id}",
                priority=task_priority(check),
                title=f"{verb} {check.label.lower()}",
                description=check.recommendation
            ))
        return tasks

    def build_insights(self, checks: Sequence[Check]) -> List[AuditInsight]:
        """One insight per category that has non-passing checks."""
        grouped: Dict[str, List[Check]] = {}
        for check in checks:
            if not check.passed:
                grouped.setdefault(check.category, []).append(check)

        return [
            AuditInsight(
                id=f"insight-{category}",
                category=category,
                message=self._narrate(category, problems)
            )
            for category, problems in grouped.items()
        ]

    def _narrate(self, category: str, problems: List[Check]) -> str:
        name = CATEGORY_NAMES.get(category, category.title())
        failing = [c.label for c in problems if c.status == "fail"]
        warning = [c.label for c in problems if c.status == "warn"]

        parts = []
        if failing:
            parts.append(f"failing: {', '.join(failing)}")
        if warning:
            parts.append(f"needs attention: {', '.join(warning)}")
        state = "at risk" if failing else "could be stronger"

        focus = CATEGORY_FOCUS.get(category)
        message = f"{name} is {state} ({'; '.join(parts)})."
        if focus:
            message += f" Left as is, {focus}."
        return message
