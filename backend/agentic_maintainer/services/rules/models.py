from dataclasses import dataclass

from agentic_maintainer.schemas.audit_result import CheckStatus, InsightCategory


@dataclass(frozen=True)
class Check:
    """Individual rule verdict."""
    id: str
    category: InsightCategory
    label: str
    status: CheckStatus
    details: str
    recommendation: str

    @property
    def passed(self) -> bool:
        return self.status == "pass"
