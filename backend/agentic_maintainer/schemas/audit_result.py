"""
Pydantic schemas for audit responses.

Field names serialize as camelCase so the JSON matches the console client.
"""

from datetime import datetime
from typing import Optional, Literal
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


CheckStatus = Literal["pass", "warn", "fail"]
TaskPriority = Literal["low", "medium", "high"]
InsightCategory = Literal["content", "seo", "accessibility", "performance", "reliability"]


class ReportModel(BaseModel):
    """Base for every report model: immutable, camelCase on the wire."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuditCheck(ReportModel):
    """One rule's verdict."""
    id: str
    label: str
    status: CheckStatus
    details: str
    recommendation: str


class MaintenanceTask(ReportModel):
    """Actionable follow-up derived from a non-passing check."""
    id: str
    priority: TaskPriority
    title: str
    description: str


class AuditInsight(ReportModel):
    """Category-level narrative."""
    id: str
    category: InsightCategory
    message: str


class BrokenLink(ReportModel):
    """Sampled link that failed its reachability probe."""
    href: str
    status: Optional[int] = None


class AuditResponse(ReportModel):
    """Complete audit report."""
    # Request info
    target_url: str

    # Fetch metadata
    status_code: Optional[int] = None
    response_time_ms: Optional[int] = None
    last_modified: Optional[str] = None

    # Page signals
    title: str = ""
    meta_description: Optional[str] = None
    word_count: int = Field(0, ge=0)
    headings: dict[str, int] = Field(default_factory=dict)
    image_count: int = Field(0, ge=0)
    images_missing_alt: int = Field(0, ge=0)

    # Link sample
    link_sample_size: int = Field(0, ge=0)
    broken_links: list[BrokenLink] = Field(default_factory=list)

    # Verdicts
    checks: list[AuditCheck] = Field(default_factory=list)
    tasks: list[MaintenanceTask] = Field(default_factory=list)
    insights: list[AuditInsight] = Field(default_factory=list)

    generated_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "targetUrl": "https://example.com/",
                "statusCode": 200,
                "responseTimeMs": 412,
                "lastModified": None,
                "title": "Example Domain",
                "metaDescription": None,
                "wordCount": 28,
                "headings": {"h1": 1, "h2": 0, "h3": 0, "h4": 0, "h5": 0, "h6": 0},
                "imageCount": 0,
                "imagesMissingAlt": 0,
                "linkSampleSize": 1,
                "brokenLinks": [],
                "checks": [],
                "tasks": [],
                "insights": [],
                "generatedAt": "2024-01-01T12:00:05Z"
            }
        }
    )
