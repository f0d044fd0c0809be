"""
Pydantic schemas for audit requests.
"""
from typing import Any, Optional
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel, ConfigDict, Field

from agentic_maintainer.services.errors import InvalidAuditUrl


ALLOWED_SCHEMES = ("http", "https")


class AuditRequest(BaseModel):
    """Request to run a site maintenance audit."""
    # Left untyped so a non-string url reaches validate_audit_url and gets a 400
    url: Optional[Any] = Field(None, description="Absolute http(s) URL to audit")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "url": "https://example.com"
            }
        }
    )


def validate_audit_url(raw_url: Any) -> str:
    """Return a trimmed absolute http(s) URL or raise InvalidAuditUrl."""
    if not isinstance(raw_url, str) or not raw_url.strip():
        raise InvalidAuditUrl("Missing url field")

    url = raw_url.strip()
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError as e:
        raise InvalidAuditUrl("Provide a valid http(s) URL") from e

    if parsed.scheme.lower() not in ALLOWED_SCHEMES or not hostname:
        raise InvalidAuditUrl("Provide a valid http(s) URL")

    # Same parser the fetcher uses; decoding the host rejects bad IDNA labels
    try:
        httpx.URL(url).host
    except (httpx.InvalidURL, ValueError) as e:
        raise InvalidAuditUrl("Provide a valid http(s) URL") from e

    return url
