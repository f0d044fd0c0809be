"""
Errors surfaced to callers of the audit pipeline.

Target-site failures never appear here; they are folded into the report.
"""


class InvalidAuditUrl(ValueError):
    """The requested URL is missing, malformed or not http(s)."""


class AuditPipelineError(RuntimeError):
    """Unexpected internal fault; the audit could not produce a report."""

    def __init__(self, message: str = "Unexpected error while auditing."):
        super().__init__(message)
