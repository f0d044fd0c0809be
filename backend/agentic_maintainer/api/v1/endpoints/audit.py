"""
Audit API endpoints.
"""
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse, Response

from agentic_maintainer.logger import logger
from agentic_maintainer.schemas.audit_request import AuditRequest, validate_audit_url
from agentic_maintainer.schemas.audit_result import AuditResponse
from agentic_maintainer.services.audit_runner import AuditRunner
from agentic_maintainer.services.errors import AuditPipelineError, InvalidAuditUrl

router = APIRouter(tags=["Audit"])


async def _audit_or_raise(request: AuditRequest) -> AuditResponse:
    """Validate at the boundary, then run the audit."""
    try:
        url = validate_audit_url(request.url)
    except InvalidAuditUrl as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        return await AuditRunner().run(url)
    except AuditPipelineError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("")
async def run_audit(request: AuditRequest):
    """Run a maintenance audit and return the full report."""
    report = await _audit_or_raise(request)
    logger.info(f"Served audit for {report.target_url}")
    return JSONResponse(content=report.model_dump(mode="json", by_alias=True))


@router.post("/pdf")
async def run_audit_pdf(request: AuditRequest):
    """Run a maintenance audit and return it as a PDF."""
    report = await _audit_or_raise(request)

    from agentic_maintainer.services.pdf_generator import PdfGenerator

    try:
        pdf_bytes = PdfGenerator().generate(report)
    except Exception:
        raise HTTPException(status_code=500, detail="Could not render the audit report.")

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": "attachment; filename=maintenance_audit.pdf"
        }
    )
