import logging
from collections.abc import Awaitable

from fastapi import APIRouter, File, Form, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.errors import AnalyzerError, ValidationError
from models.requests import QuickAnalyzeRequest
from models.responses import AnalysisResult, ErrorResponse, HealthResponse
from services import resume_analyzer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


async def read_upload(upload: UploadFile, max_bytes: int) -> bytes:
    """Read an uploaded file, rejecting it once it exceeds ``max_bytes``."""
    too_large = ValidationError(f"File too large. Max size: {settings.max_upload_size_mb}MB")
    # Starlette reports the spooled size, so most oversized files never get read
    if upload.size is not None and upload.size > max_bytes:
        raise too_large
    content = await upload.read()
    if len(content) > max_bytes:
        raise too_large
    return content


async def _relay(analysis: Awaitable[AnalysisResult]) -> AnalysisResult:
    try:
        return await analysis
    except AnalyzerError:
        raise
    except Exception as e:
        logger.exception("Unexpected error during analysis")
        raise AnalyzerError() from e


@router.get("/health", response_model=HealthResponse)
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
    }


@router.post("/analyze", response_model=AnalysisResult, responses=ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    resume: UploadFile | None = File(None),
    job_description: str | None = Form(None),
):
    if resume is None:
        raise ValidationError("Resume PDF is required")
    if not job_description or not job_description.strip():
        raise ValidationError("Job Description is required")

    content = await read_upload(resume, settings.max_upload_bytes)
    logger.info("Analyzing resume upload (%d bytes)", len(content))
    return await _relay(resume_analyzer.analyze_pdf(content, job_description))


@router.post("/analyze/quick", response_model=AnalysisResult, responses=ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def analyze_quick(request: Request, body: QuickAnalyzeRequest):
    return await _relay(resume_analyzer.analyze(body.resume_text, body.job_description))
