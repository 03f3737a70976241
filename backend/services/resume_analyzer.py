"""Resume match analysis: prompt the model once and validate its answer.

Pipeline:
1. Truncate resume and JD text into the analysis prompt
2. Single Gemini call (no retry)
3. Strip fences, parse JSON, validate against AnalysisResult
"""

import logging

import pydantic
from starlette.concurrency import run_in_threadpool

from config import settings
from models.errors import GenerationError, ValidationError
from models.responses import AnalysisResult
from services import gemini_client, pdf_parser, prompt_builder

logger = logging.getLogger(__name__)


async def analyze(resume_text: str, job_description: str) -> AnalysisResult:
    """Run the model analysis for already-extracted resume text."""
    if not resume_text.strip():
        raise ValidationError("Resume text is required")
    if not job_description.strip():
        raise ValidationError("Job Description is required")

    prompt = prompt_builder.build_analysis_prompt(
        resume_text,
        job_description,
        resume_limit=settings.resume_char_limit,
        job_description_limit=settings.job_description_char_limit,
    )
    data = await gemini_client.generate_json(prompt)

    try:
        return AnalysisResult.model_validate(data)
    except pydantic.ValidationError as e:
        logger.error("Gemini response does not match AnalysisResult: %s", e)
        raise GenerationError() from e


async def analyze_pdf(pdf_bytes: bytes, job_description: str) -> AnalysisResult:
    """Extract text from an uploaded resume PDF and analyze it."""
    resume_text = await run_in_threadpool(
        pdf_parser.extract_resume_text,
        pdf_bytes,
        settings.min_resume_text_length,
    )
    return await analyze(resume_text, job_description)
