from pydantic import BaseModel, Field


class QuickAnalyzeRequest(BaseModel):
    """Plain-text variant of the analyze upload, for callers that already have resume text."""

    resume_text: str = Field(..., min_length=1, max_length=50000)
    job_description: str = Field(..., min_length=1, max_length=10000)
