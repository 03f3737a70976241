from pydantic import BaseModel


class AnalysisResult(BaseModel):
    match_score: str
    matching_strengths: list[str]
    missing_skills: list[str]
    improvement_suggestions: list[str]
    cold_email: str


class ErrorResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    gemini_configured: bool
