"""Prompt template for the resume/job-description match analysis."""


def build_analysis_prompt(
    resume_text: str,
    job_description: str,
    resume_limit: int = 15000,
    job_description_limit: int = 5000,
) -> str:
    """Embed truncated resume and JD text in the fixed analysis template."""
    return f"""You are an expert ATS (Applicant Tracking System) and Technical Recruiter.

Analyze the following resume against the job description.

RESUME:
---
{resume_text[:resume_limit]}
---

JOB DESCRIPTION:
---
{job_description[:job_description_limit]}
---

Respond with ONLY valid JSON (no markdown, no code fences like ```json) in this exact structure:
{{
  "match_score": "<percentage string, e.g. 85%>",
  "matching_strengths": ["<strength backed by the resume>", "..."],
  "missing_skills": ["<skill the JD requires that the resume lacks>", "..."],
  "improvement_suggestions": ["<concrete change to the resume>", "..."],
  "cold_email": "Subject: ... Body: ..."
}}"""
