"""Shared test configuration, fixtures and a tiny PDF builder."""

import json
import os
from types import SimpleNamespace

# Settings are read at import time; keep the limiter out of the way.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest

SAMPLE_RESUME_LINES = [
    "Jane Doe - Senior Software Engineer",
    "Built REST APIs in Python and FastAPI serving 1M requests per day",
    "Deployed microservices with Docker and Kubernetes on AWS",
]

SAMPLE_JD = (
    "Looking for a backend engineer with Python, FastAPI and PostgreSQL experience. "
    "Kubernetes and Terraform are a plus."
)

SAMPLE_ANALYSIS = {
    "match_score": "78%",
    "matching_strengths": ["Python and FastAPI experience", "Container deployment on Kubernetes"],
    "missing_skills": ["PostgreSQL", "Terraform"],
    "improvement_suggestions": ["Mention database work explicitly"],
    "cold_email": "Subject: Backend Engineer role\nBody: Hi, I'd love to talk about the role.",
}


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(lines: list[str]) -> bytes:
    """Build a single-page PDF showing ``lines`` in Helvetica."""
    ops = ["BT", "/F1 12 Tf", "14 TL", "72 720 Td"]
    for line in lines:
        ops.append(f"({_escape(line)}) Tj T*")
    ops.append("ET")
    stream = "\n".join(ops).encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n".encode()
    out += f"startxref\n{xref_at}\n%%EOF\n".encode()
    return bytes(out)


@pytest.fixture
def resume_pdf() -> bytes:
    return build_pdf(SAMPLE_RESUME_LINES)


@pytest.fixture
def blank_pdf() -> bytes:
    return build_pdf([])


class FakeModels:
    """Stands in for ``genai.Client().aio.models``."""

    def __init__(self):
        self.reply: str | None = json.dumps(SAMPLE_ANALYSIS)
        self.error: Exception | None = None
        self.calls: list[dict] = []

    async def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.reply)

    @property
    def prompts(self) -> list[str]:
        return [c["contents"] for c in self.calls]


@pytest.fixture
def fake_model(monkeypatch) -> FakeModels:
    """Route Gemini calls to a canned in-memory reply."""
    from services import gemini_client

    models = FakeModels()
    client = SimpleNamespace(aio=SimpleNamespace(models=models))
    monkeypatch.setattr(gemini_client, "get_client", lambda: client)
    return models
