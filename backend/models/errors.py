"""Error taxonomy for the analyze flow.

Every error carries the HTTP status and the message shown to the client.
"""


class AnalyzerError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AnalyzerError):
    """Missing, empty or oversized input."""

    status_code = 400
    default_message = "Invalid request"


class ExtractionError(AnalyzerError):
    """The uploaded PDF is unreadable or yields too little text."""

    status_code = 400
    default_message = "Failed to parse PDF file"


class GenerationError(AnalyzerError):
    """The model call failed or its reply did not match AnalysisResult."""

    status_code = 500
    default_message = "Failed to generate analysis"
