from typing import Optional


class GatewayError(Exception):
    """Base class for provider failures surfaced to the caller.

    Only ``message`` ever reaches the HTTP response; provider detail is
    logged where the error is raised.
    """

    message = "Request failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class GenerationError(GatewayError):
    message = "Generation failed"


class SynthesisError(GatewayError):
    message = "Speech synthesis failed"


class TranscriptionError(GatewayError):
    message = "Transcription failed"
