from typing import Literal, Optional
from pydantic import BaseModel


AudioFormat = Literal[
    "audio/mp3",
    "audio/mpeg",
    "audio/wav",
    "audio/ogg",
    "audio/ogg;codecs=opus",
    "audio/ogg;codecs=vorbis",
    "audio/webm",
    "audio/flac",
    "audio/basic",
]

# File extension used in Content-Disposition for each format
FORMAT_EXTENSIONS = {
    "audio/mp3": "mp3",
    "audio/mpeg": "mp3",
    "audio/wav": "wav",
    "audio/ogg": "ogg",
    "audio/ogg;codecs=opus": "ogg",
    "audio/ogg;codecs=vorbis": "ogg",
    "audio/webm": "webm",
    "audio/flac": "flac",
    "audio/basic": "au",
}


class GenerateRequest(BaseModel):
    prompt: Optional[str] = None
    task: str = "rewrite"
    tone: str = "Neutral"


class GenerateResponse(BaseModel):
    text: str


class SynthesizeRequest(BaseModel):
    text: Optional[str] = None
    voice: Optional[str] = None  # defaults to TTS_VOICE
    format: Optional[AudioFormat] = None  # defaults to TTS_FORMAT


class TranscribeResponse(BaseModel):
    transcript: str


class ErrorResponse(BaseModel):
    error: str
