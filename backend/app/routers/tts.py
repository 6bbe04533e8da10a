from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from ..config import TTS_FORMAT, TTS_VOICE
from ..models import FORMAT_EXTENSIONS, ErrorResponse, SynthesizeRequest
from ..vendors import ProviderAdapter, get_tts_adapter


router = APIRouter(prefix="/api", tags=["tts"])


@router.post(
    "/tts",
    response_class=Response,
    responses={
        200: {"content": {"audio/mp3": {}, "audio/wav": {}, "audio/ogg": {}}},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def api_tts(body: SynthesizeRequest, adapter: ProviderAdapter = Depends(get_tts_adapter)):
    if not body.text or not body.text.strip():
        return JSONResponse(status_code=400, content={"error": "Missing text"})
    voice = body.voice or TTS_VOICE
    fmt = body.format or TTS_FORMAT
    audio = await adapter.synthesize(body.text, voice=voice, accept=fmt)
    ext = FORMAT_EXTENSIONS.get(fmt, "bin")
    return Response(
        content=audio,
        media_type=fmt,
        headers={
            "Content-Disposition": f'inline; filename="speech.{ext}"',
            "Cache-Control": "no-store",
        },
    )
