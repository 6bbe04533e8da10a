from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from ..config import STT_DEFAULT_CONTENT_TYPE
from ..models import ErrorResponse, TranscribeResponse
from ..services.uploads import spooled_upload
from ..vendors import ProviderAdapter, get_stt_adapter


router = APIRouter(prefix="/api", tags=["stt"])


@router.post(
    "/stt",
    response_model=TranscribeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def api_stt(audio: Optional[UploadFile] = File(None), adapter: ProviderAdapter = Depends(get_stt_adapter)):
    if audio is None:
        return JSONResponse(status_code=400, content={"error": "Missing audio"})
    content_type = audio.content_type or STT_DEFAULT_CONTENT_TYPE
    async with spooled_upload(audio) as audio_path:
        transcript = await adapter.transcribe(audio_path, content_type)
    return {"transcript": transcript}
