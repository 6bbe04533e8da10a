from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..models import ErrorResponse, GenerateRequest, GenerateResponse
from ..vendors import ProviderAdapter, get_generation_adapter


router = APIRouter(prefix="/api", tags=["generate"])


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def api_generate(body: GenerateRequest, adapter: ProviderAdapter = Depends(get_generation_adapter)):
    if not body.prompt or not body.prompt.strip():
        return JSONResponse(status_code=400, content={"error": "Missing prompt"})
    text = await adapter.generate(body.prompt, task=body.task, tone=body.tone)
    return {"text": text}
