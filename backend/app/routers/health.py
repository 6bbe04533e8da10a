from fastapi import APIRouter

from ..vendors import PROVIDER_ADAPTERS


router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def api_health():
    return {
        "status": "healthy",
        "providers": {kind: adapter.configured for kind, adapter in PROVIDER_ADAPTERS.items()},
    }
