"""
EchoVerse Gateway - HTTP front for IBM watsonx.ai and Watson speech services

This module bootstraps the FastAPI application:
- Configuration and environment setup
- CORS and request body size middleware
- Provider error mapping
- Router inclusion and optional static hosting
- Uvicorn server startup

The business logic is organized into:
- app/config.py: Environment variables and configuration
- app/models.py: Pydantic request/response models
- app/errors.py: One error type per endpoint
- app/utils.py: Request shaping and response normalization helpers
- app/vendors/: Provider adapters (watsonx, Watson TTS, Watson STT)
- app/services/: Upload spooling
- app/routers/: API route handlers
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

# Import modular components
from app.config import CORS_ORIGINS, MAX_BODY_BYTES, PORT, STATIC_DIR, ensure_directories, logger
from app.errors import GatewayError
from app.middleware import BodySizeLimitMiddleware, RequestBodyTooLarge
from app.routers import generate, tts, stt, health

# Initialize FastAPI app
app = FastAPI(title="EchoVerse Gateway", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if CORS_ORIGINS == "*" else CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request body size limit
app.add_middleware(BodySizeLimitMiddleware, max_bytes=MAX_BODY_BYTES)


@app.exception_handler(RequestBodyTooLarge)
async def body_too_large_handler(request: Request, exc: RequestBodyTooLarge):
    return JSONResponse(status_code=413, content={"error": exc.detail})


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    logger.info(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=500, content={"error": exc.message})


# Ensure required directories exist
ensure_directories()

# Include all API routers
app.include_router(generate.router)
app.include_router(tts.router)
app.include_router(stt.router)
app.include_router(health.router)

# Static frontend, mounted last so /api routes take precedence
if STATIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=str(STATIC_DIR), html=True), name="static")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("server:app", host="0.0.0.0", port=PORT)
