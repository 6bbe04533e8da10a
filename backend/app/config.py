import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Logging configuration
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Server
PORT = int(os.getenv("PORT", "3000"))
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
MAX_BODY_BYTES = int(os.getenv("MAX_BODY_BYTES", str(2 * 1024 * 1024)))

# watsonx.ai (Granite text generation)
WATSONX_URL = os.getenv("WATSONX_URL", "dummy_watsonx_url")
WATSONX_API_KEY = os.getenv("WATSONX_API_KEY", "dummy_watsonx_key")
WATSONX_PROJECT_ID = os.getenv("WATSONX_PROJECT_ID", "dummy_watsonx_project")
WATSONX_MODEL_ID = os.getenv("WATSONX_MODEL_ID", "ibm/granite-13b-instruct-v2")
WATSONX_API_VERSION = os.getenv("WATSONX_API_VERSION", "2024-05-31")

# Watson Text to Speech
TTS_API_KEY = os.getenv("TTS_API_KEY", "dummy_tts_key")
TTS_URL = os.getenv("TTS_URL", "dummy_tts_url")
TTS_VOICE = os.getenv("TTS_VOICE", "en-US_AllisonV3Voice")
TTS_FORMAT = os.getenv("TTS_FORMAT", "audio/mp3")

# Watson Speech to Text
STT_API_KEY = os.getenv("STT_API_KEY", "dummy_stt_key")
STT_URL = os.getenv("STT_URL", "dummy_stt_url")
STT_MODEL = "en-US_BroadbandModel"
STT_DEFAULT_CONTENT_TYPE = "audio/webm"

# Directories and paths
STATIC_DIR = Path(os.getenv("STATIC_DIR", "public"))
UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", "uploads"))


def ensure_directories() -> None:
    """Ensure required directories exist."""
    UPLOAD_DIR.mkdir(parents=True, exist_ok=True)


def is_configured(*values: str) -> bool:
    """True when every credential is set and is not a dummy placeholder."""
    for value in values:
        v = (value or "").strip()
        if not v or v.lower().startswith("dummy"):
            return False
    return True


def debug_log(msg: str) -> None:
    """Temporary debug logger, routed through info level."""
    logger.info(f"DEBUG: {msg}")
