import asyncio
import time
from typing import Any, Dict, Optional

from ibm_cloud_sdk_core.authenticators import IAMAuthenticator
from ibm_watson import SpeechToTextV1

from .base import ProviderAdapter
from ..config import logger, debug_log, is_configured, STT_MODEL
from ..errors import TranscriptionError
from ..utils import join_transcript


class WatsonSpeechToTextAdapter(ProviderAdapter):
    """IBM Watson Speech to Text adapter."""

    name = "watson_stt"

    def __init__(self, api_key: str, url: str, model: str = STT_MODEL, client: Optional[Any] = None):
        self.api_key = api_key
        self.url = url
        self.model = model
        self._client = client
        if self._client is None and is_configured(api_key, url):
            try:
                self._client = SpeechToTextV1(authenticator=IAMAuthenticator(api_key))
                self._client.set_service_url(url)
                logger.info("Watson Speech to Text client initialized successfully.")
            except Exception as e:
                logger.error(f"Failed to initialize Watson Speech to Text client: {e}")
                self._client = None

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def transcribe(self, audio_path: str, content_type: str) -> str:
        req_time = time.perf_counter()
        if self._client is None:
            logger.error("STT error: Watson Speech to Text client not initialized")
            raise TranscriptionError()

        def _recognize() -> Dict[str, Any]:
            with open(audio_path, "rb") as audio_file:
                response = self._client.recognize(audio=audio_file, content_type=content_type, model=self.model)
            return response.get_result() or {}

        try:
            debug_log(f"Watson STT recognize: {audio_path} content_type={content_type} model={self.model}")
            result = await asyncio.to_thread(_recognize)
            transcript = join_transcript(result.get("results"))
        except Exception as e:
            logger.error(f"STT error: {e!r}")
            raise TranscriptionError() from e

        logger.info(f"Watson STT completed: {len(transcript)} chars in {time.perf_counter() - req_time:.3f}s")
        return transcript
