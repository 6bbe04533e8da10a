import asyncio
import time
from typing import Any, Optional

from ibm_cloud_sdk_core.authenticators import IAMAuthenticator
from ibm_watson import TextToSpeechV1

from .base import ProviderAdapter
from ..config import logger, is_configured
from ..errors import SynthesisError
from ..utils import repair_wav_header


class WatsonTextToSpeechAdapter(ProviderAdapter):
    """IBM Watson Text to Speech adapter."""

    name = "watson_tts"

    def __init__(self, api_key: str, url: str, client: Optional[Any] = None):
        self.api_key = api_key
        self.url = url
        self._client = client
        if self._client is None and is_configured(api_key, url):
            try:
                self._client = TextToSpeechV1(authenticator=IAMAuthenticator(api_key))
                self._client.set_service_url(url)
                logger.info("Watson Text to Speech client initialized successfully.")
            except Exception as e:
                logger.error(f"Failed to initialize Watson Text to Speech client: {e}")
                self._client = None

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def synthesize(self, text: str, voice: str, accept: str) -> bytes:
        req_time = time.perf_counter()
        if self._client is None:
            logger.error("TTS error: Watson Text to Speech client not initialized")
            raise SynthesisError()

        def _synthesize_and_read() -> bytes:
            response = self._client.synthesize(text=text, voice=voice, accept=accept)
            return response.get_result().content

        try:
            logger.info(f"Watson TTS synthesize: voice='{voice}', accept='{accept}', text length={len(text)}")
            audio = await asyncio.to_thread(_synthesize_and_read)
        except Exception as e:
            logger.error(f"TTS error: {e!r}")
            raise SynthesisError() from e

        audio = repair_wav_header(audio or b"")
        logger.info(f"Watson TTS latency: {time.perf_counter() - req_time:.3f}s, {len(audio)} bytes")
        return audio
