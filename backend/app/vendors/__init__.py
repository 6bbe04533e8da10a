from .base import ProviderAdapter
from .watsonx import WatsonxAdapter
from .watson_tts import WatsonTextToSpeechAdapter
from .watson_stt import WatsonSpeechToTextAdapter
from ..config import (
    WATSONX_API_KEY, WATSONX_URL, WATSONX_PROJECT_ID, WATSONX_MODEL_ID, WATSONX_API_VERSION,
    TTS_API_KEY, TTS_URL, STT_API_KEY, STT_URL, STT_MODEL,
)


watsonx_adapter = WatsonxAdapter(WATSONX_API_KEY, WATSONX_URL, WATSONX_PROJECT_ID, WATSONX_MODEL_ID, WATSONX_API_VERSION)
watson_tts_adapter = WatsonTextToSpeechAdapter(TTS_API_KEY, TTS_URL)
watson_stt_adapter = WatsonSpeechToTextAdapter(STT_API_KEY, STT_URL, STT_MODEL)

PROVIDER_ADAPTERS = {
    "generation": watsonx_adapter,
    "tts": watson_tts_adapter,
    "stt": watson_stt_adapter,
}


# FastAPI dependencies; tests replace these through app.dependency_overrides
def get_generation_adapter() -> ProviderAdapter:
    return PROVIDER_ADAPTERS["generation"]


def get_tts_adapter() -> ProviderAdapter:
    return PROVIDER_ADAPTERS["tts"]


def get_stt_adapter() -> ProviderAdapter:
    return PROVIDER_ADAPTERS["stt"]
