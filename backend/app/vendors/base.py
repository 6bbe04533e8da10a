class ProviderAdapter:
    """Base class for provider adapters (generation/TTS/STT)."""

    name = "provider"

    @property
    def configured(self) -> bool:
        return False

    async def generate(self, prompt: str, task: str = "rewrite", tone: str = "Neutral") -> str:
        raise NotImplementedError

    async def synthesize(self, text: str, voice: str, accept: str) -> bytes:
        raise NotImplementedError

    async def transcribe(self, audio_path: str, content_type: str) -> str:
        raise NotImplementedError
