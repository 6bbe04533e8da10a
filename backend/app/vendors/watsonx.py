import time
from typing import Any, Dict, Optional

import httpx

from .base import ProviderAdapter
from ..config import logger, debug_log, is_configured
from ..errors import GenerationError
from ..utils import build_system_prompt, extract_generated_text


# Decoding policy; callers supply content only.
DECODING_PARAMETERS: Dict[str, Any] = {
    "decoding_method": "greedy",
    "max_new_tokens": 400,
    "stop_sequences": [],
    "temperature": 0.2,
}


class WatsonxAdapter(ProviderAdapter):
    """watsonx.ai text generation adapter (Granite models)."""

    name = "watsonx"

    def __init__(
        self,
        api_key: str,
        url: str,
        project_id: str,
        model_id: str = "ibm/granite-13b-instruct-v2",
        version: str = "2024-05-31",
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.url = (url or "").rstrip("/")
        self.project_id = project_id
        self.model_id = model_id
        self.version = version
        self.timeout = timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return is_configured(self.api_key, self.url, self.project_id)

    def build_payload(self, prompt: str, task: str, tone: str) -> Dict[str, Any]:
        return {
            "model_id": self.model_id,
            "input": prompt,
            "project_id": self.project_id,
            "parameters": dict(DECODING_PARAMETERS, stop_sequences=list(DECODING_PARAMETERS["stop_sequences"])),
            "context": {"system_prompt": build_system_prompt(task, tone)},
        }

    async def generate(self, prompt: str, task: str = "rewrite", tone: str = "Neutral") -> str:
        req_time = time.perf_counter()
        if not self.configured:
            logger.error("watsonx generation error: watsonx credentials not configured")
            raise GenerationError()

        url = f"{self.url}/ml/v1/text/generation"
        headers = {"Authorization": f"Bearer {self.api_key}", "Accept": "application/json"}
        payload = self.build_payload(prompt, task, tone)
        debug_log(f"watsonx generate called with: model={self.model_id}, task={task}, tone={tone}, input length={len(prompt)}")
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                resp = await client.post(url, params={"version": self.version}, headers=headers, json=payload)
                if resp.status_code >= 400:
                    logger.error(f"watsonx error response: {resp.status_code} - {resp.text}")
                    raise GenerationError()
                data = resp.json()
        except GenerationError:
            raise
        except Exception as e:
            logger.error(f"watsonx generation error: {e!r}")
            raise GenerationError() from e

        text = extract_generated_text(data)
        logger.info(f"watsonx generation latency: {time.perf_counter() - req_time:.3f}s, output length: {len(text)}")
        return text
