import json
import struct
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .config import logger


SYSTEM_PROMPT_TEMPLATE = (
    "You are a writer. Task: {task}. Tone: {tone}. "
    "Keep meaning intact. Output only the transformed text."
)

# Candidate locations of the generated text, highest priority first.
# The first three cover the SDK response shapes; the last is the REST shape.
GENERATED_TEXT_PATHS: List[Tuple[Union[str, int], ...]] = [
    ("result", "generated_text"),
    ("generated_text",),
    ("result", "output_text"),
    ("results", 0, "generated_text"),
]

_MISSING = object()


def build_system_prompt(task: str, tone: str) -> str:
    return SYSTEM_PROMPT_TEMPLATE.format(task=task, tone=tone)


def _lookup(data: Any, path: Sequence[Union[str, int]]) -> Any:
    current = data
    for key in path:
        if isinstance(key, int):
            if isinstance(current, list) and -len(current) <= key < len(current):
                current = current[key]
                continue
            return _MISSING
        if isinstance(current, Mapping) and key in current:
            current = current[key]
            continue
        return _MISSING
    return current


def extract_generated_text(response: Any, paths: Optional[Iterable[Sequence[Union[str, int]]]] = None) -> str:
    """Return the first generated-text field present in a provider response.

    Paths are tried in order and ``None`` values count as absent. When no
    path matches, the whole response is serialized so the caller still gets
    a (degraded) result instead of an error.
    """
    for path in paths if paths is not None else GENERATED_TEXT_PATHS:
        value = _lookup(response, path)
        if value is _MISSING or value is None:
            continue
        return value if isinstance(value, str) else json.dumps(value, default=str)
    logger.warning("No known text field in generation response, returning raw payload")
    return json.dumps(response, default=str)


def join_transcript(results: Optional[Iterable[Mapping[str, Any]]]) -> str:
    """Join the top alternative of every recognized segment, in order."""
    parts = []
    for segment in results or []:
        alternatives = (segment or {}).get("alternatives") or [{}]
        parts.append((alternatives[0] or {}).get("transcript") or "")
    return " ".join(parts).strip()


def repair_wav_header(audio: bytes) -> bytes:
    """Fix the RIFF and data chunk sizes of a streamed WAV payload.

    Streaming synthesis writes placeholder sizes (0 or 0xFFFFFFFF) into the
    header because the final length is unknown. Any payload that does not
    start with a RIFF/WAVE header is returned unchanged.
    """
    if len(audio) < 12 or audio[0:4] != b"RIFF" or audio[8:12] != b"WAVE":
        return audio

    total = len(audio)
    offset = 12
    while offset + 8 <= total:
        chunk_id = audio[offset:offset + 4]
        chunk_size = struct.unpack("<I", audio[offset + 4:offset + 8])[0]
        if chunk_id == b"data":
            data_size = total - (offset + 8)
            if chunk_size == data_size and struct.unpack("<I", audio[4:8])[0] == total - 8:
                return audio
            repaired = bytearray(audio)
            struct.pack_into("<I", repaired, 4, total - 8)
            struct.pack_into("<I", repaired, offset + 4, data_size)
            logger.debug(f"Repaired WAV header: riff={total - 8} data={data_size} (was {chunk_size})")
            return bytes(repaired)
        # chunks are word aligned
        offset += 8 + chunk_size + (chunk_size & 1)

    logger.warning("WAV payload has no data chunk, leaving header untouched")
    return audio
