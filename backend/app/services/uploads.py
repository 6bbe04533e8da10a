import os
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional, Union

import aiofiles
import aiofiles.os
from fastapi import UploadFile

from ..config import UPLOAD_DIR, logger
from ..errors import TranscriptionError


CHUNK_SIZE = 64 * 1024


def _upload_path(directory: Path, filename: Optional[str]) -> Path:
    suffix = Path(filename or "").suffix
    return directory / f"stt_{uuid.uuid4().hex}{suffix}"


@asynccontextmanager
async def spooled_upload(upload: UploadFile, directory: Union[str, Path, None] = None) -> AsyncIterator[str]:
    """Write an uploaded file to a uniquely named temp file and yield its path.

    The file is removed when the block exits, whether or not it raised.
    Removal failures are logged and ignored; a failure to write the file
    raises TranscriptionError.
    """
    target_dir = Path(directory) if directory is not None else UPLOAD_DIR
    audio_path = str(_upload_path(target_dir, upload.filename))
    try:
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(audio_path, "wb") as f:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    await f.write(chunk)
        except OSError as e:
            logger.error(f"Failed to spool upload to {audio_path}: {e}")
            raise TranscriptionError() from e
        logger.info(f"Spooled upload to {audio_path} ({os.path.getsize(audio_path)} bytes)")
        yield audio_path
    finally:
        try:
            await aiofiles.os.remove(audio_path)
        except OSError as e:
            logger.debug(f"Could not remove upload {audio_path}: {e}")
