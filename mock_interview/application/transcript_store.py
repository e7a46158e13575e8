import asyncio
import json
import os
from pathlib import Path
from typing import Any, Dict, List

import aiofiles
import structlog

from ..core.exceptions import ConfigurationError
from ..core.interfaces import TranscriptStore

logger = structlog.get_logger(__name__)


class JsonTranscriptStore(TranscriptStore):
    """Keeps every finished transcript in a single JSON array on disk.

    The whole file is read once at construction and rewritten on each append
    (temp file, then atomic rename).
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._records: List[Dict[str, Any]] = self._load()
        self._lock = asyncio.Lock()

    def _load(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Transcript file {self.path} is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise ConfigurationError(f"Transcript file {self.path} must hold a JSON array")
        logger.info("transcripts_loaded", path=str(self.path), count=len(data))
        return data

    def records(self) -> List[Dict[str, Any]]:
        return list(self._records)

    async def append(self, record: Dict[str, Any]) -> None:
        async with self._lock:
            records = [*self._records, record]
            await self._write(records)
            self._records = records
        logger.info("transcript_saved", path=str(self.path), count=len(records))

    async def _write(self, records: List[Dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_file = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            async with aiofiles.open(temp_file, "w", encoding="utf-8") as out_file:
                await out_file.write(json.dumps(records, indent=2, ensure_ascii=False))
            os.replace(temp_file, self.path)
        except OSError:
            if temp_file.exists():
                temp_file.unlink()
            raise
