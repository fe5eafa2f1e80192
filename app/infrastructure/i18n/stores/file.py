"""JSON file translation cache store."""

import hashlib
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

import structlog

from infrastructure.i18n.stores.base import TranslationCacheStore

logger = structlog.get_logger()


class FileCacheStore(TranslationCacheStore):
    """Store keeping one JSON document per cache key in a directory.

    File names are derived from a hash of the key so any key is a valid
    file name. Writes go through a temporary file and an atomic rename.

    Attributes:
        cache_dir: Directory holding the JSON files.
    """

    def __init__(self, cache_dir: Path):
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        logger.info("initialized_file_cache_store", cache_dir=str(self.cache_dir))

    def _file_for(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()[:32]
        return self.cache_dir / f"{digest}.json"

    def read(self, key: str) -> Optional[Dict[str, Any]]:
        cache_file = self._file_for(key)
        if not cache_file.is_file():
            logger.debug("cache_store_miss", key=key, backend="file")
            return None

        try:
            with open(cache_file, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(
                "cache_store_read_error", key=key, backend="file", error=str(e)
            )
            return None

        data = document.get("data") if isinstance(document, dict) else None
        if not isinstance(data, dict):
            logger.warning(
                "cache_store_read_error",
                key=key,
                backend="file",
                error="unexpected document format",
            )
            return None

        return data

    def write(self, key: str, data: Dict[str, Any]) -> None:
        cache_file = self._file_for(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.cache_dir, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"key": key, "data": data}, f, ensure_ascii=False)
            os.replace(tmp_name, cache_file)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug("cache_store_write", key=key, backend="file")

    def delete(self, key: str) -> None:
        cache_file = self._file_for(key)
        if cache_file.exists():
            cache_file.unlink()

    def clear(self) -> None:
        for cache_file in self.cache_dir.glob("*.json"):
            cache_file.unlink()
        logger.info("cache_store_cleared", backend="file")
