from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from inventory_api.core.config import settings

logger = logging.getLogger(__name__)


class LocalBlobStore:
    """BlobStore backed by one flat directory on the local filesystem."""

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def ensure(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, name: str) -> Optional[Path]:
        # flat namespace: no separators, no parent references
        if not name or name in {".", ".."} or "/" in name or "\\" in name:
            return None
        return self.directory / name

    def put(self, name: str, data: bytes) -> None:
        path = self._path(name)
        if path is None:
            raise ValueError(f"invalid blob name: {name!r}")
        self.ensure()
        path.write_bytes(data)
        logger.debug("[blobs] stored %s (%d bytes)", name, len(data))

    def get(self, name: str) -> Optional[bytes]:
        path = self._path(name)
        if path is None or not path.is_file():
            return None
        return path.read_bytes()


def get_blob_store() -> LocalBlobStore:
    """Provides the upload blob store for a request."""
    return LocalBlobStore(settings.UPLOAD_DIR)
