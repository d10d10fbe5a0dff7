from __future__ import annotations

import json
import logging
from pathlib import Path

from inventory_api.core.config import settings
from inventory_api.models.document_models import Document

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    Load/save accessor for the single JSON document holding products and orders.
    Every call reads or rewrites the whole file; calls are not serialized.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def ensure(self) -> None:
        """Creates the parent directory and an empty document if missing."""
        if self.path.parent and not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.save(Document.empty())
            logger.info("[storage] initialized empty document", extra={"path": str(self.path)})

    def load(self) -> Document:
        if not self.path.exists():
            self.ensure()
            return Document.empty()
        with self.path.open("r", encoding="utf-8") as fh:
            raw = json.load(fh)
        return Document.model_validate(raw)

    def save(self, document: Document) -> None:
        with self.path.open("w", encoding="utf-8") as fh:
            json.dump(document.to_dict(), fh, indent=2, ensure_ascii=False)


def get_store() -> DocumentStore:
    """Provides the document store for a request."""
    return DocumentStore(settings.DATA_PATH)
