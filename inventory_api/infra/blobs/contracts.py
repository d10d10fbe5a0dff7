from __future__ import annotations
from typing import Optional, Protocol

class BlobStore(Protocol):
    def put(self, name: str, data: bytes) -> None:
        ...

    def get(self, name: str) -> Optional[bytes]:
        ...
