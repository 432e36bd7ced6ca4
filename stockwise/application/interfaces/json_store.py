from __future__ import annotations

from typing import Protocol


class JsonStore(Protocol):
    """Durable key-value slots holding serialized JSON documents."""

    async def load(self, key: str) -> str | None: ...

    async def save(self, key: str, payload: str) -> None: ...
