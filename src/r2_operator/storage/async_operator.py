from __future__ import annotations
import asyncio
from typing import TYPE_CHECKING

from r2_operator.storage.operator import R2Operator

if TYPE_CHECKING:
    from r2_operator.builder import Builder


class AsyncR2Operator:
    """Coroutine front end for R2Operator; each call runs on a worker thread."""

    def __init__(self, operator: R2Operator):
        self.operator = operator

    @classmethod
    def from_builder(cls, builder: Builder) -> AsyncR2Operator:
        return cls(builder.create_client())

    @property
    def bucket_name(self) -> str:
        return self.operator.bucket_name

    async def upload_binary(self, key: str, content_type: str, data: bytes) -> None:
        await asyncio.to_thread(self.operator.upload_binary, key, content_type, data)

    async def upload_file(self, key: str, content_type: str, path: str) -> None:
        await asyncio.to_thread(self.operator.upload_file, key, content_type, path)

    async def download(self, key: str) -> bytes:
        return await asyncio.to_thread(self.operator.download, key)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self.operator.delete, key)
