import json
from logging import getLogger
from typing import Any, Protocol

import redis.asyncio as redis
from redis.exceptions import RedisError

from .errors import CypherHttpError


class CacheError(CypherHttpError):
    pass


class CacheMissError(CacheError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No cached value for `{key}`")


class CacheUnavailableError(CacheError):
    pass


class Cache(Protocol):
    """What a transaction needs from its cache handle.

    ``get`` raises on a miss. Any exception it raises is treated as one.
    """

    def set_namespace(self, prefix: str) -> None:
        ...

    async def get(self, key: str) -> Any:
        ...

    async def set(self, key: str, value: Any, duration_seconds: int) -> None:
        ...


class RedisCache:
    """A namespaced JSON key/value cache backed by Redis."""

    @classmethod
    def from_configuration(cls, host: str, port: int, db: int = 0):
        client = redis.Redis(host=host, port=int(port), db=int(db), decode_responses=True)
        return cls(client)

    def __init__(self, client: redis.Redis, prefix: str = "") -> None:
        self.client = client
        self.prefix = prefix

    @property
    def logger(self):
        return getLogger(self.__class__.__name__)

    def set_namespace(self, prefix: str) -> None:
        self.prefix = prefix or ""

    def namespaced(self, key: str) -> str:
        return f"{self.prefix}:{key}" if self.prefix else key

    async def get(self, key: str) -> Any:
        # Resolve the full key before awaiting so a later set_namespace()
        # cannot change which entry is read.
        name = self.namespaced(key)
        try:
            data = await self.client.get(name)
        except RedisError as e:
            raise CacheUnavailableError(str(e)) from e
        if data is None:
            raise CacheMissError(name)
        try:
            return json.loads(data)
        except ValueError as e:
            raise CacheUnavailableError(f"Cached value for `{name}` is not JSON") from e

    async def set(self, key: str, value: Any, duration_seconds: int) -> None:
        name = self.namespaced(key)
        try:
            await self.client.set(name, json.dumps(value), ex=duration_seconds or None)
        except RedisError as e:
            raise CacheUnavailableError(str(e)) from e
        self.logger.debug(
            "Stored value in cache",
            extra={"key": name, "duration_seconds": duration_seconds},
        )

    async def close(self) -> None:
        await self.client.aclose()
