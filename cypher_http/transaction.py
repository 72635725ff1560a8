import asyncio
import threading
from dataclasses import dataclass
from enum import Enum
from logging import getLogger
from typing import Any, Dict, List, Optional

import aiohttp

from .cache import Cache, CacheMissError
from .errors import (
    CommitFailedError,
    ConfigurationError,
    CypherError,
    ReuseError,
    TransactionFailedError,
)
from .neo4j_connection import Neo4jHttpConnection
from .query import OpenedTransaction, Statement, StatementBatch

HTTP_OK = 200
HTTP_CREATED = 201

_MISS = object()


class TransactionState(str, Enum):
    IDLE = "idle"
    EXECUTING = "executing"
    COMMITTED = "committed"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class CacheConfig:
    prefix: str
    key: str
    duration_seconds: int


class Transaction:
    """A batch of statements committed as a single unit over HTTP.

    A transaction runs at most once. It leaves ``IDLE`` the moment
    ``execute()`` is called, so a failed execution still exhausts it and a
    retry needs a fresh transaction.
    """

    def __init__(
        self,
        connection: Neo4jHttpConnection,
        cache: Optional[Cache] = None,
    ) -> None:
        self.connection = connection
        self.cache = cache
        self.cache_config: Optional[CacheConfig] = None
        self.statements: List[Statement] = []
        self.state = TransactionState.IDLE
        self.cache_write: Optional[asyncio.Task] = None
        self._state_lock = threading.Lock()
        self.logger = getLogger(self.__class__.__name__)

    @property
    def endpoint(self) -> str:
        return self.connection.transaction_url

    @property
    def used(self) -> bool:
        return self.state is not TransactionState.IDLE

    def add_query(self, query, parameters: Optional[Dict[str, Any]] = None):
        with self._state_lock:
            if self.state is not TransactionState.IDLE:
                raise ReuseError()
            self.statements.append(Statement(str(query), parameters or {}))
        return self

    def cacheable(self, prefix: str, key: str, duration_seconds: int):
        if self.cache is None:
            raise ConfigurationError()
        self.cache_config = CacheConfig(prefix, key, duration_seconds)
        return self

    def _begin(self) -> None:
        with self._state_lock:
            if self.state is not TransactionState.IDLE:
                raise ReuseError()
            self.state = TransactionState.EXECUTING

    async def execute(self) -> Any:
        self._begin()
        try:
            if self.cache_config is not None:
                cached = await self._read_cache()
                if cached is not _MISS:
                    self.state = TransactionState.COMMITTED
                    return cached

            opened = await self._open()
            results = await self._commit(opened)
            if self.cache_config is not None:
                self._schedule_cache_write(results)
        except Exception:
            self.state = TransactionState.FAILED
            raise

        self.state = TransactionState.COMMITTED
        return results

    async def _read_cache(self) -> Any:
        config = self.cache_config
        # Any cache handle failure counts as a miss; caching never breaks a read.
        try:
            self.cache.set_namespace(config.prefix)
            value = await self.cache.get(config.key)
        except CacheMissError:
            self.logger.debug("Cache miss", extra={"key": config.key})
            return _MISS
        except Exception as e:
            self.logger.warning(
                "Cache read failed, running transaction against the database",
                extra={"key": config.key, "error": str(e)},
            )
            return _MISS

        self.logger.info(
            "Serving transaction from cache",
            extra={"prefix": config.prefix, "key": config.key},
        )
        return value

    async def _open(self) -> OpenedTransaction:
        batch = StatementBatch(list(self.statements))
        response = await self.connection.post(self.endpoint, batch.as_payload())

        if response.status not in (HTTP_OK, HTTP_CREATED):
            await self._rollback()
            raise TransactionFailedError(response.status, response.reason)

        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            raise TransactionFailedError(response.status, response.reason)

        errors = body.get("errors") or []
        if errors:
            # Unconfirmed transactions expire on the server, no rollback needed.
            raise CypherError(errors)

        commit_url = body.get("commit")
        if not commit_url:
            raise TransactionFailedError(response.status, response.reason)

        return OpenedTransaction(commit_url=commit_url, results=body.get("results", []))

    async def _rollback(self) -> None:
        try:
            await self.connection.delete(self.endpoint)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.warning(
                "Rollback request failed",
                extra={"url": self.endpoint, "error": str(e)},
            )

    async def _commit(self, opened: OpenedTransaction) -> List[Dict[str, Any]]:
        response = await self.connection.post(opened.commit_url)
        if response.status != HTTP_OK:
            raise CommitFailedError(response.status, response.reason)
        return opened.results

    def _schedule_cache_write(self, results: List[Dict[str, Any]]) -> None:
        if self.cache is None:
            raise ConfigurationError()
        self.cache_write = asyncio.create_task(self._write_cache(results))

    async def _write_cache(self, results: List[Dict[str, Any]]) -> None:
        config = self.cache_config
        try:
            self.cache.set_namespace(config.prefix)
            await self.cache.set(config.key, results, config.duration_seconds)
        except Exception as e:
            self.logger.warning(
                "Cache write failed",
                extra={"key": config.key, "error": str(e)},
            )
