"""Read-only Redis access for jettison-health.

Shipped in this module
----------------------
- HealthStore    — protocol the fetcher depends on (GET semantics only)
- RedisStore     — redis-py implementation, one connection per invocation
- connect_store  — open and verify a ``RedisStore`` from config + credentials

The fetcher only ever needs ``get_many``; a missing key comes back as
``None``.  Every transport failure is translated to
:class:`~jettison_health.schema.errors.StoreError`.
"""
from __future__ import annotations

import concurrent.futures
import logging
from collections.abc import Callable, Sequence
from types import TracebackType
from typing import Protocol, TypeVar

import redis

from jettison_health.schema.config import RedisConfig
from jettison_health.schema.errors import StoreError
from jettison_health.schema.health import Credentials

logger = logging.getLogger(__name__)

CONNECT_FAILED = "Redis connection failed"

_T = TypeVar("_T")


class HealthStore(Protocol):
    """Minimal read interface over the health-pool store.

    *timeout* is the wall-clock budget for one call, in seconds; ``None``
    means no limit beyond the store's own.
    """

    def ping(self, timeout: float | None = None) -> None: ...

    def get_many(
        self, keys: Sequence[str], timeout: float | None = None
    ) -> list[str | None]: ...

    def close(self) -> None: ...


class RedisStore:
    """``HealthStore`` backed by a ``redis.Redis`` client.

    Calls given a *timeout* run on a single worker thread and are abandoned
    once it elapses.  redis-py's ``socket_timeout`` bounds each socket read
    separately, so it cannot cap a whole round trip on its own.  Closing
    the store disconnects the client, which releases an abandoned call.

    Use as a context manager so the connection is released on every exit
    path::

        with connect_store(cfg.redis, creds) as store:
            values = store.get_many(["svc:__healthpool__api_health"], timeout=2.0)
    """

    def __init__(self, client: redis.Redis) -> None:
        self._client = client
        self._executor: concurrent.futures.ThreadPoolExecutor | None = None

    def _bounded(
        self,
        call: Callable[[], _T],
        timeout: float | None,
        action: str,
        title: str | None = None,
    ) -> _T:
        if timeout is None:
            return call()
        if self._executor is None:
            self._executor = concurrent.futures.ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="jettison-redis"
            )
        future = self._executor.submit(call)
        try:
            return future.result(timeout=timeout)
        except concurrent.futures.TimeoutError as exc:
            future.cancel()
            raise StoreError(
                f"timed out after {timeout:.3g}s {action}",
                context={"timeout_seconds": timeout},
                title=title,
            ) from exc

    def ping(self, timeout: float | None = None) -> None:
        """Verify the connection and credentials.

        Raises
        ------
        StoreError
            If the server cannot be reached, rejects the credentials, or
            does not answer within *timeout* seconds.
        """
        self._bounded(self._ping, timeout, "waiting for PING", title=CONNECT_FAILED)

    def _ping(self) -> None:
        try:
            self._client.ping()
        except redis.RedisError as exc:
            raise StoreError(str(exc), title=CONNECT_FAILED) from exc

    def get_many(
        self, keys: Sequence[str], timeout: float | None = None
    ) -> list[str | None]:
        """GET every key in one pipelined round trip.

        Returns values in the order of *keys*; ``None`` for keys that do not
        exist.

        Raises
        ------
        StoreError
            On timeout, connection loss, or any other server error.
        """
        if not keys:
            return []
        keys = list(keys)
        return self._bounded(
            lambda: self._pipelined_get(keys),
            timeout,
            f"reading {len(keys)} key(s)",
        )

    def _pipelined_get(self, keys: list[str]) -> list[str | None]:
        pipe = self._client.pipeline(transaction=False)
        for key in keys:
            pipe.get(key)
        try:
            return list(pipe.execute())
        except redis.RedisError as exc:
            raise StoreError(
                f"failed to read {len(keys)} key(s): {exc}",
                context={"keys": keys},
            ) from exc
        finally:
            pipe.reset()

    def close(self) -> None:
        try:
            self._client.close()
        except redis.RedisError:
            logger.debug("Ignoring error while closing Redis client", exc_info=True)
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None

    def __enter__(self) -> RedisStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"RedisStore(client={self._client!r})"


def build_client(config: RedisConfig, credentials: Credentials) -> redis.Redis:
    """Construct (but do not connect) the redis-py client."""
    return redis.Redis(
        host=config.host,
        port=config.port,
        db=config.db,
        username=credentials.username,
        password=credentials.password,
        socket_timeout=config.timeout_seconds,
        socket_connect_timeout=config.timeout_seconds,
        decode_responses=True,
    )


def connect_store(config: RedisConfig, credentials: Credentials) -> RedisStore:
    """Open a ``RedisStore`` and verify it with ``PING``.

    The connect, AUTH and PING exchange together get at most
    ``config.timeout_seconds``.  The client is closed before the error
    propagates if the ping fails.

    Raises
    ------
    StoreError
        If the connection or authentication fails, or times out.
    """
    store = RedisStore(build_client(config, credentials))
    try:
        store.ping(timeout=config.timeout_seconds)
    except StoreError:
        store.close()
        raise
    logger.debug("Connected to Redis at %s (db %d)", config.address, config.db)
    return store
