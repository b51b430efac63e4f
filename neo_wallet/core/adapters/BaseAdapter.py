from __future__ import annotations

from abc import ABC
from collections.abc import Callable, Coroutine
from typing import Any

from loguru import logger as loguru_logger

StatusTuple = tuple[bool, Any]


class UnsupportedOperationError(RuntimeError):
    def __init__(self, client: Any, operation: str):
        self.client_name = type(client).__name__ if client is not None else None
        self.operation = operation
        if client is None:
            super().__init__(f"no client configured for {operation}")
        else:
            super().__init__(f"{self.client_name} does not support {operation}")


def delegate(client: Any, operation: str) -> Callable[..., Coroutine[Any, Any, Any]]:
    """Look up ``operation`` on ``client``, raising if the client cannot perform it."""
    fn = getattr(client, operation, None) if client is not None else None
    if not callable(fn):
        raise UnsupportedOperationError(client, operation)
    return fn


class LoguruErrorLog:
    """Presents a loguru logger through the ``error(tag, err)`` call shape."""

    def __init__(self, bound_logger: Any):
        self._logger = bound_logger

    def error(self, tag: str, err: Any) -> None:
        self._logger.error(f"{tag} {err}")

    def __getattr__(self, name: str) -> Any:
        return getattr(self._logger, name)


class BaseAdapter(ABC):
    adapter_type: str | None = None

    def __init__(
        self,
        name: str,
        config: dict[str, Any] | None = None,
        *,
        logger: Any | None = None,
    ):
        self.name = name
        self.config = config or {}
        self.logger = logger or LoguruErrorLog(
            loguru_logger.bind(adapter=self.__class__.__name__)
        )

    async def close(self) -> None:
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
