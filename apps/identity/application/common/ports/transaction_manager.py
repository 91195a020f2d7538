"""TransactionManager / Flusher Ports."""

from typing import Protocol


class Flusher(Protocol):
    """Pushes pending changes to the database without committing."""

    async def flush(self) -> None: ...


class TransactionManager(Protocol):
    """Unit-of-work boundary for a request."""

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
