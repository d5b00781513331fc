import asyncio
import logging
from typing import Callable

from sgsclient.core.models.handles import Connection
from sgsclient.core.ports.io import Readiness

ReadyCallback = Callable[[Connection, int, Readiness], None]


class AsyncioIOInterest:
    """
    IOInterest implementation backed by an asyncio event loop.

    Registering a descriptor installs loop readers/writers which forward
    readiness to `on_ready(connection, fd, readiness)`, normally the
    engine's I/O entry point. Interest is tracked per descriptor so
    READ and WRITE can be added and removed independently.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop, on_ready: ReadyCallback) -> None:
        self._loop = loop
        self._on_ready = on_ready
        self._watched: dict[int, Readiness] = {}
        self._logger = logging.getLogger("infra.asyncio_io")

    @property
    def watched(self) -> dict[int, Readiness]:
        return dict(self._watched)

    def register(self, connection: Connection, fd: int, readiness: Readiness) -> None:
        current = self._watched.get(fd, Readiness(0))

        if readiness & Readiness.READ and not current & Readiness.READ:
            self._loop.add_reader(fd, self._on_ready, connection, fd, Readiness.READ)
        if readiness & Readiness.WRITE and not current & Readiness.WRITE:
            self._loop.add_writer(fd, self._on_ready, connection, fd, Readiness.WRITE)

        self._watched[fd] = current | readiness
        self._logger.debug(f"Watching fd={fd} for {self._watched[fd]!r}")

    def unregister(self, connection: Connection, fd: int, readiness: Readiness) -> None:
        current = self._watched.get(fd)
        if current is None:
            return

        if readiness & Readiness.READ and current & Readiness.READ:
            self._loop.remove_reader(fd)
        if readiness & Readiness.WRITE and current & Readiness.WRITE:
            self._loop.remove_writer(fd)

        remaining = current & ~readiness
        if remaining:
            self._watched[fd] = remaining
        else:
            del self._watched[fd]
        self._logger.debug(f"Stopped watching fd={fd} for {readiness!r}")
