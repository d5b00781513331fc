from enum import IntFlag
from typing import Callable, Protocol

from sgsclient.core.models.handles import Connection


class Readiness(IntFlag):
    """Readiness conditions the engine may watch on a descriptor."""
    READ = 1
    WRITE = 2


IOHook = Callable[[Connection, int, Readiness], None]
"""
Bare callable form of a registration hook:
    hook(connection, fd, readiness)
"""


class IOInterest(Protocol):
    """
    Bridge between the engine and the host event loop.

    The engine calls `register` when it needs the host loop to start
    watching a file descriptor for the given readiness conditions, and
    `unregister` when it no longer does. Implementations belong to the
    embedding application; a ConnectionContext stores them and never
    calls them itself.
    """

    def register(self, connection: Connection, fd: int, readiness: Readiness) -> None:
        """Start watching `fd` for `readiness` on behalf of `connection`."""

    def unregister(self, connection: Connection, fd: int, readiness: Readiness) -> None:
        """Stop watching `fd` for `readiness` on behalf of `connection`."""
