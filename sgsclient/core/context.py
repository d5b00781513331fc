import logging
from typing import Any, Self

from sgsclient.core.errors import AllocationFailure, CapacityExceeded, InvalidHostname
from sgsclient.core.models.events import (
    EVENT_ARITY,
    HANDLER_METHODS,
    ChannelCallback,
    ChannelMessageCallback,
    ConnectionCallback,
    EventCallback,
    EventHandler,
    EventKind,
    PayloadCallback,
    SessionCallback,
)
from sgsclient.core.ports.io import IOHook, IOInterest

HOSTNAME_CAPACITY = 100
"""
Default hostname capacity in bytes, terminator included.
"""


class ConnectionContext:
    """
    Per-connection configuration and event callback registry.

    A context is created by the application before it connects, handed
    by reference to the engine, and read by the engine whenever a
    protocol event occurs. It holds:
    - the server address (hostname and port)
    - the two I/O registration hooks the engine uses to integrate with
      the host event loop
    - one optional callback slot per EventKind

    The context never performs I/O and never calls the registration
    hooks. It has no locking: configuration changes must be serialized
    with the connection lifecycle by the caller (configure before
    connecting, reconfigure while disconnected). A callback installed
    by a setter is used from the next dispatch after the setter returns.

    One context serves one connection. Two connections need two
    contexts.
    """

    def __init__(
        self,
        hostname: str,
        port: int,
        register_io: IOHook | None = None,
        unregister_io: IOHook | None = None,
        *,
        hostname_capacity: int = HOSTNAME_CAPACITY,
    ) -> None:
        try:
            size = len(hostname.encode("utf-8")) + 1
        except UnicodeEncodeError as ex:
            raise InvalidHostname(hostname, str(ex)) from ex

        if size > hostname_capacity:
            raise CapacityExceeded(hostname, size, hostname_capacity)

        try:
            self._callbacks: dict[EventKind, EventCallback | None] = {}
            self.unset_all_cbs()
        except MemoryError as ex:
            raise AllocationFailure(
                f"Unable to allocate a context for {hostname}:{port}"
            ) from ex

        self._hostname = hostname
        self._port = port
        self._register_io = register_io
        self._unregister_io = unregister_io
        self._closed = False

        self._logger = logging.getLogger("core.context")

    @classmethod
    def from_interest(
        cls,
        hostname: str,
        port: int,
        interest: IOInterest | None,
        *,
        hostname_capacity: int = HOSTNAME_CAPACITY,
    ) -> Self:
        """
        Build a context whose registration hooks are the bound methods
        of an IOInterest implementation.
        """
        if interest is None:
            return cls(hostname, port, hostname_capacity=hostname_capacity)

        return cls(
            hostname,
            port,
            interest.register,
            interest.unregister,
            hostname_capacity=hostname_capacity,
        )

    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def port(self) -> int:
        return self._port

    @property
    def register_io(self) -> IOHook | None:
        return self._register_io

    @property
    def unregister_io(self) -> IOHook | None:
        return self._unregister_io

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """
        Release the context.

        All callback slots and registration hooks are dropped. The
        caller must ensure no engine component will read the context
        afterwards; this is not checked.
        """
        self.unset_all_cbs()
        self._register_io = None
        self._unregister_io = None
        self._closed = True

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        installed = [kind.value for kind in EventKind if self._callbacks[kind] is not None]
        return (
            f"ConnectionContext(hostname={self._hostname!r}, port={self._port}, "
            f"callbacks={installed})"
        )

    def set_callback(self, kind: EventKind | str, callback: EventCallback | None) -> None:
        """
        Install `callback` for `kind`, replacing whatever was there.

        Passing None clears the slot. A slot holds a single callback;
        there is no chaining.
        """
        kind = EventKind(kind)
        if callback is not None and not callable(callback):
            raise TypeError(f"Callback for {kind} must be callable, got {callback!r}")

        previous = self._callbacks[kind]
        self._callbacks[kind] = callback
        if previous is not None and callback is not None:
            self._logger.debug(f"Replaced {kind} callback on {self._hostname}:{self._port}")

    def get_callback(self, kind: EventKind | str) -> EventCallback | None:
        return self._callbacks[EventKind(kind)]

    def is_set(self, kind: EventKind | str) -> bool:
        return self.get_callback(kind) is not None

    def callbacks(self) -> dict[EventKind, EventCallback | None]:
        """Return a snapshot of every slot, unset ones included."""
        return dict(self._callbacks)

    def unset_all_cbs(self) -> None:
        """Clear every callback slot, e.g. before reusing the context."""
        for kind in EventKind:
            self._callbacks[kind] = None

    def install(self, handler: EventHandler) -> None:
        """
        Install the event methods defined by `handler`.

        Only the slots whose `on_<event>` method the handler defines are
        replaced; the others keep their current value. Stubs inherited
        unchanged from EventHandler do not count as defined.
        """
        for kind, name in HANDLER_METHODS.items():
            method = getattr(handler, name, None)
            if method is None:
                continue
            if getattr(type(handler), name, None) is getattr(EventHandler, name):
                continue
            self.set_callback(kind, method)

    def dispatch(self, kind: EventKind | str, *args: Any) -> bool:
        """
        Invoke the callback currently installed for `kind`.

        This is the engine's side of the contract: it is called once per
        occurrence of the event with the arguments listed for that kind.
        An unset slot is skipped silently and False is returned.
        Exceptions raised by the callback propagate to the engine.
        """
        kind = EventKind(kind)
        expected = EVENT_ARITY[kind]
        if len(args) != expected:
            raise TypeError(
                f"{kind} events carry {expected} argument(s), got {len(args)}"
            )

        callback = self._callbacks[kind]
        if callback is None:
            self._logger.debug(f"No {kind} callback installed, skipping dispatch")
            return False

        callback(*args)
        return True

    def set_channel_joined_cb(self, callback: ChannelCallback | None) -> None:
        self.set_callback(EventKind.channel_joined, callback)

    def set_channel_left_cb(self, callback: ChannelCallback | None) -> None:
        self.set_callback(EventKind.channel_left, callback)

    def set_channel_recv_msg_cb(self, callback: ChannelMessageCallback | None) -> None:
        self.set_callback(EventKind.channel_message, callback)

    def set_disconnected_cb(self, callback: ConnectionCallback | None) -> None:
        self.set_callback(EventKind.disconnected, callback)

    def set_logged_in_cb(self, callback: SessionCallback | None) -> None:
        self.set_callback(EventKind.logged_in, callback)

    def set_login_failed_cb(self, callback: PayloadCallback | None) -> None:
        self.set_callback(EventKind.login_failed, callback)

    def set_reconnected_cb(self, callback: ConnectionCallback | None) -> None:
        self.set_callback(EventKind.reconnected, callback)

    def set_recv_msg_cb(self, callback: PayloadCallback | None) -> None:
        self.set_callback(EventKind.message, callback)
