from enum import StrEnum
from typing import Protocol

from sgsclient.core.models.handles import Channel, CompactId, Connection, Session


class EventKind(StrEnum):
    """
    Protocol events the application can subscribe to.

    Each kind maps to exactly one callback slot in a ConnectionContext.
    The engine decides when an event occurs; the context only stores
    what should be invoked when it does.
    """
    channel_joined = "channel_joined"
    """The client was added to a channel."""

    channel_left = "channel_left"
    """The client was removed from a channel."""

    channel_message = "channel_message"
    """A message arrived on a channel."""

    disconnected = "disconnected"
    """The underlying connection was closed."""

    logged_in = "logged_in"
    """Authentication succeeded and a session was established."""

    login_failed = "login_failed"
    """Authentication was rejected by the server."""

    reconnected = "reconnected"
    """A dropped connection was re-established."""

    message = "message"
    """A message arrived outside any channel."""


class ConnectionCallback(Protocol):
    def __call__(self, connection: Connection) -> None:
        ...


class ChannelCallback(Protocol):
    def __call__(self, connection: Connection, channel: Channel) -> None:
        ...


class ChannelMessageCallback(Protocol):
    def __call__(
        self,
        connection: Connection,
        channel: Channel,
        sender: CompactId,
        message: bytes,
    ) -> None:
        ...


class SessionCallback(Protocol):
    def __call__(self, connection: Connection, session: Session) -> None:
        ...


class PayloadCallback(Protocol):
    """
    Callback receiving raw bytes from the server: the failure reason for
    login_failed, the message body for message.
    """
    def __call__(self, connection: Connection, payload: bytes) -> None:
        ...


EventCallback = (
    ConnectionCallback
    | ChannelCallback
    | ChannelMessageCallback
    | SessionCallback
    | PayloadCallback
)


EVENT_ARITY: dict[EventKind, int] = {
    EventKind.channel_joined: 2,
    EventKind.channel_left: 2,
    EventKind.channel_message: 4,
    EventKind.disconnected: 1,
    EventKind.logged_in: 2,
    EventKind.login_failed: 2,
    EventKind.reconnected: 1,
    EventKind.message: 2,
}
"""
Number of positional arguments delivered with each event.
"""


HANDLER_METHODS: dict[EventKind, str] = {
    kind: f"on_{kind.value}"
    for kind in EventKind
}
"""
Method name an EventHandler implements to receive a given event.
"""


class EventHandler(Protocol):
    """
    Object-oriented alternative to installing callbacks one by one.

    An application may implement any subset of these methods and pass
    the object to ConnectionContext.install(); only the methods present
    on the object are installed.
    """

    def on_channel_joined(self, connection: Connection, channel: Channel) -> None:
        ...

    def on_channel_left(self, connection: Connection, channel: Channel) -> None:
        ...

    def on_channel_message(
        self,
        connection: Connection,
        channel: Channel,
        sender: CompactId,
        message: bytes,
    ) -> None:
        ...

    def on_disconnected(self, connection: Connection) -> None:
        ...

    def on_logged_in(self, connection: Connection, session: Session) -> None:
        ...

    def on_login_failed(self, connection: Connection, reason: bytes) -> None:
        ...

    def on_reconnected(self, connection: Connection) -> None:
        ...

    def on_message(self, connection: Connection, message: bytes) -> None:
        ...
