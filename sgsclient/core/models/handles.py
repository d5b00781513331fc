from dataclasses import dataclass
from typing import Protocol, Self


@dataclass(frozen=True, slots=True)
class CompactId:
    """
    Compact identifier used by the protocol for sessions and message senders.

    The server encodes identifiers as a short big‑endian byte string of at
    most eight bytes. The client never interprets the value: it is compared,
    hashed and rendered as hex for logs, nothing more.
    """
    data: bytes

    MAX_SIZE = 8

    def __post_init__(self) -> None:
        if not self.data:
            raise ValueError("Invalid compact id: empty")
        if len(self.data) > self.MAX_SIZE:
            raise ValueError(
                f"Invalid compact id: {len(self.data)} bytes "
                f"(max {self.MAX_SIZE})"
            )

    @classmethod
    def from_hex(cls, value: str) -> Self:
        return cls(bytes.fromhex(value))

    def to_hex(self) -> str:
        return self.data.hex()

    def __str__(self) -> str:
        return self.to_hex()


class Connection(Protocol):
    """
    Handle of a client connection owned by the engine.

    Callbacks receive it as their first argument. The context never
    creates, stores or inspects connection handles.
    """


class Channel(Protocol):
    """Handle of a channel the client is a member of."""

    @property
    def name(self) -> str:
        ...


class Session(Protocol):
    """Handle of an authenticated session."""

    @property
    def session_id(self) -> CompactId:
        ...
