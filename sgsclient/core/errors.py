class ContextError(Exception):
    """Base class for errors raised while building a ConnectionContext."""


class CapacityExceeded(ContextError):
    """
    The hostname does not fit in the context's hostname capacity.

    The capacity counts the UTF-8 encoded hostname plus one terminator
    byte, so the longest accepted hostname is ``capacity - 1`` bytes.
    """

    def __init__(self, hostname: str, size: int, capacity: int) -> None:
        super().__init__(
            f"Hostname too long: {size} bytes needed, capacity is {capacity}"
        )
        self.hostname = hostname
        self.size = size
        self.capacity = capacity


class AllocationFailure(ContextError):
    """Storage for a new context could not be obtained."""


class InvalidHostname(ContextError, ValueError):
    """The hostname cannot be encoded as UTF-8 (e.g. lone surrogates)."""

    def __init__(self, hostname: str, reason: str) -> None:
        super().__init__(f"Invalid hostname {hostname!r}: {reason}")
        self.hostname = hostname
