import pytest

from sgsclient.core.models.events import EVENT_ARITY, HANDLER_METHODS, EventKind
from sgsclient.core.models.handles import CompactId


@pytest.mark.ut
def test_event_kinds_are_fixed():
    assert [kind.value for kind in EventKind] == [
        "channel_joined",
        "channel_left",
        "channel_message",
        "disconnected",
        "logged_in",
        "login_failed",
        "reconnected",
        "message",
    ]


@pytest.mark.ut
def test_every_kind_has_arity_and_handler_method():
    assert set(EVENT_ARITY) == set(EventKind)
    assert HANDLER_METHODS[EventKind.channel_message] == "on_channel_message"
    assert HANDLER_METHODS[EventKind.message] == "on_message"


@pytest.mark.ut
def test_compact_id_hex():
    cid = CompactId.from_hex("0a0b")

    assert cid.data == b"\x0a\x0b"
    assert cid.to_hex() == "0a0b"
    assert str(cid) == "0a0b"
    assert cid == CompactId(b"\x0a\x0b")
    assert len({cid, CompactId(b"\x0a\x0b")}) == 1


@pytest.mark.ut
@pytest.mark.parametrize("data", [b"", b"\x00" * 9])
def test_compact_id_rejects_invalid_size(data):
    with pytest.raises(ValueError):
        CompactId(data)
