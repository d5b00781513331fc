import pytest

from tests.fake.fake_engine import FakeEngine, RecordingInterest

from sgsclient.core.context import ConnectionContext


@pytest.fixture
def interest():
    return RecordingInterest()


@pytest.fixture
def ctx(interest):
    context = ConnectionContext.from_interest("game.example.com", 1139, interest)
    yield context
    context.close()


@pytest.fixture
def engine(ctx):
    return FakeEngine(ctx)
