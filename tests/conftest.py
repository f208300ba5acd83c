import asyncio

import pytest

from toonplay.config import PlaygroundConfig
from toonplay.controller import SyncController
from toonplay.session import Playground
from toonplay.share import AddressBar
from toonplay.tokens import TokenCounter

from fakes import WordEncoder, fake_factories, install_all


@pytest.fixture
def encoder():
    return WordEncoder()


@pytest.fixture
def controller(encoder):
    """Controller over {"a":1,"b":[1,2]} with every adapter loaded."""
    ctrl = SyncController('{"a": 1, "b": [1, 2]}', counter=TokenCounter(encoder))
    return install_all(ctrl)


@pytest.fixture
def make_playground():
    """Build a started playground with fake tokenizer and real adapters."""
    def make(url="http://localhost/play", failing=(), debounce=0.0, **kwargs):
        playground = Playground(
            config=PlaygroundConfig(debounce_seconds=debounce, base_url=url),
            tokenizer_factory=WordEncoder,
            format_factories=fake_factories(failing),
            address_bar=AddressBar(url),
            **kwargs,
        )
        asyncio.run(playground.start())
        return playground
    return make
