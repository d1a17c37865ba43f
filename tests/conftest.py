import pytest

from termcore.db import ConsoleConfig, MemoryStore
from termcore.interface import BufferSurface, Interpreter


@pytest.fixture
def surface():
    return BufferSurface()


@pytest.fixture
def storage():
    return MemoryStore()


@pytest.fixture
def config():
    return ConsoleConfig(welcome_message=None)


@pytest.fixture
def interpreter(surface, storage, config):
    return Interpreter(surface, storage=storage, config=config)
