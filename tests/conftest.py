import pytest

from salao.container import reset_container, set_container
from salao.repositories.memory.factory import create_memory_container


@pytest.fixture(autouse=True)
def container(monkeypatch):
    """Fresh seeded in-memory container for every test."""
    monkeypatch.setenv("SALAO_LOGIN_DELAY", "0")
    c = create_memory_container(seed=True)
    set_container(c)
    yield c
    reset_container()


@pytest.fixture
def empty_container():
    c = create_memory_container(seed=False)
    set_container(c)
    return c


@pytest.fixture
def always_yes():
    return lambda title, message: True


@pytest.fixture
def always_no():
    return lambda title, message: False
