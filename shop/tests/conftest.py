# shop/tests/conftest.py
import logging

import pytest

from shop.domain.entities import Address
from shop.domain.interfaces import EventHandler
from shop.infrastructure.event_dispatcher import EventDispatcher


class RecordingHandler(EventHandler):
    def __init__(self, name: str, journal: list):
        self.name = name
        self.journal = journal

    def handle(self, event) -> None:
        self.journal.append((self.name, event))


@pytest.fixture
def test_logger():
    logger = logging.getLogger("test_shop")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def dispatcher(test_logger):
    return EventDispatcher(test_logger)


@pytest.fixture
def journal():
    return []


@pytest.fixture
def make_handler(journal):
    def factory(name: str) -> RecordingHandler:
        return RecordingHandler(name, journal)

    return factory


@pytest.fixture
def address():
    return Address("Street", 1, "13330-250", "City")
