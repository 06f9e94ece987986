import os

import pytest

# Qt widget tests render offscreen; must be set before QApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from loguru import logger

from pinfield.core.configuration import PinConfiguration


@pytest.fixture
def log_messages():
    """Collect loguru records emitted during a test as 'LEVEL|message' strings."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(
            f"{message.record['level'].name}|{message.record['message']}"
        ),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def digits4():
    return PinConfiguration(slot_count=4, valid_characters="0123456789", token="•")


@pytest.fixture
def digits6():
    return PinConfiguration(slot_count=6, valid_characters="0123456789", token="-")
