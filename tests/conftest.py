import random

import pytest

from utils.logger import Logger, LogCapture


@pytest.fixture
def log_capture():
    """Sink recording every structured record of the `logger` fixture."""
    return LogCapture()


@pytest.fixture
def logger(log_capture):
    """Silent logger forwarding records to log_capture."""
    lg = Logger(use_colors=False, echo=False)
    lg.set_broadcaster(log_capture)
    return lg


@pytest.fixture
def rng():
    return random.Random(1234)
