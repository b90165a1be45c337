import os
import tempfile

# Keep the JSON log of the test session out of the package folder
os.environ.setdefault("TAPTEMPO_LOG_FILE", os.path.join(tempfile.mkdtemp(prefix="taptempo-"), "taptempo_log.json"))

import pytest

from taptempo import custom_logger


class FakeClock:
    """ Monotonic nanosecond clock fed from a list of millisecond readings. """

    def __init__(self, *millis):
        self.readings = [int(ms * 1_000_000) for ms in millis]

    def __call__(self) -> int:
        return self.readings.pop(0)


@pytest.fixture
def fake_clock():
    return FakeClock


@pytest.fixture(autouse=True)
def restore_log_level():
    level = custom_logger.level
    yield
    custom_logger.setLevel(level)
