import logging

import pytest

from core.logger import APP_LOGGER_NAME


class ScriptedRandom:
    """Deterministic RandomSource.

    Replays the scripted values in order and keeps repeating the last one.
    `picks` are indexes into the sequence passed to `choice`.
    """

    def __init__(self, *, floats=(0.99,), ranges=(0,), picks=(0,)):
        self._floats = list(floats)
        self._ranges = list(ranges)
        self._picks = list(picks)
        self.calls = {"random": 0, "randrange": 0, "choice": 0}

    @staticmethod
    def _take(values, index):
        return values[min(index, len(values) - 1)]

    def random(self):
        value = self._take(self._floats, self.calls["random"])
        self.calls["random"] += 1
        return value

    def randrange(self, stop):
        value = self._take(self._ranges, self.calls["randrange"])
        self.calls["randrange"] += 1
        return value % stop

    def choice(self, seq):
        index = self._take(self._picks, self.calls["choice"])
        self.calls["choice"] += 1
        return seq[index % len(seq)]


# Digit picks that rebuild the BBAN of the canonical DE89 3704 0044 0532 0130 00.
DE_REFERENCE_BBAN = "370400440532013000"
DE_REFERENCE_PICKS = tuple(int(ch) for ch in DE_REFERENCE_BBAN)


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def de_reference_random():
    return ScriptedRandom(picks=DE_REFERENCE_PICKS)


@pytest.fixture(autouse=True)
def reset_app_logger():
    """The CLI configures handlers on the app logger; drop them between tests."""
    yield
    root = logging.getLogger(APP_LOGGER_NAME)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
