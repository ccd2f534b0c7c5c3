"""
Shared fixtures: group parameters and deterministic randomness sources.
"""

from collections import deque

import pytest

from schnorr_pok.group import get_group
from schnorr_pok.keys import KeyPair, KeyPairGenerator
from schnorr_pok.security import RandomnessSource


class ScriptedRandomness(RandomnessSource):
    """Returns pre-set values in order and records every requested range."""

    def __init__(self, values=()):
        super().__init__()
        self._values = deque(values)
        self.calls = []

    def get_random_in_range(self, low, high, stage="random"):
        self.calls.append((low, high, stage))
        value = self._values.popleft()
        assert low <= value < high, f"scripted value {value} outside [{low}, {high})"
        return value


class _BrokenSystemRandom:
    def randrange(self, *args):
        raise OSError("entropy source unavailable")


def make_failing_randomness() -> RandomnessSource:
    """RandomnessSource whose underlying generator always fails."""
    rng = RandomnessSource()
    rng._rng = _BrokenSystemRandom()
    return rng


@pytest.fixture
def toy_params():
    """p = 23, q = 11, g = 4."""
    return get_group("toy")


@pytest.fixture
def rfc_params():
    """RFC 3526 2048-bit MODP group."""
    return get_group("rfc3526-2048")


@pytest.fixture
def toy_key_pair(toy_params):
    """x = 6, y = 2."""
    return KeyPair.from_private_key(toy_params, 6)


@pytest.fixture
def scripted():
    return ScriptedRandomness


@pytest.fixture
def failing_randomness():
    return make_failing_randomness()


@pytest.fixture(scope="module")
def rfc_key_pair():
    """Random key pair in the 2048-bit group."""
    return KeyPairGenerator().generate(get_group("rfc3526-2048"))
