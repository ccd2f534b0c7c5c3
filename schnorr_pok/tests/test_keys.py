"""
Unit tests for key pair generation.
"""

import logging

import pytest

from schnorr_pok.exceptions import InputError, RngError
from schnorr_pok.keys import KeyPair, KeyPairGenerator


def test_generate_uses_full_subgroup_range(toy_params, scripted):
    rng = scripted([6])
    key_pair = KeyPairGenerator(rng).generate(toy_params)

    assert rng.calls == [(1, toy_params.q, "keygen")]
    assert key_pair.private_key == 6
    assert key_pair.public_key == 2


def test_generate_large_group(rfc_params):
    key_pair = KeyPairGenerator().generate(rfc_params)

    assert 1 <= key_pair.private_key < rfc_params.q
    assert key_pair.public_key == pow(rfc_params.g, key_pair.private_key, rfc_params.p)
    assert rfc_params.contains(key_pair.public_key)


def test_generated_keys_differ(rfc_params):
    generator = KeyPairGenerator()
    keys = {generator.generate(rfc_params).private_key for _ in range(5)}
    assert len(keys) == 5


def test_generate_covers_toy_range(toy_params):
    generator = KeyPairGenerator()
    seen = {generator.generate(toy_params).private_key for _ in range(500)}
    assert seen == set(range(1, toy_params.q))


def test_rng_failure_raises_rng_error(toy_params, failing_randomness):
    with pytest.raises(RngError) as exc_info:
        KeyPairGenerator(failing_randomness).generate(toy_params)

    assert exc_info.value.stage == "keygen"
    assert isinstance(exc_info.value.__cause__, OSError)


def test_from_private_key(toy_params):
    key_pair = KeyPair.from_private_key(toy_params, 6)
    assert key_pair == KeyPair(private_key=6, public_key=2)


@pytest.mark.parametrize("private_key", [0, 11, 12, -1])
def test_from_private_key_out_of_range(toy_params, private_key):
    with pytest.raises(InputError, match=r"\[1, q - 1\]"):
        KeyPair.from_private_key(toy_params, private_key)


def test_from_private_key_rejects_non_int(toy_params):
    with pytest.raises(InputError, match="must be int"):
        KeyPair.from_private_key(toy_params, 6.0)


def test_private_key_not_in_repr(rfc_params):
    key_pair = KeyPairGenerator().generate(rfc_params)
    assert "private_key" not in repr(key_pair)
    assert str(key_pair.private_key) not in repr(key_pair)


def test_private_key_never_logged(rfc_params, caplog):
    with caplog.at_level(logging.DEBUG, logger="schnorr_pok"):
        key_pair = KeyPairGenerator().generate(rfc_params)

    assert "Generated key pair" in caplog.text
    assert "<REDACTED>" in caplog.text
    assert str(key_pair.private_key) not in caplog.text
