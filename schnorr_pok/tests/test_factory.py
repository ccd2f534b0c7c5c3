"""
Unit tests for the challenge generator factory.
"""

import pytest

from schnorr_pok import factory, feature_flags
from schnorr_pok.challenge import ChallengeMode, FiatShamirChallenge, InteractiveChallenge


@pytest.fixture(autouse=True)
def reset_feature_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    feature_flags.set_challenge_mode(None)
    monkeypatch.delenv("SCHNORR_POK_CHALLENGE_MODE", raising=False)
    yield
    feature_flags.set_challenge_mode(None)


def test_default_is_fiat_shamir() -> None:
    assert isinstance(factory.get_challenge_generator(), FiatShamirChallenge)


def test_mode_by_name() -> None:
    assert isinstance(factory.get_challenge_generator("interactive"), InteractiveChallenge)
    assert isinstance(factory.get_challenge_generator("fiat-shamir"), FiatShamirChallenge)


def test_mode_by_enum() -> None:
    generator = factory.get_challenge_generator(ChallengeMode.INTERACTIVE)
    assert generator.mode is ChallengeMode.INTERACTIVE


def test_mode_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCHNORR_POK_CHALLENGE_MODE", "interactive")
    assert isinstance(factory.get_challenge_generator(), InteractiveChallenge)


def test_kwargs_forwarded() -> None:
    generator = factory.get_challenge_generator(
        "fiat-shamir", hash_name="SHA256", challenge_bits=64
    )
    assert generator.hash_name == "SHA256"
    assert generator.challenge_bits == 64


def test_invalid_mode() -> None:
    with pytest.raises(ValueError, match="Invalid challenge mode"):
        factory.get_challenge_generator("batch")


def test_missing_module(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(
        factory.CHALLENGE_REGISTRY, "interactive", "schnorr_pok.missing.Generator"
    )
    with pytest.raises(ImportError, match="Unable to import"):
        factory.get_challenge_generator("interactive")


def test_missing_class(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(
        factory.CHALLENGE_REGISTRY, "interactive", "schnorr_pok.challenge.Missing"
    )
    with pytest.raises(ImportError, match="not found"):
        factory.get_challenge_generator("interactive")


def test_class_must_implement_challenge_generator(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(
        factory.CHALLENGE_REGISTRY, "interactive", "schnorr_pok.verifier.Verifier"
    )
    with pytest.raises(TypeError, match="does not implement ChallengeGenerator"):
        factory.get_challenge_generator("interactive")
