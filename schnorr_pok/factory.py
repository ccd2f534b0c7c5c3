"""
Challenge generator factory.

Maps challenge mode names to ChallengeGenerator classes. New modes register
here without touching Prover or Verifier.
"""

from __future__ import annotations

import importlib
from typing import Any, Final

from .challenge import ChallengeGenerator, ChallengeMode
from .feature_flags import get_challenge_mode

CHALLENGE_REGISTRY: Final[dict[str, str]] = {
    "interactive": "schnorr_pok.challenge.InteractiveChallenge",
    "fiat-shamir": "schnorr_pok.challenge.FiatShamirChallenge",
}


def _format_valid_options() -> str:
    return ", ".join(sorted(CHALLENGE_REGISTRY.keys()))


def _normalize_mode_name(value: str | ChallengeMode | None) -> str | None:
    if isinstance(value, ChallengeMode):
        value = value.value

    if value is None or value == "":
        return None

    if not isinstance(value, str) or value not in CHALLENGE_REGISTRY:
        raise ValueError(
            f"Invalid challenge mode: {value!r}. "
            f"Valid options: {_format_valid_options()}"
        )

    return value


def _load_generator_class(mode: str) -> type[ChallengeGenerator]:
    import_path = CHALLENGE_REGISTRY[mode]
    module_path, _, class_name = import_path.rpartition(".")
    if not module_path or not class_name:
        raise ValueError(
            f"Invalid challenge generator import path for {mode!r}: {import_path!r}"
        )

    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as exc:
        raise ImportError(
            f"Unable to import challenge module {module_path!r} for {mode!r}"
        ) from exc

    try:
        generator_cls = getattr(module, class_name)
    except AttributeError as exc:
        raise ImportError(
            f"Challenge class {class_name!r} not found in module {module_path!r}"
        ) from exc

    if not isinstance(generator_cls, type) or not issubclass(
        generator_cls, ChallengeGenerator
    ):
        raise TypeError(
            f"Challenge reference {import_path!r} does not implement ChallengeGenerator"
        )

    return generator_cls


def get_challenge_generator(
    mode: str | ChallengeMode | None = None, **kwargs: Any
) -> ChallengeGenerator:
    """
    Return a challenge generator for the given mode.

    Args:
        mode: "interactive", "fiat-shamir", a ChallengeMode, or None to use
            the feature flags (SCHNORR_POK_CHALLENGE_MODE).
        **kwargs: Passed to the generator constructor
            (randomness_source, challenge_bits, hash_name, ...).

    Raises:
        ValueError: If the mode is invalid.
        ImportError: If the generator class cannot be imported.
        TypeError: If the class does not implement ChallengeGenerator.
    """
    resolved = _normalize_mode_name(mode)
    if resolved is None:
        resolved = _normalize_mode_name(get_challenge_mode())

    generator_cls = _load_generator_class(resolved)
    return generator_cls(**kwargs)
