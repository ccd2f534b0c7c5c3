"""
Runtime selection of the challenge mode and Fiat-Shamir hash function.

WARNING: The challenge mode changes the security model (interactive proofs
are only convincing to the Verifier that chose the challenge).
"""

from __future__ import annotations

import os
from typing import Final

from .config import HASH_FUNCTION, SUPPORTED_HASH_FUNCTIONS

_VALID_MODES: Final[tuple[str, ...]] = ("interactive", "fiat-shamir")
_DEFAULT_MODE: Final[str] = "fiat-shamir"
_MODE_ENV_VAR: Final[str] = "SCHNORR_POK_CHALLENGE_MODE"

_VALID_HASHES: Final[tuple[str, ...]] = tuple(SUPPORTED_HASH_FUNCTIONS)
_HASH_ENV_VAR: Final[str] = "SCHNORR_POK_HASH"

_mode_override: str | None = None
_hash_override: str | None = None


def _normalize(value: str | None, valid: tuple[str, ...], kind: str) -> str | None:
    if value is None:
        return None

    if not isinstance(value, str):
        raise ValueError(
            f"Invalid {kind}: {value!r}. Valid options: {', '.join(valid)}"
        )

    if value == "":
        return None

    if value not in valid:
        raise ValueError(
            f"Invalid {kind}: {value!r}. Valid options: {', '.join(valid)}"
        )

    return value


def get_challenge_mode(prefer: str | None = None) -> str:
    """
    Resolve challenge mode in precedence order.

    Args:
        prefer: Optional preferred mode.

    Returns:
        Mode string ("interactive" or "fiat-shamir").

    Raises:
        ValueError: If a provided mode value is invalid.
    """
    preferred = _normalize(prefer, _VALID_MODES, "challenge mode")
    if preferred is not None:
        return preferred

    if _mode_override is not None:
        return _mode_override

    env_mode = _normalize(os.getenv(_MODE_ENV_VAR), _VALID_MODES, "challenge mode")
    if env_mode is not None:
        return env_mode

    return _DEFAULT_MODE


def set_challenge_mode(value: str | None) -> None:
    """
    Set in-memory challenge mode override (testing only).

    Args:
        value: Mode to force, or None to clear the override.

    Raises:
        ValueError: If the value is invalid.
    """
    global _mode_override
    _mode_override = _normalize(value, _VALID_MODES, "challenge mode")


def get_hash_function(prefer: str | None = None) -> str:
    """Resolve the Fiat-Shamir hash name with the same precedence as the mode."""
    preferred = _normalize(prefer, _VALID_HASHES, "hash function")
    if preferred is not None:
        return preferred

    if _hash_override is not None:
        return _hash_override

    env_hash = _normalize(os.getenv(_HASH_ENV_VAR), _VALID_HASHES, "hash function")
    if env_hash is not None:
        return env_hash

    return HASH_FUNCTION


def set_hash_function(value: str | None) -> None:
    """Set in-memory hash function override (testing only)."""
    global _hash_override
    _hash_override = _normalize(value, _VALID_HASHES, "hash function")
