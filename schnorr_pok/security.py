"""
⚠️ DRAFT - requires crypto review before production use

Security utilities: randomness, fixed-width encoding, constant-time
comparison and shared input validation.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.
"""

import hmac
import os
import secrets

from .exceptions import InputError, RngError


# ============================================================================
# INPUT VALIDATION
# ============================================================================


def require_int(name: str, value, stage: str) -> int:
    """
    Reject anything that is not a plain int (bool is rejected too).

    Raises:
        InputError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InputError(
            f"{name} must be int, got {type(value).__name__}", stage=stage
        )
    return value


def require_non_negative(name: str, value, stage: str) -> int:
    """
    Reject non-int or negative values.

    Raises:
        InputError: If value is not an int or is negative
    """
    require_int(name, value, stage)
    if value < 0:
        raise InputError(f"{name} must be non-negative, got {value}", stage=stage)
    return value


# ============================================================================
# RANDOMNESS SOURCE (Fork-Safe)
# ============================================================================


class RandomnessSource:
    """
    Cryptographically secure randomness with fork detection.

    Prevents catastrophic randomness reuse if process forks. Every failure of
    the operating system entropy source surfaces as RngError.

    Example:
        >>> rng = RandomnessSource()
        >>> nonce = rng.get_random_nonzero_scalar(11)
        >>> assert 1 <= nonce <= 10
    """

    def __init__(self):
        """Initialize randomness source with fork detection."""
        self._pid = os.getpid()
        self._rng = secrets.SystemRandom()

    def _check_fork(self) -> None:
        if os.getpid() != self._pid:
            self.__init__()

    def get_random_in_range(self, low: int, high: int, stage: str = "random") -> int:
        """
        Get random integer uniformly distributed in [low, high).

        Raises:
            InputError: If the range is empty
            RngError: If the entropy source fails
        """
        require_int("low", low, "random")
        require_int("high", high, "random")
        if high <= low:
            raise InputError(f"Empty range [{low}, {high})", stage="random")

        self._check_fork()
        try:
            return self._rng.randrange(low, high)
        except (OSError, NotImplementedError) as e:
            raise RngError(
                f"Randomness source failed: {type(e).__name__}", stage=stage
            ) from e

    def get_random_nonzero_scalar(self, order: int, stage: str = "random") -> int:
        """
        Get random scalar in [1, order - 1].

        Used for private keys, nonces and interactive challenges.
        """
        return self.get_random_in_range(1, order, stage=stage)


# ============================================================================
# ENCODING
# ============================================================================


def encode_integer(value: int, width: int) -> bytes:
    """
    Fixed-width big-endian encoding of a non-negative integer.

    Raises:
        InputError: If value is negative or does not fit in width bytes
    """
    require_non_negative("value", value, "encode")
    try:
        return value.to_bytes(width, "big")
    except OverflowError as e:
        raise InputError(
            f"value does not fit in {width} bytes", stage="encode"
        ) from e


# ============================================================================
# CONSTANT-TIME OPERATIONS
# ============================================================================


def constant_time_compare(a: bytes, b: bytes) -> bool:
    """
    Constant-time comparison to prevent timing attacks.

    Uses hmac.compare_digest which takes constant time regardless of the
    input values.
    """
    return hmac.compare_digest(a, b)


def constant_time_int_equal(a: int, b: int, width: int) -> bool:
    """Compare two non-negative integers via their fixed-width encodings."""
    if a < 0 or b < 0 or max(a, b).bit_length() > width * 8:
        return False
    return constant_time_compare(a.to_bytes(width, "big"), b.to_bytes(width, "big"))
