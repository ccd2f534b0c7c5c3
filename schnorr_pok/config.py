"""
⚠️ DRAFT - requires crypto review before production use

Cryptographic configuration for the Schnorr proof of knowledge.

Runtime overrides (challenge mode, hash function) live in feature_flags.
"""

from .exceptions import ConfigurationError

# ============================================================================
# GROUP SELECTION
# ============================================================================

# Preset used by the demo CLI when no group is named.
# See group.NAMED_GROUPS for the available presets.
DEFAULT_GROUP = "rfc3526-2048"

# Groups with a smaller subgroup order are accepted but logged as insecure.
MIN_SECURE_GROUP_ORDER_BITS = 160

# ============================================================================
# HASH FUNCTIONS
# ============================================================================

# For the Fiat-Shamir transform (challenge generation)
HASH_FUNCTION = "SHA3-256"  # NOT SHA-256 (length extension attack)

# Digest size in bits for every name accepted by challenge.FiatShamirChallenge
SUPPORTED_HASH_FUNCTIONS = {
    "SHA256": 256,
    "SHA384": 384,
    "SHA512": 512,
    "SHA3-256": 256,
    "SHA3-512": 512,
    "BLAKE2b": 512,
}

# Domain separator prepended (length-prefixed) to every Fiat-Shamir transcript
DOMAIN_SEPARATOR = b"SCHNORR_POK_V1_FIAT_SHAMIR"

# Every transcript field is preceded by its length as a big-endian integer
LENGTH_PREFIX_BYTES = 4

# ============================================================================
# CHALLENGE SPACE
# ============================================================================

# None: challenges are taken modulo the subgroup order q.
# An int k: challenges are taken modulo 2^k (must not exceed the digest size).
CHALLENGE_BITS = None

# ============================================================================
# VALIDATION
# ============================================================================


def validate_challenge_bits(challenge_bits, hash_name: str = HASH_FUNCTION) -> None:
    """
    Check a challenge bit width against the digest size of a hash function.

    Raises:
        ConfigurationError: If the width is not a positive int or exceeds the
            digest size.
    """
    if challenge_bits is None:
        return

    if isinstance(challenge_bits, bool) or not isinstance(challenge_bits, int):
        raise ConfigurationError(
            f"challenge_bits must be int or None, got {type(challenge_bits).__name__}"
        )

    digest_bits = SUPPORTED_HASH_FUNCTIONS.get(hash_name)
    if digest_bits is None:
        raise ConfigurationError(
            f"Unknown hash function {hash_name!r}. "
            f"Valid options: {', '.join(SUPPORTED_HASH_FUNCTIONS)}"
        )

    if not 1 <= challenge_bits <= digest_bits:
        raise ConfigurationError(
            f"challenge_bits must be in [1, {digest_bits}] for {hash_name}, "
            f"got {challenge_bits}"
        )


def validate_config() -> bool:
    """
    Validate configuration parameters.

    Returns:
        True if configuration is valid

    Raises:
        ConfigurationError: If configuration is invalid
    """
    if HASH_FUNCTION not in SUPPORTED_HASH_FUNCTIONS:
        raise ConfigurationError(f"Invalid hash function: {HASH_FUNCTION!r}")

    if not DOMAIN_SEPARATOR:
        raise ConfigurationError("Domain separator cannot be empty")

    if LENGTH_PREFIX_BYTES < 4:
        raise ConfigurationError("Length prefix too short")

    if MIN_SECURE_GROUP_ORDER_BITS < 128:
        raise ConfigurationError("Secure group order threshold too small")

    validate_challenge_bits(CHALLENGE_BITS, HASH_FUNCTION)

    return True


# Auto-validate on import
validate_config()
