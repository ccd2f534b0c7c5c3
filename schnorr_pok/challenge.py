"""
⚠️ DRAFT - requires crypto review before production use

Challenge generation for the Schnorr protocol.

Two variants behind one capability, produce_challenge():

    InteractiveChallenge: e uniform in [1, q - 1] (or [1, 2^k - 1]),
        drawn by the Verifier after it has seen t.
    FiatShamirChallenge: e = Hash(DST, g, p, y, t, context) mod q (or mod 2^k),
        computed by anyone from the public transcript.

Fiat-Shamir transcript encoding:
    len(DST) || DST || len(g) || g || len(p) || p ||
    len(y) || y || len(t) || t || len(ctx) || ctx

    Every group value is fixed-width big-endian (width = byte length of p)
    and every field carries a 4-byte length prefix, so two different
    (g, p, y, t) tuples can never produce the same hash input.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from .config import (
    CHALLENGE_BITS,
    DOMAIN_SEPARATOR,
    LENGTH_PREFIX_BYTES,
    validate_challenge_bits,
)
from .exceptions import ConfigurationError, HashError, InputError
from .feature_flags import get_hash_function
from .group import GroupParameters
from .logger import format_fields
from .security import RandomnessSource, encode_integer, require_non_negative

logger = logging.getLogger(__name__)


class ChallengeMode(Enum):
    """Supported challenge modes."""

    INTERACTIVE = "interactive"
    FIAT_SHAMIR = "fiat-shamir"


_HASH_ALGORITHMS: Dict[str, Callable[[], hashes.HashAlgorithm]] = {
    "SHA256": hashes.SHA256,
    "SHA384": hashes.SHA384,
    "SHA512": hashes.SHA512,
    "SHA3-256": hashes.SHA3_256,
    "SHA3-512": hashes.SHA3_512,
    "BLAKE2b": lambda: hashes.BLAKE2b(64),
}


class ChallengeGenerator(ABC):
    """Produces the challenge e for one proof session."""

    mode: ChallengeMode

    @abstractmethod
    def produce_challenge(
        self, params: GroupParameters, public_key: int, commitment: int
    ) -> int:
        """
        Return the challenge for commitment t made under public key y.

        Raises:
            RngError: Interactive mode, randomness source failure
            HashError: Fiat-Shamir mode, hash primitive unavailable
            InputError: Fiat-Shamir mode, y or t not reduced modulo p
        """


class InteractiveChallenge(ChallengeGenerator):
    """
    Verifier-chosen random challenge.

    The challenge space is the full subgroup range [1, q - 1] unless an
    explicit bit width k is configured, giving [1, 2^k - 1]. A cheating
    Prover succeeds with probability 1 / (size of the challenge space).
    """

    mode = ChallengeMode.INTERACTIVE

    def __init__(
        self,
        randomness_source: Optional[RandomnessSource] = None,
        challenge_bits: Optional[int] = CHALLENGE_BITS,
    ):
        if challenge_bits is not None:
            if isinstance(challenge_bits, bool) or not isinstance(challenge_bits, int):
                raise ConfigurationError(
                    f"challenge_bits must be int or None, got {type(challenge_bits).__name__}"
                )
            if challenge_bits < 1:
                raise ConfigurationError(
                    f"challenge_bits must be >= 1, got {challenge_bits}"
                )
        self._rng = randomness_source if randomness_source is not None else RandomnessSource()
        self.challenge_bits = challenge_bits

    def challenge_bound(self, params: GroupParameters) -> int:
        """Exclusive upper bound of the challenge space."""
        if self.challenge_bits is None:
            return params.q
        return 1 << self.challenge_bits

    def produce_challenge(
        self, params: GroupParameters, public_key: int, commitment: int
    ) -> int:
        bound = self.challenge_bound(params)
        if bound <= 2:
            logger.warning("Challenge space has a single value: proof is not sound")
        challenge = self._rng.get_random_nonzero_scalar(bound, stage="challenge")
        logger.debug("Interactive challenge %s", format_fields(challenge=challenge))
        return challenge


class FiatShamirChallenge(ChallengeGenerator):
    """
    Deterministic challenge derived from the public transcript.

    Identical (g, p, y, t, context) always yields the identical challenge.

    Example:
        >>> from schnorr_pok.group import get_group
        >>> params = get_group("toy")
        >>> fs = FiatShamirChallenge()
        >>> fs.produce_challenge(params, 2, 18) == fs.produce_challenge(params, 2, 18)
        True
    """

    mode = ChallengeMode.FIAT_SHAMIR

    def __init__(
        self,
        hash_name: Optional[str] = None,
        challenge_bits: Optional[int] = CHALLENGE_BITS,
        domain_separator: bytes = DOMAIN_SEPARATOR,
        context: bytes = b"",
    ):
        if hash_name is None:
            hash_name = get_hash_function()

        if hash_name not in _HASH_ALGORITHMS:
            raise HashError(
                f"Hash function {hash_name!r} is not available. "
                f"Valid options: {', '.join(_HASH_ALGORITHMS)}",
                stage="challenge",
            )

        if not isinstance(domain_separator, bytes) or not domain_separator:
            raise ConfigurationError("domain_separator must be non-empty bytes")

        if not isinstance(context, bytes):
            raise ConfigurationError(
                f"context must be bytes, got {type(context).__name__}"
            )

        self.hash_name = hash_name
        validate_challenge_bits(challenge_bits, hash_name)
        self.challenge_bits = challenge_bits
        self.domain_separator = domain_separator
        self.context = context

        # Fail fast if the backend lacks the algorithm
        self._new_hash()

    def _new_hash(self) -> hashes.Hash:
        try:
            return hashes.Hash(_HASH_ALGORITHMS[self.hash_name]())
        except UnsupportedAlgorithm as e:
            raise HashError(
                f"Hash function {self.hash_name!r} is not supported by the backend",
                stage="challenge",
            ) from e

    def transcript_bytes(
        self, params: GroupParameters, public_key: int, commitment: int
    ) -> bytes:
        """
        Length-prefixed, fixed-width encoding of (DST, g, p, y, t, context).

        Raises:
            InputError: If y or t is not in [0, p)
        """
        require_non_negative("public_key", public_key, "challenge")
        require_non_negative("commitment", commitment, "challenge")
        if public_key >= params.p or commitment >= params.p:
            raise InputError(
                "public_key and commitment must be reduced modulo p",
                stage="challenge",
            )

        width = params.element_size
        fields = (
            self.domain_separator,
            encode_integer(params.g, width),
            encode_integer(params.p, width),
            encode_integer(public_key, width),
            encode_integer(commitment, width),
            self.context,
        )

        encoded = bytearray()
        for value in fields:
            encoded += len(value).to_bytes(LENGTH_PREFIX_BYTES, "big")
            encoded += value
        return bytes(encoded)

    def digest(self, params: GroupParameters, public_key: int, commitment: int) -> bytes:
        """Hash of the transcript encoding."""
        h = self._new_hash()
        h.update(self.transcript_bytes(params, public_key, commitment))
        return h.finalize()

    def produce_challenge(
        self, params: GroupParameters, public_key: int, commitment: int
    ) -> int:
        """
        Hash the transcript and reduce it mod q (or mod 2^k).

        Raises:
            InputError: If y or t is negative, not an int or not in [0, p);
                the fixed-width encoding needs reduced group elements
            HashError: If the hash primitive is unavailable
        """
        value = int.from_bytes(self.digest(params, public_key, commitment), "big")
        if self.challenge_bits is None:
            challenge = value % params.q
        else:
            challenge = value % (1 << self.challenge_bits)
        logger.debug(
            "Fiat-Shamir challenge %s",
            format_fields(hash=self.hash_name, commitment=commitment, challenge=challenge),
        )
        return challenge
