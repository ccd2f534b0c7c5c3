"""
⚠️ DRAFT - requires crypto review before production use

Schnorr Verifier.

Verification equation:
    g^s mod p == (t * y^e) mod p

Holds because g^s = g^(r + e*x) = g^r * (g^x)^e = t * y^e (exponents mod q).

A rejected proof returns False. Exceptions are reserved for malformed input.
"""

import logging
from typing import Optional

from .challenge import (
    ChallengeGenerator,
    ChallengeMode,
    FiatShamirChallenge,
    InteractiveChallenge,
)
from .exceptions import InputError
from .group import GroupParameters
from .security import (
    RandomnessSource,
    constant_time_int_equal,
    require_non_negative,
)
from .types import ProofTranscript

logger = logging.getLogger(__name__)


def verify(g: int, s: int, p: int, t: int, y: int, e: int) -> bool:
    """
    Check g^s mod p == (t * y^e) mod p.

    Pure function: no side effects, arguments are not modified.

    Raises:
        InputError: If any value is negative or not an int, or p <= 1

    Example:
        >>> verify(g=4, s=0, p=23, t=18, y=2, e=5)
        True
        >>> verify(g=4, s=1, p=23, t=18, y=2, e=5)
        False
    """
    for name, value in (("g", g), ("s", s), ("p", p), ("t", t), ("y", y), ("e", e)):
        require_non_negative(name, value, "verify")
    if p <= 1:
        raise InputError(f"p must be > 1, got {p}", stage="verify")

    left = pow(g, s, p)
    right = (t * pow(y, e, p)) % p

    return left == right


class Verifier:
    """
    Issues challenges (interactive mode) and checks proofs.

    Example:
        >>> from schnorr_pok.group import get_group
        >>> verifier = Verifier()
        >>> e = verifier.issue_challenge(get_group("toy"), 2, 18)
        >>> assert 1 <= e <= 10
    """

    def __init__(
        self,
        challenger: Optional[ChallengeGenerator] = None,
        randomness_source: Optional[RandomnessSource] = None,
    ):
        if challenger is None:
            challenger = InteractiveChallenge(randomness_source)
        self.challenger = challenger

    def issue_challenge(
        self, params: GroupParameters, public_key: int, commitment: int
    ) -> int:
        """Challenge for a received commitment t."""
        return self.challenger.produce_challenge(params, public_key, commitment)

    @staticmethod
    def verify(g: int, s: int, p: int, t: int, y: int, e: int) -> bool:
        return verify(g, s, p, t, y, e)

    def verify_transcript(
        self,
        transcript: ProofTranscript,
        challenger: Optional[ChallengeGenerator] = None,
    ) -> bool:
        """
        Strict verification of a complete transcript.

        Rejects when:
            - y or t is not an element of the order-q subgroup
            - s is not in [0, q)
            - (Fiat-Shamir) the challenger's hash or reduction width differs
              from the one recorded in the transcript
            - (Fiat-Shamir) e differs from the challenge recomputed from the
              transcript
            - the verification equation fails

        Args:
            transcript: Proof to check
            challenger: Fiat-Shamir generator to recompute e with. Defaults to
                this Verifier's challenger if it is Fiat-Shamir, otherwise to a
                FiatShamirChallenge built from the transcript's hash_name and
                challenge_bits.

        Raises:
            InputError: If a transcript value is negative or not an int
        """
        params = transcript.params
        y = transcript.public_key
        t = transcript.commitment
        e = transcript.challenge
        s = transcript.response

        for name, value in (("y", y), ("t", t), ("e", e), ("s", s)):
            require_non_negative(name, value, "verify")

        if not params.contains(y):
            logger.warning("Rejected proof: public key is not a subgroup element")
            return False

        if not params.contains(t):
            logger.warning("Rejected proof: commitment is not a subgroup element")
            return False

        if s >= params.q:
            logger.warning("Rejected proof: response not reduced modulo q")
            return False

        if transcript.mode is ChallengeMode.FIAT_SHAMIR:
            if challenger is None and isinstance(self.challenger, FiatShamirChallenge):
                challenger = self.challenger
            if challenger is None:
                challenger = FiatShamirChallenge(
                    hash_name=transcript.hash_name,
                    challenge_bits=transcript.challenge_bits,
                )
            elif not self._settings_match(challenger, transcript):
                logger.warning(
                    "Rejected proof: challenger settings differ from transcript"
                )
                return False
            expected = challenger.produce_challenge(params, y, t)
            width = max(1, (max(expected, e).bit_length() + 7) // 8)
            if not constant_time_int_equal(expected, e, width):
                logger.warning("Rejected proof: challenge does not match transcript")
                return False

        if not verify(params.g, s, params.p, t, y, e):
            logger.warning("Rejected proof: verification equation failed")
            return False

        return True

    @staticmethod
    def _settings_match(
        challenger: ChallengeGenerator, transcript: ProofTranscript
    ) -> bool:
        # A transcript without a hash name was built by hand; only the
        # reduction width can be checked then.
        if transcript.hash_name is not None:
            if getattr(challenger, "hash_name", None) != transcript.hash_name:
                return False
        return getattr(challenger, "challenge_bits", None) == transcript.challenge_bits
