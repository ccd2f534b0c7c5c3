"""
Common types for Schnorr proofs.

ProofTranscript holds only public values: the private key x and the nonce r
never appear in it.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .challenge import ChallengeMode
from .group import GroupParameters


@dataclass(frozen=True)
class ProofTranscript:
    """
    Everything a Verifier needs to check one proof.

    Attributes:
        params: Group parameters (p, q, g)
        public_key: y = g^x mod p
        commitment: t = g^r mod p
        challenge: e
        response: s = (r + e*x) mod q
        mode: How e was produced
        hash_name: Fiat-Shamir hash function (None for interactive proofs)
        challenge_bits: Fiat-Shamir reduction width k (None: reduced mod q)
    """

    params: GroupParameters
    public_key: int
    commitment: int
    challenge: int
    response: int
    mode: ChallengeMode
    hash_name: Optional[str] = None
    challenge_bits: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Public values as a plain dict (for display)."""
        return {
            "p": self.params.p,
            "q": self.params.q,
            "g": self.params.g,
            "y": self.public_key,
            "t": self.commitment,
            "e": self.challenge,
            "s": self.response,
            "mode": self.mode.value,
            "hash": self.hash_name,
            "challenge_bits": self.challenge_bits,
        }
