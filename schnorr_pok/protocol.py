"""
End-to-end proof sessions.

    prove():           non-interactive (Fiat-Shamir) proof
    run_interactive(): one interactive session between a fresh Prover and
                       Verifier
"""

import logging
from typing import Optional, Tuple

from .challenge import (
    ChallengeGenerator,
    ChallengeMode,
    FiatShamirChallenge,
    InteractiveChallenge,
)
from .group import GroupParameters
from .keys import KeyPair
from .prover import Prover
from .security import RandomnessSource
from .types import ProofTranscript
from .verifier import Verifier

logger = logging.getLogger(__name__)


def prove(
    params: GroupParameters,
    key_pair: KeyPair,
    challenger: Optional[ChallengeGenerator] = None,
    randomness_source: Optional[RandomnessSource] = None,
) -> ProofTranscript:
    """
    Produce a non-interactive proof of knowledge of key_pair.private_key.

    Args:
        params: Group parameters
        key_pair: Prover key pair
        challenger: Challenge generator (FiatShamirChallenge() if None)
        randomness_source: Source for the nonce

    Raises:
        RngError: If the randomness source fails
        HashError: If the hash primitive is unavailable
    """
    if challenger is None:
        challenger = FiatShamirChallenge()

    prover = Prover(key_pair, params, randomness_source)
    nonce, commitment = prover.commit()
    challenge = challenger.produce_challenge(params, key_pair.public_key, commitment)
    response = prover.respond(nonce, challenge)

    return ProofTranscript(
        params=params,
        public_key=key_pair.public_key,
        commitment=commitment,
        challenge=challenge,
        response=response,
        mode=challenger.mode,
        hash_name=getattr(challenger, "hash_name", None),
        challenge_bits=(
            challenger.challenge_bits
            if challenger.mode is ChallengeMode.FIAT_SHAMIR
            else None
        ),
    )


def run_interactive(
    params: GroupParameters,
    key_pair: KeyPair,
    randomness_source: Optional[RandomnessSource] = None,
    challenge_bits: Optional[int] = None,
) -> Tuple[ProofTranscript, bool]:
    """
    Run commit, challenge, respond and verify once.

    Returns:
        (transcript, accepted)
    """
    prover = Prover(key_pair, params, randomness_source)
    verifier = Verifier(InteractiveChallenge(randomness_source, challenge_bits))

    nonce, commitment = prover.commit()
    challenge = verifier.issue_challenge(params, prover.public_key, commitment)
    response = prover.respond(nonce, challenge)

    transcript = ProofTranscript(
        params=params,
        public_key=prover.public_key,
        commitment=commitment,
        challenge=challenge,
        response=response,
        mode=verifier.challenger.mode,
    )
    accepted = verifier.verify_transcript(transcript)
    logger.debug("Interactive session finished, accepted=%s", accepted)
    return transcript, accepted
