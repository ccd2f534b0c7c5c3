"""
⚠️ DRAFT - requires crypto review before production use

Schnorr Prover.

Protocol (one proof session):
    1. commit:  r <- [1, q - 1],  t = g^r mod p        (Idle -> Committed)
    2. receive challenge e (Verifier or Fiat-Shamir hash)
    3. respond: s = (r + e*x) mod q                    (Committed -> Responded)

Security Requirements:
    1. r MUST be drawn from the full range [1, q - 1]
    2. r MUST be answered at most once. Two responses for the same r under
       different challenges reveal x = (s1 - s2) / (e1 - e2) mod q
    3. r is discarded as soon as the response is computed
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from .exceptions import InputError, ProtocolViolation
from .group import GroupParameters
from .keys import KeyPair
from .logger import format_fields
from .security import (
    RandomnessSource,
    constant_time_int_equal,
    require_int,
    require_non_negative,
)

logger = logging.getLogger(__name__)


class ProverState(Enum):
    """Prover session state."""

    IDLE = "idle"
    COMMITTED = "committed"
    RESPONDED = "responded"


@dataclass(frozen=True)
class Commitment:
    """
    First protocol message plus the nonce that produced it.

    Attributes:
        nonce: r in [1, q - 1] (single-use, never shared)
        commitment: t = g^r mod p (sent to the Verifier)

    Unpacks as ``r, t = prover.commit()``.
    """

    nonce: int = field(repr=False)
    commitment: int

    def __iter__(self) -> Iterator[int]:
        yield self.nonce
        yield self.commitment


def compute_response(nonce: int, challenge: int, private_key: int, order: int) -> int:
    """
    Compute s = (r + e*x) mod q.

    Raises:
        InputError: If any argument is negative or not an int, or order <= 1

    Example:
        >>> compute_response(3, 5, 6, 11)
        0
    """
    require_non_negative("nonce", nonce, "respond")
    require_non_negative("challenge", challenge, "respond")
    require_non_negative("private_key", private_key, "respond")
    require_int("order", order, "respond")
    if order <= 1:
        raise InputError(f"order must be > 1, got {order}", stage="respond")

    return (nonce + challenge * private_key) % order


class Prover:
    """
    Owns the private key and the nonce of the current proof session.

    Example:
        >>> from schnorr_pok.group import get_group
        >>> params = get_group("toy")
        >>> key_pair = KeyPair.from_private_key(params, 6)
        >>> prover = Prover(key_pair, params)
        >>> r, t = prover.commit()
        >>> s = prover.respond(r, 5)
        >>> prover.state
        <ProverState.RESPONDED: 'responded'>
    """

    def __init__(
        self,
        key_pair: KeyPair,
        params: GroupParameters,
        randomness_source: Optional[RandomnessSource] = None,
    ):
        self._key_pair = key_pair
        self._params = params
        self._rng = randomness_source if randomness_source is not None else RandomnessSource()
        self._state = ProverState.IDLE
        self._nonce: Optional[int] = None
        self._session_params: Optional[GroupParameters] = None

    @property
    def state(self) -> ProverState:
        return self._state

    @property
    def public_key(self) -> int:
        return self._key_pair.public_key

    @property
    def params(self) -> GroupParameters:
        return self._params

    def commit(self, params: Optional[GroupParameters] = None) -> Commitment:
        """
        Start a proof session: draw r and compute t = g^r mod p.

        A commit while already Committed discards the unanswered nonce.

        Raises:
            RngError: If the randomness source fails
        """
        session_params = params if params is not None else self._params

        if self._state is ProverState.COMMITTED:
            logger.debug("Discarding unanswered nonce before new commitment")
        self._discard_nonce()

        nonce = self._rng.get_random_nonzero_scalar(session_params.q, stage="commit")
        commitment = pow(session_params.g, nonce, session_params.p)

        self._nonce = nonce
        self._session_params = session_params
        self._state = ProverState.COMMITTED

        logger.debug("Committed %s", format_fields(commitment=commitment, nonce=nonce))
        return Commitment(nonce=nonce, commitment=commitment)

    def respond(
        self,
        nonce: int,
        challenge: int,
        private_key: Optional[int] = None,
        order: Optional[int] = None,
    ) -> int:
        """
        Answer the challenge for the current session: s = (r + e*x) mod q.

        Args:
            nonce: r returned by the matching commit()
            challenge: e from the Verifier or the Fiat-Shamir hash
            private_key: x (defaults to this Prover's key)
            order: q (defaults to the session's subgroup order)

        Returns:
            Response s in [0, q)

        Raises:
            ProtocolViolation: If there is no open commitment, the nonce does
                not match it, or it was already answered
            InputError: If challenge is negative or not an int
        """
        if self._state is not ProverState.COMMITTED or self._nonce is None:
            if self._state is ProverState.RESPONDED:
                reason = "nonce already answered; commit again before responding"
            else:
                reason = "respond called without a prior commit"
            logger.warning("Protocol violation: %s", reason)
            raise ProtocolViolation(reason, stage="respond")

        require_non_negative("challenge", challenge, "respond")
        require_int("nonce", nonce, "respond")

        width = self._session_params.element_size
        if not constant_time_int_equal(nonce, self._nonce, width):
            # The session is no longer trustworthy; drop its nonce.
            self._discard_nonce()
            self._state = ProverState.IDLE
            logger.warning("Protocol violation: nonce does not match commitment")
            raise ProtocolViolation(
                "nonce does not match the open commitment", stage="respond"
            )

        if private_key is None:
            private_key = self._key_pair.private_key
        if order is None:
            order = self._session_params.q

        response = compute_response(self._nonce, challenge, private_key, order)

        self._discard_nonce()
        self._state = ProverState.RESPONDED

        logger.debug("Responded %s", format_fields(challenge=challenge, response=response))
        return response

    def _discard_nonce(self) -> None:
        self._nonce = None
