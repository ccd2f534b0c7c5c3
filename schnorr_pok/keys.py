"""
⚠️ DRAFT - requires crypto review before production use

Key pair generation: x uniform in [1, q - 1], y = g^x mod p.

The private key x is drawn from the full subgroup range. A bound that does
not depend on q shrinks the secret's entropy and lets anyone enumerate x.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .exceptions import InputError
from .group import GroupParameters
from .logger import format_fields
from .security import RandomnessSource, require_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPair:
    """
    Prover identity.

    Attributes:
        private_key: x in [1, q - 1] (never serialized, logged or printed)
        public_key: y = g^x mod p (shareable)
    """

    private_key: int = field(repr=False)
    public_key: int

    @classmethod
    def from_private_key(cls, params: GroupParameters, private_key: int) -> "KeyPair":
        """
        Build a key pair from a known private key.

        Raises:
            InputError: If private_key is not in [1, q - 1]
        """
        require_int("private_key", private_key, "keygen")
        if not 1 <= private_key < params.q:
            raise InputError("private_key must be in [1, q - 1]", stage="keygen")
        return cls(private_key=private_key, public_key=pow(params.g, private_key, params.p))


class KeyPairGenerator:
    """
    Generates Prover key pairs from an injected randomness source.

    Example:
        >>> from schnorr_pok.group import get_group
        >>> params = get_group("toy")
        >>> key_pair = KeyPairGenerator().generate(params)
        >>> assert pow(params.g, key_pair.private_key, params.p) == key_pair.public_key
    """

    def __init__(self, randomness_source: Optional[RandomnessSource] = None):
        self._rng = randomness_source if randomness_source is not None else RandomnessSource()

    def generate(self, params: GroupParameters) -> KeyPair:
        """
        Draw x uniformly from [1, q - 1] and compute y = g^x mod p.

        Raises:
            RngError: If the randomness source fails
        """
        private_key = self._rng.get_random_nonzero_scalar(params.q, stage="keygen")
        key_pair = KeyPair(
            private_key=private_key, public_key=pow(params.g, private_key, params.p)
        )
        logger.debug(
            "Generated key pair %s",
            format_fields(public_key=key_pair.public_key, private_key=private_key),
        )
        return key_pair
