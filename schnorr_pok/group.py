"""
⚠️ DRAFT - requires crypto review before production use

Group parameters (p, q, g) for the Schnorr proof of knowledge.

    p: prime modulus
    q: prime order of the subgroup generated by g, q | p - 1
    g: generator of the order-q subgroup of Z_p*

Validation is structural only. Primality of p and q is the responsibility
of whoever generated the parameters.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from .config import MIN_SECURE_GROUP_ORDER_BITS
from .exceptions import InputError, ParameterError
from .security import require_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupParameters:
    """
    Validated, immutable group parameters.

    Raises:
        ParameterError: If any structural invariant fails

    Example:
        >>> params = GroupParameters(p=23, q=11, g=4)
        >>> params.element_size
        1
        >>> GroupParameters(p=23, q=11, g=5)
        Traceback (most recent call last):
        ...
        schnorr_pok.exceptions.ParameterError: [parameters] g^q mod p != 1 (g does not generate the order-q subgroup)
    """

    p: int
    q: int
    g: int

    def __post_init__(self):
        for name in ("p", "q", "g"):
            try:
                require_int(name, getattr(self, name), "parameters")
            except InputError as e:
                raise ParameterError(str(e.args[0]), stage="parameters") from e

        p, q, g = self.p, self.q, self.g

        if p <= 2:
            raise ParameterError(f"p must be > 2, got {p}", stage="parameters")

        if not 1 < q < p:
            raise ParameterError(
                f"q must satisfy 1 < q < p, got q={q}", stage="parameters"
            )

        if (p - 1) % q != 0:
            raise ParameterError("q does not divide p - 1", stage="parameters")

        if not 1 < g < p:
            raise ParameterError(
                f"g must satisfy 1 < g < p, got g={g}", stage="parameters"
            )

        if pow(g, q, p) != 1:
            raise ParameterError(
                "g^q mod p != 1 (g does not generate the order-q subgroup)",
                stage="parameters",
            )

        if q.bit_length() < MIN_SECURE_GROUP_ORDER_BITS:
            logger.warning(
                "Group order has %d bits (< %d): insecure, tests and demos only",
                q.bit_length(),
                MIN_SECURE_GROUP_ORDER_BITS,
            )

    @property
    def element_size(self) -> int:
        """Byte length of p; every group element encodes to this width."""
        return (self.p.bit_length() + 7) // 8

    def contains(self, element: int) -> bool:
        """True if element is in [1, p) and lies in the order-q subgroup."""
        if isinstance(element, bool) or not isinstance(element, int):
            return False
        return 1 <= element < self.p and pow(element, self.q, self.p) == 1


# ============================================================================
# NAMED GROUPS
# ============================================================================

# RFC 3526 - 2048-bit MODP Group (safe prime, p = 2q + 1).
# p = 7 mod 8, so 2 is a quadratic residue and generates the order-q subgroup.
RFC3526_2048_P = int(
    """
    FFFFFFFF FFFFFFFF C90FDAA2 2168C234 C4C6628B 80DC1CD1
    29024E08 8A67CC74 020BBEA6 3B139B22 514A0879 8E3404DD
    EF9519B3 CD3A431B 302B0A6D F25F1437 4FE1356D 6D51C245
    E485B576 625E7EC6 F44C42E9 A637ED6B 0BFF5CB6 F406B7ED
    EE386BFB 5A899FA5 AE9F2411 7C4B1FE6 49286651 ECE45B3D
    C2007CB8 A163BF05 98DA4836 1C55D39A 69163FA8 FD24CF5F
    83655D23 DCA3AD96 1C62F356 208552BB 9ED52907 7096966D
    670C354E 4ABC9804 F1746C08 CA18217C 32905E46 2E36CE3B
    E39E772C 180E8603 9B2783A2 EC07A28F B5C55DF0 6F4C52C9
    DE2BCBF6 95581718 3995497C EA956AE5 15D22618 98FA0510
    15728E5A 8AACAA68 FFFFFFFF FFFFFFFF
    """.replace(" ", "").replace("\n", ""),
    16,
)

NAMED_GROUPS: Dict[str, Tuple[int, int, int]] = {
    # Tests and demos only.
    "toy": (23, 11, 4),
    "rfc3526-2048": (RFC3526_2048_P, (RFC3526_2048_P - 1) // 2, 2),
}


def get_group(name: str) -> GroupParameters:
    """
    Look up a named group preset.

    Raises:
        ParameterError: If the name is not registered
    """
    try:
        p, q, g = NAMED_GROUPS[name]
    except (KeyError, TypeError) as e:
        raise ParameterError(
            f"Unknown group {name!r}. Valid options: {', '.join(NAMED_GROUPS)}",
            stage="parameters",
        ) from e
    return GroupParameters(p=p, q=q, g=g)
