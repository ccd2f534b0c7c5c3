"""Public API for schnorr_pok.

Schnorr proof of knowledge of a discrete logarithm over a prime-order
subgroup of Z_p*, in interactive and Fiat-Shamir modes.
"""
from __future__ import annotations

import logging

from .challenge import (
    ChallengeGenerator,
    ChallengeMode,
    FiatShamirChallenge,
    InteractiveChallenge,
)
from .exceptions import (
    ConfigurationError,
    HashError,
    InputError,
    ParameterError,
    ProtocolViolation,
    RngError,
    SchnorrError,
)
from .factory import get_challenge_generator
from .feature_flags import (
    get_challenge_mode,
    get_hash_function,
    set_challenge_mode,
    set_hash_function,
)
from .group import GroupParameters, get_group
from .keys import KeyPair, KeyPairGenerator
from .protocol import prove, run_interactive
from .prover import Commitment, Prover, ProverState, compute_response
from .security import RandomnessSource
from .types import ProofTranscript
from .verifier import Verifier, verify

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ChallengeGenerator",
    "ChallengeMode",
    "FiatShamirChallenge",
    "InteractiveChallenge",
    "get_challenge_generator",
    "get_challenge_mode",
    "set_challenge_mode",
    "get_hash_function",
    "set_hash_function",
    "GroupParameters",
    "get_group",
    "KeyPair",
    "KeyPairGenerator",
    "Commitment",
    "Prover",
    "ProverState",
    "compute_response",
    "Verifier",
    "verify",
    "ProofTranscript",
    "prove",
    "run_interactive",
    "RandomnessSource",
    "SchnorrError",
    "ParameterError",
    "RngError",
    "HashError",
    "ProtocolViolation",
    "InputError",
    "ConfigurationError",
]
