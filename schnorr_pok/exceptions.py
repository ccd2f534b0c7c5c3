"""
⚠️ DRAFT - requires crypto review before production use

Custom exceptions for the Schnorr proof of knowledge.

These exceptions provide structured error handling for each protocol stage.
A rejected proof is NOT an error: verification returns False.
"""

from typing import Optional


class SchnorrError(Exception):
    """
    Base exception for Schnorr protocol errors.

    Args:
        message: Human readable description
        stage: Protocol stage that failed ("parameters", "keygen", "commit",
            "challenge", "respond", "verify")
    """

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.stage = stage

    def __str__(self) -> str:
        message = super().__str__()
        if self.stage:
            return f"[{self.stage}] {message}"
        return message


class ParameterError(SchnorrError):
    """Malformed group parameters (p, q, g)."""

    pass


class RngError(SchnorrError):
    """Randomness source failure."""

    pass


class HashError(SchnorrError):
    """Hash primitive unavailable."""

    pass


class ProtocolViolation(SchnorrError):
    """Out-of-order call, nonce mismatch or nonce reuse."""

    pass


class InputError(SchnorrError, ValueError):
    """Malformed integer input (wrong type, negative, out of range)."""

    pass


class ConfigurationError(SchnorrError):
    """Configuration error."""

    pass
