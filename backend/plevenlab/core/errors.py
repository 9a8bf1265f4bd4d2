# plevenlab/core/errors.py
"""
Error kinds raised by the credential and token core.

A single exception type carries an explicit ErrorKind so callers branch on
`exc.kind` instead of catching a family of exception classes.
"""
from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories of the credential/token core."""
    INVALID_INPUT = "INVALID_INPUT"                  # null/blank password or bad policy value
    MALFORMED_CREDENTIAL = "MALFORMED_CREDENTIAL"    # stored hash/salt has the wrong length
    POLICY_UNSATISFIABLE = "POLICY_UNSATISFIABLE"    # policy asks for more than the alphabets allow
    SIGNING_KEY_MISSING = "SIGNING_KEY_MISSING"      # token secret absent or too short


class CredentialError(Exception):
    """
    Raised by the credential/token core.

    Attributes:
        kind: ErrorKind describing what went wrong
        message: Human-readable description (safe to show for INVALID_INPUT)
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"CredentialError({self.kind.value}, {self.message!r})"
