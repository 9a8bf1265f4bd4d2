# plevenlab/core/credentials.py
"""
Password credential codec.
Turns a plaintext password into a storable (hash, salt) pair and verifies
a plaintext password against a stored pair.

Scheme: HMAC-SHA512 keyed with a random 128-byte salt. The salt doubles as
the HMAC key, so nothing else has to be stored next to the hash.
"""
import hashlib
import hmac
import secrets
from dataclasses import dataclass

from plevenlab.core.errors import CredentialError, ErrorKind

HASH_LENGTH = 64    # SHA-512 digest size in bytes
SALT_LENGTH = 128   # HMAC-SHA512 block size in bytes, used as the key length


@dataclass(frozen=True)
class Credential:
    """
    Stored password material for one account.

    Attributes:
        hash: HMAC-SHA512 of the UTF-8 password, exactly HASH_LENGTH bytes
        salt: Random HMAC key, exactly SALT_LENGTH bytes
    """
    hash: bytes
    salt: bytes

    def __repr__(self) -> str:
        # never print key material
        return f"Credential(hash=<{len(self.hash)} bytes>, salt=<{len(self.salt)} bytes>)"


def require_password(password) -> str:
    """
    Reject a missing, non-string or blank password with INVALID_INPUT.
    Returns the password unchanged otherwise.
    """
    if password is None:
        raise CredentialError(ErrorKind.INVALID_INPUT, "Password is required")
    if not isinstance(password, str):
        raise CredentialError(ErrorKind.INVALID_INPUT, "Password must be a string")
    if not password.strip():
        raise CredentialError(ErrorKind.INVALID_INPUT, "Password cannot be empty or whitespace only")
    return password


def _keyed_hash(password: str, salt: bytes) -> bytes:
    return hmac.new(salt, password.encode("utf-8"), hashlib.sha512).digest()


def create_credential(password: str) -> Credential:
    """
    Derive a new credential from a plaintext password.

    Args:
        password: Plaintext password (must contain a non-whitespace character)

    Returns:
        Credential with a fresh random salt and the matching hash

    Raises:
        CredentialError(INVALID_INPUT): If password is None, not a string, or blank
    """
    password = require_password(password)
    salt = secrets.token_bytes(SALT_LENGTH)
    return Credential(hash=_keyed_hash(password, salt), salt=salt)


def verify_credential(password: str, credential: Credential) -> bool:
    """
    Check a plaintext password against a stored credential.

    The comparison always inspects every byte of the digest, so timing does
    not reveal where the first mismatch occurs.

    Args:
        password: Plaintext password supplied at login
        credential: Stored credential of the account

    Returns:
        True if the password matches, False otherwise

    Raises:
        CredentialError(INVALID_INPUT): If password is None, not a string, or blank
        CredentialError(MALFORMED_CREDENTIAL): If the stored hash or salt has the wrong length
    """
    password = require_password(password)
    stored_hash = bytes(credential.hash or b"")
    stored_salt = bytes(credential.salt or b"")
    if len(stored_hash) != HASH_LENGTH:
        raise CredentialError(
            ErrorKind.MALFORMED_CREDENTIAL,
            f"Invalid length of password hash ({HASH_LENGTH} bytes expected, got {len(stored_hash)})",
        )
    if len(stored_salt) != SALT_LENGTH:
        raise CredentialError(
            ErrorKind.MALFORMED_CREDENTIAL,
            f"Invalid length of password salt ({SALT_LENGTH} bytes expected, got {len(stored_salt)})",
        )
    return hmac.compare_digest(_keyed_hash(password, stored_salt), stored_hash)
