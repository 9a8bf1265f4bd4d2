# plevenlab/core/security.py
"""
Security module for session issuance.
Turns a user identifier into a signed, time-bounded JWT bearer token, and
decodes such tokens for the request-authentication dependency.
"""
import datetime as dt
from functools import lru_cache

import jwt  # PyJWT

from plevenlab.config import settings
from plevenlab.core.errors import CredentialError, ErrorKind

JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)
MIN_SECRET_BYTES = 32  # HS256 key must be at least as long as the SHA-256 output
ACCESS_TOKEN_LIFETIME = dt.timedelta(days=7)  # Bearer token validity


def _secret_bytes(secret: str | bytes | None) -> bytes:
    """
    Validate and normalize the signing secret.

    Raises:
        CredentialError(SIGNING_KEY_MISSING): If the secret is absent or too short
    """
    if secret is None:
        raise CredentialError(ErrorKind.SIGNING_KEY_MISSING, "JWT signing secret is not configured")
    key = secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)
    if len(key) < MIN_SECRET_BYTES:
        raise CredentialError(
            ErrorKind.SIGNING_KEY_MISSING,
            f"JWT signing secret must be at least {MIN_SECRET_BYTES} bytes (got {len(key)})",
        )
    return key


class TokenIssuer:
    """
    Issues signed bearer tokens for authenticated users.

    The signing secret is passed in explicitly; the issuer never reads
    process-wide configuration and never generates a secret itself.
    Tokens carry a single identity claim (sub) plus iat/nbf/exp.
    """

    def __init__(self, secret: str | bytes | None, lifetime: dt.timedelta = ACCESS_TOKEN_LIFETIME):
        self._key = _secret_bytes(secret)
        self.lifetime = lifetime

    def issue(self, subject, now: dt.datetime | None = None) -> str:
        """
        Create a signed token for a user.

        Args:
            subject: User identifier, stored as its decimal/string form in `sub`
            now: Issue time (defaults to the current UTC time)

        Returns:
            Compact JWS string
        """
        if now is None:
            now = dt.datetime.now(dt.timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=dt.timezone.utc)
        payload = {
            "sub": str(subject),  # Subject (user ID)
            "iat": now,           # Issued at timestamp
            "nbf": now,           # Not valid before issue time
            "exp": now + self.lifetime,  # Expiration timestamp
        }
        return jwt.encode(payload, self._key, algorithm=JWT_ALG)


def decode_access_token(token: str, secret: str | bytes | None) -> dict:
    """
    Decode and validate a JWT access token.

    Args:
        token: JWT token string to decode
        secret: Signing secret the token was issued with

    Returns:
        Decoded token payload dictionary (sub, iat, nbf, exp)

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or malformed
    """
    return jwt.decode(
        token,
        _secret_bytes(secret),
        algorithms=[JWT_ALG],
        options={"require": ["sub", "exp"]},
    )


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """
    Application-wide TokenIssuer built from settings.jwt_secret.

    Called once at startup so a missing secret stops the service before it
    serves any login traffic.
    """
    return TokenIssuer(settings.jwt_secret)
