"""
One-time password-set tokens.

Only the SHA-256 fingerprint of a token is ever stored; the plain secret goes
out in the set-password link and nowhere else.
"""

import hashlib
import hmac
import os
import secrets
from datetime import datetime, timedelta

RESET_TOKEN_BYTES = 32
RESET_TOKEN_EXPIRE_MINUTES = int(os.getenv("RESET_TOKEN_EXPIRE_MINUTES", 60))


def fingerprint(secret: str) -> str:
    return hashlib.sha256(secret.encode("utf-8")).hexdigest()


def issue_reset_token(now: datetime = None):
    """Return (plain_secret, fingerprint, expiry) for a fresh token."""
    now = now or datetime.utcnow()
    secret = secrets.token_hex(RESET_TOKEN_BYTES)
    expires = now + timedelta(minutes=RESET_TOKEN_EXPIRE_MINUTES)
    return secret, fingerprint(secret), expires


def verify_reset_token(plain_secret, stored_fingerprint, stored_expiry, now: datetime = None) -> bool:
    """Check a presented secret against the stored fingerprint and expiry.

    Returns False for a wrong secret, an expired token, or missing stored
    values alike, so the caller cannot learn which check failed.
    """
    if not plain_secret or not stored_fingerprint or stored_expiry is None:
        return False

    now = now or datetime.utcnow()
    matches = hmac.compare_digest(fingerprint(plain_secret), stored_fingerprint)
    not_expired = now < stored_expiry
    return matches and not_expired
