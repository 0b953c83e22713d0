"""
auth/passwords.py -- Password hashing and verification (bcrypt).

bcrypt is used directly rather than through passlib: passlib's wrap-bug
detection feeds bcrypt 4.x a password longer than 72 bytes, which it rejects.

The stored hash is self-describing ($2b$<cost>$<salt><digest>), so verifying
needs only the plaintext and the stored string -- no separate salt column.

bcrypt only looks at the first 72 bytes of a password and cannot take NUL
bytes; newer releases raise instead of truncating. _prepare() maps every
password to NUL-free bytes first, one-to-one, so hash_password() is total
over str input and two different passwords never share prepared bytes
(beyond bcrypt's 72-byte window).
"""

from __future__ import annotations

import base64

import bcrypt

# Cost factor: 2**10 key-expansion rounds.
BCRYPT_ROUNDS = 10

_MAX_PASSWORD_BYTES = 72

# Marks a base64-encoded password. Plain UTF-8 starting with it is encoded
# too, so the two forms never overlap.
_ENCODED_PREFIX = b"\x01"


def _prepare(plain: str) -> bytes:
    raw = plain.encode("utf-8")
    if b"\x00" in raw or raw.startswith(_ENCODED_PREFIX):
        raw = _ENCODED_PREFIX + base64.b64encode(raw)
    return raw[:_MAX_PASSWORD_BYTES]


def hash_password(plain: str) -> str:
    """Return a bcrypt hash of the plaintext password with a fresh salt."""
    return bcrypt.hashpw(_prepare(plain), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain: str, hashed: str | None) -> bool:
    """Return True if the plaintext password matches the bcrypt hash.

    A missing or structurally invalid hash counts as a mismatch.
    """
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(_prepare(plain), hashed.encode("utf-8"))
    except ValueError:
        return False
