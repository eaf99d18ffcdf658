"""
Credential derivation for the chat service login.

The service never receives the plaintext password. It expects a base64 MD5
digest over the lower-cased username, a fixed service tag and the password,
joined by newlines. The server repeats the same derivation, so the layout
below must stay byte-exact.
"""

import base64
import hashlib
from dataclasses import dataclass

from chatlink.errors import UnrecoverableError

SERVICE_TAG = "skyper"


@dataclass(frozen=True, slots=True)
class RawSecret:
    """A plaintext password the builder turns into a credential token."""

    secret: str

    def __repr__(self) -> str:
        return "RawSecret(secret='***')"


@dataclass(frozen=True, slots=True)
class PrecomputedToken:
    """An already-derived token, e.g. cached from an earlier session."""

    token: str


Credential = RawSecret | PrecomputedToken | None


def password_to_hash(username: str, password: str) -> str:
    """Derive the login token for ``username``/``password``."""
    payload = f"{username.lower()}\n{SERVICE_TAG}\n{password}".encode("utf-8")
    try:
        digest = hashlib.md5(payload).digest()
    except ValueError as exc:
        # FIPS-restricted OpenSSL builds refuse md5.
        raise UnrecoverableError("MD5 digest is unavailable in this runtime.") from exc
    return base64.b64encode(digest).decode("ascii")


def resolve_token(username: str, credential: Credential) -> str | None:
    """Turn a credential into the token handed to the authenticated client."""
    if credential is None:
        return None
    if isinstance(credential, RawSecret):
        return password_to_hash(username, credential.secret)
    if isinstance(credential, PrecomputedToken):
        # Passed through without revalidation.
        return credential.token
    raise TypeError(f"Unsupported credential type: {type(credential).__name__}")
