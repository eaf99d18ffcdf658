"""
Configuration resolution for remote chat service clients.

:class:`ClientBuilder` collects options and builds either an authenticated
or a guest client; :func:`password_to_hash` derives the login token.
"""

from chatlink.builder import ALL_RESOURCES, ClientBuilder, build_from_settings
from chatlink.client import ChatClient, FullClient, GuestClient
from chatlink.credentials import PrecomputedToken, RawSecret, password_to_hash
from chatlink.errors import InvalidArgumentError, UnrecoverableError
from chatlink.settings import Settings

__all__ = [
    "ALL_RESOURCES",
    "ChatClient",
    "ClientBuilder",
    "FullClient",
    "GuestClient",
    "InvalidArgumentError",
    "PrecomputedToken",
    "RawSecret",
    "Settings",
    "UnrecoverableError",
    "build_from_settings",
    "password_to_hash",
]
