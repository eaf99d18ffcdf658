"""
Client handles produced by :class:`chatlink.builder.ClientBuilder`.

The builder selects exactly one of two variants. Neither re-validates its
inputs; everything they receive has already been checked by the builder.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable

import httpx

ErrorHandler = Callable[[Exception], None]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _BaseClient:
    username: str
    resources: frozenset[str]
    custom_logger: logging.Logger | None
    error_handlers: tuple[ErrorHandler, ...]
    session: httpx.AsyncClient = field(repr=False)

    @property
    def log(self) -> logging.Logger:
        """The custom logger if one was configured, else the module logger."""
        return self.custom_logger if self.custom_logger is not None else logger

    async def aclose(self) -> None:
        """Close the underlying HTTP session."""
        await self.session.aclose()


@dataclass(slots=True)
class FullClient(_BaseClient):
    """Client logged in with a password-derived or precomputed token."""

    credential_token: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        self.log.debug(
            "Authenticated chat client created",
            extra={"username": self.username, "resources": sorted(self.resources)},
        )

    @property
    def is_guest(self) -> bool:
        return False


@dataclass(slots=True)
class GuestClient(_BaseClient):
    """Anonymous client scoped to a single conversation."""

    chat_id: str = ""

    def __post_init__(self) -> None:
        self.log.debug(
            "Guest chat client created",
            extra={"username": self.username, "chat_id": self.chat_id},
        )

    @property
    def is_guest(self) -> bool:
        return True


ChatClient = FullClient | GuestClient
