"""
Builder that turns user-supplied options into a concrete chat client.

Options accumulate through chained ``with_*`` calls; one terminal ``build*``
call validates the combination and returns either an authenticated
:class:`~chatlink.client.FullClient` or a :class:`~chatlink.client.GuestClient`
scoped to a single conversation.

The builder does not log. Diagnostics go through the logger configured on the
built client.
"""

import logging

import httpx

from chatlink.client import ChatClient, ErrorHandler, FullClient, GuestClient
from chatlink.credentials import Credential, PrecomputedToken, RawSecret, resolve_token
from chatlink.errors import InvalidArgumentError
from chatlink.http_client import DEFAULT_SERVICE_URL, DEFAULT_TIMEOUT, create_chat_session
from chatlink.settings import ALL_RESOURCES_MARKER, Settings

ALL_RESOURCES = (
    "/v1/users/ME/conversations/ALL/properties",
    "/v1/users/ME/conversations/ALL/messages",
    "/v1/users/ME/contacts/ALL",
    "/v1/threads/ALL",
)

CHAT_ID_PREFIX = "19:"


class ClientBuilder:
    """Accumulates client options; consumed once by a ``build*`` call."""

    def __init__(self, username: str) -> None:
        self._username = username
        self._resources: set[str] = set()
        self._error_handlers: list[ErrorHandler] = []
        self._custom_logger: logging.Logger | None = None
        self._chat_id: str | None = None
        self._service_url = DEFAULT_SERVICE_URL
        self._timeout = DEFAULT_TIMEOUT
        self._transport: httpx.AsyncBaseTransport | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientBuilder":
        """Factory that seeds a builder from Settings."""
        builder = cls(settings.username).with_service(
            settings.service_url, settings.api_timeout
        )
        for resource in settings.resources:
            if resource == ALL_RESOURCES_MARKER:
                builder.with_all_resources()
            else:
                builder.with_resource(resource)
        if settings.chat_id is not None:
            builder.with_chat(settings.chat_id)
        return builder

    @property
    def username(self) -> str:
        return self._username

    @property
    def resources(self) -> frozenset[str]:
        return frozenset(self._resources)

    @property
    def chat_id(self) -> str | None:
        return self._chat_id

    @property
    def error_handlers(self) -> tuple[ErrorHandler, ...]:
        return tuple(self._error_handlers)

    @property
    def logger(self) -> logging.Logger | None:
        return self._custom_logger

    def with_all_resources(self) -> "ClientBuilder":
        """Subscribe to every well-known resource."""
        self._resources.update(ALL_RESOURCES)
        return self

    def with_resource(self, resource: str) -> "ClientBuilder":
        """Subscribe to a resource not covered by :data:`ALL_RESOURCES`."""
        self._resources.add(resource)
        return self

    def with_logger(self, logger: logging.Logger) -> "ClientBuilder":
        self._custom_logger = logger
        return self

    def with_error_handler(self, handler: ErrorHandler) -> "ClientBuilder":
        self._error_handlers.append(handler)
        return self

    def with_chat(self, chat_id: str) -> "ClientBuilder":
        """
        Join a single conversation as a guest.

        Ignored when the client is built with a credential.
        """
        if not chat_id.startswith(CHAT_ID_PREFIX):
            raise InvalidArgumentError(f"Invalid chat id: {chat_id!r}")
        self._chat_id = chat_id
        return self

    def with_service(
        self,
        service_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ClientBuilder":
        """Point the built client's HTTP session at another service endpoint."""
        self._service_url = service_url
        self._timeout = timeout
        self._transport = transport
        return self

    def build_with_password(self, password: str | None) -> ChatClient:
        """Derive the credential token from ``password`` and build."""
        return self.build(RawSecret(password) if password is not None else None)

    def build_with_hash(self, password_hash: str | None) -> ChatClient:
        """Build with a token already produced by ``password_to_hash``."""
        return self.build(PrecomputedToken(password_hash) if password_hash is not None else None)

    def build(self, credential: Credential = None) -> ChatClient:
        """Validate the options and build the matching client variant."""
        if not self._resources:
            raise InvalidArgumentError("No resources selected")

        token = resolve_token(self._username, credential)
        if token is not None:
            return FullClient(
                username=self._username,
                credential_token=token,
                resources=frozenset(self._resources),
                custom_logger=self._custom_logger,
                error_handlers=tuple(self._error_handlers),
                session=self._create_session(),
            )
        if self._chat_id is not None:
            return GuestClient(
                username=self._username,
                chat_id=self._chat_id,
                resources=frozenset(self._resources),
                custom_logger=self._custom_logger,
                error_handlers=tuple(self._error_handlers),
                session=self._create_session(),
            )
        raise InvalidArgumentError("No chat specified")

    def _create_session(self) -> httpx.AsyncClient:
        return create_chat_session(
            self._service_url,
            self._timeout,
            transport=self._transport,
        )


def build_from_settings(settings: Settings) -> ChatClient:
    """Build a client from Settings, preferring a configured password hash."""
    builder = ClientBuilder.from_settings(settings)
    if settings.password_hash is not None:
        return builder.build_with_hash(settings.password_hash)
    return builder.build_with_password(settings.password)
