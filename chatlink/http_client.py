"""HTTP session factory for the remote chat service."""

import httpx

DEFAULT_SERVICE_URL = "https://client-s.gateway.messenger.live.com"
DEFAULT_TIMEOUT = 30.0


def create_chat_session(
    service_url: str = DEFAULT_SERVICE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build an AsyncClient pointed at the chat service.

    ``transport`` lets tests swap in an ``httpx.MockTransport``.
    """
    return httpx.AsyncClient(
        base_url=service_url,
        timeout=timeout,
        transport=transport,
    )
