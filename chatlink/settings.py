"""Environment-driven configuration for building a chat client."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from chatlink.http_client import DEFAULT_SERVICE_URL, DEFAULT_TIMEOUT

ALL_RESOURCES_MARKER = "ALL"


def _optional(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value or None


@dataclass(frozen=True, slots=True)
class Settings:
    """Container for runtime configuration."""

    username: str
    password: str | None = field(default=None, repr=False)
    password_hash: str | None = field(default=None, repr=False)
    chat_id: str | None = None
    resources: tuple[str, ...] = (ALL_RESOURCES_MARKER,)
    service_url: str = DEFAULT_SERVICE_URL
    api_timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def load(cls) -> "Settings":
        """
        Load configuration from environment variables.

        Python-dotenv is used so a local .env file can hold the account details
        without exporting them globally.
        """
        load_dotenv()

        username = os.getenv("CHAT_USERNAME", "").strip()
        if not username:
            raise ValueError("CHAT_USERNAME is required but was not provided.")

        resources_raw = os.getenv("CHAT_RESOURCES", "").strip() or ALL_RESOURCES_MARKER
        resources = tuple(item.strip() for item in resources_raw.split(",") if item.strip())
        if not resources:
            raise ValueError("CHAT_RESOURCES must list at least one resource.")

        api_timeout_raw = os.getenv("API_TIMEOUT", "").strip() or str(DEFAULT_TIMEOUT)
        try:
            api_timeout = float(api_timeout_raw)
        except ValueError as exc:
            raise ValueError("API_TIMEOUT must be a numeric value.") from exc
        if api_timeout <= 0:
            raise ValueError("API_TIMEOUT must be greater than zero.")

        return cls(
            username=username,
            # Passwords are not stripped; surrounding whitespace is part of the secret.
            password=os.getenv("CHAT_PASSWORD") or None,
            password_hash=_optional("CHAT_PASSWORD_HASH"),
            chat_id=_optional("CHAT_ID"),
            resources=resources,
            service_url=_optional("CHAT_SERVICE_URL") or DEFAULT_SERVICE_URL,
            api_timeout=api_timeout,
        )
