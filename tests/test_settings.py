import pytest

from chatlink import settings as settings_module
from chatlink.http_client import DEFAULT_SERVICE_URL
from chatlink.settings import Settings

_VARS = (
    "CHAT_USERNAME",
    "CHAT_PASSWORD",
    "CHAT_PASSWORD_HASH",
    "CHAT_ID",
    "CHAT_RESOURCES",
    "CHAT_SERVICE_URL",
    "API_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings_module, "load_dotenv", lambda: False)
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_load_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHAT_USERNAME", " bob ")
    loaded = Settings.load()
    assert loaded.username == "bob"
    assert loaded.password is None
    assert loaded.password_hash is None
    assert loaded.chat_id is None
    assert loaded.resources == ("ALL",)
    assert loaded.service_url == DEFAULT_SERVICE_URL
    assert loaded.api_timeout == 30.0


def test_load_full_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHAT_USERNAME", "bob")
    monkeypatch.setenv("CHAT_PASSWORD", " pw ")
    monkeypatch.setenv("CHAT_PASSWORD_HASH", "cached")
    monkeypatch.setenv("CHAT_ID", "19:abc")
    monkeypatch.setenv("CHAT_RESOURCES", "/v1/threads/ALL, /v1/custom ,")
    monkeypatch.setenv("CHAT_SERVICE_URL", "http://mock.local")
    monkeypatch.setenv("API_TIMEOUT", "2.5")
    loaded = Settings.load()
    assert loaded.password == " pw "
    assert loaded.password_hash == "cached"
    assert loaded.chat_id == "19:abc"
    assert loaded.resources == ("/v1/threads/ALL", "/v1/custom")
    assert loaded.service_url == "http://mock.local"
    assert loaded.api_timeout == 2.5


def test_username_is_required() -> None:
    with pytest.raises(ValueError, match="CHAT_USERNAME"):
        Settings.load()


@pytest.mark.parametrize("value", ["abc", "0", "-1"])
def test_invalid_timeout(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("CHAT_USERNAME", "bob")
    monkeypatch.setenv("API_TIMEOUT", value)
    with pytest.raises(ValueError, match="API_TIMEOUT"):
        Settings.load()


def test_resources_without_entries_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHAT_USERNAME", "bob")
    monkeypatch.setenv("CHAT_RESOURCES", " , ,")
    with pytest.raises(ValueError, match="CHAT_RESOURCES"):
        Settings.load()


def test_repr_hides_secrets() -> None:
    text = repr(Settings(username="bob", password="pw-secret", password_hash="hash-secret"))
    assert "pw-secret" not in text
    assert "hash-secret" not in text
