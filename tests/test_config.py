import httpx
import pytest

from geoapify import DEFAULT_BASE_URL, ConfigError, GeoapifyClient, RetryConfig, Settings

ENV_VARS = [
    "GEOAPIFY_API_KEY",
    "GEOAPIFY_BASE_URL",
    "GEOAPIFY_MAX_RETRIES",
    "GEOAPIFY_RETRY_INITIAL_DELAY",
    "GEOAPIFY_RETRY_MAX_DELAY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_missing_api_key(clean_env):
    with pytest.raises(ConfigError, match="GEOAPIFY_API_KEY"):
        Settings.from_env()


def test_defaults(clean_env):
    clean_env.setenv("GEOAPIFY_API_KEY", "abc")

    settings = Settings.from_env()

    assert settings.api_key == "abc"
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.retry is None


def test_retry_enabled_by_max_retries(clean_env):
    clean_env.setenv("GEOAPIFY_API_KEY", "abc")
    clean_env.setenv("GEOAPIFY_BASE_URL", "http://localhost:8080")
    clean_env.setenv("GEOAPIFY_MAX_RETRIES", "4")
    clean_env.setenv("GEOAPIFY_RETRY_MAX_DELAY", "10")

    settings = Settings.from_env()

    assert settings.base_url == "http://localhost:8080"
    assert settings.retry == RetryConfig(max_retries=4, initial_delay=0.5, max_delay=10.0)


@pytest.mark.parametrize("name, value", [
    ("GEOAPIFY_MAX_RETRIES", "many"),
    ("GEOAPIFY_MAX_RETRIES", "-2"),
    ("GEOAPIFY_RETRY_INITIAL_DELAY", "0"),
    ("GEOAPIFY_RETRY_MAX_DELAY", "0.1"),
])
def test_invalid_retry_settings(clean_env, name, value):
    clean_env.setenv("GEOAPIFY_API_KEY", "abc")
    clean_env.setenv("GEOAPIFY_MAX_RETRIES", "3")
    clean_env.setenv(name, value)

    with pytest.raises(ConfigError):
        Settings.from_env()


async def test_client_from_settings():
    settings = Settings(
        api_key="abc",
        base_url="https://example.test/",
        retry=RetryConfig(max_retries=2, initial_delay=0.1, max_delay=1.0),
    )
    async with httpx.AsyncClient() as http:
        client = GeoapifyClient.from_settings(settings, http_client=http)

        assert client.base_url == "https://example.test"
        assert client.retry_config.max_retries == 2
        assert client.build_url("/v1/x").endswith("apiKey=abc")


async def test_owned_transport_closed_on_exit():
    async with GeoapifyClient("abc") as client:
        http = client._http
    assert http.is_closed


async def test_injected_transport_left_open():
    async with httpx.AsyncClient() as http:
        async with GeoapifyClient("abc", http_client=http):
            pass
        assert not http.is_closed
