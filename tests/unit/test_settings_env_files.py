import pytest

from pxshot.application.settings import PxshotSettings, get_pxshot_settings
from pxshot.domain.errors import ValidationError

PXSHOT_ENV = ("PXSHOT_API_KEY", "PXSHOT_BASE_URL", "PXSHOT_TIMEOUT_SECONDS", "PXSHOT_USER_AGENT")


def _clear_env(mp) -> None:  # type: ignore[no-untyped-def]
    for name in PXSHOT_ENV:
        mp.delenv(name, raising=False)


def test_settings_without_env_files(monkeypatch, tmp_path) -> None:
    with monkeypatch.context() as mp:
        mp.chdir(tmp_path)
        _clear_env(mp)
        settings = get_pxshot_settings()
        assert settings.api_key is None
        assert settings.base_url == "https://api.pxshot.com"
        with pytest.raises(ValidationError, match="PXSHOT_API_KEY"):
            settings.to_client_config()


def test_env_local_overrides_env(monkeypatch, tmp_path) -> None:
    (tmp_path / ".env").write_text("PXSHOT_API_KEY=from-env\n", encoding="utf-8")
    (tmp_path / ".env.local").write_text("PXSHOT_API_KEY=from-local\n", encoding="utf-8")

    with monkeypatch.context() as mp:
        mp.chdir(tmp_path)
        _clear_env(mp)
        settings = get_pxshot_settings()
        assert settings.api_key == "from-local"

        mp.setenv("PXSHOT_API_KEY", "from-process")
        settings = get_pxshot_settings()
        assert settings.api_key == "from-process"


def test_to_client_config() -> None:
    settings = PxshotSettings(
        _env_file=None,
        api_key="k",
        base_url="https://staging.pxshot.test",
        timeout_seconds=120,
        user_agent="MyApp/1.0",
    )
    config = settings.to_client_config()
    assert config.api_key.get_secret_value() == "k"
    assert config.base_url == "https://staging.pxshot.test"
    assert config.timeout_seconds == 120
    assert config.user_agent == "MyApp/1.0"
