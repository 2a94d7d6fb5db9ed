from page_scanner.config import BrowserStartOptions, Config, get_config, reset_config
from page_scanner.constants import PageDefaults


def test_from_env_reads_browser_settings(monkeypatch):
    monkeypatch.setenv("HEADLESS", "false")
    monkeypatch.setenv("BROWSER_WS_ENDPOINT", "ws://127.0.0.1:9222")
    monkeypatch.setenv("VIEWPORT_WIDTH", "1024")
    monkeypatch.setenv("AXE_SOURCE_PATH", "/opt/axe/axe.min.js")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = Config.from_env()

    assert config.browser.headless is False
    assert config.browser.viewport_width == 1024
    assert config.browser.viewport_height == PageDefaults.VIEWPORT_HEIGHT
    assert config.scanner.axe_source_path == "/opt/axe/axe.min.js"
    assert config.log_level == "DEBUG"
    assert config.browser.start_options() == BrowserStartOptions(
        browser_executable_path=None,
        browser_ws_endpoint="ws://127.0.0.1:9222",
    )


def test_empty_env_values_are_unset(monkeypatch):
    monkeypatch.setenv("BROWSER_EXECUTABLE_PATH", "")
    monkeypatch.delenv("BROWSER_WS_ENDPOINT", raising=False)

    config = Config.from_env()

    assert config.browser.browser_executable_path is None
    assert config.browser.browser_ws_endpoint is None


def test_get_config_is_cached_until_reset():
    reset_config()
    first = get_config()

    assert get_config() is first
    reset_config()
    assert get_config() is not first
    reset_config()
