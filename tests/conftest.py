"""Pytest fixtures for page_scanner: Playwright collaborators replaced with mocks."""
from unittest.mock import AsyncMock, MagicMock

import pytest

from page_scanner.browser.browser_error import BrowserError, BrowserErrorType
from page_scanner.browser.page import Page
from page_scanner.browser.page_navigator import ResponseMeta


REQUEST_URL = "http://a.test/x"


def _navigation_succeeds(status_code=200, redirect_count=0, final_url=None):
    async def navigate(url, page, on_error):
        return ResponseMeta(
            status_code=status_code,
            final_url=final_url or url,
            redirect_count=redirect_count,
            ok=200 <= status_code < 300,
        )
    return navigate


def _navigation_fails(status_code=404, message="Page responded with HTTP 404"):
    async def navigate(url, page, on_error):
        await on_error(BrowserError(
            message=message,
            status_code=status_code,
            error_type=BrowserErrorType.HTTP_ERROR_CODE,
        ))
        return None
    return navigate


@pytest.fixture
def request_url():
    return REQUEST_URL


@pytest.fixture
def navigation_succeeds():
    return _navigation_succeeds


@pytest.fixture
def navigation_fails():
    return _navigation_fails


@pytest.fixture
def playwright_page():
    page = MagicMock()
    page.url = REQUEST_URL
    page.is_closed = MagicMock(return_value=False)
    page.title = AsyncMock(return_value="Test page")
    return page


@pytest.fixture
def browser(playwright_page):
    browser = MagicMock()
    browser.version = "120.0.6099.0"
    browser.new_page = AsyncMock(return_value=playwright_page)
    return browser


@pytest.fixture
def web_driver(browser):
    driver = MagicMock()
    driver.launch = AsyncMock(return_value=browser)
    driver.connect = AsyncMock(return_value=browser)
    driver.close = AsyncMock()
    return driver


@pytest.fixture
def page_navigator():
    navigator = MagicMock()
    navigator.navigate = AsyncMock(side_effect=_navigation_succeeds())
    navigator.page_configurator.get_user_agent = MagicMock(return_value="TestAgent/1.0")
    navigator.page_configurator.get_browser_resolution = MagicMock(return_value="1920x1080")
    navigator.page_configurator.page_options = MagicMock(return_value={
        "user_agent": "TestAgent/1.0",
        "viewport": {"width": 1920, "height": 1080},
    })
    return navigator


@pytest.fixture
def axe_results():
    return {"url": REQUEST_URL, "violations": [{"id": "image-alt", "impact": "critical", "nodes": [{}]}]}


@pytest.fixture
def axe_analyzer(axe_results):
    analyzer = MagicMock()
    analyzer.analyze = AsyncMock(return_value=axe_results)
    return analyzer


@pytest.fixture
def axe_analyzer_factory(axe_analyzer):
    factory = MagicMock()
    factory.create_analyzer = AsyncMock(return_value=axe_analyzer)
    return factory


@pytest.fixture
def privacy_page_scanner():
    scanner = MagicMock()
    scanner.scan_page_for_privacy = AsyncMock(return_value={
        "cookie_collection_consent_results": [{"cookies": []}],
    })
    return scanner


@pytest.fixture
def scan_logger():
    return MagicMock()


@pytest.fixture
def page(web_driver, axe_analyzer_factory, page_navigator, privacy_page_scanner, scan_logger):
    return Page(
        web_driver=web_driver,
        axe_analyzer_factory=axe_analyzer_factory,
        page_navigator=page_navigator,
        privacy_page_scanner=privacy_page_scanner,
        logger=scan_logger,
    )
