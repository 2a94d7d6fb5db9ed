import pytest
from unittest.mock import AsyncMock

from page_scanner.browser.page import Page, PageNotReadyError
from page_scanner.scan.privacy import ReloadPageResponse, collect_consent_errors


async def open_page(page, url):
    await page.create()
    await page.navigate_to_url(url)


@pytest.mark.asyncio
async def test_scan_merges_status_code_and_seed_uri(page, privacy_page_scanner, playwright_page, request_url):
    await open_page(page, request_url)

    result = await page.scan_for_privacy()

    assert privacy_page_scanner.scan_page_for_privacy.await_args.args[0] is playwright_page
    assert result.results == {
        "cookie_collection_consent_results": [{"cookies": []}],
        "http_status_code": 200,
        "seed_uri": request_url,
    }
    assert result.page_response_code == 200
    assert result.error is None
    assert "scanned_url" not in result.to_dict()


@pytest.mark.asyncio
async def test_first_consent_error_is_reported_and_all_are_logged(
    page, privacy_page_scanner, scan_logger, request_url
):
    privacy_page_scanner.scan_page_for_privacy.return_value = {
        "cookie_collection_consent_results": [{"error": "E1"}, {"cookies": []}, {"error": "E2"}],
    }
    await open_page(page, request_url)

    result = await page.scan_for_privacy()

    assert result.error == "E1"
    scan_logger.error.assert_called_once()
    logged_message = scan_logger.error.call_args.args[0]
    assert "E1" in logged_message
    assert "E2" in logged_message


@pytest.mark.asyncio
async def test_reload_keeps_original_status_code(
    page, page_navigator, privacy_page_scanner, playwright_page, request_url, navigation_succeeds
):
    reload_responses = []

    async def scan_with_reload(scanned_page, reload_page_func):
        page_navigator.navigate.side_effect = navigation_succeeds(status_code=203)
        reload_responses.append(await reload_page_func(scanned_page))
        return {"cookie_collection_consent_results": []}

    privacy_page_scanner.scan_page_for_privacy = AsyncMock(side_effect=scan_with_reload)
    await open_page(page, request_url)

    result = await page.scan_for_privacy()

    assert reload_responses == [ReloadPageResponse(success=True, error=None)]
    assert page_navigator.navigate.await_count == 2
    assert page_navigator.navigate.await_args.args[0] == playwright_page.url
    assert page.last_navigation_response.status_code == 203
    assert result.results["http_status_code"] == 200
    assert result.page_response_code == 200


@pytest.mark.asyncio
async def test_failed_reload_reports_browser_error(
    page, page_navigator, privacy_page_scanner, request_url, navigation_fails
):
    reload_responses = []

    async def scan_with_reload(scanned_page, reload_page_func):
        page_navigator.navigate.side_effect = navigation_fails(503, "Page responded with HTTP 503")
        reload_responses.append(await reload_page_func(scanned_page))
        return {"cookie_collection_consent_results": [{"error": "reload failed"}]}

    privacy_page_scanner.scan_page_for_privacy = AsyncMock(side_effect=scan_with_reload)
    await open_page(page, request_url)

    result = await page.scan_for_privacy()

    assert reload_responses[0].success is False
    assert reload_responses[0].error.status_code == 503
    assert result.page_response_code == 200
    assert result.error == "reload failed"


@pytest.mark.asyncio
async def test_scan_flags_url_changed_by_reload(
    page, privacy_page_scanner, playwright_page, scan_logger, request_url
):
    async def scan_and_move(scanned_page, reload_page_func):
        playwright_page.url = "http://a.test/consent"
        return {"cookie_collection_consent_results": []}

    privacy_page_scanner.scan_page_for_privacy = AsyncMock(side_effect=scan_and_move)
    await open_page(page, request_url)

    result = await page.scan_for_privacy()

    assert result.scanned_url == "http://a.test/consent"
    scan_logger.warning.assert_called_once()


@pytest.mark.asyncio
async def test_scan_flags_redirected_navigation(page, page_navigator, request_url, navigation_succeeds):
    page_navigator.navigate.side_effect = navigation_succeeds(redirect_count=2)
    await open_page(page, request_url)

    result = await page.scan_for_privacy()

    assert result.scanned_url == request_url


@pytest.mark.asyncio
async def test_engine_failure_is_converted_to_result(page, privacy_page_scanner, scan_logger, request_url):
    privacy_page_scanner.scan_page_for_privacy = AsyncMock(side_effect=ValueError("banner timeout"))
    await open_page(page, request_url)

    result = await page.scan_for_privacy()

    assert result.error.startswith("Privacy scan engine error. ")
    assert "banner timeout" in result.error
    assert result.scanned_url == request_url
    assert result.results is None
    scan_logger.error.assert_called_once()


@pytest.mark.asyncio
async def test_scan_without_privacy_scanner_is_programmer_error(
    web_driver, axe_analyzer_factory, page_navigator, request_url
):
    page = Page(web_driver, axe_analyzer_factory, page_navigator)
    await open_page(page, request_url)

    with pytest.raises(PageNotReadyError):
        await page.scan_for_privacy()


def test_collect_consent_errors_keeps_order():
    privacy_results = {
        "cookie_collection_consent_results": [{"error": "E1"}, {}, {"error": None}, {"error": "E2"}],
    }

    assert collect_consent_errors(privacy_results) == ["E1", "E2"]
    assert collect_consent_errors({}) == []
