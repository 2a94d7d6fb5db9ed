from page_scanner.browser.navigation_reconciler import (
    encode_uri,
    is_scanned_url_diverged,
    navigation_succeeded,
)
from page_scanner.browser.page_navigator import ResponseMeta


def make_response(redirect_count=0, status_code=200):
    return ResponseMeta(
        status_code=status_code,
        final_url="http://a.test/x",
        redirect_count=redirect_count,
        ok=200 <= status_code < 300,
    )


def test_encode_uri_matches_browser_encoding():
    assert encode_uri("http://a.test/x?q=1&b=2#top") == "http://a.test/x?q=1&b=2#top"
    assert encode_uri("http://a.test/a b") == "http://a.test/a%20b"
    assert encode_uri("http://a.test/ü") == "http://a.test/%C3%BC"
    assert encode_uri("http://a.test/100%") == "http://a.test/100%25"


def test_navigation_succeeded():
    assert navigation_succeeded(make_response()) is True
    assert navigation_succeeded(make_response(status_code=500)) is False
    assert navigation_succeeded(None) is False


def test_same_url_without_redirect_is_not_diverged():
    assert is_scanned_url_diverged(make_response(), "http://a.test/x", "http://a.test/x") is False


def test_redirect_chain_is_diverged():
    assert is_scanned_url_diverged(make_response(redirect_count=1), "http://a.test/x", "http://a.test/x") is True


def test_encoded_url_mismatch_is_diverged():
    assert is_scanned_url_diverged(make_response(), "http://a.test/x", "http://a.test/y") is True


def test_unset_request_url_compares_only_redirects():
    assert is_scanned_url_diverged(make_response(), None, "http://a.test/y") is False


def test_missing_response_checks_url_only():
    assert is_scanned_url_diverged(None, "http://a.test/x", "http://a.test/x") is False
    assert is_scanned_url_diverged(None, "http://a.test/x", "http://a.test/z") is True
