import types

import pytest
import requests

from urlsentry.errors import FetchError
from urlsentry.fetch import content_fetcher


def fake_response(status_code=200, text="<html>ok</html>"):
    return types.SimpleNamespace(ok=200 <= status_code < 400, status_code=status_code, text=text)


def patch_get(monkeypatch, response=None, exc=None):
    calls = []

    def fake_get(url, headers=None, timeout=None):
        calls.append({"url": url, "headers": headers, "timeout": timeout})
        if exc:
            raise exc
        return response

    monkeypatch.setattr(content_fetcher.requests, "get", fake_get)
    return calls


def test_returns_page_text(monkeypatch):
    calls = patch_get(monkeypatch, fake_response())

    assert content_fetcher.fetch_content("https://a.example", timeout=3) == "<html>ok</html>"
    assert calls[0]["timeout"] == 3
    assert "Mozilla" in calls[0]["headers"]["User-Agent"]


@pytest.mark.parametrize("url", ["ftp://a.example", "a.example", "", None])
def test_rejects_non_http_urls(monkeypatch, url):
    calls = patch_get(monkeypatch, fake_response())

    with pytest.raises(FetchError) as info:
        content_fetcher.fetch_content(url)

    assert info.value.status == 400
    assert calls == []


def test_timeout_maps_to_504(monkeypatch):
    patch_get(monkeypatch, exc=requests.Timeout("slow"))

    with pytest.raises(FetchError) as info:
        content_fetcher.fetch_content("https://a.example")

    assert info.value.status == 504


def test_connection_error_maps_to_500(monkeypatch):
    patch_get(monkeypatch, exc=requests.ConnectionError("refused"))

    with pytest.raises(FetchError) as info:
        content_fetcher.fetch_content("https://a.example")

    assert info.value.status == 500
    assert "refused" in info.value.message


def test_upstream_status_and_short_body(monkeypatch):
    patch_get(monkeypatch, fake_response(404, "no such page"))

    with pytest.raises(FetchError) as info:
        content_fetcher.fetch_content("https://a.example/missing")

    assert info.value.status == 404
    assert "Server message: no such page" in info.value.message


def test_long_error_body_is_not_echoed(monkeypatch):
    patch_get(monkeypatch, fake_response(503, "x" * 600))

    with pytest.raises(FetchError) as info:
        content_fetcher.fetch_content("https://a.example")

    assert info.value.status == 503
    assert "Server message" not in info.value.message


def test_oversized_content(monkeypatch):
    patch_get(monkeypatch, fake_response(text="y" * 20))

    with pytest.raises(FetchError) as info:
        content_fetcher.fetch_content("https://a.example", max_bytes=10)

    assert info.value.status == 413
