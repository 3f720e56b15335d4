from unittest import mock

import pytest
import responses

from clipfetch import request as http

URL = "https://example.com/page"


@pytest.fixture(autouse=True)
def reset_options():
    http.set_options(http.RequestOptions(retry_times=1))
    yield
    http.set_options(http.RequestOptions())


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_get_returns_body(mocked):
    mocked.add(responses.GET, URL, body="hello body")
    assert http.get(URL) == "hello body"


def test_referer_defaults_to_url(mocked):
    mocked.add(responses.GET, URL, body="x")
    http.get(URL, "", None)
    assert mocked.calls[0].request.headers["Referer"] == URL


def test_refer_argument_sets_referer(mocked):
    mocked.add(responses.GET, URL, body="x")
    http.get(URL, "https://example.com/", {"X-Test": "1"})
    sent = mocked.calls[0].request.headers
    assert sent["Referer"] == "https://example.com/"
    assert sent["X-Test"] == "1"


def test_global_refer_overrides(mocked):
    mocked.add(responses.GET, URL, body="x")
    http.set_options(http.RequestOptions(retry_times=1, refer="https://example.com/ref"))
    http.get(URL, "https://example.com/", None)
    assert mocked.calls[0].request.headers["Referer"] == "https://example.com/ref"


def test_raw_cookie_is_sent_as_is(mocked):
    mocked.add(responses.GET, URL, body="x")
    http.set_options(http.RequestOptions(retry_times=1, cookie="name: value;"))
    http.get(URL)
    assert mocked.calls[0].request.headers["Cookie"] == "name: value;"


def test_cookie_file_format_is_parsed(mocked):
    mocked.add(responses.GET, URL, body="x")
    cookie_text = "# Netscape HTTP Cookie File\n.example.com\tTRUE\t/\tFALSE\t0\tsession\tabc\n"
    http.set_options(http.RequestOptions(retry_times=1, cookie=cookie_text))
    http.get(URL)
    assert mocked.calls[0].request.headers["Cookie"] == "session=abc"


def test_http_error_raises(mocked):
    mocked.add(responses.GET, URL, status=404)
    with pytest.raises(http.RequestError, match="request error: HTTP 404"):
        http.get(URL)


def test_retries_until_success(mocked):
    mocked.add(responses.GET, URL, status=500)
    mocked.add(responses.GET, URL, body="ok")
    http.set_options(http.RequestOptions(retry_times=3))
    with mock.patch("clipfetch.request.time.sleep") as sleep:
        assert http.get(URL) == "ok"
    assert sleep.call_count == 1
    assert len(mocked.calls) == 2


def test_gives_up_after_retry_times(mocked):
    mocked.add(responses.GET, URL, status=503)
    http.set_options(http.RequestOptions(retry_times=3))
    with mock.patch("clipfetch.request.time.sleep") as sleep:
        with pytest.raises(http.RequestError):
            http.get(URL)
    assert len(mocked.calls) == 3
    assert sleep.call_count == 2


def test_invalid_url_raises():
    with pytest.raises(http.RequestError):
        http.get("test", "", None)


def test_size(mocked):
    mocked.add(responses.GET, URL, body=b"abcde", headers={"Content-Length": "5"})
    assert http.size(URL, "") == 5


def test_size_without_content_length(mocked):
    mocked.add(responses.GET, URL, body=b"")
    with pytest.raises(http.RequestError, match="Content-Length is not present"):
        http.size(URL, "")


def test_content_type_strips_parameters(mocked):
    mocked.add(responses.GET, URL, body="x", content_type="text/html; charset=utf-8")
    assert http.content_type(URL, "") == "text/html"


def test_get_headers(mocked):
    mocked.add(responses.GET, URL, body="x", headers={"X-Served-By": "cache"})
    assert http.get_headers(URL, "")["x-served-by"] == "cache"


def test_debug_output(mocked, capsys):
    mocked.add(responses.GET, URL, body="x")
    http.set_options(http.RequestOptions(retry_times=1, debug=True))
    http.get(URL)
    out = capsys.readouterr().out
    assert f"URL:         {URL}" in out
    assert "Status Code: 200" in out