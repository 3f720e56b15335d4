"""HTTP requests with shared options, retries and cookie handling."""

from __future__ import annotations

import time
import warnings
from dataclasses import dataclass, fields
from typing import Mapping

import requests
from requests.structures import CaseInsensitiveDict

_TIMEOUT = (10, 15 * 60)


class RequestError(Exception):
    """An HTTP request failed."""


@dataclass
class RequestOptions:
    """Options applied to every request."""

    retry_times: int = 0
    cookie: str = ""
    refer: str = ""
    debug: bool = False


_options = RequestOptions()
_session = requests.Session()


def set_options(options: RequestOptions) -> None:
    """Set the options used by all following requests."""
    for field in fields(RequestOptions):
        setattr(_options, field.name, getattr(options, field.name))


def _parse_cookie_file(text: str) -> list[tuple[str, str]]:
    """Read cookies in the Netscape cookie file format."""
    cookies = []
    for line in text.splitlines():
        line = line.strip()
        if line.startswith("#HttpOnly_"):
            line = line[len("#HttpOnly_"):]
        elif not line or line.startswith("#"):
            continue
        parts = line.split("\t")
        if len(parts) != 7:
            continue
        cookies.append((parts[5], parts[6]))
    return cookies


def _print_debug(url: str, method: str, headers: Mapping[str, str], status: int) -> None:
    print()
    print(f"URL:         {url}")
    print(f"Method:      {method}")
    print(f"Headers:     {dict(headers)}")
    print(f"Status Code: {status}")


def request(
    method: str,
    url: str,
    body: bytes | None = None,
    headers: Mapping[str, str] | None = None,
) -> requests.Response:
    """Send a request, retrying on failure; the body is left unread."""
    headers = dict(headers or {})
    options = _options
    merged = dict(headers)
    if "Referer" not in headers:
        merged["Referer"] = url
    if options.cookie:
        cookies = _parse_cookie_file(options.cookie)
        if cookies:
            merged["Cookie"] = "; ".join(f"{name}={value}" for name, value in cookies)
        else:
            merged["Cookie"] = options.cookie
    if options.refer:
        merged["Referer"] = options.refer

    try:
        prepared = _session.prepare_request(
            requests.Request(method, url, data=body, headers=merged)
        )
    except requests.RequestException as exc:
        raise RequestError(f"request error: {exc}") from exc

    settings = _session.merge_environment_settings(prepared.url, {}, True, False, None)
    settings.update(verify=False, stream=True, timeout=_TIMEOUT)

    attempt = 0
    while True:
        response = None
        error = None
        try:
            with warnings.catch_warnings():
                warnings.filterwarnings("ignore", message="Unverified HTTPS request")
                response = _session.send(prepared, **settings)
        except requests.RequestException as exc:
            error = exc
        if error is None and response.status_code < 400:
            break
        if attempt + 1 >= options.retry_times:
            if error is not None:
                raise RequestError(f"request error: {error}") from error
            response.close()
            raise RequestError(f"{url} request error: HTTP {response.status_code}")
        if response is not None:
            response.close()
        time.sleep(1)
        attempt += 1

    if options.debug:
        _print_debug(url, method, prepared.headers, response.status_code)
    return response


def get_bytes(
    url: str, refer: str = "", headers: Mapping[str, str] | None = None
) -> bytes:
    """GET a URL and return its decoded body."""
    headers = dict(headers or {})
    if refer:
        headers["Referer"] = refer
    with request("GET", url, None, headers) as response:
        return response.content


def get(url: str, refer: str = "", headers: Mapping[str, str] | None = None) -> str:
    """GET a URL and return its body as text."""
    return get_bytes(url, refer, headers).decode("utf-8", errors="replace")


def get_headers(url: str, refer: str = "") -> CaseInsensitiveDict:
    """Return the response headers of a GET request."""
    with request("GET", url, None, {"Referer": refer}) as response:
        return response.headers


def size(url: str, refer: str = "") -> int:
    """Return the Content-Length of a URL."""
    value = get_headers(url, refer).get("Content-Length", "")
    if not value:
        raise RequestError("Content-Length is not present")
    try:
        return int(value)
    except ValueError as exc:
        raise RequestError(f"invalid Content-Length: {value!r}") from exc


def content_type(url: str, refer: str = "") -> str:
    """Return the media type of a URL without its parameters."""
    value = get_headers(url, refer).get("Content-Type", "")
    return value.split(";")[0]