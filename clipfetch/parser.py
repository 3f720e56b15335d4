"""Helpers for reading HTML pages."""

from __future__ import annotations

from typing import Callable

from bs4 import BeautifulSoup


def get_doc(html: str) -> BeautifulSoup:
    """Parse an HTML string into a document."""
    return BeautifulSoup(html, "html.parser", multi_valued_attributes=None)


def title(doc: BeautifulSoup) -> str:
    """Return the page title: the first h1, then og:title, then <title>."""
    heading = doc.find("h1")
    text = heading.get_text() if heading is not None else ""
    result = text.strip().replace("\n", "")
    if not result:
        meta = doc.find("meta", attrs={"property": "og:title"})
        result = meta.get("content", "") if meta is not None else ""
    if not result:
        result = "".join(tag.get_text() for tag in doc.find_all("title"))
    return result


def get_images(
    html: str,
    img_class: str,
    url_handler: Callable[[str], str] | None = None,
) -> tuple[str, list[str]]:
    """Return the page title and the sources of images whose class is exactly img_class."""
    doc = get_doc(html)
    urls = []
    for image in doc.find_all("img"):
        if image.get("class") != img_class:
            continue
        url = image.get("src", "")
        if url_handler is not None:
            url = url_handler(url)
        urls.append(url)
    return title(doc), urls