"""Extractor for Tumblr posts with images or videos."""

from __future__ import annotations

import json

from .. import parser, request, utils
from ..types import Data, DataType, ExtractionError, Options, Part, Stream, URLParseFailed

_SITE = "Tumblr tumblr.com"


def _gen_part(url: str, referer: str) -> Part:
    part_size = request.size(url, referer)
    _, ext = utils.get_name_and_ext(url)
    return Part(url=url, size=part_size, ext=ext)


def _image_urls(json_string: str) -> list[str]:
    document = json.loads(json_string)
    image = document.get("image", "") if isinstance(document, dict) else ""
    # The "image" field holds either a single URL or an object with a list.
    if '"image":{"@list"' in json_string:
        urls = image.get("@list", []) if isinstance(image, dict) else None
        if not isinstance(urls, list):
            raise URLParseFailed()
        return [str(url) for url in urls]
    if not isinstance(image, str):
        raise URLParseFailed()
    return [image]


def _image_data(url: str, html: str, page_title: str) -> list[Data]:
    found = utils.match_one_of(html, r'<script type="application/ld\+json">\s*(.+?)</script>')
    if not found or len(found) < 2:
        raise URLParseFailed()
    parts = [_gen_part(image_url, url) for image_url in _image_urls(found[1])]
    stream = Stream(parts=parts, size=sum(part.size for part in parts))
    return [
        Data(
            site=_SITE,
            title=page_title,
            type=DataType.IMAGE,
            streams={"default": stream},
            url=url,
        )
    ]


def _video_data(url: str, html: str, page_title: str) -> list[Data]:
    found = utils.match_one_of(html, r"<iframe src='(.+?)'")
    if not found or len(found) < 2:
        raise URLParseFailed()
    video_url = found[1]
    if "tumblr.com/video" not in video_url:
        raise ExtractionError("this URL is not supported right now")

    video_html = request.get(video_url, url, None)
    real = utils.match_one_of(video_html, r'source src="(.+?)"')
    if not real or len(real) < 2:
        raise URLParseFailed()

    part = _gen_part(real[1], url)
    stream = Stream(parts=[part], size=part.size)
    return [
        Data(
            site=_SITE,
            title=page_title,
            type=DataType.VIDEO,
            streams={"default": stream},
            url=url,
        )
    ]


class TumblrExtractor:
    """Extracts images or a video from a Tumblr post."""

    def extract(self, url: str, options: Options | None = None) -> list[Data]:
        """Return the data found at url."""
        html = request.get(url, url, None)
        page_title = parser.title(parser.get_doc(html))
        if "<iframe src=" in html:
            return _video_data(url, html, page_title)
        return _image_data(url, html, page_title)