"""Extractor for udn.com news videos."""

from __future__ import annotations

import re

from .. import request, utils
from ..types import Data, DataType, ExtractionError, Options, Part, Stream, URLParseFailed

_EMBED_PREFIX = "https://video.udn.com/embed/"
_START_FLAG = "',\n            mp4: '//"
_END_FLAG = "'\n        },\n        subtitles"
_TITLE_PATTERN = r"title: '(.+?)',\n        link:"


def get_cdn_url(html: str) -> str:
    """Return the CDN address of the video, or "" if it is not in the page."""
    found = utils.match_one_of(html, re.escape(_START_FLAG) + "(.+?)" + re.escape(_END_FLAG))
    if found and len(found) > 1 and found[1]:
        return found[1]
    return ""


def prepare_embed_url(url: str) -> str:
    """Turn a news video URL into its embed page URL."""
    if _EMBED_PREFIX in url:
        return url
    return _EMBED_PREFIX + "news/" + url.split("/")[-1]


class UdnExtractor:
    """Extracts the video of a udn.com news page."""

    def extract(self, url: str, options: Options | None = None) -> list[Data]:
        """Return the data found at url."""
        url = prepare_embed_url(url)
        if not url:
            raise URLParseFailed()

        html = request.get(url, url, None)
        found = utils.match_one_of(html, _TITLE_PATTERN)
        page_title = found[1] if found and len(found) > 1 else "udn"

        cdn_url = get_cdn_url(html)
        if not cdn_url:
            raise ExtractionError("empty list")
        src_url = request.get("http://" + cdn_url, url, None)
        video_size = request.size(src_url, url)

        quality = "normal"
        stream = Stream(
            parts=[Part(url=src_url, size=video_size, ext="mp4")],
            size=video_size,
            quality=quality,
        )
        return [
            Data(
                site="udn udn.com",
                title=page_title,
                type=DataType.VIDEO,
                streams={quality: stream},
                url=url,
            )
        ]