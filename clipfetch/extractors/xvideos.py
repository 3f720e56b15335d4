"""Extractor for xvideos.com videos."""

from __future__ import annotations

from dataclasses import dataclass

from .. import request, utils
from ..types import Data, DataType, Options, Part, Stream

_LOW_FLAG = "html5player.setVideoUrlLow('"
_LOW_FINAL_FLAG = "');\n\t    html5player.setVideoUrlHigh("
_HIGH_FLAG = "html5player.setVideoUrlHigh('"
_HIGH_FINAL_FLAG = "');\n\t    html5player.setVideoHLS("
_QUALITY_LOW = "low"
_QUALITY_HIGH = "high"


@dataclass
class Source:
    """A video address together with its quality."""

    url: str
    quality: str


def _between(html: str, start_flag: str, end_flag: str) -> str | None:
    start = html.find(start_flag)
    if start == -1:
        return None
    start += len(start_flag)
    end = html.find(end_flag, start)
    if end == -1:
        return None
    return html[start:end]


def get_src(html: str) -> list[Source]:
    """Return the low and high quality video sources found in the page."""
    sources = []
    for start_flag, end_flag, quality in (
        (_LOW_FLAG, _LOW_FINAL_FLAG, _QUALITY_LOW),
        (_HIGH_FLAG, _HIGH_FINAL_FLAG, _QUALITY_HIGH),
    ):
        url = _between(html, start_flag, end_flag)
        if url is not None:
            sources.append(Source(url=url, quality=quality))
    return sources


class XvideosExtractor:
    """Extracts the streams of an xvideos.com page."""

    def extract(self, url: str, options: Options | None = None) -> list[Data]:
        """Return the data found at url."""
        html = request.get(url, url, None)
        found = utils.match_one_of(html, r"<title>(.+?)</title>")
        page_title = found[1] if found and len(found) > 1 else "xvideos"

        streams: dict[str, Stream] = {}
        for source in get_src(html):
            video_size = request.size(source.url, url)
            streams[source.quality] = Stream(
                parts=[Part(url=source.url, size=video_size, ext="mp4")],
                size=video_size,
                quality=source.quality,
            )
        return [
            Data(
                site="XVIDEOS xvideos.com",
                title=page_title,
                type=DataType.VIDEO,
                streams=streams,
                url=url,
            )
        ]