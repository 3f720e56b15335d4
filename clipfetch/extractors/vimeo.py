"""Extractor for Vimeo videos."""

from __future__ import annotations

import json

from .. import request, utils
from ..types import Data, DataType, Options, Part, Stream, URLParseFailed


def _player_html(url: str) -> str:
    if "player.vimeo.com" in url:
        return request.get(url, url, None)
    found = utils.match_one_of(url, r"vimeo\.com/(\d+)")
    if not found or len(found) < 2:
        raise URLParseFailed()
    return request.get("https://player.vimeo.com/video/" + found[1], url, None)


def _as_dict(value: object) -> dict:
    return value if isinstance(value, dict) else {}


class VimeoExtractor:
    """Extracts the progressive streams of a Vimeo video."""

    def extract(self, url: str, options: Options | None = None) -> list[Data]:
        """Return the data found at url."""
        html = _player_html(url)
        found = utils.match_one_of(html, r"var \w+\s?=\s?({.+?});")
        if not found or len(found) < 2:
            raise URLParseFailed()
        config = _as_dict(json.loads(found[1]))

        files = _as_dict(_as_dict(config.get("request")).get("files"))
        streams: dict[str, Stream] = {}
        for video in files.get("progressive") or []:
            video = _as_dict(video)
            video_url = video.get("url", "")
            video_size = request.size(video_url, url)
            streams[str(video.get("profile", 0))] = Stream(
                parts=[Part(url=video_url, size=video_size, ext="mp4")],
                size=video_size,
                quality=video.get("quality", ""),
            )

        return [
            Data(
                site="Vimeo vimeo.com",
                title=_as_dict(config.get("video")).get("title", ""),
                type=DataType.VIDEO,
                streams=streams,
                url=url,
            )
        ]