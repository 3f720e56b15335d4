"""Extractor for yinyuetai.com music videos."""

from __future__ import annotations

import json
from typing import Any

from .. import request, utils
from ..types import Data, DataType, ExtractionError, Options, Part, Stream, URLParseFailed

_API = "https://ext.yinyuetai.com/main/"
_ACTION_GET_MV_INFO = "get-h-mv-info"
_URL_PATTERNS = (
    r"https?://v.yinyuetai.com/video/(\d+)(?:\?vid=\d+)?",
    r"https?://v.yinyuetai.com/video/h5/(\d+)(?:\?vid=\d+)?",
    r"https?://m2.yinyuetai.com/video.html\?id=(\d+)",
)


def gen_api(action: str, param: str) -> str:
    """Return the API address for an action with its query parameters."""
    return f"{_API}{action}?json=true&{param}"


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _parse_response(text: str) -> dict:
    try:
        document = json.loads(text)
    except ValueError as exc:
        raise URLParseFailed() from exc
    if not isinstance(document, dict):
        raise URLParseFailed()
    return document


class YinyuetaiExtractor:
    """Extracts the streams of a yinyuetai.com music video."""

    def extract(self, url: str, options: Options | None = None) -> list[Data]:
        """Return the data found at url."""
        found = utils.match_one_of(url, *_URL_PATTERNS)
        if not found or len(found) < 2:
            raise ExtractionError("invalid url for yinyuetai")

        api_url = gen_api(_ACTION_GET_MV_INFO, f"videoId={found[1]}")
        document = _parse_response(request.get(api_url, url, None))

        if document.get("error"):
            raise ExtractionError(str(document.get("message", "")))
        core = _as_dict(_as_dict(document.get("videoInfo")).get("coreVideoInfo"))
        if core.get("error"):
            raise ExtractionError(str(core.get("errorMsg", "")))

        streams: dict[str, Stream] = {}
        for model in core.get("videoURLModels") or []:
            model = _as_dict(model)
            file_size = int(model.get("fileSize", 0) or 0)
            streams[str(model.get("qualityLevel", ""))] = Stream(
                parts=[Part(url=model.get("videoURL", ""), size=file_size, ext="mp4")],
                size=file_size,
                quality=model.get("qualityLevelName", ""),
            )

        return [
            Data(
                site="音悦台 yinyuetai.com",
                title=core.get("videoName", ""),
                type=DataType.VIDEO,
                streams=streams,
                url=url,
            )
        ]