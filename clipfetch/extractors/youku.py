"""Extractor for youku.com videos."""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import random
import struct
import time
from typing import Any
from urllib.parse import quote_plus

from .. import request, utils
from ..types import Data, DataType, ExtractionError, Options, Part, Stream, URLParseFailed

_REFERER = "https://v.youku.com"
_UTDID_KEY = b"d6fc3a4a06adbde89223bvefedc24fecde188aaa9161"
_UTDID_CCODE = "0103010102"
_AUDIO_LANGS = {"guoyu": "国语", "ja": "日语", "yue": "粤语"}


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _int32_bytes(value: int) -> bytes:
    return struct.pack(">i", _to_int32(value))


def get_audio_lang(lang: str) -> str:
    """Return the display name of an audio language code."""
    return _AUDIO_LANGS.get(lang, lang)


def hash_code(s: str) -> int:
    """Return the 32-bit signed string hash (h = 31*h + c over code points)."""
    result = 0
    for char in s:
        result = _to_int32(result * 0x1F + ord(char))
    return result


def generate_utdid() -> str:
    """Generate a random device identifier for the ups API."""
    timestamp = _to_int32(int(time.time()))
    buffer = bytearray()
    buffer += _int32_bytes(timestamp - 60 * 60 * 8)
    buffer += _int32_bytes(random.getrandbits(31))
    buffer += b"\x03\x00"
    imei = str(random.getrandbits(31))
    buffer += _int32_bytes(hash_code(imei))
    digest = hmac.new(_UTDID_KEY, bytes(buffer), hashlib.sha1).digest()
    buffer += _int32_bytes(hash_code(base64.b64encode(digest).decode("ascii")))
    return base64.b64encode(bytes(buffer)).decode("ascii")


def gen_streams(data: dict) -> dict[str, Stream]:
    """Build the streams from the "data" object of an ups response."""
    streams: dict[str, Stream] = {}
    for raw in data.get("stream") or []:
        entry = _as_dict(raw)
        stream_type = entry.get("stream_type", "")
        audio_lang = entry.get("audio_lang", "")
        width = int(entry.get("width", 0) or 0)
        height = int(entry.get("height", 0) or 0)
        if audio_lang == "default":
            key = stream_type
            quality = f"{stream_type} {width}x{height}"
        else:
            key = f"{stream_type}-{audio_lang}"
            quality = f"{stream_type} {width}x{height} {get_audio_lang(audio_lang)}"

        segs = [_as_dict(seg) for seg in entry.get("segs") or []]
        if not segs:
            raise URLParseFailed()
        ext = segs[0].get("cdn_url", "").split("?")[0].split(".")[-1]
        parts = [
            Part(url=seg.get("cdn_url", ""), size=int(seg.get("size", 0) or 0), ext=ext)
            for seg in segs
        ]
        streams[key] = Stream(
            parts=parts, size=int(entry.get("size", 0) or 0), quality=quality
        )
    return streams


def _youku_ups(vid: str, options: Options) -> dict:
    if "cna" in options.cookie:
        utids = utils.match_one_of(
            options.cookie, r"cna=(.+?);", r"cna\s+(.+?)\s", r"cna\s+(.+?)$"
        )
    else:
        headers = request.get_headers("http://log.mmstat.com/eg.js", _REFERER)
        utids = utils.match_one_of(headers.get("Set-Cookie", ""), r"cna=(.+?);")
    if not utids or len(utids) < 2:
        raise URLParseFailed()
    utid = utids[1]

    ccode = options.youku_ccode
    if ccode == _UTDID_CCODE:
        utid = generate_utdid()
    url = (
        f"https://ups.youku.com/ups/get.json?vid={vid}&ccode={ccode}"
        f"&client_ip=192.168.1.1&client_ts={int(time.time()) // 1000}"
        f"&utid={quote_plus(utid)}&ckey={quote_plus(options.youku_ckey)}"
    )
    if options.youku_password:
        url = f"{url}&password={options.youku_password}"

    body = request.get_bytes(url, _REFERER, None)
    try:
        document = json.loads(body)
    except ValueError as exc:
        raise ExtractionError(f"invalid ups response: {exc}") from exc
    return _as_dict(document)


class YoukuExtractor:
    """Extracts the streams of a youku.com video."""

    def extract(self, url: str, options: Options | None = None) -> list[Data]:
        """Return the data found at url."""
        options = options or Options()
        found = utils.match_one_of(url, r"id_(.+?)\.html", r"id_(.+)")
        if not found or len(found) < 2:
            raise URLParseFailed()

        data = _as_dict(_youku_ups(found[1], options).get("data"))
        error = _as_dict(data.get("error"))
        if error.get("code", 0) != 0:
            raise ExtractionError(str(error.get("note", "")))

        streams = gen_streams(data)
        video_title = _as_dict(data.get("video")).get("title", "")
        show_title = _as_dict(data.get("show")).get("title", "")
        if not show_title or show_title in video_title:
            page_title = video_title
        else:
            page_title = f"{show_title} {video_title}"

        return [
            Data(
                site="优酷 youku.com",
                title=page_title,
                type=DataType.VIDEO,
                streams=streams,
                url=url,
            )
        ]