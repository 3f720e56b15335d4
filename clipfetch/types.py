"""Data structures shared by all extractors."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class ExtractionError(Exception):
    """Base class for errors raised while extracting data."""


class URLParseFailed(ExtractionError):
    """The page or URL could not be parsed."""

    def __init__(self, message: str = "url parse failed") -> None:
        super().__init__(message)


class LoginRequired(ExtractionError):
    """The content is only available to logged-in users."""

    def __init__(self, message: str = "login required") -> None:
        super().__init__(message)


class DataType(str, Enum):
    """Kind of extracted data."""

    VIDEO = "video"
    IMAGE = "image"


# Extensions whose parts are merged into an mp4 file.
_MERGE_TO_MP4 = frozenset({"ts", "flv", "f4v"})


@dataclass
class Part:
    """A single downloadable piece of a stream."""

    url: str = ""
    size: int = 0
    ext: str = ""


@dataclass
class Stream:
    """One variant of the content, e.g. 720P or 1080P."""

    id: str = ""
    quality: str = ""
    parts: list[Part] = field(default_factory=list)
    size: int = 0
    ext: str = ""
    need_mux: bool = False


@dataclass
class Data:
    """Everything extracted from one URL."""

    url: str = ""
    site: str = ""
    title: str = ""
    type: DataType | str = ""
    streams: dict[str, Stream] = field(default_factory=dict)
    caption: Part | None = None
    err: BaseException | None = None

    def fill_up_streams_data(self) -> None:
        """Fill in stream ids, qualities, merged extensions and total sizes."""
        for stream_id, stream in self.streams.items():
            stream.id = stream_id
            if not stream.quality:
                stream.quality = stream_id

            if self.type == DataType.VIDEO and not stream.ext:
                ext = stream.parts[0].ext
                stream.ext = "mp4" if ext in _MERGE_TO_MP4 else ext

            if stream.size > 0:
                continue
            stream.size = sum(part.size for part in stream.parts)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable representation."""
        data_type = self.type.value if isinstance(self.type, DataType) else self.type
        return {
            "url": self.url,
            "site": self.site,
            "title": self.title,
            "type": data_type,
            "streams": {key: _stream_dict(s) for key, s in self.streams.items()},
            "caption": asdict(self.caption) if self.caption is not None else None,
            "err": str(self.err) if self.err is not None else None,
        }


def _stream_dict(stream: Stream) -> dict[str, Any]:
    return {
        "id": stream.id,
        "quality": stream.quality,
        "parts": [asdict(part) for part in stream.parts],
        "size": stream.size,
        "ext": stream.ext,
        "NeedMux": stream.need_mux,
    }


def empty_data(url: str, err: BaseException) -> Data:
    """Return a Data that only records the URL and the error."""
    return Data(url=url, err=err)


@dataclass
class Options:
    """Options that extractors may take into account."""

    playlist: bool = False
    items: str = ""
    item_start: int = 0
    item_end: int = 0
    thread_number: int = 0
    cookie: str = ""
    episode_title_only: bool = False
    youku_ccode: str = ""
    youku_ckey: str = ""
    youku_password: str = ""