"""Extractor for plain file URLs."""

from __future__ import annotations

from .. import request, utils
from ..types import Data, Options, Part, Stream


class UniversalExtractor:
    """Treats the URL itself as the single file to download."""

    def extract(self, url: str, options: Options | None = None) -> list[Data]:
        """Return the data for the file at url."""
        filename, ext = utils.get_name_and_ext(url)
        file_size = request.size(url, url)
        stream = Stream(parts=[Part(url=url, size=file_size, ext=ext)], size=file_size)
        media_type = request.content_type(url, url)
        return [
            Data(
                site="Universal",
                title=filename,
                type=media_type,
                streams={"default": stream},
                url=url,
            )
        ]