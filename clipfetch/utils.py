"""General helpers: pattern matching, file names, input files and URLs."""

from __future__ import annotations

import hashlib
import json
import os
import re
import sys
from typing import IO, Any, Iterable
from urllib.parse import urljoin, urlsplit

from . import request
from .selection import need_download_list

_CHUNK_SIZE = 32 * 1024
_ELLIPSES = "..."

_DOMAIN_PATTERN = (
    r"([a-z0-9][-a-z0-9]{0,62})\."
    r"(com\.cn|com\.hk|"
    r"cn|com|net|edu|gov|biz|org|info|pro|name|xxx|xyz|be|"
    r"me|top|cc|tv|tt)"
)

# Alternation order matters: ": " must win over ":" at the same position.
_NAME_REPLACEMENTS = {"\n": " ", "/": " ", "|": "-", ": ": "：", ":": "：", "'": "’"}
_WINDOWS_REPLACEMENTS = {'"': " ", "?": " ", "*": " ", "\\": " ", "<": " ", ">": " "}


def _replacer(table: dict[str, str]):
    pattern = re.compile("|".join(re.escape(old) for old in table))
    return lambda text: pattern.sub(lambda m: table[m.group(0)], text)


_replace_name = _replacer(_NAME_REPLACEMENTS)
_replace_windows = _replacer(_WINDOWS_REPLACEMENTS)


def _split_json_path(path: str) -> list[str]:
    keys: list[str] = []
    current: list[str] = []
    chars = iter(path)
    for char in chars:
        if char == "\\":
            current.append(next(chars, ""))
        elif char == ".":
            keys.append("".join(current))
            current = []
        else:
            current.append(char)
    keys.append("".join(current))
    return keys


def _json_to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def get_string_from_json(json_text: str, path: str) -> str:
    """Return the value at a dotted path as a string, or "" if absent.

    Array elements are addressed by index; ``#`` gives an array's length.
    """
    try:
        current: Any = json.loads(json_text)
    except ValueError:
        return ""
    for key in _split_json_path(path):
        if isinstance(current, dict):
            if key not in current:
                return ""
            current = current[key]
        elif isinstance(current, list):
            if key == "#":
                current = len(current)
            elif key.isdigit() and int(key) < len(current):
                current = current[int(key)]
            else:
                return ""
        else:
            return ""
    return _json_to_string(current)


def match_one_of(text: str, *args: str) -> list[str] | None:
    """Return the groups of the first pattern that matches, or None."""
    for pattern in args:
        match = re.search(pattern, text)
        if match:
            return [match.group(0), *(group or "" for group in match.groups())]
    return None


def match_all(text: str, pattern: str) -> list[list[str]]:
    """Return the groups of every match of pattern."""
    return [
        [match.group(0), *(group or "" for group in match.groups())]
        for match in re.finditer(pattern, text)
    ]


def file_size(file_path: str) -> tuple[int, bool]:
    """Return the size of a file and whether it exists."""
    try:
        return os.stat(file_path).st_size, True
    except FileNotFoundError:
        return 0, False


def domain(url: str) -> str:
    """Return the second-level domain name of a URL, or ""."""
    found = match_one_of(url, _DOMAIN_PATTERN)
    return found[1] if found else ""


def limit_length(s: str, length: int) -> str:
    """Shorten s to length characters, ending with an ellipsis; 0 means no limit."""
    if length == 0 or len(s) <= length:
        return s
    if length < len(_ELLIPSES):
        raise ValueError(f"length {length} is too small to hold an ellipsis")
    return s[: length - len(_ELLIPSES)] + _ELLIPSES


def file_name(name: str, ext: str, length: int) -> str:
    """Turn a string into a valid file name with an optional extension."""
    name = _replace_name(name)
    if sys.platform == "win32":
        name = _replace_windows(name)
    limited = limit_length(name, length)
    return f"{limited}.{ext}" if ext else limited


def file_path(name: str, ext: str, length: int, output_path: str, escape: bool) -> str:
    """Build the path of an output file; output_path must exist if given."""
    if output_path:
        os.stat(output_path)
    name_part = file_name(name, ext, length) if escape else f"{name}.{ext}"
    return os.path.join(output_path, name_part)


def file_line_counter(stream: IO) -> int:
    """Count the newline characters in a text or binary stream."""
    count = 0
    while chunk := stream.read(_CHUNK_SIZE):
        count += chunk.count(b"\n" if isinstance(chunk, bytes) else "\n")
    return count


def parse_input_file(stream: Iterable, items: str, item_start: int, item_end: int) -> list[str]:
    """Read one URL per line and keep the selected lines.

    Selection indices are compared with 0-based line positions.
    """
    lines = [
        (line.decode("utf-8") if isinstance(line, bytes) else line).strip()
        for line in stream
    ]
    wanted = set(need_download_list(items, item_start, item_end, len(lines)))
    return [line for index, line in enumerate(lines) if index in wanted]


def item_in_slice(item: Any, items: Iterable[Any]) -> bool:
    """Whether an int or str item is in items, comparing same types only."""
    if type(item) not in (int, str):
        return False
    return any(type(other) is type(item) and other == item for other in items)


def get_name_and_ext(uri: str) -> tuple[str, str]:
    """Return the file name and extension of a URL.

    When the path has no extension it is taken from the Content-Type.
    """
    parts = urlsplit(uri)
    if not parts.scheme and not uri.startswith("/"):
        raise ValueError(f"invalid URI for request: {uri!r}")
    filename = parts.path.split("/")[-1].split(".")
    if len(filename) > 1:
        return filename[0], filename[1]
    media_type = request.content_type(uri, uri).split("/")
    if len(media_type) < 2:
        raise ValueError(f"cannot find an extension for {uri!r}")
    return filename[0], media_type[1]


def md5(text: str) -> str:
    """Return the hex MD5 digest of text."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def m3u8_urls(uri: str) -> list[str]:
    """Return the absolute segment URLs listed in an m3u8 playlist."""
    if not uri:
        raise ValueError("url is null")
    urls = []
    for line in request.get(uri, "", None).split("\n"):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        urls.append(line if line.startswith("http") else urljoin(uri, line))
    return urls


def reverse(s: str) -> str:
    """Return s with its characters in reverse order."""
    return s[::-1]