# clipfetch

clipfetch finds the media behind a web page. It fetches the page, works out
which video or image streams it offers, and describes each one as a set of
downloadable parts with sizes and file extensions. Around that it provides
helpers for playlist item selection, safe file names, m3u8 playlist expansion
and merging downloaded parts with ffmpeg.

## Extracting streams

Every extractor class has an `extract(url, options)` method that returns a list
of `clipfetch.types.Data` records.

```python
from clipfetch.types import Options
from clipfetch.extractors.vimeo import VimeoExtractor

data = VimeoExtractor().extract("https://vimeo.com/254865724", Options())
for item in data:
    print(item.title)
    for stream_id, stream in item.streams.items():
        print(stream_id, stream.quality, stream.size)
```

| Module                           | Class                | Handles                                           |
|----------------------------------|----------------------|---------------------------------------------------|
| `clipfetch.extractors.tumblr`    | `TumblrExtractor`    | Tumblr posts with images or an embedded video     |
| `clipfetch.extractors.udn`       | `UdnExtractor`       | udn.com news videos                               |
| `clipfetch.extractors.universal` | `UniversalExtractor` | any direct file URL                               |
| `clipfetch.extractors.vimeo`     | `VimeoExtractor`     | `vimeo.com/<id>` and `player.vimeo.com` pages     |
| `clipfetch.extractors.xvideos`   | `XvideosExtractor`   | xvideos.com pages (low and high quality)          |
| `clipfetch.extractors.yinyuetai` | `YinyuetaiExtractor` | yinyuetai.com music videos                        |
| `clipfetch.extractors.youku`     | `YoukuExtractor`     | youku.com videos                                  |

`UniversalExtractor` names the result after the file in the URL and uses the
server's `Content-Type` (for example `image/jpeg`) as its type.

`YoukuExtractor` reads `Options.youku_ccode`, `youku_ckey` and
`youku_password`, and takes the `cna` value from `Options.cookie` when present.
These options have no defaults suitable for the site, so set them yourself.

### Data records

`Data` has `url`, `site`, `title`, `type` (a `DataType` such as
`DataType.VIDEO`, or a plain string), `streams` (a dict of `Stream`), `caption`
and `err`. Each `Stream` holds `parts` (a list of `Part` with `url`, `size`,
`ext`), `quality`, `size`, `ext` and `need_mux`.

- `Data.fill_up_streams_data()` sets each stream's `id` to its key, uses the key
  as quality when none is given, sets the merged extension for video streams
  (`ts`, `flv` and `f4v` become `mp4`), and sums part sizes where the stream
  size is not set.
- `Data.to_dict()` returns a JSON-ready dictionary.
- `empty_data(url, err)` returns a record that only carries a URL and an error.

### Errors

Extractors raise exceptions rather than returning error values:
`URLParseFailed` when a page does not have the expected shape, and
`ExtractionError` (the base class of `URLParseFailed` and `LoginRequired`) for
other site-level failures. HTTP failures raise `clipfetch.request.RequestError`.

## HTTP settings

All requests made through `clipfetch.request` share one set of options:

```python
from clipfetch.request import RequestOptions, set_options

set_options(RequestOptions(retry_times=3, cookie="", refer="", debug=False))
```

- A request is retried up to `retry_times` times, one second apart, until the
  server answers with a status below 400; then `RequestError` is raised.
- `cookie` may be a raw `Cookie` header value or the text of a Netscape-format
  cookie file.
- `refer`, when set, overrides the `Referer` of every request; otherwise the
  request URL (or the given referer) is sent.
- `debug` prints the URL, method, headers and status of each request.
- Proxies are taken from the environment; TLS certificates are not verified.

`get`, `get_bytes`, `get_headers`, `size` (the `Content-Length`) and
`content_type` (the media type without parameters) build on `request`.

## Choosing playlist items

```python
from clipfetch.selection import need_download_list

need_download_list("1-3, 5, 7-8, 10", 1, 0, 10)  # [1, 2, 3, 5, 7, 8, 10]
need_download_list("", 2, 0, 3)                    # [2, 3]
```

An end of 0 means the last item; an end before the start selects just the
start. `clipfetch.utils.parse_input_file(stream, items, item_start, item_end)`
reads one URL per line and keeps the selected lines; note that it compares the
selected numbers with 0-based line positions.

## Other helpers

`clipfetch.utils` also provides `match_one_of`, `match_all`,
`get_string_from_json` (dotted paths, array indices and `#` for length),
`domain`, `limit_length`, `file_name`, `file_path`, `file_size`,
`file_line_counter`, `item_in_slice`, `get_name_and_ext`, `md5`, `m3u8_urls`
and `reverse`. `clipfetch.parser` offers `get_doc`, `title` and `get_images`
for HTML pages, and `clipfetch.pool.WaitGroupPool` limits how many tasks run
at once.

## File names and merging

```python
from clipfetch.utils import file_name
from clipfetch.ffmpeg import merge_to_mp4

name = file_name("hello:world", "mp4", 255)   # "hello：world.mp4"
merge_to_mp4(["part0.ts", "part1.ts"], name, "hello")
```

`merge_to_mp4` writes its list of inputs to `<filename>.txt` in the current
directory; `merge_files_with_same_extension` merges an audio and a video file
(or files of one extension) into one. Both need the `ffmpeg` program on the
`PATH`; a failed run raises `MergeError` with ffmpeg's error output. After a
successful merge the part files and the list file are removed.

## What clipfetch does not do

- There is no command-line program; it is used as a library.
- It does not download the parts it describes; fetching them and choosing a
  stream are left to the caller.
- There is no lookup that picks an extractor from a URL; import the extractor
  for the site you need.