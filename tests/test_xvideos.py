import pytest
import responses

from clipfetch import request
from clipfetch.extractors.xvideos import Source, XvideosExtractor, get_src
from clipfetch.types import DataType, Options

PAGE = "https://www.xvideos.com/video1/sample"
PLAYER_JS = (
    "html5player.setVideoUrlLow('https://cdn.example.com/low.mp4');\n"
    "\t    html5player.setVideoUrlHigh('https://cdn.example.com/high.mp4');\n"
    "\t    html5player.setVideoHLS('https://cdn.example.com/hls.m3u8');"
)


@pytest.fixture(autouse=True)
def default_options():
    request.set_options(request.RequestOptions())
    yield
    request.set_options(request.RequestOptions())


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_get_src():
    assert get_src(PLAYER_JS) == [
        Source(url="https://cdn.example.com/low.mp4", quality="low"),
        Source(url="https://cdn.example.com/high.mp4", quality="high"),
    ]


def test_get_src_without_player():
    assert get_src("<html></html>") == []


def test_extract(mocked):
    mocked.add(responses.GET, PAGE, body="<title>Sample clip</title>\n" + PLAYER_JS)
    for name, length in (("low", 11), ("high", 22)):
        mocked.add(
            responses.GET,
            f"https://cdn.example.com/{name}.mp4",
            body=b"x" * length,
            headers={"Content-Length": str(length)},
        )

    item = XvideosExtractor().extract(PAGE, Options())[0]

    assert item.title == "Sample clip"
    assert item.type == DataType.VIDEO
    assert item.site == "XVIDEOS xvideos.com"
    assert sorted(item.streams) == ["high", "low"]
    for quality, stream in item.streams.items():
        assert stream.quality == quality
        assert stream.parts[0].url == f"https://cdn.example.com/{quality}.mp4"
        assert stream.parts[0].ext == "mp4"
        assert stream.size == stream.parts[0].size
    assert item.streams["high"].size == 22


def test_extract_default_title(mocked):
    mocked.add(responses.GET, PAGE, body="<html></html>")
    item = XvideosExtractor().extract(PAGE, Options())[0]
    assert item.title == "xvideos"
    assert item.streams == {}