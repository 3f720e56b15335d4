import pytest

from clipfetch.parser import get_doc, get_images, title


def test_get_doc():
    doc = get_doc("<html><head><title>hello</title></head><body>hello</body></html>")
    assert doc.find("title").get_text() == "hello"


def test_get_images():
    html = (
        '<html><head><title>hello</title></head><body><img class="test" src="test.jpg" />'
        '<img class="test2" src="test2.jpg" /></body></html>'
    )
    page_title, urls = get_images(html, "test", None)
    assert page_title == "hello"
    assert urls == ["test.jpg"]


def test_get_images_with_handler():
    html = '<html><body><img class="test" src="test.jpg" /><img class="test" src="b.jpg" /></body></html>'
    _, urls = get_images(html, "test", lambda u: "https:" + u)
    assert urls == ["https:test.jpg", "https:b.jpg"]


def test_get_images_class_must_match_exactly():
    html = '<html><body><img class="test extra" src="a.jpg" /></body></html>'
    _, urls = get_images(html, "test")
    assert urls == []


@pytest.mark.parametrize(
    "html, want",
    [
        ("<html><head><title>hello</title></head><body>hello</body></html>", "hello"),
        ("<html><head><title>hello</title></head><body><h1> aa</h1></body></html>", "aa"),
        (
            '<html><head><meta property="og:title" content="你的名字。"></head><body>hello</body></html>',
            "你的名字。",
        ),
    ],
)
def test_title(html, want):
    assert title(get_doc(html)) == want