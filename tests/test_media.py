import pytest

from clubsite.media import (
    extract_image_url,
    get_proxy_download_url,
    normalize_image_url,
    sanitize_link,
)


ORIGIN = "https://cms.example.org"


@pytest.mark.parametrize("value, expected", [
    ("photo.jpg", f"{ORIGIN}/api/media/file/photo.jpg"),
    ("/api/media/file/photo.jpg", f"{ORIGIN}/api/media/file/photo.jpg"),
    ("https://elsewhere/x.jpg", "https://elsewhere/x.jpg"),
    ({"url": "/x.jpg"}, f"{ORIGIN}/x.jpg"),
    ({"filename": "y.png"}, f"{ORIGIN}/api/media/file/y.png"),
    ({"id": "abc123"}, f"{ORIGIN}/api/media/file/abc123"),
    ({"id": 42}, f"{ORIGIN}/api/media/file/42"),
    ({"url": "/u.jpg", "filename": "f.jpg", "id": "i"}, f"{ORIGIN}/u.jpg"),
])
def test_normalize_image_url(value, expected):
    assert normalize_image_url(value, ORIGIN) == expected


@pytest.mark.parametrize("value", [None, "", "   ", {}, {"alt": "no reference"}, 17, []])
def test_normalize_image_url_unresolvable(value):
    assert normalize_image_url(value, ORIGIN) is None


def test_normalize_image_url_defaults_to_configured_origin():
    from clubsite.config import config
    assert normalize_image_url("a.jpg") == f"{config.cms_url}/api/media/file/a.jpg"


def test_trailing_slash_on_origin_is_ignored():
    assert normalize_image_url("/x.jpg", ORIGIN + "/") == f"{ORIGIN}/x.jpg"


def test_extract_image_url_unwraps_nested_media():
    value = {"image": {"media": {"url": "/api/media/file/deep.jpg"}}}
    assert extract_image_url(value, ORIGIN) == f"{ORIGIN}/api/media/file/deep.jpg"


def test_extract_image_url_prefers_direct_reference():
    value = {"url": "https://a/direct.jpg", "image": {"url": "/nested.jpg"}}
    assert extract_image_url(value, ORIGIN) == "https://a/direct.jpg"


def test_extract_image_url_missing():
    assert extract_image_url({"image": {"alt": "x"}}, ORIGIN) is None


@pytest.mark.parametrize("value, expected", [
    ("doc.pdf", "/api/download/doc.pdf"),
    ("/api/media/file/doc.pdf", "/api/download/doc.pdf"),
    ("https://cms.example.org/api/media/file/doc.pdf?v=2", "/api/download/doc.pdf"),
    ({"url": "/api/media/file/schedule.pdf"}, "/api/download/schedule.pdf"),
    ({"filename": "schedule.pdf"}, "/api/download/schedule.pdf"),
    (None, None),
    ({}, None),
])
def test_get_proxy_download_url(value, expected):
    assert get_proxy_download_url(value) == expected


@pytest.mark.parametrize("url, expected", [
    ("/programs", "/programs"),
    ("https://example.org", "https://example.org"),
    ("javascript:alert(1)", ""),
    ("programs", ""),
    (None, ""),
])
def test_sanitize_link(url, expected):
    assert sanitize_link(url) == expected


def test_sanitize_link_fallback():
    assert sanitize_link("ftp://x", "/news") == "/news"
