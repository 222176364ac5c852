"""Shared fixtures for the WistiaDL test suite."""

import json
from unittest.mock import MagicMock

import pytest

from wistiadl.core.models import AssetRecord

RAW_ASSETS = [
    {
        "type": "original",
        "display_name": "Original File",
        "width": 1920,
        "height": 1080,
        "ext": "mp4",
        "size": 52428800,
        "url": "https://embed-ssl.wistia.com/deliveries/aaa111.bin",
        "bitrate": 5000,
        "public": True,
    },
    {
        "type": "iphone_video",
        "display_name": "360p",
        "width": 640,
        "height": 360,
        "size": 1048576,
        "url": "https://embed-ssl.wistia.com/deliveries/bbb222.bin",
    },
    {
        "type": "still_image",
        "display_name": "Thumbnail",
        "width": 1280,
        "height": 720,
        "size": 204800,
        "url": "https://embed-ssl.wistia.com/deliveries/ccc333.bin",
    },
]


def embed_page(document) -> str:
    """Build an embed page body embedding ``document`` the way Wistia does."""
    return (
        "<html><head><script>"
        f"W.iframeInit({json.dumps(document)}, {{}});"
        "</script></head></html>"
    )


def mock_response(status_code=200, text=""):
    """Create a stand-in for ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    return response


@pytest.fixture
def raw_assets():
    """Raw asset dicts as served by the embed page."""
    return [dict(asset) for asset in RAW_ASSETS]


@pytest.fixture
def records():
    """A small, varied set of normalized records."""
    return (
        AssetRecord(id="asset_0", display_name="Original File", size=5000,
                    width=1920, height=1080, url="https://x/a.mp4", ext="mp4", type="original"),
        AssetRecord(id="asset_1", display_name="360p", size=1000,
                    width=640, height=360, url="https://x/b.mp4", ext="mp4", type="iphone_video"),
        AssetRecord(id="asset_2", display_name="Thumbnail", size=200,
                    width=1280, height=720, url="https://x/c.jpg", ext="jpg", type="still_image"),
        AssetRecord(id="asset_3", display_name="audio track", size=3000,
                    url="https://x/d.m4a", ext="m4a", type="audio"),
    )
