"""Tests for video ID resolution."""

import pytest

from wistiadl.core.errors import InputError
from wistiadl.core.resolver import IdentifierResolver


@pytest.fixture
def resolver():
    """Create resolver instance."""
    return IdentifierResolver()


def test_resolve_urls(resolver):
    """Test video ID extraction from the supported URL forms."""
    test_cases = [
        ("https://x.wistia.com/medias/abc123", "abc123"),
        ("https://example.com/page?wvideo=abc123", "abc123"),
        ("https://fast.wistia.net/embed/iframe/abc123?videoFoam=true", "abc123"),
        ("https://acme.wistia.com/medias/e4a27b971d?foo=bar", "e4a27b971d"),
        ("  https://x.wistia.com/medias/abc123  ", "abc123"),
    ]

    for text, expected_id in test_cases:
        assert resolver.resolve(text) == expected_id, f"{text} should resolve to {expected_id}"


def test_resolve_bare_id(resolver):
    """Test that an alphanumeric ID is accepted as is."""
    assert resolver.resolve("abc123") == "abc123"
    assert resolver.resolve("  abc123\n") == "abc123"


def test_pattern_priority(resolver):
    """Test that wvideo= wins over path-style matches."""
    text = "https://x.wistia.com/medias/pathid?wvideo=queryid"
    assert resolver.resolve(text) == "queryid"

    text = "https://fast.wistia.net/embed/iframe/iframeid/medias/mediaid"
    assert resolver.resolve(text) == "mediaid"


def test_resolve_invalid(resolver):
    """Test inputs that do not name a video."""
    invalid_inputs = ["", "   ", None, "ab!123", "abc 123", "https://vimeo.com/123456/", "medias/"]

    for text in invalid_inputs:
        assert resolver.resolve(text) is None, f"Should not resolve: {text!r}"
        assert not resolver.is_valid_input(text)


def test_require(resolver):
    """Test that require raises InputError with a presentable message."""
    assert resolver.require("abc123") == "abc123"

    with pytest.raises(InputError, match="valid Wistia video ID"):
        resolver.require("ab!123")


def test_embed_url(resolver):
    """Test embed URL construction."""
    assert resolver.embed_url("abc123") == (
        "https://fast.wistia.net/embed/iframe/abc123?videoFoam=true"
    )

    custom = IdentifierResolver("http://localhost/embed/{video_id}")
    assert custom.embed_url("abc123") == "http://localhost/embed/abc123"
