"""Video ID resolution for Wistia links and raw IDs."""

from __future__ import annotations

import logging
import re

from .errors import InputError
from .models import DEFAULT_EMBED_URL

logger = logging.getLogger(__name__)

# Wistia URL patterns, in priority order
WISTIA_PATTERNS = [
    r"wvideo=([a-zA-Z0-9]+)",
    r"medias/([a-zA-Z0-9]+)",
    r"embed/iframe/([a-zA-Z0-9]+)",
]

# Compiled regex patterns
COMPILED_PATTERNS = [re.compile(pattern) for pattern in WISTIA_PATTERNS]

BARE_ID_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")


class IdentifierResolver:
    """Turns free-form input into a Wistia video ID."""

    def __init__(self, embed_url_template: str = DEFAULT_EMBED_URL) -> None:
        self.embed_url_template = embed_url_template

    def resolve(self, text: str | None) -> str | None:
        """Extract the video ID from a URL, embed code or bare ID."""
        if not text:
            return None

        text = text.strip()
        if not text:
            return None

        for pattern in COMPILED_PATTERNS:
            match = pattern.search(text)
            if match:
                return match.group(1)

        if BARE_ID_PATTERN.match(text):
            return text

        return None

    def is_valid_input(self, text: str | None) -> bool:
        """Check if a video ID can be resolved from the input."""
        return self.resolve(text) is not None

    def require(self, text: str | None) -> str:
        """Resolve the video ID or raise :class:`InputError`."""
        video_id = self.resolve(text)
        if video_id is None:
            logger.warning(f"Could not resolve a video ID from: {text!r}")
            raise InputError(
                "Please enter a valid Wistia video ID or URL",
                hint="Use a media URL, an embed URL or the alphanumeric ID itself.",
            )
        return video_id

    def embed_url(self, video_id: str) -> str:
        """Build the embed page URL for a video ID."""
        return self.embed_url_template.format(video_id=video_id)
