"""Retrieval of the asset list from the Wistia embed page.

The embed page inlines the media data as the first argument of an
``iframeInit(...)`` call. That markup is undocumented, so everything that
depends on it lives in :func:`extract_payload`.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

import requests

from .errors import EmptyAssetsError, HttpError, MalformedPayloadError, PayloadNotFoundError
from .models import AppConfig
from .resolver import IdentifierResolver

logger = logging.getLogger(__name__)

# JSON document between "iframeInit(" and the first ", {}"
PAYLOAD_PATTERN = re.compile(r"iframeInit\((.*?), \{\}")


def extract_payload(text: str) -> dict[str, Any]:
    """Pull the embedded media document out of an embed page body."""
    match = PAYLOAD_PATTERN.search(text)
    if not match:
        raise PayloadNotFoundError(
            "Could not find video data in response. "
            "The video might be private or the ID might be incorrect."
        )

    try:
        document = json.loads(match.group(1))
    except json.JSONDecodeError as e:
        raise MalformedPayloadError(
            "Invalid response format. Please check the video ID."
        ) from e

    if not isinstance(document, dict):
        raise EmptyAssetsError("No assets found for this video.")

    return document


def extract_assets(document: dict[str, Any]) -> list[Any]:
    """Return the non-empty ``assets`` array of a media document."""
    assets = document.get("assets")
    if not isinstance(assets, list) or not assets:
        raise EmptyAssetsError("No assets found for this video.")
    return assets


class AssetFetcher:
    """Fetches raw asset dicts for a video ID."""

    def __init__(
        self,
        config: AppConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.session = session or requests.Session()
        self.resolver = IdentifierResolver(self.config.embed_url_template)

        if self.config.user_agent:
            self.session.headers["User-Agent"] = self.config.user_agent

    def fetch(self, video_id: str) -> list[Any]:
        """Fetch the raw asset list for a video, in server order."""
        url = self.resolver.embed_url(video_id)
        logger.info(f"[fetch] {url}")

        try:
            response = self.session.get(url, timeout=self.config.request_timeout)
        except requests.RequestException as e:
            logger.error(f"Network error fetching {url}: {e}")
            raise HttpError(
                f"Failed to fetch video data: {e}",
                hint="Check your network connection and try again.",
            ) from e

        if not 200 <= response.status_code < 300:
            logger.error(f"Embed request for {video_id} failed with HTTP {response.status_code}")
            raise HttpError(
                "Failed to fetch video data. Please check the video ID.",
                status_code=response.status_code,
            )

        document = extract_payload(response.text)
        assets = extract_assets(document)

        logger.debug(f"Embed page for {video_id} lists {len(assets)} assets")
        return assets
