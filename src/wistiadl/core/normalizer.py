"""Normalization of raw asset dicts into :class:`AssetRecord` objects."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any, Dict

from .errors import MalformedPayloadError
from .models import AssetRecord, RawAsset

logger = logging.getLogger(__name__)

# File extension by Wistia asset type
TYPE_EXTENSIONS: Dict[str, str] = {
    "original": "mp4",
    "iphone_video": "mp4",
    "mp4_video": "mp4",
    "md_mp4_video": "mp4",
    "hd_mp4_video": "mp4",
    "still_image": "jpg",
    "storyboard": "jpg",
}

DEFAULT_EXTENSION = "mp4"
DEFAULT_TYPE = "video"

BIN_SUFFIX = re.compile(r"\.bin$")


def target_extension(ext: str | None, asset_type: str | None) -> str:
    """Pick the file extension for an asset."""
    # "bin" is the placeholder being replaced, never a usable extension
    if ext and ext != "bin":
        return ext
    return TYPE_EXTENSIONS.get(asset_type or "", DEFAULT_EXTENSION)


def process_url(url: str | None, ext: str | None, asset_type: str | None) -> str | None:
    """Replace a trailing ``.bin`` in an asset URL with the real extension."""
    if not url:
        return None
    return BIN_SUFFIX.sub(f".{target_extension(ext, asset_type)}", url)


class AssetNormalizer:
    """Builds ordinal-indexed asset records from the raw asset list."""

    def normalize_one(self, raw: Any, ordinal: int) -> AssetRecord:
        """Normalize the raw asset found at ``ordinal``."""
        if not isinstance(raw, Mapping):
            raise MalformedPayloadError(
                f"Asset {ordinal + 1} is not an object: {type(raw).__name__}"
            )

        asset = RawAsset.model_validate(dict(raw))

        return AssetRecord(
            id=f"asset_{ordinal}",
            display_name=asset.display_name or f"Asset {ordinal + 1}",
            size=asset.size if asset.size and asset.size > 0 else 0,
            width=asset.width if asset.width and asset.width > 0 else None,
            height=asset.height if asset.height and asset.height > 0 else None,
            url=process_url(asset.url, asset.ext, asset.type),
            ext=target_extension(asset.ext, asset.type),
            type=asset.type or DEFAULT_TYPE,
        )

    def normalize(self, raw_assets: Sequence[Any]) -> tuple[AssetRecord, ...]:
        """Normalize a raw asset list, keeping its order."""
        records = tuple(
            self.normalize_one(raw, ordinal) for ordinal, raw in enumerate(raw_assets)
        )
        logger.debug(f"Normalized {len(records)} assets")
        return records
