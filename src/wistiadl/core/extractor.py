"""Extraction pipeline: resolve, fetch, normalize and load."""

from __future__ import annotations

import logging
import threading

from .collection import AssetCollection
from .errors import BusyError
from .fetcher import AssetFetcher
from .models import AppConfig, AssetRecord
from .normalizer import AssetNormalizer
from .resolver import IdentifierResolver

logger = logging.getLogger(__name__)


class AssetExtractor:
    """Runs extractions into a collection, one at a time.

    A second :meth:`extract` while one is running fails right away with
    :class:`BusyError` instead of waiting, since both would replace the
    collection's records. A failed extraction leaves the collection as it was.
    """

    def __init__(
        self,
        collection: AssetCollection,
        config: AppConfig | None = None,
        fetcher: AssetFetcher | None = None,
        normalizer: AssetNormalizer | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.collection = collection
        self.resolver = IdentifierResolver(self.config.embed_url_template)
        self.fetcher = fetcher or AssetFetcher(self.config)
        self.normalizer = normalizer or AssetNormalizer()
        self._running = threading.Lock()

    @property
    def is_busy(self) -> bool:
        """Check if an extraction is in flight."""
        return self._running.locked()

    def extract(self, text: str) -> tuple[AssetRecord, ...]:
        """Extract the assets of the video named by ``text`` into the collection."""
        if not self._running.acquire(blocking=False):
            logger.warning("Extraction already in progress, rejecting new request")
            raise BusyError(
                "An extraction is already in progress",
                hint="Wait for the current extraction to finish.",
            )

        try:
            video_id = self.resolver.require(text)
            logger.info(f"[extract] {video_id}")

            raw_assets = self.fetcher.fetch(video_id)
            records = self.normalizer.normalize(raw_assets)
            self.collection.load(records)

            logger.info(f"[success] Found {len(records)} assets for {video_id}")
            return records
        finally:
            self._running.release()
