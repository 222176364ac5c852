"""Bulk download of selected assets."""

from __future__ import annotations

import concurrent.futures
import logging
import os
import re
import threading
import time
from collections.abc import Callable, Sequence
from pathlib import Path

import requests

from .models import AppConfig, AssetRecord, DownloadResult

logger = logging.getLogger(__name__)

MAX_WORKERS = 4
CHUNK_SIZE = 1024 * 1024  # 1MB chunks

RESERVED_NAMES = {
    "CON",
    "PRN",
    "AUX",
    "NUL",
    *(f"COM{i}" for i in range(1, 10)),
    *(f"LPT{i}" for i in range(1, 10)),
}


def sanitize_filename(filename: str, fallback: str = "asset") -> str:
    """Create safe filename from input string, preventing path traversal."""
    # Remove any path components to prevent directory traversal
    filename = os.path.basename(filename.replace("\\", "/"))

    safe = re.sub(r"[\\/:*?\"<>|\n\r\t]+", "_", filename)
    safe = safe.strip("_ .")

    # Prevent path traversal attempts and hidden files
    if ".." in safe or safe.startswith(".") or "~" in safe:
        safe = fallback

    stem = safe.split(".", 1)[0]
    if not safe or stem.upper() in RESERVED_NAMES:
        safe = fallback

    # Limit length to prevent filesystem issues
    return safe[:255]


class BulkDownloader:
    """Downloads asset files, staggering the start of each one."""

    def __init__(
        self,
        config: AppConfig | None = None,
        session: requests.Session | None = None,
        progress_callback: Callable[[str], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config or AppConfig()
        self.session = session or requests.Session()
        self.progress_callback = progress_callback
        self._sleep = sleep

        if self.config.user_agent:
            self.session.headers["User-Agent"] = self.config.user_agent

    def _log(self, message: str) -> None:
        """Log message via callback or logger."""
        logger.info(message)
        if self.progress_callback:
            self.progress_callback(message)

    def target_path(self, record: AssetRecord, dest_dir: Path) -> Path:
        """Destination file for a record inside ``dest_dir``."""
        name = sanitize_filename(record.display_name, fallback=record.id)
        return dest_dir / f"{name}.{sanitize_filename(record.ext, fallback='bin')}"

    def download_asset(self, record: AssetRecord, dest_dir: Path) -> DownloadResult:
        """Download one asset to ``dest_dir``."""
        if not record.url:
            return DownloadResult(
                success=False,
                asset_id=record.id,
                error_message="Asset has no URL",
            )

        path = self.target_path(record, dest_dir)
        self._log(f"[download] {record.display_name}")

        try:
            dest_dir.mkdir(parents=True, exist_ok=True)
            with self.session.get(
                record.url, stream=True, timeout=self.config.request_timeout
            ) as response:
                response.raise_for_status()
                with path.open("wb") as f:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)

        except requests.RequestException as e:
            error_msg = f"Download failed: {e}"
            self._log(f"[error] {record.display_name}: {error_msg}")
            return DownloadResult(success=False, asset_id=record.id, error_message=error_msg)
        except OSError as e:
            error_msg = f"File error during download: {e}"
            self._log(f"[error] {record.display_name}: {error_msg}")
            return DownloadResult(success=False, asset_id=record.id, error_message=error_msg)

        filesize = path.stat().st_size
        self._log(f"[success] Downloaded: {path.name}")
        return DownloadResult(
            success=True,
            asset_id=record.id,
            file_path=path,
            filesize=filesize,
        )

    def download_multiple(
        self,
        records: Sequence[AssetRecord],
        dest_dir: Path | None = None,
        progress_callback: Callable[[int, int, AssetRecord], None] | None = None,
    ) -> list[DownloadResult]:
        """Download records concurrently, item ``i`` starting ``i * stagger`` seconds in.

        Records without a URL are skipped. Results come back in input order.
        """
        dest_dir = dest_dir or self.config.download_dir
        stagger = self.config.download_stagger
        pending = [(index, record) for index, record in enumerate(records) if record.url]

        if not pending:
            logger.warning("No downloadable assets in selection")
            return []

        completed_count = 0
        lock = threading.Lock()
        started_at = time.monotonic()

        def download_with_delay(index: int, record: AssetRecord) -> DownloadResult:
            """Wait for the record's start slot, then download it."""
            nonlocal completed_count

            delay = started_at + index * stagger - time.monotonic()
            if delay > 0:
                self._sleep(delay)

            result = self.download_asset(record, dest_dir)

            with lock:
                completed_count += 1
                if progress_callback:
                    progress_callback(completed_count, len(pending), record)

            return result

        max_workers = min(MAX_WORKERS, len(pending))
        with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(download_with_delay, index, record)
                for index, record in pending
            ]
            results = [future.result() for future in futures]

        succeeded = sum(1 for result in results if result.success)
        logger.info(f"Downloaded {succeeded} of {len(results)} assets to {dest_dir}")
        return results
