"""Core functionality for WistiaDL."""

from .collection import AssetCollection
from .downloader import BulkDownloader
from .errors import (
    BusyError,
    EmptyAssetsError,
    HttpError,
    InputError,
    MalformedPayloadError,
    NoDataError,
    PayloadNotFoundError,
    UnsupportedFormatError,
    WistiaDLError,
)
from .exporter import Exporter
from .extractor import AssetExtractor
from .fetcher import AssetFetcher
from .models import (
    AppConfig,
    AssetRecord,
    DownloadResult,
    ExportFormat,
    ExportResult,
    SelectionSummary,
    SortConfig,
    SortDirection,
)
from .normalizer import AssetNormalizer, process_url
from .resolver import IdentifierResolver

__all__ = [
    "AppConfig",
    "AssetCollection",
    "AssetExtractor",
    "AssetFetcher",
    "AssetNormalizer",
    "AssetRecord",
    "BulkDownloader",
    "BusyError",
    "DownloadResult",
    "EmptyAssetsError",
    "ExportFormat",
    "ExportResult",
    "Exporter",
    "HttpError",
    "IdentifierResolver",
    "InputError",
    "MalformedPayloadError",
    "NoDataError",
    "PayloadNotFoundError",
    "SelectionSummary",
    "SortConfig",
    "SortDirection",
    "UnsupportedFormatError",
    "WistiaDLError",
    "process_url",
]
