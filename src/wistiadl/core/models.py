"""Data models for WistiaDL."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_EMBED_URL = "https://fast.wistia.net/embed/iframe/{video_id}?videoFoam=true"


class SortDirection(str, Enum):
    """Direction of a collection sort."""

    ASC = "asc"
    DESC = "desc"


class ExportFormat(str, Enum):
    """Supported export formats."""

    CSV = "csv"
    JSON = "json"


class AppConfig(BaseModel):
    """Application configuration."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )

    # Network
    embed_url_template: str = DEFAULT_EMBED_URL
    request_timeout: float = Field(default=30.0, gt=0)
    user_agent: str | None = None

    # Directories
    download_dir: Path = Path("~/Downloads/Wistia Assets").expanduser()
    logs_dir: Path = Path("logs")

    # Bulk download settings
    download_stagger: float = Field(default=0.5, ge=0)

    # Export settings
    export_basename: str = "wistia_assets"

    @field_validator("embed_url_template")
    @classmethod
    def _check_template(cls, value: str) -> str:
        if "{video_id}" not in value:
            raise ValueError("embed_url_template must contain '{video_id}'")
        return value

    def ensure_directories(self) -> None:
        """Create necessary directories."""
        self.download_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)


class RawAsset(BaseModel):
    """One entry of the ``assets`` array as served by the embed page.

    Every field is optional and anything else the server sends is dropped.
    Loosely-typed values are coerced rather than rejected: numbers in text
    fields become strings, fractional numbers are floored and values that
    cannot be read as a number become ``None``.
    """

    model_config = ConfigDict(extra="ignore")

    display_name: str | None = None
    size: int | None = None
    width: int | None = None
    height: int | None = None
    url: str | None = None
    ext: str | None = None
    type: str | None = None

    @field_validator("display_name", "url", "ext", "type", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return None

    @field_validator("size", "width", "height", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> int | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                value = float(value.strip())
            except ValueError:
                return None
        if isinstance(value, float) and math.isfinite(value):
            return math.floor(value)
        return None


class AssetRecord(BaseModel):
    """A normalized, downloadable asset of a video."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    display_name: str
    size: int = Field(default=0, ge=0)
    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)
    url: str | None = None
    ext: str = "mp4"
    type: str = "video"

    @field_validator("url")
    @classmethod
    def _reject_bin_url(cls, value: str | None) -> str | None:
        if value is not None and value.endswith(".bin"):
            raise ValueError("asset url must not end in .bin")
        return value

    @property
    def area(self) -> int:
        """Pixel area, treating a missing dimension as 0."""
        return (self.width or 0) * (self.height or 0)

    @property
    def filename(self) -> str:
        """Suggested filename for a download of this asset."""
        return f"{self.display_name}.{self.ext}"

    def to_export_dict(self) -> dict[str, str | int | None]:
        """Project the record onto the export schema."""
        return {
            "name": self.display_name,
            "size": self.size,
            "width": self.width,
            "height": self.height,
            "url": self.url,
            "type": self.type,
            "extension": self.ext,
        }


@dataclass(frozen=True)
class SortConfig:
    """Active sort key and direction of a collection."""

    key: str | None = None
    direction: SortDirection = SortDirection.ASC

    def __iter__(self):
        yield self.key
        yield self.direction


@dataclass(frozen=True)
class SelectionSummary:
    """Selection counts relative to the visible records."""

    visible: int
    selected_visible: int
    selected_total: int

    @property
    def all_visible_selected(self) -> bool:
        """Check if every visible record is selected."""
        return self.visible > 0 and self.selected_visible == self.visible

    @property
    def partially_selected(self) -> bool:
        """Check if some but not all visible records are selected."""
        return 0 < self.selected_visible < self.visible


@dataclass(frozen=True)
class ExportResult:
    """Exported content, ready for the caller to persist."""

    content: str
    filename: str
    media_type: str


class DownloadResult(BaseModel):
    """Result from downloading one asset."""

    model_config = ConfigDict(extra="forbid")

    success: bool
    asset_id: str
    file_path: Path | None = None
    error_message: str | None = None
    filesize: int | None = None
