"""In-memory asset collection with search, sort and selection."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from numbers import Real
from typing import Any

from .models import AssetRecord, SelectionSummary, SortConfig, SortDirection

logger = logging.getLogger(__name__)

# Record fields matched by search
SEARCH_FIELDS = ("display_name", "url", "ext")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _text_key(value: Any) -> str:
    return "" if value is None else str(value).lower()


def build_sort_key(key: str, records: Iterable[AssetRecord]) -> Callable[[AssetRecord], Any]:
    """Build the sort key function for a column key.

    ``size`` sorts by bytes, ``name`` by display name ignoring case and
    ``width`` by pixel area. Any other key sorts by the raw field, as a
    number when the records hold numbers there and as text otherwise.
    """
    if key == "size":
        return lambda record: record.size
    if key == "name":
        return lambda record: record.display_name.lower()
    if key == "width":
        return lambda record: record.area

    values = [getattr(record, key, None) for record in records]
    present = [value for value in values if value is not None]
    if present and all(_is_number(value) for value in present):
        return lambda record: getattr(record, key, None) or 0
    return lambda record: _text_key(getattr(record, key, None))


class AssetCollection:
    """Owns the extracted records and the views derived from them.

    The canonical records only change on :meth:`load`. Search, sort and
    selection work on derived state and publish new immutable values, so
    readers never see a view in the middle of an update.
    """

    def __init__(self, records: Iterable[AssetRecord] = ()) -> None:
        self._lock = threading.RLock()
        self._records: tuple[AssetRecord, ...] = ()
        self._visible: tuple[AssetRecord, ...] = ()
        self._selected: frozenset[str] = frozenset()
        self._sort_config = SortConfig()
        self._query = ""

        records = tuple(records)
        if records:
            self.load(records)

    # Read-only views

    @property
    def records(self) -> tuple[AssetRecord, ...]:
        """All records of the last successful extraction, in extraction order."""
        return self._records

    @property
    def visible(self) -> tuple[AssetRecord, ...]:
        """Records matching the current search, in display order."""
        return self._visible

    @property
    def selected_ids(self) -> frozenset[str]:
        return self._selected

    @property
    def sort_config(self) -> SortConfig:
        return self._sort_config

    @property
    def query(self) -> str:
        return self._query

    @property
    def has_records(self) -> bool:
        return bool(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def get(self, asset_id: str) -> AssetRecord | None:
        """Look up a record by its ID."""
        for record in self._records:
            if record.id == asset_id:
                return record
        return None

    def selected_records(self) -> tuple[AssetRecord, ...]:
        """Selected records in extraction order, including hidden ones."""
        selected = self._selected
        return tuple(record for record in self._records if record.id in selected)

    def selection_summary(self) -> SelectionSummary:
        """Selection counts for the tri-state select-all control."""
        with self._lock:
            visible = self._visible
            selected = self._selected
            return SelectionSummary(
                visible=len(visible),
                selected_visible=sum(1 for record in visible if record.id in selected),
                selected_total=len(selected),
            )

    # Loading and filtering

    def load(self, records: Iterable[AssetRecord]) -> tuple[AssetRecord, ...]:
        """Replace all records, resetting search and selection."""
        records = tuple(records)
        with self._lock:
            self._records = records
            self._visible = records
            self._selected = frozenset()
            self._query = ""

        logger.info(f"Loaded {len(records)} assets")
        return records

    def search(self, query: str) -> tuple[AssetRecord, ...]:
        """Filter records by a case-insensitive substring query.

        The result is always in extraction order; an earlier sort of the
        visible records is not kept, though :attr:`sort_config` is.
        """
        needle = (query or "").strip().lower()

        with self._lock:
            if needle:
                visible = tuple(
                    record
                    for record in self._records
                    if any(
                        needle in value.lower()
                        for value in (getattr(record, field) for field in SEARCH_FIELDS)
                        if value
                    )
                )
            else:
                visible = self._records

            self._visible = visible
            self._query = needle

        logger.debug(f"Search {needle!r}: {len(visible)} of {len(self._records)} assets")
        return visible

    # Sorting

    def sort(
        self,
        key: str,
        direction: SortDirection | str = SortDirection.ASC,
    ) -> tuple[AssetRecord, ...]:
        """Sort the visible records by a column key.

        The sort is stable in both directions: records with equal keys keep
        their relative order.
        """
        direction = SortDirection(direction)

        with self._lock:
            sort_key = build_sort_key(key, self._visible)
            visible = tuple(
                sorted(
                    self._visible,
                    key=sort_key,
                    reverse=direction is SortDirection.DESC,
                )
            )
            self._visible = visible
            self._sort_config = SortConfig(key=key, direction=direction)

        logger.debug(f"Sorted {len(visible)} assets by {key} {direction.value}")
        return visible

    def toggle_sort(self, key: str) -> tuple[AssetRecord, ...]:
        """Sort by a column the way a header click does.

        The active key flips direction; a new key starts ascending.
        """
        with self._lock:
            current = self._sort_config
            if current.key == key:
                direction = (
                    SortDirection.DESC
                    if current.direction is SortDirection.ASC
                    else SortDirection.ASC
                )
            else:
                direction = SortDirection.ASC
            return self.sort(key, direction)

    # Selection

    def _known(self, asset_id: str) -> bool:
        if any(record.id == asset_id for record in self._records):
            return True
        logger.debug(f"Ignoring selection of unknown asset {asset_id}")
        return False

    def set_checked(self, asset_id: str, checked: bool) -> frozenset[str]:
        """Select or deselect one record, visible or not."""
        with self._lock:
            if not self._known(asset_id):
                return self._selected
            if checked:
                self._selected = self._selected | {asset_id}
            else:
                self._selected = self._selected - {asset_id}
            return self._selected

    def select_toggle(self, asset_id: str) -> frozenset[str]:
        """Flip the selection of one record, visible or not."""
        with self._lock:
            return self.set_checked(asset_id, asset_id not in self._selected)

    def select_all_checked(self, checked: bool) -> frozenset[str]:
        """Select or deselect every visible record.

        Selected records hidden by the search are left as they are.
        """
        with self._lock:
            visible_ids = {record.id for record in self._visible}
            if checked:
                self._selected = self._selected | visible_ids
            else:
                self._selected = self._selected - visible_ids
            return self._selected

    def select_all(self) -> frozenset[str]:
        """Select every visible record."""
        return self.select_all_checked(True)

    def deselect_all(self) -> frozenset[str]:
        """Deselect every visible record."""
        return self.select_all_checked(False)

    def toggle_select_all(self) -> frozenset[str]:
        """Deselect the visible records if all are selected, else select them."""
        with self._lock:
            all_selected = all(record.id in self._selected for record in self._visible)
            return self.select_all_checked(not all_selected)
