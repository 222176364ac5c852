"""Tests for CSV and JSON export."""

import csv
import io
import json

import pytest

from wistiadl.core.collection import AssetCollection
from wistiadl.core.errors import NoDataError, UnsupportedFormatError
from wistiadl.core.exporter import EXPORT_FIELDS, Exporter
from wistiadl.core.models import AssetRecord, ExportFormat


@pytest.fixture
def exporter():
    """Create exporter instance."""
    return Exporter()


@pytest.fixture
def collection(records):
    """Create a loaded collection."""
    return AssetCollection(records)


def test_export_empty_collection(exporter):
    """Test that exporting nothing fails with NoDataError."""
    for fmt in ("csv", "json"):
        with pytest.raises(NoDataError, match="No data to export"):
            exporter.export(AssetCollection(), fmt)


def test_export_unknown_format(exporter, collection):
    """Test unsupported format handling."""
    with pytest.raises(UnsupportedFormatError):
        exporter.export(collection, "xml")


def test_csv_export(exporter, collection, records):
    """Test CSV layout and metadata."""
    result = exporter.export(collection, ExportFormat.CSV)

    assert result.filename == "wistia_assets.csv"
    assert result.media_type == "text/csv"

    lines = result.content.split("\n")
    assert len(lines) == len(records) + 1
    assert lines[0] == "name,size,width,height,url,type,extension"
    assert lines[1] == '"Original File","5000","1920","1080","https://x/a.mp4","original","mp4"'
    assert lines[4] == '"audio track","3000","","","https://x/d.m4a","audio","m4a"'
    assert not result.content.endswith("\n")


def test_csv_export_escapes_quotes(exporter):
    """Test that embedded quotes are doubled."""
    record = AssetRecord(id="asset_0", display_name='My "best" cut, final', url=None)
    result = exporter.export(AssetCollection([record]), "csv")

    assert result.content.split("\n")[1].startswith('"My ""best"" cut, final","0","",""')

    rows = list(csv.DictReader(io.StringIO(result.content)))
    assert rows[0]["name"] == 'My "best" cut, final'


def test_csv_header_is_unquoted(exporter):
    """Test that only data fields are quoted, not the header row."""
    record = AssetRecord(id="asset_0", display_name="A", url="https://x/a.mp4")
    header, row = exporter.export(AssetCollection([record]), "csv").content.split("\n")

    assert header == ",".join(EXPORT_FIELDS)
    assert row.startswith('"A","0"')


def test_json_export(exporter, collection, records):
    """Test that JSON parses back to the full record list."""
    result = exporter.export(collection, "json")

    assert result.filename == "wistia_assets.json"
    assert result.media_type == "application/json"

    data = json.loads(result.content)
    assert len(data) == len(records)
    assert list(data[0]) == EXPORT_FIELDS
    assert data[3]["width"] is None
    assert [row["name"] for row in data] == [r.display_name for r in records]
    assert result.content.startswith("[\n  {")


def test_export_ignores_search_sort_and_selection(exporter, collection, records):
    """Test that export always covers every record in extraction order."""
    collection.search("thumb")
    collection.sort("size", "desc")
    collection.set_checked("asset_2", True)

    data = json.loads(exporter.export(collection, "json").content)

    assert [row["name"] for row in data] == [r.display_name for r in records]


def test_export_basename():
    """Test a custom export file name."""
    collection = AssetCollection([AssetRecord(id="asset_0", display_name="A")])

    assert Exporter("my_video").export(collection, "json").filename == "my_video.json"
