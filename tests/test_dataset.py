"""Tests for parsing and loading the JSON dataset."""

import json

import pytest

from pytrianglesqt.dataset import load_dataset, parse_record, parse_records
from pytrianglesqt.models import DataItem, DatasetError


class TestParseRecord:
    """Tests for parse_record."""

    def test_valid_record(self):
        item = parse_record({"x": 1, "y": 2.5, "base": 3, "height": 4, "hue": 0})
        assert item == DataItem(x=1.0, y=2.5, base=3.0, height=4.0, hue=0.0)
        assert isinstance(item.x, float)

    def test_extra_keys_ignored(self):
        item = parse_record(
            {"x": 1, "y": 2, "base": 3, "height": 4, "hue": 5, "label": "a"}
        )
        assert item.hue == 5.0

    def test_missing_field(self):
        with pytest.raises(DatasetError, match="missing field 'hue'"):
            parse_record({"x": 1, "y": 2, "base": 3, "height": 4}, index=7)

    def test_non_numeric_field(self):
        with pytest.raises(DatasetError, match="Record 3: field 'base'"):
            parse_record({"x": 1, "y": 2, "base": "3", "height": 4, "hue": 5}, index=3)

    def test_bool_is_not_a_number(self):
        with pytest.raises(DatasetError):
            parse_record({"x": True, "y": 2, "base": 3, "height": 4, "hue": 5})

    def test_not_a_mapping(self):
        with pytest.raises(DatasetError, match="expected an object"):
            parse_record([1, 2, 3, 4, 5])


class TestParseRecords:
    """Tests for parse_records."""

    def test_parses_all(self, sample_records):
        items = parse_records(sample_records)
        assert len(items) == 10
        assert items[9].hue == 360.0

    def test_not_a_list(self):
        with pytest.raises(DatasetError, match="JSON array"):
            parse_records({"x": 1})

    def test_expected_count(self, sample_records):
        with pytest.raises(DatasetError, match="exactly 10"):
            parse_records(sample_records[:9], expected_count=10)

    def test_error_names_record_index(self, sample_records):
        sample_records[4] = {"x": 1}
        with pytest.raises(DatasetError, match="Record 4"):
            parse_records(sample_records)


class TestLoadDataset:
    """Tests for load_dataset."""

    def test_load_file(self, tmp_path, sample_records):
        path = tmp_path / "triangles.json"
        path.write_text(json.dumps(sample_records), encoding="utf-8")
        items = load_dataset(path)
        assert len(items) == 10
        assert items[0] == DataItem(x=10, y=20, base=30, height=40, hue=50)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetError, match="Cannot read"):
            load_dataset(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(DatasetError, match="Invalid JSON"):
            load_dataset(path)

    def test_wrong_count_rejected_by_default(self, tmp_path, sample_records):
        path = tmp_path / "short.json"
        path.write_text(json.dumps(sample_records[:3]), encoding="utf-8")
        with pytest.raises(DatasetError):
            load_dataset(path)
        assert len(load_dataset(path, expected_count=None)) == 3

    def test_dataset_error_is_value_error(self):
        assert issubclass(DatasetError, ValueError)
