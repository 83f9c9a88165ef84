"""Tests for padcheck.io_utils."""
from __future__ import annotations

from pathlib import Path

import orjson
import pytest

from padcheck.io_utils import (
    dumps_json,
    load_json,
    load_jsonl,
    read_samples,
    save_json,
    save_jsonl,
)


class TestJson:
    def test_save_and_load(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "report.json"
        save_json({"b": 1, "a": [1, 2]}, path)
        assert load_json(path) == {"a": [1, 2], "b": 1}

    def test_sorted_keys(self) -> None:
        assert dumps_json({"b": 1, "a": 2}, pretty=False) == b'{"a":2,"b":1}'

    def test_jsonl_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "rows.jsonl"
        save_jsonl([{"value": "01"}, {"value": "02"}], path)
        assert load_jsonl(path) == [{"value": "01"}, {"value": "02"}]

    def test_jsonl_skips_blank_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "rows.jsonl"
        path.write_bytes(b'{"value": "1"}\n\n   \n{"value": "2"}\n')
        assert len(load_jsonl(path)) == 2


class TestReadSamples:
    def test_text(self, tmp_path: Path) -> None:
        path = tmp_path / "frames.txt"
        path.write_text("001\n  002 \n\n010\n", encoding="utf-8")
        assert read_samples(path) == ["001", "002", "010"]

    def test_json_strings(self, tmp_path: Path) -> None:
        path = tmp_path / "frames.json"
        path.write_bytes(orjson.dumps(["01", "02"]))
        assert read_samples(path) == ["01", "02"]

    def test_json_objects(self, tmp_path: Path) -> None:
        path = tmp_path / "frames.json"
        path.write_bytes(orjson.dumps([{"value": "7"}, {"value": "8"}]))
        assert read_samples(path) == ["7", "8"]

    def test_jsonl(self, tmp_path: Path) -> None:
        path = tmp_path / "frames.jsonl"
        path.write_bytes(b'{"value": "0003"}\n{"value": "0004"}\n')
        assert read_samples(path) == ["0003", "0004"]

    def test_json_not_a_list(self, tmp_path: Path) -> None:
        path = tmp_path / "frames.json"
        path.write_bytes(b'{"value": "1"}')
        with pytest.raises(ValueError):
            read_samples(path)

    def test_json_bad_item(self, tmp_path: Path) -> None:
        path = tmp_path / "frames.json"
        path.write_bytes(b"[1, 2]")
        with pytest.raises(ValueError, match="string"):
            read_samples(path)
