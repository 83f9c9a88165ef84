"""Tests for padcheck.sequence."""
from __future__ import annotations

from padcheck.sequence import (
    extract_numbers,
    group_sequences,
    parse_sequence_name,
    render_sequence_name,
)
from padcheck.verdict import PaddingVerdict


class TestParseSequenceName:
    def test_frame(self) -> None:
        seq = parse_sequence_name("frame0001.exr")
        assert seq is not None
        assert seq.prefix == "frame"
        assert seq.digits == "0001"
        assert seq.suffix == ".exr"
        assert seq.value == 1

    def test_last_digit_run_wins(self) -> None:
        seq = parse_sequence_name("shot010_v2_0042.dpx")
        assert seq is not None
        assert seq.prefix == "shot010_v2_"
        assert seq.digits == "0042"

    def test_digits_in_extension(self) -> None:
        seq = parse_sequence_name("clip.mp4")
        assert seq is not None
        assert seq.prefix == "clip.mp"
        assert seq.digits == "4"
        assert seq.suffix == ""

    def test_directory_becomes_parent(self) -> None:
        seq = parse_sequence_name("renders/v3/img_12.png")
        assert seq is not None
        assert seq.name == "img_12.png"
        assert seq.prefix == "img_"
        assert seq.parent == "renders/v3"
        assert seq.key == ("renders/v3", "img_", ".png")

    def test_no_digits(self) -> None:
        assert parse_sequence_name("README.md") is None

    def test_key(self) -> None:
        seq = parse_sequence_name("part-00003.parquet")
        assert seq is not None
        assert seq.key == ("", "part-", ".parquet")


class TestExtractNumbers:
    def test_skips_names_without_digits(self) -> None:
        names = ["a01.txt", "notes.txt", "a02.txt"]
        assert extract_numbers(names) == ["01", "02"]


class TestGroupSequences:
    def test_groups_by_prefix_and_suffix(self) -> None:
        names = ["a1.png", "b01.png", "a2.png", "a3.jpg", "b02.png"]
        groups = group_sequences(names)
        assert list(groups) == [("", "a", ".png"), ("", "b", ".png"), ("", "a", ".jpg")]
        assert [s.digits for s in groups[("", "a", ".png")]] == ["1", "2"]
        assert [s.digits for s in groups[("", "b", ".png")]] == ["01", "02"]

    def test_directories_split_groups(self) -> None:
        groups = group_sequences(["x/f01.png", "y/f1.png", "x/f02.png"])
        assert [s.digits for s in groups[("x", "f", ".png")]] == ["01", "02"]
        assert [s.digits for s in groups[("y", "f", ".png")]] == ["1"]


class TestRenderSequenceName:
    def test_padded(self) -> None:
        seq = parse_sequence_name("frame0009.exr")
        assert seq is not None
        assert render_sequence_name(seq, 10, PaddingVerdict.consistent(4)) == (
            "frame0010.exr"
        )

    def test_legacy_code(self) -> None:
        seq = parse_sequence_name("img_9.png")
        assert seq is not None
        assert render_sequence_name(seq, 10, 1) == "img_10.png"

    def test_keeps_directory(self) -> None:
        seq = parse_sequence_name("shot_010/frame0099.exr")
        assert seq is not None
        assert render_sequence_name(seq, 100, 4) == "shot_010/frame0100.exr"
