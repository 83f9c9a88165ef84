"""Numbered file-name sequences (frame0001.exr, shard-00017-of-00128.tfrecord).

The last run of ASCII digits in a base name is taken as the sequence
number; everything before it is the prefix and everything after it
(extension included) is the suffix. Names in different directories
never belong to the same sequence.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import PurePath

from padcheck.formatting import format_number
from padcheck.verdict import PaddingVerdict

_LAST_NUMBER_RE = re.compile(r"([0-9]+)([^0-9]*)$")


@dataclass(frozen=True, slots=True)
class SequenceName:
    """A file name split around its sequence number."""

    name: str
    prefix: str
    digits: str
    suffix: str
    parent: str = ""

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.parent, self.prefix, self.suffix)

    @property
    def value(self) -> int:
        return int(self.digits)


def parse_sequence_name(name: str) -> SequenceName | None:
    """Split ``name`` around its last digit run, or None if it has none."""
    path = PurePath(name)
    base = path.name
    m = _LAST_NUMBER_RE.search(base)
    if m is None:
        return None
    parent = path.parent.as_posix()
    return SequenceName(
        name=base,
        prefix=base[: m.start(1)],
        digits=m.group(1),
        suffix=m.group(2),
        parent="" if parent == "." else parent,
    )


def extract_numbers(names: Iterable[str]) -> list[str]:
    """Digit tokens of every name that carries one, in input order."""
    out: list[str] = []
    for name in names:
        seq = parse_sequence_name(name)
        if seq is not None:
            out.append(seq.digits)
    return out


def group_sequences(
    names: Iterable[str],
) -> dict[tuple[str, str, str], list[SequenceName]]:
    """Group names that share directory, prefix and suffix (first-seen order)."""
    groups: dict[tuple[str, str, str], list[SequenceName]] = {}
    for name in names:
        seq = parse_sequence_name(name)
        if seq is None:
            continue
        groups.setdefault(seq.key, []).append(seq)
    return groups


def render_sequence_name(
    seq: SequenceName,
    value: int,
    verdict: PaddingVerdict | int,
) -> str:
    """Build the sibling of ``seq`` numbered ``value``, keeping its directory."""
    name = f"{seq.prefix}{format_number(value, verdict)}{seq.suffix}"
    return f"{seq.parent}/{name}" if seq.parent else name
