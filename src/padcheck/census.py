"""Padding census across many independent number sequences.

Each sequence is classified on its own; the census only aggregates the
per-sequence verdicts into distributions for reporting.

Reports carry integer value ranges, so a sample wider than
``sys.get_int_max_str_digits()`` raises ValueError here even though
``classify_padding`` accepts it.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from padcheck.formatting import format_number
from padcheck.padding import classify_padding
from padcheck.sequence import SequenceName, group_sequences, render_sequence_name
from padcheck.verdict import CONSISTENT, INCONSISTENT, PaddingVerdict


@dataclass(frozen=True, slots=True)
class SequenceReport:
    """Verdict and value range for one sequence."""

    key: str
    count: int
    verdict: PaddingVerdict
    min_value: int | None
    max_value: int | None
    next_name: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "count": self.count,
            "verdict": self.verdict.to_dict(),
            "min_value": self.min_value,
            "max_value": self.max_value,
            "next_name": self.next_name,
        }


@dataclass(frozen=True, slots=True)
class CensusSummary:
    """Aggregate view over a set of sequence reports."""

    total_sequences: int
    total_samples: int
    kind_distribution: dict[str, int]
    width_distribution: dict[int, int]
    reports: tuple[SequenceReport, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_sequences": self.total_sequences,
            "total_samples": self.total_samples,
            "kind_distribution": dict(self.kind_distribution),
            "width_distribution": {
                str(k): v for k, v in self.width_distribution.items()
            },
            "sequences": [r.to_dict() for r in self.reports],
        }


def sequence_label(prefix: str, suffix: str, parent: str = "") -> str:
    """Display key for a file-name sequence, e.g. ``shot_010/frame#.exr``."""
    label = f"{prefix}#{suffix}"
    return f"{parent}/{label}" if parent else label


def _report_for_names(key: str, seqs: Sequence[SequenceName]) -> SequenceReport:
    verdict = classify_padding(s.digits for s in seqs)
    values = [s.value for s in seqs]
    next_name = None
    if verdict.kind != INCONSISTENT:
        next_name = render_sequence_name(seqs[0], max(values) + 1, verdict)
    return SequenceReport(
        key=key,
        count=len(seqs),
        verdict=verdict,
        min_value=min(values),
        max_value=max(values),
        next_name=next_name,
    )


def _report_for_samples(key: str, samples: Sequence[str]) -> SequenceReport:
    verdict = classify_padding(samples)
    values = [int(s) for s in samples]
    next_name = None
    if verdict.kind != INCONSISTENT:
        next_name = format_number(max(values, default=0) + 1, verdict)
    return SequenceReport(
        key=key,
        count=len(samples),
        verdict=verdict,
        min_value=min(values, default=None),
        max_value=max(values, default=None),
        next_name=next_name,
    )


def summarize_reports(reports: Iterable[SequenceReport]) -> CensusSummary:
    """Build kind and width distributions from per-sequence reports."""
    reports = tuple(reports)
    kinds: Counter[str] = Counter()
    widths: Counter[int] = Counter()
    for r in reports:
        kinds[r.verdict.kind] += 1
        if r.verdict.kind == CONSISTENT and r.verdict.width is not None:
            widths[r.verdict.width] += 1
    return CensusSummary(
        total_sequences=len(reports),
        total_samples=sum(r.count for r in reports),
        kind_distribution=dict(kinds.most_common()),
        width_distribution=dict(sorted(widths.items())),
        reports=reports,
    )


def census_from_names(
    names: Iterable[str],
    *,
    min_count: int = 1,
) -> CensusSummary:
    """Group file names into sequences and classify each one."""
    reports = [
        _report_for_names(sequence_label(prefix, suffix, parent), seqs)
        for (parent, prefix, suffix), seqs in group_sequences(names).items()
        if len(seqs) >= min_count
    ]
    return summarize_reports(reports)


def census_from_groups(
    groups: Mapping[str, Sequence[str]],
    *,
    min_count: int = 1,
) -> CensusSummary:
    """Classify pre-grouped raw digit strings, one verdict per group."""
    reports = [
        _report_for_samples(key, samples)
        for key, samples in groups.items()
        if len(samples) >= min_count
    ]
    return summarize_reports(reports)
