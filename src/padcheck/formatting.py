"""Render new numbers that follow a detected padding convention."""

from __future__ import annotations

from collections.abc import Sequence

from padcheck.padding import classify_padding
from padcheck.verdict import CONSISTENT, INCONSISTENT, PaddingVerdict


class PaddingConventionError(ValueError):
    """Raised when no single convention can be applied to new numbers."""


def _as_verdict(verdict: PaddingVerdict | int) -> PaddingVerdict:
    if isinstance(verdict, PaddingVerdict):
        return verdict
    return PaddingVerdict.from_code(verdict)


def format_number(value: int, verdict: PaddingVerdict | int) -> str:
    """Format ``value`` the way the classified samples are written.

    Consistent padding zero-fills to the detected width; values wider
    than the width overflow without truncation. Unpadded, empty and
    inconclusive verdicts render the bare number.
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    v = _as_verdict(verdict)
    if v.kind == INCONSISTENT:
        raise PaddingConventionError(
            "Cannot format number: samples use inconsistent padding"
        )
    if v.kind == CONSISTENT and v.width is not None:
        return str(value).zfill(v.width)
    return str(value)


def next_number(samples: Sequence[str], *, step: int = 1) -> str:
    """Return the number after the largest sample, in the samples' style.

    Unlike classification, this parses the samples as integers, so a
    sample wider than ``sys.get_int_max_str_digits()`` raises ValueError.
    """
    if step < 1:
        raise ValueError(f"step must be positive, got {step}")
    verdict = classify_padding(samples)
    highest = max((int(s) for s in samples), default=0)
    return format_number(highest + step, verdict)
