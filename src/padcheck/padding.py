"""Zero-padding classification for collections of numeric strings.

Given a sample such as ``["0001", "0002", "0137"]`` decide whether the
numbers share a fixed zero-padded width, are plainly unpadded, disagree
with each other, or do not carry enough signal to tell.

Decision order (first match wins):
  1. empty input
  2. consistent fixed width, allowing unpadded overflow past the width
  3. mixed leading-zero counts among numbers of the same magnitude
  4. provably unpadded (a bare single-digit number is present)
  5. inconclusive, reporting the shortest raw length

The order matters: mixed single/double digit samples resolve differently
if steps are reordered.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from padcheck.verdict import PaddingVerdict

_DIGITS_RE = re.compile(r"[0-9]+")
_LEADING_ZEROS_RE = re.compile(r"0*")


class InvalidNumberError(ValueError):
    """Raised when a sample is not a non-negative decimal integer string."""

    def __init__(self, sample: object, index: int) -> None:
        super().__init__(
            f"Sample {index} is not a non-negative decimal integer: {sample!r}"
        )
        self.sample = sample
        self.index = index


@dataclass(frozen=True, slots=True)
class NumberStats:
    """Facts derived from one numeric string."""

    text: str
    length: int
    leading_zeros: int
    value_length: int


def leading_zero_count(text: str) -> int:
    """Count consecutive '0' characters at the start of ``text``."""
    match = _LEADING_ZEROS_RE.match(text)
    return match.end() if match else 0


def number_stats(text: str) -> NumberStats:
    zeros = leading_zero_count(text)
    return NumberStats(
        text=text,
        length=len(text),
        leading_zeros=zeros,
        # An all-zero string still has one significant digit ("0").
        value_length=max(len(text) - zeros, 1),
    )


def collect_stats(int_strs: Iterable[str]) -> list[NumberStats]:
    """Validate samples and derive per-string facts, preserving order."""
    stats: list[NumberStats] = []
    for i, s in enumerate(int_strs):
        if not isinstance(s, str) or _DIGITS_RE.fullmatch(s) is None:
            raise InvalidNumberError(s, i)
        stats.append(number_stats(s))
    return stats


def _consistent_width(stats: Sequence[NumberStats]) -> int | None:
    min_value_length = min(st.value_length for st in stats)
    short = [st for st in stats if st.value_length == min_value_length]
    short_length = short[0].length

    # Padding only counts when the shortest numbers are actually widened.
    if short_length <= min_value_length:
        return None
    for st in short:
        if st.length != short_length or not st.text.startswith("0"):
            return None

    for st in stats:
        if st.value_length == min_value_length:
            if st.length != short_length:
                return None
        elif st.leading_zeros != 0 or st.length != st.value_length:
            return None
    return short_length


def _has_mixed_padding(stats: Sequence[NumberStats]) -> bool:
    zeros_by_value_length: dict[int, set[int]] = {}
    for st in stats:
        zeros_by_value_length.setdefault(st.value_length, set()).add(
            st.leading_zeros
        )
    return any(len(counts) > 1 for counts in zeros_by_value_length.values())


def _is_definitely_unpadded(stats: Sequence[NumberStats]) -> bool:
    shortest_value_length = min(st.value_length for st in stats)
    has_bare_digit = any(
        st.value_length == shortest_value_length and st.length == 1
        for st in stats
    )
    if not has_bare_digit:
        return False

    lengths_by_value_length: dict[int, set[int]] = {}
    for st in stats:
        if st.leading_zeros > 0 or st.length != st.value_length:
            return False
        lengths_by_value_length.setdefault(st.value_length, set()).add(st.length)
    return all(len(lengths) == 1 for lengths in lengths_by_value_length.values())


def classify_padding(int_strs: Iterable[str]) -> PaddingVerdict:
    """Classify the padding convention of ``int_strs``.

    Raises InvalidNumberError if any sample is not made of ASCII digits.
    """
    stats = collect_stats(int_strs)
    if not stats:
        return PaddingVerdict.empty()

    width = _consistent_width(stats)
    if width is not None:
        return PaddingVerdict.consistent(width)

    if _has_mixed_padding(stats):
        return PaddingVerdict.inconsistent()

    if _is_definitely_unpadded(stats):
        return PaddingVerdict.unpadded()

    return PaddingVerdict.inconclusive(min(st.length for st in stats))


def check_number_padding(int_strs: Iterable[str]) -> int:
    """Return the legacy integer verdict for ``int_strs``.

    >1 padded width, 1 unpadded, 0 empty, -1 inconsistent,
    <-1 inconclusive with magnitude equal to the shortest sample length.
    """
    return classify_padding(int_strs).code
