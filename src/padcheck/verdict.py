"""Padding verdict type and its legacy integer encoding.

The classifier's historical contract is a signed integer:

  >1   consistent zero-padding of that width
   1   no padding in use
   0   no observations
  -1   proven inconsistent padding
  <-1  inconclusive; magnitude is the shortest observed string length

``PaddingVerdict`` carries the same information as a tagged value so
callers can branch on ``kind`` instead of decoding signs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

PaddingKind = Literal[
    "EMPTY",
    "CONSISTENT",
    "UNPADDED",
    "INCONSISTENT",
    "INCONCLUSIVE",
]

EMPTY: PaddingKind = "EMPTY"
CONSISTENT: PaddingKind = "CONSISTENT"
UNPADDED: PaddingKind = "UNPADDED"
INCONSISTENT: PaddingKind = "INCONSISTENT"
INCONCLUSIVE: PaddingKind = "INCONCLUSIVE"

ALL_KINDS: tuple[PaddingKind, ...] = (
    EMPTY,
    CONSISTENT,
    UNPADDED,
    INCONSISTENT,
    INCONCLUSIVE,
)


@dataclass(frozen=True, slots=True)
class PaddingVerdict:
    """Outcome of classifying one collection of numeric strings."""

    kind: PaddingKind
    width: int | None = None
    min_length: int | None = None

    def __post_init__(self) -> None:
        if self.kind not in ALL_KINDS:
            raise ValueError(f"Unknown padding kind: {self.kind!r}")
        if self.kind == CONSISTENT and (self.width is None or self.width < 2):
            raise ValueError(
                f"CONSISTENT verdict needs width >= 2, got {self.width}"
            )
        if self.kind == INCONCLUSIVE and (
            self.min_length is None or self.min_length < 1
        ):
            raise ValueError(
                f"INCONCLUSIVE verdict needs min_length >= 1, got {self.min_length}"
            )

    # -- constructors -----------------------------------------------------

    @classmethod
    def empty(cls) -> PaddingVerdict:
        return cls(kind=EMPTY)

    @classmethod
    def consistent(cls, width: int) -> PaddingVerdict:
        return cls(kind=CONSISTENT, width=width)

    @classmethod
    def unpadded(cls) -> PaddingVerdict:
        return cls(kind=UNPADDED, width=1)

    @classmethod
    def inconsistent(cls) -> PaddingVerdict:
        return cls(kind=INCONSISTENT)

    @classmethod
    def inconclusive(cls, min_length: int) -> PaddingVerdict:
        return cls(kind=INCONCLUSIVE, min_length=min_length)

    @classmethod
    def from_code(cls, code: int) -> PaddingVerdict:
        """Decode a legacy integer verdict.

        ``-1`` always decodes to INCONSISTENT, even though an inconclusive
        result over one-character samples also encodes as ``-1``.
        """
        if isinstance(code, bool) or not isinstance(code, int):
            raise TypeError(f"Verdict code must be an int, got {type(code).__name__}")
        if code > 1:
            return cls.consistent(code)
        if code == 1:
            return cls.unpadded()
        if code == 0:
            return cls.empty()
        if code == -1:
            return cls.inconsistent()
        return cls.inconclusive(-code)

    # -- views ------------------------------------------------------------

    @property
    def code(self) -> int:
        """Legacy signed-integer encoding of this verdict."""
        if self.kind == CONSISTENT:
            if self.width is None:
                raise ValueError("CONSISTENT verdict has no width")
            return self.width
        if self.kind == UNPADDED:
            return 1
        if self.kind == EMPTY:
            return 0
        if self.kind == INCONSISTENT:
            return -1
        if self.min_length is None:
            raise ValueError("INCONCLUSIVE verdict has no min_length")
        return -self.min_length

    @property
    def is_conclusive(self) -> bool:
        return self.kind in (CONSISTENT, UNPADDED, INCONSISTENT)

    @property
    def is_padded(self) -> bool:
        return self.kind == CONSISTENT

    def describe(self) -> str:
        if self.kind == CONSISTENT:
            return f"zero-padded to width {self.width}"
        if self.kind == UNPADDED:
            return "no padding"
        if self.kind == EMPTY:
            return "no observations"
        if self.kind == INCONSISTENT:
            return "inconsistent padding"
        return f"inconclusive (shortest sample has {self.min_length} chars)"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "code": self.code,
            "width": self.width,
            "min_length": self.min_length,
        }
