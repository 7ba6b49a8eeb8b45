"""Hierarchical path value type built from encoded label segments."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self

from elm_test_labels.codec import decode_segment

SEPARATOR = "/"
PARENT_SEGMENT = ".."


@dataclass(frozen=True, order=True)
class LabelPath:
    """Relative, filesystem-style path whose segments are encoded labels.

    Paths compare element-wise, so sorting a collection of paths keeps every
    parent directly before its descendants.
    """

    segments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalise segments to a tuple and reject embedded separators."""
        segments = tuple(self.segments)
        for segment in segments:
            if SEPARATOR in segment:
                raise ValueError(f"Path segment contains {SEPARATOR!r}: {segment!r}")
        object.__setattr__(self, "segments", segments)

    @classmethod
    def from_string(cls, text: str) -> Self:
        """Parse the ``/``-joined form produced by ``str(path)``."""
        if not text:
            return cls()
        return cls(tuple(text.split(SEPARATOR)))

    def __str__(self) -> str:
        return SEPARATOR.join(self.segments)

    def __truediv__(self, segment: str) -> Self:
        return self.joinpath(segment)

    @property
    def name_count(self) -> int:
        return len(self.segments)

    @property
    def module_name(self) -> str:
        """First segment, verbatim. The empty path has an empty module name."""
        return self.segments[0] if self.segments else ""

    @property
    def file_name(self) -> str | None:
        return self.segments[-1] if self.segments else None

    @property
    def parent(self) -> Self | None:
        """All segments but the last, or None for single-segment and empty paths."""
        if len(self.segments) <= 1:
            return None
        return type(self)(self.segments[:-1])

    def joinpath(self, *segments: str) -> Self:
        return type(self)(self.segments + segments)

    def starts_with(self, other: "LabelPath") -> bool:
        """Check whether ``other`` is an element-wise prefix of this path."""
        prefix = other.segments
        return self.segments[: len(prefix)] == prefix

    def relativize(self, other: "LabelPath") -> Self:
        """Express ``other`` relative to this path.

        Segments shared from the root are dropped, each remaining segment of
        this path becomes a ``..`` and the rest of ``other`` follows.
        """
        common = 0
        for mine, theirs in zip(self.segments, other.segments, strict=False):
            if mine != theirs:
                break
            common += 1
        ups = (PARENT_SEGMENT,) * (len(self.segments) - common)
        return type(self)(ups + other.segments[common:])

    def labels(self) -> Sequence[str]:
        """Decode every segment back into the label it was built from."""
        return [decode_segment(segment) for segment in self.segments]


EMPTY_PATH = LabelPath()
