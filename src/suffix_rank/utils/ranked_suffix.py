"""Suffix record compared by its pair of rank keys."""

from __future__ import annotations

from functools import total_ordering

NO_RANK = -1
"""Key of a position past the end of the text; orders before every real rank."""


@total_ordering
class RankedSuffix:
    """
    A suffix start offset together with the two keys used to order it in one refinement round.

    Records compare by ``(primary_key, secondary_key)`` only. Two records with the same
    keys are equal for ordering purposes even if they start at different offsets.

    Parameters
    ----------
    start_offset : int
        Offset of the suffix in the source text.
    primary_key : int
        Rank of the suffix under the previous window (or its first character code).
    secondary_key : int
        Rank of the suffix starting half a window later, or ``NO_RANK``.

    Examples
    --------
    >>> RankedSuffix(0, 1, NO_RANK) < RankedSuffix(1, 1, 0)
    True
    >>> RankedSuffix(0, 2, 3) == RankedSuffix(5, 2, 3)
    True
    """

    __slots__ = ("_start_offset", "primary_key", "secondary_key")

    def __init__(self, start_offset: int, primary_key: int, secondary_key: int = NO_RANK) -> None:
        self._start_offset: int = start_offset
        self.primary_key: int = primary_key
        self.secondary_key: int = secondary_key

    @property
    def start_offset(self) -> int:
        return self._start_offset

    @property
    def keys(self) -> tuple[int, int]:
        return self.primary_key, self.secondary_key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RankedSuffix):
            return NotImplemented
        return self.primary_key == other.primary_key and self.secondary_key == other.secondary_key

    def __lt__(self, other: RankedSuffix) -> bool:
        if self.primary_key != other.primary_key:
            return self.primary_key < other.primary_key
        return self.secondary_key < other.secondary_key

    # Keys are reassigned every round.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RankedSuffix(start_offset={self._start_offset}, keys={self.keys})"
