"""Suffix array construction by prefix doubling."""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Iterator
from collections.abc import Sequence
from itertools import islice
from typing import cast

import numpy as np
import numpy.typing as npt

from suffix_rank.utils.logger import log
from suffix_rank.utils.ranked_suffix import NO_RANK
from suffix_rank.utils.ranked_suffix import RankedSuffix

type Text = str | bytes | bytearray | Sequence[int] | npt.NDArray[np.integer]


class InvalidTextError(TypeError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Cannot build a suffix array: {detail}")


class SuffixRankOutOfRangeError(IndexError):
    def __init__(self, rank: int, size: int) -> None:
        super().__init__(f"Rank {rank} is out of range for a suffix array of length {size}")
        self.rank: int = rank
        self.size: int = size


def symbol_codes(text: Text) -> list[int]:
    """
    Map a text to the integer codes its suffixes are compared by.

    Parameters
    ----------
    text : Text
        A ``str`` (code points), ``bytes``/``bytearray`` (byte values),
        or a sequence or integer array of non-negative symbols.

    Returns
    -------
    list[int]
        One non-negative code per position.

    Raises
    ------
    InvalidTextError
        If the text is missing, of an unsupported type or holds a negative symbol.

    Examples
    --------
    >>> symbol_codes("ab")
    [97, 98]
    >>> symbol_codes(b"\\x00\\xff")
    [0, 255]
    """
    if text is None:
        raise InvalidTextError("text is None")
    if isinstance(text, str):
        return [ord(c) for c in text]
    if isinstance(text, bytes | bytearray):
        return list(text)
    if isinstance(text, np.ndarray):
        text = cast(list[int], text.tolist())
    if not isinstance(text, Sequence):
        raise InvalidTextError(f"unsupported text type {type(text).__name__}")

    codes: list[int] = []
    for offset, symbol in enumerate(text):
        if isinstance(symbol, bool) or not isinstance(symbol, int | np.integer):
            raise InvalidTextError(f"symbol {symbol!r} at offset {offset} is not an integer")
        if symbol < 0:
            raise InvalidTextError(f"symbol {symbol} at offset {offset} is negative")
        codes.append(int(symbol))
    return codes


def compress_ranks(records: list[RankedSuffix], ranks: list[int]) -> int:
    """
    Assign dense ranks to sorted records and store them by start offset.

    Equal key pairs share a rank; each strict increase in keys bumps the rank by one.

    Parameters
    ----------
    records : list[RankedSuffix]
        Records already sorted by their keys.
    ranks : list[int]
        Rank table indexed by start offset, overwritten in place.

    Returns
    -------
    int
        The highest rank assigned, ``NO_RANK`` when there are no records.

    Examples
    --------
    >>> records = [RankedSuffix(2, 0, 1), RankedSuffix(0, 0, 1), RankedSuffix(1, 3, NO_RANK)]
    >>> ranks = [0, 0, 0]
    >>> compress_ranks(records, ranks)
    1
    >>> ranks
    [0, 1, 0]
    """
    if not records:
        return NO_RANK

    rank = 0
    previous = records[0]
    ranks[previous.start_offset] = rank
    for record in islice(records, 1, None):
        if record != previous:
            rank += 1
            previous = record
        ranks[record.start_offset] = rank
    return rank


def build_suffix_array(text: Text) -> list[int]:
    """
    Sort all suffixes of ``text`` by refining ranks over doubling prefix windows.

    The seed round ranks every suffix by its first two symbols. Each later round
    doubles the window and orders a suffix by the pair (its own rank, the rank of
    the suffix half a window further), so a round costs one sort over integer pairs.
    Refinement stops as soon as every suffix has its own rank.

    Parameters
    ----------
    text : Text
        The text to index, see ``symbol_codes``.

    Returns
    -------
    list[int]
        Start offsets in lexicographic order of their suffixes, with the end of
        the text ordered before any symbol.

    Examples
    --------
    >>> build_suffix_array("banana")
    [5, 3, 1, 0, 4, 2]
    >>> build_suffix_array("")
    []
    """
    codes = symbol_codes(text)
    n = len(codes)
    if n == 0:
        return []

    records = [RankedSuffix(i, codes[i], codes[i + 1] if i + 1 < n else NO_RANK) for i in range(n)]
    ranks = [0] * n
    window = 2

    records.sort()
    max_rank = compress_ranks(records, ranks)
    log.debug(f"window={window}: {max_rank + 1}/{n} distinct ranks")

    while max_rank < n - 1:
        window *= 2
        half = window // 2
        for record in records:
            offset = record.start_offset
            record.primary_key = ranks[offset]
            record.secondary_key = ranks[offset + half] if offset + half < n else NO_RANK

        records.sort()
        max_rank = compress_ranks(records, ranks)
        log.debug(f"window={window}: {max_rank + 1}/{n} distinct ranks")

    return [record.start_offset for record in records]


class SuffixArray:
    """
    Read-only suffix array of one text.

    Parameters
    ----------
    text : Text
        The text to index.
    builder : Callable[[Text], list[int]]
        Function producing the sorted offsets, ``build_suffix_array`` by default.

    Examples
    --------
    >>> sa = SuffixArray("banana")
    >>> sa.suffix_at(0)
    5
    >>> sa.suffix(1)
    'ana'
    """

    def __init__(self, text: Text, builder: Callable[[Text], list[int]] = build_suffix_array) -> None:
        self._text: Text = text
        offsets = np.asarray(builder(text), dtype=np.int64)
        offsets.flags.writeable = False
        self._offsets: npt.NDArray[np.int64] = offsets

    def __len__(self) -> int:
        return len(self._offsets)

    def __iter__(self) -> Iterator[int]:
        return (int(offset) for offset in self._offsets)

    def __getitem__(self, rank: int) -> int:
        return self.suffix_at(rank)

    def __repr__(self) -> str:
        return f"SuffixArray({list(self)})"

    @property
    def offsets(self) -> tuple[int, ...]:
        return tuple(self)

    def to_numpy(self) -> npt.NDArray[np.int64]:
        """Return the offsets as a read-only array."""
        return self._offsets

    def suffix_at(self, rank: int) -> int:
        """
        Return the start offset of the suffix at position ``rank`` in sorted order.

        Raises
        ------
        TypeError
            If ``rank`` is not an integer.
        SuffixRankOutOfRangeError
            If ``rank`` is outside ``[0, len(self))``.
        """
        if isinstance(rank, bool) or not isinstance(rank, int | np.integer):
            raise TypeError(f"Rank must be an integer, got {type(rank).__name__}")  # noqa: TRY003
        if not 0 <= rank < len(self._offsets):
            raise SuffixRankOutOfRangeError(int(rank), len(self._offsets))
        return int(self._offsets[rank])

    def suffix(self, rank: int) -> Text:
        """Return the suffix itself at position ``rank`` in sorted order."""
        return self._text[self.suffix_at(rank) :]
