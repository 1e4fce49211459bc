from collections.abc import Callable
from collections.abc import Sequence
from typing import Literal

from suffix_rank.config.algorithms.base import AlgorithmConfig
from suffix_rank.utils.naive import naive_suffix_array
from suffix_rank.utils.prefix_doubling import SuffixArray
from suffix_rank.utils.prefix_doubling import Text
from suffix_rank.utils.prefix_doubling import build_suffix_array


class SuffixArrayMismatchError(RuntimeError):
    def __init__(self, rank: int, expected: int, actual: int) -> None:
        super().__init__(f"Suffix array differs from the reference at rank {rank}: expected {expected}, got {actual}")


class SuffixArrayAlgorithmConfig(AlgorithmConfig):
    algorithm_name: Literal["prefix_doubling", "naive"] = "prefix_doubling"

    def get_builder(self) -> Callable[[Text], list[int]]:
        match self.algorithm_name:
            case "prefix_doubling":
                return build_suffix_array
            case "naive":
                return naive_suffix_array

    def build(self, text: Text) -> SuffixArray:
        """
        Build the suffix array of ``text`` with the configured builder.

        Parameters
        ----------
        text : Text
            The text to index.

        Returns
        -------
        SuffixArray
            The finished, read-only suffix array.

        Raises
        ------
        SuffixArrayMismatchError
            If ``verify`` is set and the result disagrees with the naive reference.

        Examples
        --------
        >>> SuffixArrayAlgorithmConfig(verify=True).build("abcabc").offsets
        (0, 3, 1, 4, 2, 5)
        """
        sa = SuffixArray(text, builder=self.get_builder())
        if self.verify:
            expected = naive_suffix_array(text)
            for rank, (want, got) in enumerate(zip(expected, sa, strict=True)):
                if want != got:
                    raise SuffixArrayMismatchError(rank, want, got)
        return sa

    def answer(self, sa: SuffixArray, queries: Sequence[int]) -> list[int]:
        """Look up the start offset for every queried rank, in query order."""
        return [sa.suffix_at(rank) for rank in queries]
