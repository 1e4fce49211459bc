import logging
import random
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from suffix_rank.utils.naive import naive_suffix_array
from suffix_rank.utils.prefix_doubling import InvalidTextError
from suffix_rank.utils.prefix_doubling import SuffixArray
from suffix_rank.utils.prefix_doubling import SuffixRankOutOfRangeError
from suffix_rank.utils.prefix_doubling import build_suffix_array
from suffix_rank.utils.prefix_doubling import compress_ranks
from suffix_rank.utils.prefix_doubling import symbol_codes
from suffix_rank.utils.ranked_suffix import NO_RANK
from suffix_rank.utils.ranked_suffix import RankedSuffix


def random_texts(seed: int, count: int, alphabet: str, max_length: int) -> list[str]:
    rng = random.Random(seed)
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(1, max_length))) for _ in range(count)]


class TestSymbolCodes:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("", []),
            ("abc", [97, 98, 99]),
            ("é", [233]),
            (b"\x00\x7f\xff", [0, 127, 255]),
            (bytearray(b"ab"), [97, 98]),
            ([3, 0, 2], [3, 0, 2]),
            ((1, 1), [1, 1]),
            (np.array([4, 2], dtype=np.int32), [4, 2]),
        ],
    )
    def test_symbol_codes(self, text: object, expected: list[int]) -> None:
        assert symbol_codes(text) == expected  # pyright: ignore[reportArgumentType]

    def test_none(self) -> None:
        with pytest.raises(InvalidTextError, match="text is None"):
            symbol_codes(None)  # pyright: ignore[reportArgumentType]

    def test_unsupported_type(self) -> None:
        with pytest.raises(InvalidTextError, match="unsupported text type int"):
            symbol_codes(42)  # pyright: ignore[reportArgumentType]

    def test_negative_symbol(self) -> None:
        with pytest.raises(InvalidTextError, match="symbol -1 at offset 1 is negative"):
            symbol_codes([0, -1])

    def test_non_integer_symbol(self) -> None:
        with pytest.raises(InvalidTextError, match="not an integer"):
            symbol_codes([1, "a"])  # pyright: ignore[reportArgumentType]

    def test_bool_symbol(self) -> None:
        with pytest.raises(InvalidTextError, match="not an integer"):
            symbol_codes([True, False])

    def test_invalid_text_error_is_type_error(self) -> None:
        assert issubclass(InvalidTextError, TypeError)


class TestCompressRanks:
    def test_empty(self) -> None:
        assert compress_ranks([], []) == NO_RANK

    def test_single(self) -> None:
        ranks = [7]
        assert compress_ranks([RankedSuffix(0, 97, NO_RANK)], ranks) == 0
        assert ranks == [0]

    def test_ties_share_rank(self) -> None:
        records = [
            RankedSuffix(3, 0, NO_RANK),
            RankedSuffix(1, 1, 0),
            RankedSuffix(0, 1, 0),
            RankedSuffix(2, 1, 2),
        ]
        ranks = [-5] * 4
        assert compress_ranks(records, ranks) == 2
        assert ranks == [1, 1, 2, 0]

    def test_all_distinct(self) -> None:
        records = [RankedSuffix(i, i, NO_RANK) for i in range(4)]
        ranks = [0] * 4
        assert compress_ranks(records, ranks) == 3
        assert ranks == [0, 1, 2, 3]

    def test_ranks_are_contiguous(self) -> None:
        rng = random.Random(0)
        records = [RankedSuffix(i, rng.randint(0, 3), rng.randint(-1, 3)) for i in range(50)]
        records.sort()
        ranks = [0] * 50
        max_rank = compress_ranks(records, ranks)
        assert sorted(set(ranks)) == list(range(max_rank + 1))
        for a in records:
            for b in records:
                assert (ranks[a.start_offset] == ranks[b.start_offset]) == (a.keys == b.keys)


class TestBuildSuffixArray:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("", []),
            ("a", [0]),
            ("banana", [5, 3, 1, 0, 4, 2]),
            ("aaaa", [3, 2, 1, 0]),
            ("abcabc", [0, 3, 1, 4, 2, 5]),
            ("mississippi", [10, 7, 4, 1, 0, 9, 8, 6, 3, 5, 2]),
            ("ba", [1, 0]),
            ("ab", [0, 1]),
            ("abab", [2, 0, 3, 1]),
        ],
    )
    def test_known_arrays(self, text: str, expected: list[int]) -> None:
        assert build_suffix_array(text) == expected

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 7, 8, 9, 16, 17, 33, 100])
    def test_identical_characters(self, n: int) -> None:
        assert build_suffix_array("z" * n) == list(range(n - 1, -1, -1))

    def test_bytes_and_int_sequences(self) -> None:
        assert build_suffix_array(b"banana") == [5, 3, 1, 0, 4, 2]
        assert build_suffix_array([2, 1, 3, 1, 3, 1]) == [5, 3, 1, 0, 4, 2]

    def test_zero_symbol_sorts_after_end_of_text(self) -> None:
        # A zero code is still a real symbol, so the shorter suffix comes first.
        assert build_suffix_array([0, 0]) == [1, 0]
        assert build_suffix_array(b"\x00") == [0]

    @pytest.mark.parametrize(
        "alphabet, max_length",
        [("ab", 40), ("abc", 64), ("acgt", 130), ("a", 20), ("xyzé中", 50)],
    )
    def test_matches_naive_reference(self, alphabet: str, max_length: int) -> None:
        for text in random_texts(seed=len(alphabet) * max_length, count=60, alphabet=alphabet, max_length=max_length):
            assert build_suffix_array(text) == naive_suffix_array(text), text

    def test_permutation_and_order(self) -> None:
        for text in random_texts(seed=7, count=40, alphabet="abcd", max_length=80):
            sa = build_suffix_array(text)
            assert sorted(sa) == list(range(len(text)))
            for p, q in zip(sa, sa[1:]):
                assert text[p:] <= text[q:]

    def test_idempotent(self) -> None:
        text = "the quick brown fox jumps over the lazy dog"
        assert build_suffix_array(text) == build_suffix_array(text)

    def test_none_rejected(self) -> None:
        with pytest.raises(InvalidTextError):
            build_suffix_array(None)  # pyright: ignore[reportArgumentType]

    def test_round_count_is_logarithmic(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="suffix_rank"):
            build_suffix_array("a" * 100)
        windows = [r.getMessage() for r in caplog.records if r.getMessage().startswith("window=")]
        # Seed window 2, then 4, 8, 16, 32, 64, 128.
        assert len(windows) == 7
        assert windows[-1].startswith("window=128: 100/100")

    def test_distinct_characters_stop_after_seed_round(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="suffix_rank"):
            assert build_suffix_array("dcba") == [3, 2, 1, 0]
        windows = [r.getMessage() for r in caplog.records if r.getMessage().startswith("window=")]
        assert windows == ["window=2: 4/4 distinct ranks"]

    def test_independent_concurrent_builds(self) -> None:
        texts = random_texts(seed=11, count=16, alphabet="ab", max_length=200)
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(build_suffix_array, texts))
        assert results == [naive_suffix_array(text) for text in texts]


class TestSuffixArray:
    def test_suffix_at(self) -> None:
        sa = SuffixArray("banana")
        assert sa.suffix_at(0) == 5
        assert [sa.suffix_at(rank) for rank in range(6)] == [5, 3, 1, 0, 4, 2]

    @pytest.mark.parametrize("rank", [6, 7, -1, -6, 10**9])
    def test_out_of_range(self, rank: int) -> None:
        sa = SuffixArray("banana")
        with pytest.raises(SuffixRankOutOfRangeError, match=f"Rank {rank} is out of range") as exc_info:
            sa.suffix_at(rank)
        assert exc_info.value.rank == rank
        assert exc_info.value.size == 6

    def test_out_of_range_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            SuffixArray("abc")[3]

    def test_empty_text(self) -> None:
        sa = SuffixArray("")
        assert len(sa) == 0
        assert list(sa) == []
        with pytest.raises(SuffixRankOutOfRangeError):
            sa.suffix_at(0)

    @pytest.mark.parametrize("rank", ["0", 1.0, None, True])
    def test_non_integer_rank(self, rank: object) -> None:
        with pytest.raises(TypeError, match="Rank must be an integer"):
            SuffixArray("banana").suffix_at(rank)  # pyright: ignore[reportArgumentType]

    def test_numpy_integer_rank(self) -> None:
        assert SuffixArray("banana").suffix_at(np.int64(1)) == 3

    def test_sequence_protocol(self) -> None:
        sa = SuffixArray("abcabc")
        assert len(sa) == 6
        assert sa[1] == 3
        assert list(sa) == [0, 3, 1, 4, 2, 5]
        assert sa.offsets == (0, 3, 1, 4, 2, 5)
        assert repr(sa) == "SuffixArray([0, 3, 1, 4, 2, 5])"

    def test_suffix(self) -> None:
        sa = SuffixArray("banana")
        assert [sa.suffix(rank) for rank in range(len(sa))] == ["a", "ana", "anana", "banana", "na", "nana"]

    def test_to_numpy_is_read_only(self) -> None:
        offsets = SuffixArray("banana").to_numpy()
        assert offsets.dtype == np.int64
        assert offsets.tolist() == [5, 3, 1, 0, 4, 2]
        with pytest.raises(ValueError):
            offsets[0] = 1

    def test_custom_builder(self) -> None:
        sa = SuffixArray("banana", builder=naive_suffix_array)
        assert sa.offsets == (5, 3, 1, 0, 4, 2)

    def test_none_rejected(self) -> None:
        with pytest.raises(InvalidTextError):
            SuffixArray(None)  # pyright: ignore[reportArgumentType]
