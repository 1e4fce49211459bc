from suffix_rank.utils.prefix_doubling import Text
from suffix_rank.utils.prefix_doubling import symbol_codes


def naive_suffix_array(text: Text) -> list[int]:
    """
    Sort suffix offsets by comparing the suffixes directly.

    Quadratic in memory and slow on long inputs; meant as a reference for
    checking ``build_suffix_array``.

    Examples
    --------
    >>> naive_suffix_array("abcabc")
    [0, 3, 1, 4, 2, 5]
    """
    codes = symbol_codes(text)
    return sorted(range(len(codes)), key=lambda i: codes[i:])
