import io
import sys
from collections.abc import Iterable
from collections.abc import Iterator
from pathlib import Path
from typing import NamedTuple

from suffix_rank.config import Config
from suffix_rank.config.io import LocalFileInputConfig
from suffix_rank.config.io import OutputConfig
from suffix_rank.config.io import StdinInputConfig
from suffix_rank.utils.logger import log


class MalformedQueryError(ValueError):
    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"Malformed query line {line!r}: {reason}")


class QueryBatch(NamedTuple):
    text: str
    queries: list[int]


def parse_queries(line: str) -> list[int]:
    """
    Parse a query line made of a count followed by that many rank indices.

    Examples
    --------
    >>> parse_queries("3 0 1 2")
    [0, 1, 2]
    >>> parse_queries("0")
    []
    """
    tokens = line.split()
    if not tokens:
        raise MalformedQueryError(line, "missing query count")
    try:
        values = [int(token) for token in tokens]
    except ValueError as e:
        raise MalformedQueryError(line, "tokens must be integers") from e

    count, queries = values[0], values[1:]
    if count < 0:
        raise MalformedQueryError(line, f"negative query count {count}")
    if len(queries) != count:
        raise MalformedQueryError(line, f"expected {count} rank indices, found {len(queries)}")
    return queries


def read_line_pairs(lines: Iterable[str]) -> Iterator[QueryBatch]:
    """
    Group input lines into (text, queries) batches.

    Reading stops at the end of the input or at the first empty text line.
    """
    it = iter(lines)
    for raw in it:
        text = raw.strip()
        if not text:
            return
        query_line = next(it, None)
        if query_line is None:
            log.warning(f"Text line {text[:30]!r} has no query line, stopping")
            return
        yield QueryBatch(text, parse_queries(query_line))


def load_batches(config: Config) -> list[QueryBatch]:
    match config.input:
        case LocalFileInputConfig():
            with open(config.input.path, encoding=config.input.encoding) as f:
                return list(read_line_pairs(f))
        case StdinInputConfig():
            if isinstance(sys.stdin, io.TextIOWrapper):
                sys.stdin.reconfigure(encoding=config.input.encoding)
            return list(read_line_pairs(sys.stdin))


def format_answers(offsets: Iterable[int], separator: str = " ") -> str:
    """
    Join answered offsets into one output line.

    Examples
    --------
    >>> format_answers([5, 3, 1])
    '5 3 1'
    """
    return separator.join(str(offset) for offset in offsets)


def save_answers(config: Config, lines: Iterable[str]) -> None:
    """Write one answer line per batch to the configured destination."""
    match config.output:
        case OutputConfig(output_path=None):
            for line in lines:
                _ = sys.stdout.write(line + "\n")
            sys.stdout.flush()
        case OutputConfig(output_path=str(output_path)):
            path = Path(output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding=config.output.encoding) as f:
                for line in lines:
                    _ = f.write(line + "\n")
