from typing import cast

from suffix_rank.config import Config
from suffix_rank.config import SuffixArrayAlgorithmConfig
from suffix_rank.data_sources.io import format_answers
from suffix_rank.data_sources.io import load_batches
from suffix_rank.data_sources.io import save_answers
from suffix_rank.utils.logger import log
from suffix_rank.utils.memory import frozen_gc
from suffix_rank.utils.timer import Timer


def main(config: Config) -> None:
    """
    Answer rank queries for every (text, queries) batch of the configured input.

    Parameters
    ----------
    config: Config
        The run configuration object.

    """

    log.setLevel(config.debug.logging_level)
    timer = Timer()
    algo = cast(SuffixArrayAlgorithmConfig, config.algorithm)
    answers: list[str] = []
    num_queries = 0
    total_chars = 0

    with timer("Total", enable_spin=False):
        with timer("Reading", enable_spin=False):
            batches = load_batches(config)

        for i, batch in enumerate(batches):
            with timer("Building"), frozen_gc():
                sa = algo.build(batch.text)
            log.debug(f"Batch #{i}: built suffix array of length {len(sa)}")

            with timer("Querying", enable_spin=False):
                answers.append(format_answers(algo.answer(sa, batch.queries), algo.separator))

            num_queries += len(batch.queries)
            total_chars += len(batch.text)

        with timer("Writing", enable_spin=False):
            save_answers(config, answers)

    timer.report({"Batches": len(batches), "Characters": total_chars, "Queries": num_queries})


if __name__ == "__main__":
    from pydantic_settings import CliApp

    from suffix_rank.config.base import Config
    from suffix_rank.utils.env import check_env

    config = CliApp.run(Config)
    check_env()
    if config.debug.enable_profiling:
        from scalene.scalene_profiler import enable_profiling

        with enable_profiling():
            main(config)
    else:
        main(config)
