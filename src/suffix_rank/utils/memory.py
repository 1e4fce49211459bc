import gc
from collections.abc import Generator
from contextlib import contextmanager


@contextmanager
def frozen_gc() -> Generator[None, None, None]:
    """
    Pause cyclic garbage collection while suffix records are allocated in bulk.

    Objects alive on entry are moved to the permanent generation so that the
    collector does not rescan them when collection resumes. The previous
    enabled/disabled state of the collector is restored on exit.
    """
    was_enabled = gc.isenabled()
    gc.freeze()
    gc.disable()
    try:
        yield
    finally:
        gc.unfreeze()
        if was_enabled:
            gc.enable()
