import time
from types import TracebackType
from typing import Any

from rich.console import Console
from rich.progress import Progress
from rich.progress import SpinnerColumn
from rich.progress import TextColumn

from .logger import log


class TimerAttrError(Exception):
    def __init__(self, var_name: str) -> None:
        super().__init__(f"Variable {var_name} is not set")


class TimerContext:
    def __init__(self, timer: "Timer", name: str, enable_spin: bool = True):
        self.timer: Timer = timer
        self.name: str = name
        self.start_time: float | None = None
        self.enable_spin: bool = enable_spin
        self.spinner: Progress = Progress(
            SpinnerColumn(), TextColumn("{task.description}"), console=Console(stderr=True), transient=True
        )

    def __enter__(self) -> None:
        self.start_time = time.perf_counter()
        if self.enable_spin:
            self.spinner.start()
            _ = self.spinner.add_task(self.name, total=None)

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_value: BaseException | None, traceback: TracebackType | None
    ) -> None:
        if self.enable_spin:
            self.spinner.stop()
        if exc_value is not None:
            return
        if self.start_time is None:
            raise TimerAttrError("start_time")
        # Phases entered more than once (one per batch) accumulate.
        elapsed = time.perf_counter() - self.start_time
        self.timer.elapsed_times[self.name] = self.timer.elapsed_times.get(self.name, 0.0) + elapsed


class Timer:
    """
    Named wall-clock phases, reported through the package logger.

    Examples
    --------
    >>> timer = Timer()
    >>> with timer("Building", enable_spin=False):
    ...     pass
    >>> list(timer.elapsed_times)
    ['Building']
    """

    def __init__(self) -> None:
        self.elapsed_times: dict[str, float] = {}
        self._pad: int = 0

    def __call__(self, name: str, enable_spin: bool = True) -> TimerContext:
        self._pad = max(self._pad, len(name))
        return TimerContext(self, name, enable_spin=enable_spin)

    @staticmethod
    def _is_total(name: str) -> bool:
        return name.lower() in {"total", "total time"}

    def report(self, additional_info: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportExplicitAny]
        if additional_info:
            self._pad = max(self._pad, max(len(key) for key in additional_info))
        if not self.elapsed_times:
            log.info("No phases were timed")
            return

        time_pad = max(len(f"{elapsed_time:.2f}") for elapsed_time in self.elapsed_times.values())
        phase_time = sum(v for k, v in self.elapsed_times.items() if not self._is_total(k))

        for name, elapsed_time in self.elapsed_times.items():
            if self._is_total(name) or phase_time == 0:
                percentage = ""
            else:
                percentage = f"({elapsed_time / phase_time * 100:>5.2f}%)"
            log.info(
                f"[green]{name:>{self.pad}}[/green]: {f'{elapsed_time:.2f} s':<{time_pad + 2}} {percentage}",
                extra={"markup": True},
            )

        for key, value in (additional_info or {}).items():  # pyright: ignore[reportAny]
            log.info(f"[green]{key:>{self.pad}}[/green]: {value}", extra={"markup": True})

    @property
    def pad(self) -> int:
        return self._pad + 2
