from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Protocol

from tqdm import tqdm

from ..model.errors import ComputationCancelled


ProgressCallback = Callable[[int, int], None]


class CancelFlag(Protocol):
    def is_set(self) -> bool: ...


def check_cancelled(cancel: Optional[CancelFlag], stage: str) -> None:
    if cancel is not None and cancel.is_set():
        msg = f"Computation cancelled during {stage}."
        raise ComputationCancelled(msg)


def report(progress: Optional[ProgressCallback], done: int, total: int) -> None:
    if progress is not None:
        progress(done, total)


@contextmanager
def tqdm_progress(desc: str, leave: bool = False) -> Iterator[ProgressCallback]:
    """Yield a ``(done, total)`` callback that drives a tqdm bar.

    The bar is reset whenever ``total`` changes, so one callback can be
    shared by consecutive stages of a computation.
    """
    bar = tqdm(total=0, desc=desc, leave=leave)

    def _update(done: int, total: int) -> None:
        if bar.total != total:
            bar.reset(total=total)
        bar.n = done
        bar.refresh()

    try:
        yield _update
    finally:
        bar.close()
