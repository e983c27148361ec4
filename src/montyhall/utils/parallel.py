# src/montyhall/utils/parallel.py
"""Parallel execution helpers used by simulations.

Small, testable utilities for mapping work with a ProcessPoolExecutor.
Keep simulation-specific logic outside utils.
"""

from __future__ import annotations

import contextlib
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, Iterable, Iterator, TypeVar

_T = TypeVar("_T")
_R = TypeVar("_R")


def process_map(
    fn: Callable[[_T], _R],
    items: Iterable[_T],
    *,
    n_jobs: int | None = None,
    window: int = 0,
) -> Iterator[_R]:
    """Map ``fn`` across ``items`` with optional multiprocessing support.

    With ``n_jobs`` in ``(None, 0, 1)`` the work runs inline and results come
    back in input order.  Otherwise at most ``window`` tasks are in flight and
    results are yielded in *completion* order, so callers that care about
    ordering must carry their own index through ``fn``.
    """
    if n_jobs in (None, 0, 1):
        for it in items:
            yield fn(it)
        return
    if n_jobs < 0:
        raise ValueError("n_jobs must be non-negative")
    if window <= 0:
        window = n_jobs * 4

    with ProcessPoolExecutor(max_workers=n_jobs) as pool:
        it = iter(items)
        futs = []
        # prefill the window
        for _ in range(window):
            try:
                futs.append(pool.submit(fn, next(it)))
            except StopIteration:
                break
        while futs:
            done = next(as_completed(futs))
            futs.remove(done)
            yield done.result()
            with contextlib.suppress(StopIteration):
                futs.append(pool.submit(fn, next(it)))


__all__ = ["process_map"]
