"""cProfile helpers for measuring path query performance."""

from __future__ import annotations

import cProfile
import pstats
from pathlib import Path
from typing import Any, Callable


def profile_queries(
    n: int,
    query: Callable[[], Any],
    out_path: str | Path = "profile.prof",
) -> pstats.Stats:
    """Profile ``query`` for ``n`` iterations and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of iterations to profile.
    query:
        Function called once per iteration, typically a bound
        ``Pathfinder.find_path`` wrapped in a lambda.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        query()
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


__all__ = ["profile_queries"]
