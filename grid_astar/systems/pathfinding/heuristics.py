"""Distance estimates used by the A* pathfinder."""

from __future__ import annotations

from typing import Callable, Dict, Tuple


Coord = Tuple[int, int]
Heuristic = Callable[[Coord, Coord], float]


def manhattan(a: Coord, b: Coord) -> float:
    """Return ``|ax - bx| + |ay - by|``.

    Admissible for 4-neighbour movement. With diagonal moves at unit cost
    it can overestimate, so diagonal results are not guaranteed optimal.
    """

    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def chebyshev(a: Coord, b: Coord) -> float:
    """Return ``max(|ax - bx|, |ay - by|)``, admissible for unit-cost 8-neighbour moves."""

    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "chebyshev": chebyshev,
}


def get_heuristic(name: str) -> Heuristic:
    """Return the heuristic registered under ``name``."""

    try:
        return HEURISTICS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(HEURISTICS))
        raise ValueError(f"Unknown heuristic '{name}' (expected one of: {known})") from None


__all__ = ["Heuristic", "manhattan", "chebyshev", "HEURISTICS", "get_heuristic"]
