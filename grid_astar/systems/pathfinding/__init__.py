"""pathfinding package."""

from .heuristics import HEURISTICS, chebyshev, get_heuristic, manhattan
from .pathfinder import Pathfinder

__all__ = ["HEURISTICS", "Pathfinder", "chebyshev", "get_heuristic", "manhattan"]
