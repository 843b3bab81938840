# grid_astar/main.py
"""Logging bootstrap and construction of a configured pathfinder."""

from __future__ import annotations

from pathlib import Path
import logging

from .config import load_config, CONFIG
from .core.grid import Grid
from .systems.pathfinding.pathfinder import Pathfinder


log_level_str = CONFIG.logging.global_level
numeric_level = getattr(logging, log_level_str, logging.INFO)
logging.basicConfig(
    level=numeric_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)
logger = logging.getLogger(__name__)

# Apply per-module levels if defined
if CONFIG.logging.module_levels:
    for module_name, level_str in CONFIG.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path = Path("config.yaml")) -> Pathfinder:
    """Return a :class:`Pathfinder` over an open grid sized from ``config_path``."""

    cfg = load_config(Path(config_path))

    width, height = cfg.grid.size
    grid = Grid(int(width), int(height))
    pathfinder = Pathfinder(
        grid, heuristic=cfg.search.heuristic, diagonal=cfg.search.diagonal
    )
    logger.info(
        "[Bootstrap] Grid %dx%d ready (heuristic=%s, diagonal=%s)",
        grid.width, grid.height, cfg.search.heuristic, cfg.search.diagonal,
    )
    return pathfinder


__all__ = ["bootstrap"]
