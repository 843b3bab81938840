"""Simple configuration loader for grid_astar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Configuration values for the grid section."""

    size: tuple[int, int] = (32, 32)


@dataclass
class SearchConfig:
    """Defaults applied to path queries."""

    diagonal: bool = False
    heuristic: str = "manhattan"


@dataclass
class LoggingConfig:
    """Root and per-module log levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    search: SearchConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid") or {}
    grid = GridConfig(size=tuple(grid_data.get("size", [32, 32])))

    search_data = data.get("search") or {}
    search = SearchConfig(
        diagonal=bool(search_data.get("diagonal", False)),
        heuristic=str(search_data.get("heuristic", "manhattan")),
    )

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(grid=grid, search=search, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "SearchConfig",
    "LoggingConfig",
    "load_config",
]
