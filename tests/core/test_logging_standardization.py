import importlib
import logging

from grid_astar.config import Config, GridConfig, LoggingConfig, SearchConfig


def test_logging_configured():
    logging.basicConfig(level=logging.WARNING, force=True)
    import grid_astar.main as main
    importlib.reload(main)
    assert logging.getLogger().getEffectiveLevel() == logging.INFO
    assert (
        logging.getLogger("grid_astar.systems.pathfinding.pathfinder").level
        == logging.INFO
    )


def test_module_levels_from_config(monkeypatch):
    custom = Config(
        grid=GridConfig(),
        search=SearchConfig(),
        logging=LoggingConfig(
            global_level="DEBUG",
            module_levels={"grid_astar.test_quiet": "error", "grid_astar.test_bad": "LOUD"},
        ),
    )
    monkeypatch.setattr("grid_astar.config.CONFIG", custom)
    import grid_astar.main as main
    importlib.reload(main)
    try:
        assert logging.getLogger().getEffectiveLevel() == logging.DEBUG
        assert logging.getLogger("grid_astar.test_quiet").level == logging.ERROR
        assert logging.getLogger("grid_astar.test_bad").level == logging.NOTSET
    finally:
        monkeypatch.undo()
        importlib.reload(main)
