import importlib
import logging


def test_logging_configured():
    logging.basicConfig(level=logging.WARNING, force=True)
    import grid_pathfinder.main as main
    importlib.reload(main)
    assert logging.getLogger().getEffectiveLevel() == logging.INFO


def test_bootstrap_builds_session_from_config(tmp_path):
    import grid_pathfinder.main as main

    path = tmp_path / "config.yaml"
    path.write_text("grid:\n  rows: 4\n  cols: 6\n")
    session, cfg = main.bootstrap(path)
    assert session.grid.shape == (4, 6)
    assert cfg.gui.enabled is True
