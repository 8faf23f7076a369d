"""Configuration loader for grid_pathfinder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Dimensions of the editable grid."""

    rows: int = 20
    cols: int = 30


@dataclass
class GUIConfig:
    """Settings for the pygame front end."""

    enabled: bool = True
    cell_size: int = 30
    fps: int = 60
    caption: str = "A* Pathfinding Visualizer"


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    gui: GUIConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid", {}) or {}
    grid = GridConfig(
        rows=int(grid_data.get("rows", 20)),
        cols=int(grid_data.get("cols", 30)),
    )

    gui_data = data.get("gui", {}) or {}
    gui = GUIConfig(
        enabled=bool(gui_data.get("enabled", True)),
        cell_size=int(gui_data.get("cell_size", 30)),
        fps=int(gui_data.get("fps", 60)),
        caption=str(gui_data.get("caption", "A* Pathfinding Visualizer")),
    )

    log_data = data.get("logging", {}) or {}
    logging_cfg = LoggingConfig(
        global_level=str(log_data.get("global_level", "INFO")).upper(),
        module_levels=dict(log_data.get("module_levels") or {}),
    )

    return Config(grid=grid, gui=gui, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "GUIConfig",
    "LoggingConfig",
    "load_config",
]
