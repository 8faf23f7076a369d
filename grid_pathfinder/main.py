# grid_pathfinder/main.py
"""Session bootstrap and the interactive event loop."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import pygame

from .config import CONFIG, CONFIG_PATH, Config, load_config
from .gui import input as gui_input
from .gui.renderer import Renderer
from .session import EditorSession
from .utils.cli.command_parser import poll_command, start_cli_thread, stop_cli_thread
from .utils.cli.commands import execute


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
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path = CONFIG_PATH) -> tuple[EditorSession, Config]:
    cfg = load_config(Path(config_path))
    session = EditorSession(cfg.grid.rows, cfg.grid.cols)
    logger.info("[Bootstrap] %dx%d grid ready", cfg.grid.rows, cfg.grid.cols)
    return session, cfg


def _drain_cli(session: EditorSession, state: dict) -> None:
    cmd = poll_command()
    while cmd is not None and state["running"]:
        execute(cmd.name, cmd.args, session, state)
        cmd = poll_command()


def run_headless(session: EditorSession) -> None:
    state = {"running": True}
    while state["running"]:
        _drain_cli(session, state)
        time.sleep(0.05)


def run_gui(session: EditorSession, cfg: Config) -> None:
    pygame.init()
    renderer = Renderer(
        session.grid.rows,
        session.grid.cols,
        cell_size=cfg.gui.cell_size,
        caption=cfg.gui.caption,
    )
    clock = pygame.time.Clock()
    state = {"running": True}

    logger.info("Click to place start, then goal, then walls. SPACE searches, R resets.")
    while state["running"]:
        gui_input.handle_events(session, renderer, state)
        if not state["running"]:
            break
        _drain_cli(session, state)

        renderer.window.clear()
        renderer.update(session)
        renderer.window.refresh()
        clock.tick(cfg.gui.fps)


def main() -> None:
    session, cfg = bootstrap()
    cli_thread = start_cli_thread()
    try:
        if cfg.gui.enabled:
            run_gui(session, cfg)
        else:
            run_headless(session)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        stop_cli_thread()
        if cli_thread.is_alive():
            cli_thread.join(timeout=0.1)
        if pygame.get_init():
            pygame.quit()


if __name__ == "__main__":
    main()
