"""Simple configuration loader for astar_map."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class MapConfig:
    """Where the grid is read from."""

    path: Path = Path("map.txt")


@dataclass
class RenderConfig:
    """Terminal output options."""

    colour: bool = False


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    map: MapConfig
    render: RenderConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    map_data = data.get("map") or {}
    map_cfg = MapConfig(path=Path(map_data.get("path", "map.txt")))

    render_data = data.get("render") or {}
    render = RenderConfig(colour=bool(render_data.get("colour", False)))

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(map=map_cfg, render=render, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`.

    A relative ``map.path`` is taken relative to the directory holding the
    config file. Without a config file the defaults apply unchanged.
    """

    if not path.is_file():
        return _parse_config({})

    cfg = _parse_config(yaml.safe_load(path.read_text()) or {})
    if not cfg.map.path.is_absolute():
        cfg.map.path = path.parent / cfg.map.path
    return cfg


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "MapConfig",
    "RenderConfig",
    "LoggingConfig",
    "load_config",
]
