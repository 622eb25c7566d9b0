# amazons/config.py
from dataclasses import dataclass, field
from typing import Optional
import os
import tomllib

# Larger than any mobility score (at most 4 queens x 36 squares per side).
WINNING_VALUE = 900000


@dataclass
class SearchConfig:
    depth: Optional[int] = None  # fixed depth; None means derive from the move count
    depth_divisor: int = 30      # one extra ply per this many moves played
    initial_depth: int = 1
    max_depth: Optional[int] = None
    time_limit_ms: Optional[int] = None  # None means depth-only
    iterative_deepening: bool = True
    show_info: bool = False  # print an info line per completed depth


@dataclass
class EvalConfig:
    winning_value: int = WINNING_VALUE


@dataclass
class UIConfig:
    engine_name: str = "Amazons"
    api_port: int = 8000
    auto_white: bool = False
    auto_black: bool = True


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        # unknown sections and keys are ignored
        for section in ("search", "eval", "ui"):
            for k, v in raw.get(section, {}).items():
                target = getattr(cfg, section)
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("AMAZONS_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("AMAZONS_SEARCH_DEPTH")
if override_depth and override_depth.isdigit():
    CONFIG.search.depth = int(override_depth)
