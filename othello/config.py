# othello/config.py
from dataclasses import dataclass, field
from typing import List
import logging
import os
import tomllib

logger = logging.getLogger(__name__)

# Static square weights, symmetric about both axes and both diagonals.
POSITION_WEIGHTS = [
    [20, -3, 11, 8, 8, 11, -3, 20],
    [-3, -7, -4, 1, 1, -4, -7, -3],
    [11, -4, 2, 2, 2, 2, -4, 11],
    [8, 1, 2, -3, -3, 2, 1, 8],
    [8, 1, 2, -3, -3, 2, 1, 8],
    [11, -4, 2, 2, 2, 2, -4, 11],
    [-3, -7, -4, 1, 1, -4, -7, -3],
    [20, -3, 11, 8, 8, 11, -3, 20],
]

EVALUATOR_KINDS = ("weighted", "simple")
PRUNING_MODES = ("single_bound", "alphabeta")


@dataclass
class SearchConfig:
    depth: int = 4
    pruning: str = "single_bound"  # "alphabeta" for the classical two-bound window
    log_info: bool = True


@dataclass
class EvalConfig:
    kind: str = "weighted"
    position_weights: List[List[int]] = field(
        default_factory=lambda: [row[:] for row in POSITION_WEIGHTS])
    # Final blend of the normalized terms.
    parity_weight: float = 10.0
    corner_weight: float = 801.724
    closeness_weight: float = 382.026
    mobility_weight: float = 78.922
    frontier_weight: float = 74.396
    position_weight: float = 10.0
    # Per-square raw values for the corner terms.
    corner_value: float = 25.0
    closeness_value: float = -12.5


@dataclass
class BoardConfig:
    strict_codes: bool = False  # reject unknown external cell codes instead of reading them as empty


@dataclass
class UIConfig:
    engine_name: str = "OthelloEngine"
    api_host: str = "127.0.0.1"
    api_port: int = 8000


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    board: BoardConfig = field(default_factory=BoardConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "board", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
                else:
                    logger.warning("Ignoring unknown config key %s.%s", section, k)
        if "log_level" in raw:
            cfg.log_level = raw["log_level"]
        return cfg


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("OTHELLO_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("OTHELLO_SEARCH_DEPTH")
if override_depth:
    try:
        CONFIG.search.depth = int(override_depth)
    except ValueError:
        logger.warning("Ignoring invalid OTHELLO_SEARCH_DEPTH=%r", override_depth)
