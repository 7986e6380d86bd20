"""Global configuration for the battle simulator."""

import os
from dataclasses import dataclass, field

from src.pogo_battle.constants import DEFAULT_IV, DEFAULT_LEVEL, DEFAULT_MAX_TURNS


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value else default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    return float(value) if value else default


@dataclass
class SimulatorConfig:
    """Defaults applied when a caller leaves a value out.

    Explicit arguments (a simulation input's max_turns, a request's level/IVs)
    always win over these.
    """

    default_max_turns: int = field(default_factory=lambda: _env_int("POGO_BATTLE_MAX_TURNS", DEFAULT_MAX_TURNS))
    default_level: float = field(default_factory=lambda: _env_float("POGO_BATTLE_DEFAULT_LEVEL", DEFAULT_LEVEL))
    default_iv: int = field(default_factory=lambda: _env_int("POGO_BATTLE_DEFAULT_IV", DEFAULT_IV))

    def __post_init__(self):
        if self.default_max_turns < 1:
            raise ValueError(f"default_max_turns must be at least 1, got {self.default_max_turns}")


# Global config instance
config = SimulatorConfig()
