from types import MappingProxyType
from typing import Mapping

from pydantic import Field, field_serializer, field_validator

from src.pogo_battle.constants import FALLBACK_LEVEL
from src.pogo_battle.schema.base import FrozenBattleModel
from src.pogo_battle.utils.type_names import normalize_type_name


class TypeEffectivenessEntry(FrozenBattleModel):
    """One (attacker type, defender type, multiplier) triple of the type chart"""

    attacker_type: str
    defender_type: str
    multiplier: float = Field(ge=0)

    @field_validator("attacker_type", "defender_type")
    @classmethod
    def normalize_type(cls, value: str) -> str:
        return normalize_type_name(value)


class BattleRuleset(FrozenBattleModel):
    """Constants governing a battle - shared read-only across simulations"""

    version: str
    turn_duration_ms: int = Field(ge=0)
    max_energy: int = Field(ge=0)
    shields_per_side: int = Field(ge=0)
    stab_multiplier: float = Field(ge=0)
    type_effectiveness: tuple[TypeEffectivenessEntry, ...] = ()  # absent pairs are neutral
    cp_multiplier_table: Mapping[float, float]  # level -> CP multiplier, read-only

    @field_validator("cp_multiplier_table")
    @classmethod
    def check_cp_multiplier_table(cls, table: Mapping[float, float]) -> Mapping[float, float]:
        if FALLBACK_LEVEL not in table:
            raise ValueError(f"cp_multiplier_table must contain the fallback level {FALLBACK_LEVEL}")
        for level, multiplier in table.items():
            if multiplier <= 0:
                raise ValueError(f"cp_multiplier_table[{level}] must be greater than 0, got {multiplier}")
        return MappingProxyType(dict(table))

    @field_serializer("cp_multiplier_table")
    def dump_cp_multiplier_table(self, table: Mapping[float, float]) -> dict[float, float]:
        return dict(table)
