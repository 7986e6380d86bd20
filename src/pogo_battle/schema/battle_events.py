from typing import Optional

from pydantic import Field

from src.pogo_battle.enums import ActionType, EnergySource
from src.pogo_battle.schema.base import FrozenBattleModel
from src.pogo_battle.schema.battle_state import BattleState


class BattleAction(FrozenBattleModel):
    """One action taken by a participant"""

    type: ActionType
    participant_id: str
    move_id: Optional[str] = None  # for attacks
    timestamp: int = Field(ge=0)  # relative to battle start (ms)


class DamageEvent(FrozenBattleModel):
    """Damage applied by one hit"""

    attacker_id: str
    defender_id: str
    move_id: str
    damage: int = Field(ge=0)
    is_critical: bool = False  # no critical hits in this engine
    effectiveness: float = Field(ge=0)
    defender_hp_after: int = Field(ge=0)


class EnergyEvent(FrozenBattleModel):
    """Energy change of one participant"""

    participant_id: str
    energy_change: int
    energy_after: int = Field(ge=0)
    source: EnergySource


class BattleTurn(FrozenBattleModel):
    """Everything that happened in one turn, plus the state right after it"""

    turn_number: int = Field(ge=1)
    timestamp: int = Field(ge=0)
    actions: tuple[BattleAction, ...] = ()
    damage_events: tuple[DamageEvent, ...] = ()
    energy_events: tuple[EnergyEvent, ...] = ()
    state_after: BattleState
