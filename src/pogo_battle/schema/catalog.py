from typing import Optional

from pydantic import Field

from src.pogo_battle.constants import MAX_IV, MAX_LEVEL, MIN_IV, MIN_LEVEL
from src.pogo_battle.enums import LearnMethod
from src.pogo_battle.schema.base import FrozenBattleModel
from src.pogo_battle.schema.move_snapshot import MoveSnapshot


class LearnableMove(FrozenBattleModel):
    """One learnset entry of a catalog form"""

    move: MoveSnapshot
    learn_method: LearnMethod


class PokemonForm(FrozenBattleModel):
    """Catalog form as loaded by the caller - base stats and learnset"""

    id: str
    species_name: str
    form_name: str = ""
    primary_type: str
    secondary_type: Optional[str] = None
    base_attack: int = Field(ge=1)
    base_defense: int = Field(ge=1)
    base_stamina: int = Field(ge=1)
    moves: tuple[LearnableMove, ...] = ()


class BattleSimulationRequest(FrozenBattleModel):
    """Request to simulate a battle between two catalog forms, with optional level/IV overrides"""

    participant1_form_id: str
    participant2_form_id: str

    participant1_level: Optional[float] = Field(default=None, ge=MIN_LEVEL, le=MAX_LEVEL)
    participant2_level: Optional[float] = Field(default=None, ge=MIN_LEVEL, le=MAX_LEVEL)

    participant1_iv_atk: Optional[int] = Field(default=None, ge=MIN_IV, le=MAX_IV)
    participant1_iv_def: Optional[int] = Field(default=None, ge=MIN_IV, le=MAX_IV)
    participant1_iv_sta: Optional[int] = Field(default=None, ge=MIN_IV, le=MAX_IV)
    participant2_iv_atk: Optional[int] = Field(default=None, ge=MIN_IV, le=MAX_IV)
    participant2_iv_def: Optional[int] = Field(default=None, ge=MIN_IV, le=MAX_IV)
    participant2_iv_sta: Optional[int] = Field(default=None, ge=MIN_IV, le=MAX_IV)
