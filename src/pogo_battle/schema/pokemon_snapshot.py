from typing import Optional

from pydantic import Field, model_validator

from src.pogo_battle.constants import MAX_IV, MIN_IV
from src.pogo_battle.enums import MoveCategory
from src.pogo_battle.schema.base import FrozenBattleModel
from src.pogo_battle.schema.move_snapshot import MoveSnapshot


class PokemonSnapshot(FrozenBattleModel):
    """Battle-ready combatant - built by the catalog bridge, never mutated by the simulator"""

    # Identity
    form_id: str
    species_name: str
    form_name: str = ""

    # Types
    primary_type: str
    secondary_type: Optional[str] = None

    # Base stats
    base_attack: int = Field(ge=1)
    base_defense: int = Field(ge=1)
    base_stamina: int = Field(ge=1)

    # Level (half levels allowed) and IVs
    level: float = Field(gt=0)
    iv_atk: int = Field(ge=MIN_IV, le=MAX_IV)
    iv_def: int = Field(ge=MIN_IV, le=MAX_IV)
    iv_sta: int = Field(ge=MIN_IV, le=MAX_IV)

    # Optional precomputed values
    cp: Optional[int] = Field(default=None, ge=1)
    hp: Optional[int] = Field(default=None, ge=1)

    # Moves
    fast_move: MoveSnapshot
    charged_moves: tuple[MoveSnapshot, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def check_move_categories(self) -> "PokemonSnapshot":
        if self.fast_move.category != MoveCategory.FAST:
            raise ValueError(f"fast_move {self.fast_move.id} is not a FAST move")
        for move in self.charged_moves:
            if move.category != MoveCategory.CHARGED:
                raise ValueError(f"charged move {move.id} is not a CHARGED move")
        return self

    @property
    def types(self) -> list[str]:
        """Defender typing - one or two types"""
        if self.secondary_type:
            return [self.primary_type, self.secondary_type]
        return [self.primary_type]
