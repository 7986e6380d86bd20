from pydantic import Field, model_validator

from src.pogo_battle.enums import MoveCategory
from src.pogo_battle.schema.base import FrozenBattleModel


class MoveSnapshot(FrozenBattleModel):
    """Immutable description of one move, resolved from static game data"""

    id: str
    name: str
    type: str  # elemental type tag, e.g. "FIRE"
    category: MoveCategory
    power: float = Field(ge=0)
    energy_delta: int  # <= 0 for fast moves (energy generated), >= 0 for charged moves (energy consumed)
    duration_ms: int = Field(ge=0, default=0)  # not used by the turn loop

    @model_validator(mode="after")
    def check_energy_sign(self) -> "MoveSnapshot":
        if self.category == MoveCategory.FAST and self.energy_delta > 0:
            raise ValueError(f"Fast move {self.id} must have energy_delta <= 0, got {self.energy_delta}")
        if self.category == MoveCategory.CHARGED and self.energy_delta < 0:
            raise ValueError(f"Charged move {self.id} must have energy_delta >= 0, got {self.energy_delta}")
        return self
