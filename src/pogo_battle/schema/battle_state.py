from typing import Optional

from pydantic import ConfigDict, Field

from src.pogo_battle.schema.base import BattleModel, FrozenBattleModel
from src.pogo_battle.schema.pokemon_snapshot import PokemonSnapshot


class BattleParticipant(BattleModel):
    """Mutable per-battle state of one combatant - owned by a single simulation"""

    id: str  # battle-scoped id ("participant1" / "participant2")
    pokemon: PokemonSnapshot
    max_hp: int = Field(ge=1)
    current_hp: int = Field(ge=0)
    current_energy: int = Field(ge=0, default=0)
    shields_remaining: int = Field(ge=0)
    is_active: bool = True

    @property
    def is_standing(self) -> bool:
        """Active and above 0 HP"""
        return self.is_active and self.current_hp > 0

    def freeze(self) -> "ParticipantState":
        """Immutable copy of the current values"""
        return ParticipantState(**dict(self))


class ParticipantState(BattleParticipant):
    """Recorded participant values - part of a BattleState, never changes"""

    model_config = ConfigDict(frozen=True)


class BattleState(FrozenBattleModel):
    """Copy of both participants plus battle progress, taken after a turn or at the end"""

    participants: tuple[ParticipantState, ParticipantState]
    turn_number: int = Field(ge=0)
    timestamp: int = Field(ge=0)  # cumulative ms since battle start
    is_complete: bool
    winner_id: Optional[str] = None  # None while in progress or on a draw

    def get_participant(self, participant_id: str) -> ParticipantState:
        for participant in self.participants:
            if participant.id == participant_id:
                return participant
        raise KeyError(participant_id)
