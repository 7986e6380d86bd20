from typing import Optional

from pydantic import Field

from src.pogo_battle.schema.base import FrozenBattleModel
from src.pogo_battle.schema.battle_events import BattleTurn
from src.pogo_battle.schema.battle_state import BattleState
from src.pogo_battle.schema.pokemon_snapshot import PokemonSnapshot
from src.pogo_battle.schema.ruleset import BattleRuleset


class BattleSimulationInput(FrozenBattleModel):
    """Simulator input - ruleset and max_turns fall back to defaults when omitted"""

    participant1: PokemonSnapshot
    participant2: PokemonSnapshot
    ruleset: Optional[BattleRuleset] = None
    max_turns: Optional[int] = Field(default=None, ge=1)


class BattleSimulationResult(FrozenBattleModel):
    """Complete, replayable outcome of one simulation"""

    input: BattleSimulationInput
    ruleset: BattleRuleset  # the ruleset actually used
    turns: tuple[BattleTurn, ...]
    final_state: BattleState
    duration_ms: int = Field(ge=0)
    log: tuple[str, ...]  # human-readable battle log
