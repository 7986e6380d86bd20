from functools import lru_cache

from src.pogo_battle.constants import CP_MULTIPLIER_TABLE, MAX_ENERGY, RULESET_VERSION, SHIELDS_PER_SIDE, STAB_MULTIPLIER, TURN_DURATION_MS
from src.pogo_battle.data.type_chart import TYPE_EFFECTIVENESS_CHART
from src.pogo_battle.schema.ruleset import BattleRuleset, TypeEffectivenessEntry


@lru_cache(maxsize=1)
def get_default_ruleset() -> BattleRuleset:
    """
    Default versioned ruleset

    Built once; every call returns the same frozen object. Callers that need
    different constants pass their own BattleRuleset - it is used as-is and
    never merged with this one.
    """
    return BattleRuleset(
        version=RULESET_VERSION,
        turn_duration_ms=TURN_DURATION_MS,
        max_energy=MAX_ENERGY,
        shields_per_side=SHIELDS_PER_SIDE,
        stab_multiplier=STAB_MULTIPLIER,
        type_effectiveness=tuple(TypeEffectivenessEntry(attacker_type=attacker, defender_type=defender, multiplier=multiplier) for attacker, defender, multiplier in TYPE_EFFECTIVENESS_CHART),
        cp_multiplier_table=dict(CP_MULTIPLIER_TABLE),
    )
