from typing import Optional, Sequence

from src.pogo_battle.constants import ALL_TYPES, TYPE_MUL_NO_EFFECT, TYPE_MUL_NORMAL
from src.pogo_battle.ruleset import get_default_ruleset
from src.pogo_battle.schema.ruleset import BattleRuleset
from src.pogo_battle.utils.type_names import normalize_type_name


class TypeEffectiveness:
    """
    Type chart lookups against a ruleset

    Pairs missing from the ruleset's chart are neutral (x1.0), so unknown or
    misspelled types never raise - they simply do nothing.
    """

    @staticmethod
    def get_effectiveness(attacking_type: str, defending_type: str, ruleset: BattleRuleset) -> float:
        """Single-type multiplier: 0.0, 0.5, 1.0 or 2.0 with the default chart"""
        attacking_type = normalize_type_name(attacking_type)
        defending_type = normalize_type_name(defending_type)

        for entry in ruleset.type_effectiveness:
            if entry.attacker_type == attacking_type and entry.defender_type == defending_type:
                return entry.multiplier

        return TYPE_MUL_NORMAL

    @staticmethod
    def calculate_effectiveness(attacking_type: str, defending_types: Sequence[str], ruleset: BattleRuleset) -> float:
        """
        Combined multiplier against a one- or two-type defender

        The per-type multipliers are multiplied together, so a dual-type defender
        can take x0.25, x0.5, x1, x2 or x4 (or x0 when either type is immune).
        """
        multiplier = TYPE_MUL_NORMAL
        for defending_type in defending_types:
            multiplier *= TypeEffectiveness.get_effectiveness(attacking_type, defending_type, ruleset)
        return multiplier

    @staticmethod
    def is_immune(attacking_type: str, defending_type: str, ruleset: BattleRuleset) -> bool:
        return TypeEffectiveness.get_effectiveness(attacking_type, defending_type, ruleset) == TYPE_MUL_NO_EFFECT

    @staticmethod
    def is_super_effective(attacking_type: str, defending_types: Sequence[str], ruleset: BattleRuleset) -> bool:
        return TypeEffectiveness.calculate_effectiveness(attacking_type, defending_types, ruleset) > TYPE_MUL_NORMAL


def get_type_effectiveness(attacker_type: str, defender_types: Sequence[str], ruleset: Optional[BattleRuleset] = None) -> float:
    """Combined type multiplier of an attack against the defender's types (default ruleset if none given)"""
    return TypeEffectiveness.calculate_effectiveness(attacker_type, defender_types, ruleset if ruleset is not None else get_default_ruleset())


def _types_of(primary_type: str, secondary_type: Optional[str]) -> list[str]:
    if secondary_type:
        return [primary_type, secondary_type]
    return [primary_type]


def get_weak_against_types(primary_type: str, secondary_type: Optional[str] = None, ruleset: Optional[BattleRuleset] = None) -> list[str]:
    """Attacking types that hit this typing for more than x1.0, in chart order"""
    ruleset = ruleset if ruleset is not None else get_default_ruleset()
    defender_types = _types_of(primary_type, secondary_type)
    return [attacking_type for attacking_type in ALL_TYPES if TypeEffectiveness.is_super_effective(attacking_type, defender_types, ruleset)]


def get_strong_against_types(primary_type: str, secondary_type: Optional[str] = None, ruleset: Optional[BattleRuleset] = None) -> list[str]:
    """Defending types that at least one of this typing's types hits for more than x1.0, in chart order"""
    ruleset = ruleset if ruleset is not None else get_default_ruleset()
    attacking_types = _types_of(primary_type, secondary_type)
    return [
        defending_type
        for defending_type in ALL_TYPES
        if any(TypeEffectiveness.is_super_effective(attacking_type, [defending_type], ruleset) for attacking_type in attacking_types)
    ]
