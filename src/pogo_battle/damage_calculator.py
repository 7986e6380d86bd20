"""
Stat and damage calculations

Pure functions over snapshots and a ruleset - no I/O, no shared state, the
same inputs always give the same outputs.

Formulas (simplified GO formulas):
- CP     = floor(Attack * sqrt(Defense) * sqrt(Stamina) * CPM^2 / 10), minimum 1
- HP     = floor(Stamina * CPM), minimum 1
- Damage = floor(0.5 * Power * (AttackStat / DefenseStat) * STAB * Effectiveness) + 1, minimum 1

where Attack/Defense/Stamina are base stat + IV and CPM is the level's CP
multiplier. Levels missing from the multiplier table use the FALLBACK_LEVEL entry.

The +1 is applied after flooring, so even an immune (x0) hit deals 1 damage.
"""

import math

from src.pogo_battle.constants import FALLBACK_LEVEL, MIN_CP, MIN_DAMAGE, MIN_HP
from src.pogo_battle.enums import MoveCategory
from src.pogo_battle.schema.move_snapshot import MoveSnapshot
from src.pogo_battle.schema.pokemon_snapshot import PokemonSnapshot
from src.pogo_battle.schema.ruleset import BattleRuleset
from src.pogo_battle.type_effectiveness import TypeEffectiveness
from src.pogo_battle.utils.type_names import normalize_type_name


def get_cp_multiplier(level: float, ruleset: BattleRuleset) -> float:
    """Level -> CP multiplier, falling back to the FALLBACK_LEVEL entry for unknown levels"""
    multiplier = ruleset.cp_multiplier_table.get(level)
    if multiplier is None:
        return ruleset.cp_multiplier_table[FALLBACK_LEVEL]
    return multiplier


def calculate_cp(base_attack: int, base_defense: int, base_stamina: int, iv_atk: int, iv_def: int, iv_sta: int, level: float, ruleset: BattleRuleset) -> int:
    """Combat Power for the given base stats, IVs and level"""
    attack = base_attack + iv_atk
    defense = base_defense + iv_def
    stamina = base_stamina + iv_sta

    cp_multiplier = get_cp_multiplier(level, ruleset)
    cp_multiplier_squared = cp_multiplier * cp_multiplier

    cp = math.floor((attack * math.sqrt(defense) * math.sqrt(stamina) * cp_multiplier_squared) / 10)
    return max(MIN_CP, cp)


def calculate_hp(base_stamina: int, iv_sta: int, level: float, ruleset: BattleRuleset) -> int:
    """Max HP for the given base stamina, IV and level"""
    stamina = base_stamina + iv_sta
    hp = math.floor(stamina * get_cp_multiplier(level, ruleset))
    return max(MIN_HP, hp)


def calculate_pokemon_cp(pokemon: PokemonSnapshot, ruleset: BattleRuleset) -> int:
    """CP of a snapshot - the precomputed value wins when present"""
    if pokemon.cp is not None:
        return pokemon.cp
    return calculate_cp(pokemon.base_attack, pokemon.base_defense, pokemon.base_stamina, pokemon.iv_atk, pokemon.iv_def, pokemon.iv_sta, pokemon.level, ruleset)


def is_stab(move: MoveSnapshot, pokemon: PokemonSnapshot) -> bool:
    """Same-type attack bonus applies when the move matches either of the user's types"""
    move_type = normalize_type_name(move.type)
    return any(move_type == normalize_type_name(pokemon_type) for pokemon_type in pokemon.types)


def calculate_effectiveness(move: MoveSnapshot, defender: PokemonSnapshot, ruleset: BattleRuleset) -> float:
    """Type multiplier of the move against the defender's one or two types"""
    return TypeEffectiveness.calculate_effectiveness(move.type, defender.types, ruleset)


def calculate_damage(move: MoveSnapshot, attacker: PokemonSnapshot, defender: PokemonSnapshot, ruleset: BattleRuleset) -> int:
    """
    Damage dealt by one hit of the move

    Both level multipliers are looked up on every call; levels never change
    during a battle.
    """
    attacker_attack = attacker.base_attack + attacker.iv_atk
    defender_defense = defender.base_defense + defender.iv_def

    attack_stat = attacker_attack * get_cp_multiplier(attacker.level, ruleset)
    defense_stat = defender_defense * get_cp_multiplier(defender.level, ruleset)

    stab_multiplier = ruleset.stab_multiplier if is_stab(move, attacker) else 1.0
    effectiveness = calculate_effectiveness(move, defender, ruleset)

    base_damage = 0.5 * move.power * (attack_stat / defense_stat) * stab_multiplier * effectiveness
    damage = math.floor(base_damage) + 1

    return max(MIN_DAMAGE, damage)


def calculate_energy_gain(move: MoveSnapshot) -> int:
    """Energy generated by a fast move (its energy_delta is negative); 0 for charged moves"""
    if move.category != MoveCategory.FAST:
        return 0
    return abs(move.energy_delta)


def calculate_energy_cost(move: MoveSnapshot) -> int:
    """Energy consumed by a charged move; 0 for fast moves"""
    if move.category != MoveCategory.CHARGED:
        return 0
    return move.energy_delta
