import pytest

from src.pogo_battle.damage_calculator import (
    calculate_cp,
    calculate_damage,
    calculate_energy_cost,
    calculate_energy_gain,
    calculate_hp,
    calculate_pokemon_cp,
    get_cp_multiplier,
    is_stab,
)
from src.pogo_battle.enums import MoveCategory
from src.pogo_battle.ruleset import get_default_ruleset
from src.pogo_battle.schema.move_snapshot import MoveSnapshot
from src.pogo_battle.schema.pokemon_snapshot import PokemonSnapshot


def make_move(move_type: str = "NORMAL", power: float = 10, category: MoveCategory = MoveCategory.FAST, energy_delta: int | None = None) -> MoveSnapshot:
    if energy_delta is None:
        energy_delta = -10 if category == MoveCategory.FAST else 35
    return MoveSnapshot(id=f"{move_type}_{category.value}_{power}", name=f"{move_type.title()} Move", type=move_type, category=category, power=power, energy_delta=energy_delta, duration_ms=500)


def make_pokemon(primary_type: str = "WATER", secondary_type: str | None = None, *, base_attack: int = 100, base_defense: int = 100, base_stamina: int = 100, level: float = 40, iv: int = 15, cp: int | None = None) -> PokemonSnapshot:
    return PokemonSnapshot(
        form_id="TEST_FORM",
        species_name="Testmon",
        primary_type=primary_type,
        secondary_type=secondary_type,
        base_attack=base_attack,
        base_defense=base_defense,
        base_stamina=base_stamina,
        level=level,
        iv_atk=iv,
        iv_def=iv,
        iv_sta=iv,
        cp=cp,
        fast_move=make_move(),
        charged_moves=[make_move(power=50, category=MoveCategory.CHARGED)],
    )


@pytest.fixture
def ruleset():
    return get_default_ruleset()


def test_cp_and_hp_at_level_40_perfect_ivs(ruleset):
    assert calculate_cp(100, 100, 100, 15, 15, 15, 40, ruleset) == 825
    assert calculate_hp(100, 15, 40, ruleset) == 90


def test_half_level_multiplier(ruleset):
    assert get_cp_multiplier(20.5, ruleset) == pytest.approx(0.6048236651)
    assert calculate_hp(100, 15, 20.5, ruleset) == 69


def test_unknown_level_falls_back_to_level_40(ruleset):
    assert get_cp_multiplier(99, ruleset) == 0.7903
    assert get_cp_multiplier(40.25, ruleset) == 0.7903
    assert calculate_cp(100, 100, 100, 15, 15, 15, 99, ruleset) == calculate_cp(100, 100, 100, 15, 15, 15, 40, ruleset)
    assert calculate_hp(100, 15, 0.5, ruleset) == 90


def test_cp_and_hp_minimum_is_one(ruleset):
    assert calculate_cp(10, 10, 10, 0, 0, 0, 1, ruleset) == 1
    assert calculate_hp(5, 0, 1, ruleset) == 1


def test_precomputed_cp_wins(ruleset):
    assert calculate_pokemon_cp(make_pokemon(cp=1500), ruleset) == 1500
    assert calculate_pokemon_cp(make_pokemon(), ruleset) == 825


def test_neutral_damage(ruleset):
    attacker = make_pokemon("WATER")
    defender = make_pokemon("WATER")
    # 0.5 * 10 * 1.0 = 5 -> 5 + 1
    assert calculate_damage(make_move("NORMAL", 10), attacker, defender, ruleset) == 6
    assert calculate_damage(make_move("NORMAL", 50, MoveCategory.CHARGED), attacker, defender, ruleset) == 26


def test_stab_applies_for_either_type(ruleset):
    defender = make_pokemon("NORMAL")
    fire_move = make_move("FIRE", 10)
    assert is_stab(fire_move, make_pokemon("FIRE"))
    assert is_stab(fire_move, make_pokemon("WATER", "FIRE"))
    assert not is_stab(fire_move, make_pokemon("WATER"))

    # 0.5 * 10 * 1.2 = 6 -> 7
    assert calculate_damage(fire_move, make_pokemon("FIRE"), defender, ruleset) == 7
    assert calculate_damage(fire_move, make_pokemon("WATER"), defender, ruleset) == 6


def test_super_effective_damage(ruleset):
    assert calculate_damage(make_move("FIRE", 10), make_pokemon("WATER"), make_pokemon("GRASS"), ruleset) == 11


def test_immune_hit_still_deals_one(ruleset):
    ghost = make_pokemon("GHOST")
    assert calculate_damage(make_move("NORMAL", 100), make_pokemon("WATER"), ghost, ruleset) == 1
    assert calculate_damage(make_move("NORMAL", 0), make_pokemon("WATER"), make_pokemon("WATER"), ruleset) == 1


def test_damage_scales_with_stats_and_levels(ruleset):
    strong = make_pokemon("WATER", base_attack=200)
    # 0.5 * 10 * (215 / 115) = 9.35 -> 10
    assert calculate_damage(make_move("NORMAL", 10), strong, make_pokemon("WATER"), ruleset) == 10
    # 0.5 * 10 * (0.7903 / 0.5974) = 6.61 -> 7
    assert calculate_damage(make_move("NORMAL", 10), make_pokemon("WATER"), make_pokemon("WATER", level=20), ruleset) == 7


def test_energy_gain_and_cost():
    fast = make_move(energy_delta=-12)
    charged = make_move(category=MoveCategory.CHARGED, energy_delta=45)

    assert calculate_energy_gain(fast) == 12
    assert calculate_energy_cost(fast) == 0
    assert calculate_energy_gain(charged) == 0
    assert calculate_energy_cost(charged) == 45
