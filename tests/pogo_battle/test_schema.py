import pytest
from pydantic import ValidationError

from src.pogo_battle.enums import MoveCategory
from src.pogo_battle.ruleset import get_default_ruleset
from src.pogo_battle.schema.move_snapshot import MoveSnapshot
from src.pogo_battle.schema.pokemon_snapshot import PokemonSnapshot
from src.pogo_battle.schema.ruleset import BattleRuleset

TACKLE = {"id": "TACKLE_FAST", "name": "Tackle", "type": "NORMAL", "category": "FAST", "power": 5, "energyDelta": -5, "durationMs": 500}
BODY_SLAM = {"id": "BODY_SLAM", "name": "Body Slam", "type": "NORMAL", "category": "CHARGED", "power": 50, "energyDelta": 35, "durationMs": 1900}


def make_pokemon_data(**overrides) -> dict:
    data = {
        "form_id": "SNORLAX_NORMAL",
        "species_name": "Snorlax",
        "form_name": "Normal",
        "primary_type": "NORMAL",
        "base_attack": 190,
        "base_defense": 169,
        "base_stamina": 330,
        "level": 40,
        "iv_atk": 15,
        "iv_def": 15,
        "iv_sta": 15,
        "fast_move": TACKLE,
        "charged_moves": [BODY_SLAM],
    }
    data.update(overrides)
    return data


def test_move_snapshot_from_camel_case():
    move = MoveSnapshot.model_validate(TACKLE)
    assert move.category == MoveCategory.FAST
    assert move.energy_delta == -5
    assert move.duration_ms == 500


def test_fast_move_cannot_cost_energy():
    with pytest.raises(ValidationError):
        MoveSnapshot(id="BAD", name="Bad", type="NORMAL", category=MoveCategory.FAST, power=5, energy_delta=5)


def test_charged_move_cannot_generate_energy():
    with pytest.raises(ValidationError):
        MoveSnapshot(id="BAD", name="Bad", type="NORMAL", category=MoveCategory.CHARGED, power=50, energy_delta=-35)


def test_negative_power_rejected():
    with pytest.raises(ValidationError):
        MoveSnapshot(id="BAD", name="Bad", type="NORMAL", category=MoveCategory.FAST, power=-1, energy_delta=-5)


def test_valid_pokemon_snapshot():
    pokemon = PokemonSnapshot(**make_pokemon_data(secondary_type="FAIRY"))
    assert pokemon.types == ["NORMAL", "FAIRY"]
    assert len(pokemon.charged_moves) == 1
    assert pokemon.cp is None and pokemon.hp is None


def test_empty_charged_moves_rejected():
    with pytest.raises(ValidationError):
        PokemonSnapshot(**make_pokemon_data(charged_moves=[]))


def test_move_categories_checked():
    with pytest.raises(ValidationError):
        PokemonSnapshot(**make_pokemon_data(fast_move=BODY_SLAM))
    with pytest.raises(ValidationError):
        PokemonSnapshot(**make_pokemon_data(charged_moves=[BODY_SLAM, TACKLE]))


@pytest.mark.parametrize("field, value", [("iv_atk", 16), ("iv_def", -1), ("level", 0), ("base_defense", 0), ("hp", 0)])
def test_out_of_range_values_rejected(field, value):
    with pytest.raises(ValidationError):
        PokemonSnapshot(**make_pokemon_data(**{field: value}))


def test_snapshots_are_immutable():
    pokemon = PokemonSnapshot(**make_pokemon_data())
    with pytest.raises(ValidationError):
        pokemon.level = 50
    with pytest.raises(ValidationError):
        pokemon.fast_move.power = 100


def test_ruleset_requires_fallback_level():
    with pytest.raises(ValidationError):
        BattleRuleset(version="bad", turn_duration_ms=500, max_energy=100, shields_per_side=2, stab_multiplier=1.2, cp_multiplier_table={1: 0.094})


def test_default_ruleset_constants():
    ruleset = get_default_ruleset()
    assert ruleset.version == "1.0.0"
    assert ruleset.turn_duration_ms == 500
    assert ruleset.max_energy == 100
    assert ruleset.shields_per_side == 2
    assert ruleset.stab_multiplier == 1.2
    assert ruleset.cp_multiplier_table[40] == 0.7903
    assert min(ruleset.cp_multiplier_table) == 1.0
    assert max(ruleset.cp_multiplier_table) == 50.0


def test_default_ruleset_is_stable():
    assert get_default_ruleset() is get_default_ruleset()
    assert get_default_ruleset().model_dump() == get_default_ruleset().model_dump()


def test_default_ruleset_table_is_read_only():
    ruleset = get_default_ruleset()
    with pytest.raises(TypeError):
        ruleset.cp_multiplier_table[40.0] = 0.1
    assert ruleset.cp_multiplier_table[40.0] == 0.7903
    assert ruleset.model_dump()["cp_multiplier_table"][40.0] == 0.7903


def test_ruleset_copies_the_given_table():
    table = {40: 0.7903, 20: 0.5974}
    ruleset = BattleRuleset(version="custom", turn_duration_ms=500, max_energy=100, shields_per_side=2, stab_multiplier=1.2, cp_multiplier_table=table)
    table[40] = 0.1
    assert ruleset.cp_multiplier_table[40] == 0.7903


@pytest.mark.parametrize("multiplier", [0.0, -0.5])
def test_ruleset_rejects_non_positive_multipliers(multiplier):
    with pytest.raises(ValidationError):
        BattleRuleset(version="bad", turn_duration_ms=500, max_energy=100, shields_per_side=2, stab_multiplier=1.2, cp_multiplier_table={40: 0.7903, 20: multiplier})
