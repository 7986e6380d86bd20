from src.pogo_battle.damage_calculator import calculate_hp
from src.pogo_battle.schema.battle_state import BattleParticipant
from src.pogo_battle.schema.pokemon_snapshot import PokemonSnapshot
from src.pogo_battle.schema.ruleset import BattleRuleset


def create_participant(pokemon: PokemonSnapshot, participant_id: str, ruleset: BattleRuleset) -> BattleParticipant:
    # Precomputed HP wins over the formula
    max_hp = pokemon.hp if pokemon.hp is not None else calculate_hp(pokemon.base_stamina, pokemon.iv_sta, pokemon.level, ruleset)

    return BattleParticipant(
        id=participant_id,
        pokemon=pokemon,
        max_hp=max_hp,
        current_hp=max_hp,
        current_energy=0,
        shields_remaining=ruleset.shields_per_side,
        is_active=True,
    )
