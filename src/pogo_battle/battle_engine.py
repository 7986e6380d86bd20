import logging
from typing import Mapping, Optional

from src.pogo_battle.config import SimulatorConfig, config
from src.pogo_battle.constants import PARTICIPANT_1_ID, PARTICIPANT_2_ID
from src.pogo_battle.damage_calculator import calculate_damage, calculate_effectiveness, calculate_energy_cost, calculate_energy_gain, calculate_pokemon_cp
from src.pogo_battle.enums import ActionType, EnergySource, MoveCategory
from src.pogo_battle.errors import BattleNotInitializedError
from src.pogo_battle.ruleset import get_default_ruleset
from src.pogo_battle.schema.battle_events import BattleAction, BattleTurn, DamageEvent, EnergyEvent
from src.pogo_battle.schema.battle_state import BattleParticipant, BattleState
from src.pogo_battle.schema.catalog import BattleSimulationRequest, PokemonForm
from src.pogo_battle.schema.move_snapshot import MoveSnapshot
from src.pogo_battle.schema.pokemon_snapshot import PokemonSnapshot
from src.pogo_battle.schema.ruleset import BattleRuleset
from src.pogo_battle.schema.simulation import BattleSimulationInput, BattleSimulationResult
from src.pogo_battle.utils.participant_factory import create_participant
from src.pogo_battle.utils.snapshot_builder import build_request_snapshots

logger = logging.getLogger(__name__)


class BattleEngine:
    """
    Deterministic two-participant battle simulator

    Turn flow:
    1. Advance the turn counter and the clock by one turn duration
    2. Participant 1 acts, then participant 2 (fixed order, every turn)
    3. Each actor uses the first charged move it can afford, otherwise its fast move
    4. A charged move is fully blocked while the defender has shields left
    5. A knockout ends the turn immediately - the other participant does not act
    6. Record a copy of the state after the turn

    The battle ends when a participant faints, or as a draw when max_turns is
    reached. Participant 1 acting first is a deliberate bias: it can land a
    knockout before participant 2 gets its action in that turn.
    """

    def __init__(self, ruleset: Optional[BattleRuleset] = None, max_turns: Optional[int] = None, settings: Optional[SimulatorConfig] = None):
        settings = settings or config

        # Overrides as given, echoed back in the result input
        self._ruleset_override = ruleset
        self._max_turns_override = max_turns

        self.ruleset = ruleset if ruleset is not None else get_default_ruleset()
        self.max_turns = max_turns if max_turns is not None else settings.default_max_turns
        if self.max_turns < 1:
            raise ValueError(f"max_turns must be at least 1, got {self.max_turns}")

        self.participant1: Optional[BattleParticipant] = None
        self.participant2: Optional[BattleParticipant] = None
        self.turns: list[BattleTurn] = []
        self.log: list[str] = []
        self.turn_number = 0
        self.timestamp = 0

    def initialize_battle(self, participant1: PokemonSnapshot, participant2: PokemonSnapshot) -> None:
        """Create fresh per-battle state for both combatants and reset the turn history"""
        self.participant1 = create_participant(participant1, PARTICIPANT_1_ID, self.ruleset)
        self.participant2 = create_participant(participant2, PARTICIPANT_2_ID, self.ruleset)
        self.turns = []
        self.log = []
        self.turn_number = 0
        self.timestamp = 0

        logger.info(
            "Battle started: %s (CP %d, %d HP) vs %s (CP %d, %d HP), ruleset %s, max %d turns",
            participant1.species_name,
            calculate_pokemon_cp(participant1, self.ruleset),
            self.participant1.current_hp,
            participant2.species_name,
            calculate_pokemon_cp(participant2, self.ruleset),
            self.participant2.current_hp,
            self.ruleset.version,
            self.max_turns,
        )

        self.log.append(f"Battle started: {participant1.species_name} vs {participant2.species_name}")
        self.log.append(f"{participant1.species_name}: {self.participant1.current_hp} HP")
        self.log.append(f"{participant2.species_name}: {self.participant2.current_hp} HP")

    def opponent_of(self, participant: BattleParticipant) -> BattleParticipant:
        return self.participant2 if participant is self.participant1 else self.participant1

    def is_battle_over(self) -> bool:
        """Complete once fewer than two participants are still standing"""
        standing = [p for p in (self.participant1, self.participant2) if p.is_standing]
        return len(standing) < 2

    def get_winner_id(self) -> Optional[str]:
        """Id of the only participant still standing; None while in progress or on a draw"""
        if not self.is_battle_over():
            return None
        standing = [p for p in (self.participant1, self.participant2) if p.is_standing]
        return standing[0].id if len(standing) == 1 else None

    def snapshot_state(self, final: bool = False) -> BattleState:
        """
        Value copy of the current state - later turns never change it

        The final state is always complete; a per-turn state is complete only
        once someone has fainted.
        """
        return BattleState(
            participants=(self.participant1.freeze(), self.participant2.freeze()),
            turn_number=self.turn_number,
            timestamp=self.timestamp,
            is_complete=final or self.is_battle_over(),
            winner_id=self.get_winner_id(),
        )

    def process_turn(self) -> BattleTurn:
        """
        Run one full turn and record it

        Returns:
            The recorded turn, including the state after it

        Raises:
            BattleNotInitializedError: initialize_battle() has not been called
        """
        if self.participant1 is None or self.participant2 is None:
            raise BattleNotInitializedError("initialize_battle() must be called before process_turn()")

        self.turn_number += 1
        self.timestamp += self.ruleset.turn_duration_ms

        actions: list[BattleAction] = []
        damage_events: list[DamageEvent] = []
        energy_events: list[EnergyEvent] = []

        for attacker in (self.participant1, self.participant2):
            if not attacker.is_standing:
                continue
            defender = self.opponent_of(attacker)

            move = self.select_move(attacker)
            if move.category == MoveCategory.CHARGED:
                actions.append(self._use_charged_move(attacker, defender, move, damage_events))
            else:
                actions.append(self._use_fast_move(attacker, defender, damage_events, energy_events))

            # Knockout ends the turn
            if defender.current_hp <= 0:
                defender.is_active = False
                self.log.append(f"{defender.pokemon.species_name} was knocked out!")
                logger.debug("Turn %d: %s knocked out", self.turn_number, defender.id)
                break

        turn = BattleTurn(
            turn_number=self.turn_number,
            timestamp=self.timestamp,
            actions=actions,
            damage_events=damage_events,
            energy_events=energy_events,
            state_after=self.snapshot_state(),
        )
        self.turns.append(turn)
        return turn

    @staticmethod
    def select_move(attacker: BattleParticipant) -> MoveSnapshot:
        """First affordable charged move in list order, otherwise the fast move"""
        for move in attacker.pokemon.charged_moves:
            if calculate_energy_cost(move) <= attacker.current_energy:
                return move
        return attacker.pokemon.fast_move

    def _use_charged_move(self, attacker: BattleParticipant, defender: BattleParticipant, move: MoveSnapshot, damage_events: list[DamageEvent]) -> BattleAction:
        # Energy is spent even when the hit is blocked; the cost is not logged as an EnergyEvent
        attacker.current_energy -= calculate_energy_cost(move)

        action = BattleAction(type=ActionType.CHARGED_ATTACK, participant_id=attacker.id, move_id=move.id, timestamp=self.timestamp)

        if defender.shields_remaining > 0:
            defender.shields_remaining -= 1
            self.log.append(f"Turn {self.turn_number}: {defender.pokemon.species_name} used a shield!")
            self.log.append(f"Turn {self.turn_number}: {attacker.pokemon.species_name} used {move.name}, but it was blocked!")
            logger.debug("Turn %d: %s %s blocked, %s has %d shields left", self.turn_number, attacker.id, move.id, defender.id, defender.shields_remaining)
            return action

        damage = self._apply_damage(attacker, defender, move, damage_events)
        self.log.append(
            f"Turn {self.turn_number}: {attacker.pokemon.species_name} used {move.name}! "
            f"Dealt {damage} damage. {defender.pokemon.species_name} has {defender.current_hp} HP remaining."
        )
        return action

    def _use_fast_move(self, attacker: BattleParticipant, defender: BattleParticipant, damage_events: list[DamageEvent], energy_events: list[EnergyEvent]) -> BattleAction:
        move = attacker.pokemon.fast_move
        energy_gain = calculate_energy_gain(move)
        attacker.current_energy = max(0, min(self.ruleset.max_energy, attacker.current_energy + energy_gain))

        action = BattleAction(type=ActionType.FAST_ATTACK, participant_id=attacker.id, move_id=move.id, timestamp=self.timestamp)

        # Fast moves are never shielded
        damage = self._apply_damage(attacker, defender, move, damage_events)
        energy_events.append(EnergyEvent(participant_id=attacker.id, energy_change=energy_gain, energy_after=attacker.current_energy, source=EnergySource.FAST_MOVE))

        self.log.append(
            f"Turn {self.turn_number}: {attacker.pokemon.species_name} used {move.name}. "
            f"Dealt {damage} damage, gained {energy_gain} energy. "
            f"{defender.pokemon.species_name} has {defender.current_hp} HP remaining."
        )
        return action

    def _apply_damage(self, attacker: BattleParticipant, defender: BattleParticipant, move: MoveSnapshot, damage_events: list[DamageEvent]) -> int:
        damage = calculate_damage(move, attacker.pokemon, defender.pokemon, self.ruleset)
        effectiveness = calculate_effectiveness(move, defender.pokemon, self.ruleset)

        defender.current_hp = max(0, defender.current_hp - damage)

        damage_events.append(
            DamageEvent(
                attacker_id=attacker.id,
                defender_id=defender.id,
                move_id=move.id,
                damage=damage,
                is_critical=False,
                effectiveness=effectiveness,
                defender_hp_after=defender.current_hp,
            )
        )
        logger.debug("Turn %d: %s used %s on %s for %d (x%s), %d HP left", self.turn_number, attacker.id, move.id, defender.id, damage, effectiveness, defender.current_hp)
        return damage

    def run(self) -> BattleSimulationResult:
        """
        Play turns until the battle is over or max_turns is reached

        Raises:
            BattleNotInitializedError: initialize_battle() has not been called
        """
        if self.participant1 is None or self.participant2 is None:
            raise BattleNotInitializedError("initialize_battle() must be called before run()")

        while self.turn_number < self.max_turns and not self.is_battle_over():
            self.process_turn()

        final_state = self.snapshot_state(final=True)

        if final_state.winner_id is not None:
            winner = final_state.get_participant(final_state.winner_id)
            self.log.append(f"Battle ended! {winner.pokemon.species_name} wins!")
            logger.info("Battle ended after %d turns, winner %s (%s)", self.turn_number, winner.id, winner.pokemon.species_name)
        else:
            self.log.append("Battle ended in a draw (max turns reached).")
            logger.info("Battle ended in a draw after %d turns", self.turn_number)

        return BattleSimulationResult(
            input=BattleSimulationInput(
                participant1=self.participant1.pokemon,
                participant2=self.participant2.pokemon,
                ruleset=self._ruleset_override,
                max_turns=self._max_turns_override,
            ),
            ruleset=self.ruleset,
            turns=self.turns,
            final_state=final_state,
            duration_ms=self.timestamp,
            log=self.log,
        )


def simulate_battle(simulation_input: BattleSimulationInput, settings: Optional[SimulatorConfig] = None) -> BattleSimulationResult:
    """Simulate a full battle between the two input snapshots"""
    engine = BattleEngine(ruleset=simulation_input.ruleset, max_turns=simulation_input.max_turns, settings=settings)
    engine.initialize_battle(simulation_input.participant1, simulation_input.participant2)
    return engine.run()


def simulate_request(request: BattleSimulationRequest, catalog: Mapping[str, PokemonForm], settings: Optional[SimulatorConfig] = None) -> BattleSimulationResult:
    """Resolve a request's forms in the catalog, build both snapshots and simulate"""
    participant1, participant2 = build_request_snapshots(request, catalog, settings)
    return simulate_battle(BattleSimulationInput(participant1=participant1, participant2=participant2), settings)
