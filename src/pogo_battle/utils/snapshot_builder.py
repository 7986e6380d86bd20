import logging
from typing import Mapping, Optional

from src.pogo_battle.config import SimulatorConfig, config as default_config
from src.pogo_battle.constants import DEFAULT_IV, DEFAULT_LEVEL
from src.pogo_battle.enums import LearnMethod, MoveCategory
from src.pogo_battle.errors import FormNotFoundError, SnapshotBuildError
from src.pogo_battle.schema.catalog import BattleSimulationRequest, PokemonForm
from src.pogo_battle.schema.pokemon_snapshot import PokemonSnapshot

logger = logging.getLogger(__name__)


def build_pokemon_snapshot(
    form: PokemonForm,
    level: float = DEFAULT_LEVEL,
    iv_atk: int = DEFAULT_IV,
    iv_def: int = DEFAULT_IV,
    iv_sta: int = DEFAULT_IV,
) -> PokemonSnapshot:
    """
    Build a battle-ready snapshot from a catalog form

    The fast move is the first learnset entry that is a FAST move learned by
    the FAST method; every CHARGED move in the learnset becomes a charged move,
    in learnset order.

    Raises:
        SnapshotBuildError: the form has no usable fast move or no charged move
    """
    fast_move = next((entry.move for entry in form.moves if entry.move.category == MoveCategory.FAST and entry.learn_method == LearnMethod.FAST), None)
    if fast_move is None:
        logger.warning("Form %s has no fast move", form.id)
        raise SnapshotBuildError(form.id, "no fast move found")

    charged_moves = [entry.move for entry in form.moves if entry.move.category == MoveCategory.CHARGED]
    if not charged_moves:
        logger.warning("Form %s has no charged moves", form.id)
        raise SnapshotBuildError(form.id, "no charged moves found")

    logger.debug("Form %s: fast move %s, charged moves %s", form.id, fast_move.id, [move.id for move in charged_moves])

    return PokemonSnapshot(
        form_id=form.id,
        species_name=form.species_name,
        form_name=form.form_name,
        primary_type=form.primary_type,
        secondary_type=form.secondary_type,
        base_attack=form.base_attack,
        base_defense=form.base_defense,
        base_stamina=form.base_stamina,
        level=level,
        iv_atk=iv_atk,
        iv_def=iv_def,
        iv_sta=iv_sta,
        fast_move=fast_move,
        charged_moves=charged_moves,
    )


def _pick(value, default):
    return default if value is None else value


def build_request_snapshots(
    request: BattleSimulationRequest,
    catalog: Mapping[str, PokemonForm],
    settings: Optional[SimulatorConfig] = None,
) -> tuple[PokemonSnapshot, PokemonSnapshot]:
    """
    Resolve both form ids of a request and build their snapshots

    Level and IVs left out of the request come from the simulator config.

    Raises:
        FormNotFoundError: a form id is missing from the catalog
        SnapshotBuildError: a form has no usable moves
    """
    settings = settings or default_config

    forms = []
    for form_id in (request.participant1_form_id, request.participant2_form_id):
        form = catalog.get(form_id)
        if form is None:
            raise FormNotFoundError(form_id)
        forms.append(form)

    participant1 = build_pokemon_snapshot(
        forms[0],
        level=_pick(request.participant1_level, settings.default_level),
        iv_atk=_pick(request.participant1_iv_atk, settings.default_iv),
        iv_def=_pick(request.participant1_iv_def, settings.default_iv),
        iv_sta=_pick(request.participant1_iv_sta, settings.default_iv),
    )
    participant2 = build_pokemon_snapshot(
        forms[1],
        level=_pick(request.participant2_level, settings.default_level),
        iv_atk=_pick(request.participant2_iv_atk, settings.default_iv),
        iv_def=_pick(request.participant2_iv_def, settings.default_iv),
        iv_sta=_pick(request.participant2_iv_sta, settings.default_iv),
    )
    return participant1, participant2
