from enum import Enum


class ActionType(str, Enum):
    """Battle action tags recorded in the turn log"""

    FAST_ATTACK = "FAST_ATTACK"
    CHARGED_ATTACK = "CHARGED_ATTACK"
    # Reserved - never emitted by the engine (no swapping, shields are automatic)
    SWAP = "SWAP"
    SHIELD = "SHIELD"


class EnergySource(str, Enum):
    """What caused an energy change"""

    FAST_MOVE = "FAST_MOVE"
    CHARGED_MOVE = "CHARGED_MOVE"
    DAMAGE_TAKEN = "DAMAGE_TAKEN"
