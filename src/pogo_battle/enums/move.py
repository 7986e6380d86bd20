from enum import Enum


class MoveCategory(str, Enum):
    """Move category - fast moves generate energy, charged moves spend it"""

    FAST = "FAST"
    CHARGED = "CHARGED"


class LearnMethod(str, Enum):
    """How a form learns a move in the catalog learnset"""

    FAST = "FAST"
    CHARGED = "CHARGED"
    ELITE_FAST = "ELITE_FAST"
    ELITE_CHARGED = "ELITE_CHARGED"
    LEGACY = "LEGACY"
