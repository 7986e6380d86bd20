from src.pogo_battle.enums.move import MoveCategory, LearnMethod
from src.pogo_battle.enums.battle import ActionType, EnergySource
