from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BattleModel(BaseModel):
    """Base for all battle records - snake_case in Python, camelCase when dumped with by_alias=True"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenBattleModel(BattleModel):
    """Immutable battle record"""

    model_config = ConfigDict(frozen=True)
