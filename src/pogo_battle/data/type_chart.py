from src.pogo_battle.constants import TYPE_MUL_NO_EFFECT, TYPE_MUL_NOT_EFFECTIVE, TYPE_MUL_SUPER_EFFECTIVE

# Format: (AttackingType, DefendingType, Multiplier)
# Pairs that are not listed are neutral (x1.0)
TYPE_EFFECTIVENESS_CHART: list[tuple[str, str, float]] = [
    # Normal
    ("NORMAL", "ROCK", TYPE_MUL_NOT_EFFECTIVE),
    ("NORMAL", "GHOST", TYPE_MUL_NO_EFFECT),
    ("NORMAL", "STEEL", TYPE_MUL_NOT_EFFECTIVE),
    # Fire
    ("FIRE", "FIRE", TYPE_MUL_NOT_EFFECTIVE),
    ("FIRE", "WATER", TYPE_MUL_NOT_EFFECTIVE),
    ("FIRE", "GRASS", TYPE_MUL_SUPER_EFFECTIVE),
    ("FIRE", "ICE", TYPE_MUL_SUPER_EFFECTIVE),
    ("FIRE", "BUG", TYPE_MUL_SUPER_EFFECTIVE),
    ("FIRE", "STEEL", TYPE_MUL_SUPER_EFFECTIVE),
    ("FIRE", "ROCK", TYPE_MUL_NOT_EFFECTIVE),
    ("FIRE", "DRAGON", TYPE_MUL_NOT_EFFECTIVE),
    # Water
    ("WATER", "FIRE", TYPE_MUL_SUPER_EFFECTIVE),
    ("WATER", "WATER", TYPE_MUL_NOT_EFFECTIVE),
    ("WATER", "GRASS", TYPE_MUL_NOT_EFFECTIVE),
    ("WATER", "GROUND", TYPE_MUL_SUPER_EFFECTIVE),
    ("WATER", "ROCK", TYPE_MUL_SUPER_EFFECTIVE),
    ("WATER", "DRAGON", TYPE_MUL_NOT_EFFECTIVE),
    # Electric
    ("ELECTRIC", "WATER", TYPE_MUL_SUPER_EFFECTIVE),
    ("ELECTRIC", "ELECTRIC", TYPE_MUL_NOT_EFFECTIVE),
    ("ELECTRIC", "GRASS", TYPE_MUL_NOT_EFFECTIVE),
    ("ELECTRIC", "GROUND", TYPE_MUL_NO_EFFECT),
    ("ELECTRIC", "FLYING", TYPE_MUL_SUPER_EFFECTIVE),
    ("ELECTRIC", "DRAGON", TYPE_MUL_NOT_EFFECTIVE),
    # Grass
    ("GRASS", "FIRE", TYPE_MUL_NOT_EFFECTIVE),
    ("GRASS", "WATER", TYPE_MUL_SUPER_EFFECTIVE),
    ("GRASS", "GRASS", TYPE_MUL_NOT_EFFECTIVE),
    ("GRASS", "POISON", TYPE_MUL_NOT_EFFECTIVE),
    ("GRASS", "GROUND", TYPE_MUL_SUPER_EFFECTIVE),
    ("GRASS", "FLYING", TYPE_MUL_NOT_EFFECTIVE),
    ("GRASS", "BUG", TYPE_MUL_NOT_EFFECTIVE),
    ("GRASS", "ROCK", TYPE_MUL_SUPER_EFFECTIVE),
    ("GRASS", "DRAGON", TYPE_MUL_NOT_EFFECTIVE),
    ("GRASS", "STEEL", TYPE_MUL_NOT_EFFECTIVE),
    # Ice
    ("ICE", "FIRE", TYPE_MUL_NOT_EFFECTIVE),
    ("ICE", "WATER", TYPE_MUL_NOT_EFFECTIVE),
    ("ICE", "GRASS", TYPE_MUL_SUPER_EFFECTIVE),
    ("ICE", "ICE", TYPE_MUL_NOT_EFFECTIVE),
    ("ICE", "GROUND", TYPE_MUL_SUPER_EFFECTIVE),
    ("ICE", "FLYING", TYPE_MUL_SUPER_EFFECTIVE),
    ("ICE", "DRAGON", TYPE_MUL_SUPER_EFFECTIVE),
    ("ICE", "STEEL", TYPE_MUL_NOT_EFFECTIVE),
    # Fighting
    ("FIGHTING", "NORMAL", TYPE_MUL_SUPER_EFFECTIVE),
    ("FIGHTING", "ICE", TYPE_MUL_SUPER_EFFECTIVE),
    ("FIGHTING", "POISON", TYPE_MUL_NOT_EFFECTIVE),
    ("FIGHTING", "FLYING", TYPE_MUL_NOT_EFFECTIVE),
    ("FIGHTING", "PSYCHIC", TYPE_MUL_NOT_EFFECTIVE),
    ("FIGHTING", "BUG", TYPE_MUL_NOT_EFFECTIVE),
    ("FIGHTING", "ROCK", TYPE_MUL_SUPER_EFFECTIVE),
    ("FIGHTING", "GHOST", TYPE_MUL_NO_EFFECT),
    ("FIGHTING", "DARK", TYPE_MUL_SUPER_EFFECTIVE),
    ("FIGHTING", "STEEL", TYPE_MUL_SUPER_EFFECTIVE),
    # Poison
    ("POISON", "GRASS", TYPE_MUL_SUPER_EFFECTIVE),
    ("POISON", "POISON", TYPE_MUL_NOT_EFFECTIVE),
    ("POISON", "GROUND", TYPE_MUL_NOT_EFFECTIVE),
    ("POISON", "ROCK", TYPE_MUL_NOT_EFFECTIVE),
    ("POISON", "GHOST", TYPE_MUL_NOT_EFFECTIVE),
    ("POISON", "STEEL", TYPE_MUL_NO_EFFECT),
    # Ground
    ("GROUND", "FIRE", TYPE_MUL_SUPER_EFFECTIVE),
    ("GROUND", "ELECTRIC", TYPE_MUL_SUPER_EFFECTIVE),
    ("GROUND", "GRASS", TYPE_MUL_NOT_EFFECTIVE),
    ("GROUND", "POISON", TYPE_MUL_SUPER_EFFECTIVE),
    ("GROUND", "FLYING", TYPE_MUL_NO_EFFECT),
    ("GROUND", "BUG", TYPE_MUL_NOT_EFFECTIVE),
    ("GROUND", "ROCK", TYPE_MUL_SUPER_EFFECTIVE),
    ("GROUND", "STEEL", TYPE_MUL_SUPER_EFFECTIVE),
    # Flying
    ("FLYING", "ELECTRIC", TYPE_MUL_NOT_EFFECTIVE),
    ("FLYING", "GRASS", TYPE_MUL_SUPER_EFFECTIVE),
    ("FLYING", "FIGHTING", TYPE_MUL_SUPER_EFFECTIVE),
    ("FLYING", "BUG", TYPE_MUL_SUPER_EFFECTIVE),
    ("FLYING", "ROCK", TYPE_MUL_NOT_EFFECTIVE),
    ("FLYING", "STEEL", TYPE_MUL_NOT_EFFECTIVE),
    # Psychic
    ("PSYCHIC", "FIGHTING", TYPE_MUL_SUPER_EFFECTIVE),
    ("PSYCHIC", "POISON", TYPE_MUL_SUPER_EFFECTIVE),
    ("PSYCHIC", "PSYCHIC", TYPE_MUL_NOT_EFFECTIVE),
    ("PSYCHIC", "DARK", TYPE_MUL_NO_EFFECT),
    ("PSYCHIC", "STEEL", TYPE_MUL_NOT_EFFECTIVE),
    # Bug
    ("BUG", "FIRE", TYPE_MUL_NOT_EFFECTIVE),
    ("BUG", "GRASS", TYPE_MUL_SUPER_EFFECTIVE),
    ("BUG", "FIGHTING", TYPE_MUL_NOT_EFFECTIVE),
    ("BUG", "POISON", TYPE_MUL_NOT_EFFECTIVE),
    ("BUG", "FLYING", TYPE_MUL_NOT_EFFECTIVE),
    ("BUG", "PSYCHIC", TYPE_MUL_SUPER_EFFECTIVE),
    ("BUG", "GHOST", TYPE_MUL_NOT_EFFECTIVE),
    ("BUG", "DARK", TYPE_MUL_SUPER_EFFECTIVE),
    ("BUG", "STEEL", TYPE_MUL_NOT_EFFECTIVE),
    # Rock
    ("ROCK", "FIRE", TYPE_MUL_SUPER_EFFECTIVE),
    ("ROCK", "ICE", TYPE_MUL_SUPER_EFFECTIVE),
    ("ROCK", "FIGHTING", TYPE_MUL_NOT_EFFECTIVE),
    ("ROCK", "GROUND", TYPE_MUL_NOT_EFFECTIVE),
    ("ROCK", "FLYING", TYPE_MUL_SUPER_EFFECTIVE),
    ("ROCK", "BUG", TYPE_MUL_SUPER_EFFECTIVE),
    ("ROCK", "STEEL", TYPE_MUL_NOT_EFFECTIVE),
    # Ghost
    ("GHOST", "NORMAL", TYPE_MUL_NO_EFFECT),
    ("GHOST", "PSYCHIC", TYPE_MUL_SUPER_EFFECTIVE),
    ("GHOST", "GHOST", TYPE_MUL_SUPER_EFFECTIVE),
    ("GHOST", "DARK", TYPE_MUL_NOT_EFFECTIVE),
    # Dragon
    ("DRAGON", "DRAGON", TYPE_MUL_SUPER_EFFECTIVE),
    ("DRAGON", "STEEL", TYPE_MUL_NOT_EFFECTIVE),
    # Dark
    ("DARK", "FIGHTING", TYPE_MUL_NOT_EFFECTIVE),
    ("DARK", "PSYCHIC", TYPE_MUL_SUPER_EFFECTIVE),
    ("DARK", "GHOST", TYPE_MUL_SUPER_EFFECTIVE),
    ("DARK", "DARK", TYPE_MUL_NOT_EFFECTIVE),
    ("DARK", "STEEL", TYPE_MUL_NOT_EFFECTIVE),
    # Steel
    ("STEEL", "FIRE", TYPE_MUL_NOT_EFFECTIVE),
    ("STEEL", "WATER", TYPE_MUL_NOT_EFFECTIVE),
    ("STEEL", "ELECTRIC", TYPE_MUL_NOT_EFFECTIVE),
    ("STEEL", "ICE", TYPE_MUL_SUPER_EFFECTIVE),
    ("STEEL", "ROCK", TYPE_MUL_SUPER_EFFECTIVE),
    ("STEEL", "STEEL", TYPE_MUL_NOT_EFFECTIVE),
    # Fairy
    ("FAIRY", "FIRE", TYPE_MUL_NOT_EFFECTIVE),
    ("FAIRY", "FIGHTING", TYPE_MUL_SUPER_EFFECTIVE),
    ("FAIRY", "POISON", TYPE_MUL_NOT_EFFECTIVE),
    ("FAIRY", "DRAGON", TYPE_MUL_SUPER_EFFECTIVE),
    ("FAIRY", "DARK", TYPE_MUL_SUPER_EFFECTIVE),
    ("FAIRY", "STEEL", TYPE_MUL_NOT_EFFECTIVE),
]
