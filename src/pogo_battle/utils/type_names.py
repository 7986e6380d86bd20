import re

# Longer, more specific prefixes first
_TYPE_PREFIXES = (
    re.compile(r"^POKEMON_TYPE_"),
    re.compile(r"^POKEMONTYPE_"),
    re.compile(r"^POKEMONTYPE"),
    re.compile(r"^POKEMON_TYPE"),
    re.compile(r"^TYPE_"),
    re.compile(r"^TYPE"),
)
_NON_LETTERS = re.compile(r"[^A-Z]")


def normalize_type_name(type_name: str | None) -> str:
    """Normalize a type tag to its canonical upper-case name

    "POKEMON_TYPE_FIRE", "fire" and "Type_Fire" all become "FIRE". An empty name
    becomes "NORMAL". Names that are not real types pass through upper-cased, so
    they stay neutral in effectiveness lookups.
    """
    if not type_name:
        return "NORMAL"

    normalized = str(type_name).upper().strip()
    for prefix in _TYPE_PREFIXES:
        normalized = prefix.sub("", normalized)

    normalized = _NON_LETTERS.sub("", normalized)
    return normalized or "NORMAL"
