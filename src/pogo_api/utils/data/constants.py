"""
Shared constants for game master parsing and API rendering.

This module centralizes the identifier templates, variant markers and asset
settings used across the codebase. Rather than duplicating these values in the
parser and renderer, they are defined once here and imported where needed.
"""

# ============================================================================
# Record Templates
# ============================================================================
# Anchored, case-insensitive patterns for game master template ids.
# Order matters: the first matching template wins.
POKEMON_TEMPLATE = r"^V(?P<numeric_key>\d{4})_POKEMON_(?P<name>.*)$"
MOVE_TEMPLATE = r"^V(?P<numeric_key>\d{4})_MOVE_(?P<name>.*)$"
COMBAT_MOVE_TEMPLATE = r"^COMBAT_V(?P<numeric_key>\d{4})_MOVE_(?P<name>.*)$"
TEMPORARY_EVOLUTION_TEMPLATE = (
    r"^TEMPORARY_EVOLUTION_V(?P<numeric_key>\d{4})_POKEMON_(?P<name>.*)$"
)
FORMS_TEMPLATE = r"^FORMS_V(?P<numeric_key>\d{4})_POKEMON_(?P<name>.*)$"

# ============================================================================
# Variant Handling
# ============================================================================
# Form id fragments that mark a cosmetic copy of a species rather than a new entry
SUPPRESSED_FORM_MARKERS: tuple[str, ...] = ("_PURIFIED", "_SHADOW", "_NORMAL", "_COPY")
SUPPRESSED_FORM_SUFFIX_PATTERN = r"_\d{4}$"

NORMAL_FORM_SUFFIX = "_NORMAL"

# Length of the "TEMP_EVOLUTION" prefix of temporary evolution ids
TEMP_EVOLUTION_PREFIX = "TEMP_EVOLUTION"
TEMP_EVOLUTION_PREFIX_LENGTH = len(TEMP_EVOLUTION_PREFIX)

# ============================================================================
# Type-Related Constants
# ============================================================================
POKEMON_TYPE_PREFIX = "POKEMON_TYPE_"

# ============================================================================
# Move Constants
# ============================================================================
FAST_MOVE_SUFFIX = "_FAST"

# ============================================================================
# Generation Boundaries
# ============================================================================
# Highest national dex number of each generation
GENERATION_BOUNDARIES: dict[int, int] = {
    1: 151,
    2: 251,
    3: 386,
    4: 493,
    5: 649,
    6: 721,
    7: 809,
    8: 905,
    9: 1025,
}

# ============================================================================
# Asset Settings
# ============================================================================
ASSETS_BASE_URL = (
    "https://raw.githubusercontent.com/PokeMiners/pogo_assets/master/"
    "Images/Pokemon/pokemon_icon_{dex_nr:03d}_{asset_bundle_id:02d}.png"
)

DEFAULT_GAME_MASTER_URL = (
    "https://raw.githubusercontent.com/PokeMiners/game_masters/master/latest/latest.json"
)

DEFAULT_LANGUAGES: tuple[str, ...] = ("English", "German", "French", "Italian", "Japanese")
