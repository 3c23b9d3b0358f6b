"""Almanac user configuration.

Modify settings here to customize a run. Anything left out keeps its
default from src/almanac/schemas/param.py.

Usage:
    python scripts/run_almanac.py scripts/user_config.py
    python scripts/run_almanac.py scripts/user_config.py --day 5
"""

CONFIG = {
    # ========================================================================
    # PUZZLE
    # ========================================================================
    "AOC_YEAR": 2023,
    "AOC_DAY": 5,

    # ========================================================================
    # INPUT FETCHING
    # ========================================================================
    "AOC_URL": "https://adventofcode.com",
    "AOC_INPUT_DIR": "input",     # Cache: input/<year>/<day>.txt
    "AOC_SESSION_ID": None,       # Browser 'session' cookie; only needed on a cache miss

    # ========================================================================
    # RANGE SEARCH
    # ========================================================================
    "SEARCH_STRATEGY": "step",    # "step" (coarse/fine probe) or "interval" (exact)
    "SEARCH_STEP": 1000,          # Coarse stride of the step search
    "MAX_LOCATION": 2**32,        # Step search bound; "unbounded" to scan forever

    "LOG_LEVEL": "INFO",
}
