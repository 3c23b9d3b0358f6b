"""Root-level pytest fixtures for the Almanac test suite.

Provides shared configuration fixtures and almanac inputs. Tests build
configs through these fixtures instead of raw dicts.
"""

import pytest

from almanac.remap import Pipeline, RangeRule, Stage, StageId, parse_almanac
from almanac.schemas import ParamConfig, UserConfig, resolve_config


EXAMPLE_ALMANAC = """\
seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4
"""


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Default configuration."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config, tmp_path):
    """Factory fixture for creating custom test configs.
    
    Accepts UserConfig-compatible kwargs. The input cache points at a
    per-test temporary directory unless overridden.
    
    Examples
    --------
    >>> def test_interval(make_config):
    ...     config = make_config(strategy="interval")
    ...     assert config.search.strategy == "interval"
    """
    def _make(**user_overrides):
        user_overrides.setdefault("input_dir", str(tmp_path / "input"))
        user = UserConfig(**user_overrides)
        return resolve_config(param_config, user, None)
    
    return _make


# =============================================================================
# Almanac Fixtures
# =============================================================================

@pytest.fixture
def example_text():
    """The worked example from the puzzle statement (answers 35 and 46)."""
    return EXAMPLE_ALMANAC


@pytest.fixture
def example_pipeline(example_text):
    return parse_almanac(example_text)


@pytest.fixture
def make_pipeline():
    """Build a Pipeline from ``{StageId: [(source, destination, length), ...]}``."""
    def _make(stage_rules=None, seeds=()):
        stages = {
            StageId(stage_id): Stage(
                stage_id=stage_id,
                rules=tuple(
                    RangeRule(source_start=s, destination_start=d, length=n)
                    for s, d, n in rules
                ),
            )
            for stage_id, rules in (stage_rules or {}).items()
        }
        return Pipeline.from_stages(stages, seeds)

    return _make
